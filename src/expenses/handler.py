"""Lambda handler for expense operations."""

import json
import os
import logging
from functools import lru_cache
from typing import Any, Callable, Dict
import sys

# Add parent directory to path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from supabase import Client

from shared.config import Settings
from shared.events import ApiRequest
from shared.response import created_response, error_response, json_response, preflight_response
from shared.supabase_client import SupabaseTable, create_scoped_client
from shared.validators import parse_date_query, validate_required_fields
from shared.exceptions import AuthenticationError, ExpenseTrackerException, error_status
from expenses.models import DateRangeEcho
from expenses.routes import Route, resolve_route
from expenses.service import ExpenseService

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO'))

ClientFactory = Callable[[Settings, str], Client]


class ExpenseHandler:
    """
    Handles expense requests.

    Routes:
    - OPTIONS (any path) - CORS preflight
    - POST /expense, PUT /expense - Create expense
    - GET /expense?specificDate=MM-DD-YYYY - Expenses of one day and their total
    - GET /expense?fromDate=...&toDate=... - Echo of the range (filtering not implemented)
    - GET, PUT, DELETE /expense/{id} - Declared, answer 501
    """

    def __init__(self, settings: Settings, client_factory: ClientFactory = create_scoped_client):
        """
        Initialize handler.

        Args:
            settings: Validated function settings
            client_factory: Builds a Supabase client from settings and an Authorization header
        """
        self.settings = settings
        self.client_factory = client_factory

    def handle(self, request: ApiRequest) -> Dict[str, Any]:
        """
        Handle one request.

        Args:
            request: Normalised request

        Returns:
            API Gateway response
        """
        resolved = resolve_route(request.method, request.path)
        if resolved.route is Route.PREFLIGHT:
            return preflight_response()

        authorization = request.header('Authorization')
        if not authorization:
            raise AuthenticationError()

        service = self._service_for(authorization)

        if resolved.route is Route.CREATE_EXPENSE:
            return self.handle_create(request, service)
        return self.handle_read(request, service)

    def handle_create(self, request: ApiRequest, service: ExpenseService) -> Dict[str, Any]:
        """
        Handle create expense.

        A body that is not JSON surfaces as a decode error, answered with 500.

        Args:
            request: Normalised request
            service: Expense service scoped to the caller

        Returns:
            API Gateway response
        """
        body = request.json()
        validate_required_fields(body, ['expense'])

        service.create_expense(body['expense'])

        return created_response()

    def handle_read(self, request: ApiRequest, service: ExpenseService) -> Dict[str, Any]:
        """
        Handle read expenses.

        Args:
            request: Normalised request
            service: Expense service scoped to the caller

        Returns:
            API Gateway response
        """
        specific_day, date_range = parse_date_query(request.query)

        if specific_day is not None:
            summary = service.get_daily_summary(specific_day)
            return json_response(summary.model_dump())

        # TODO: filter by fromDate/toDate once inclusivity and timezone are decided
        from_date, to_date = date_range
        echo = DateRangeEcho(fromDate=from_date, toDate=to_date)
        return json_response(echo.model_dump(by_alias=True))

    def _service_for(self, authorization: str) -> ExpenseService:
        client = self.client_factory(self.settings, authorization)
        return ExpenseService(SupabaseTable(client, self.settings.expenses_table))


@lru_cache(maxsize=1)
def get_handler() -> ExpenseHandler:
    """
    Build the handler once per container.

    Raises:
        ConfigurationError: If the environment is incomplete; not cached, so
            the next invocation tries again
    """
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    return ExpenseHandler(settings)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for expense operations.

    Args:
        event: Lambda event
        context: Lambda context

    Returns:
        API Gateway response
    """
    try:
        request = ApiRequest.from_event(event)

        # Log request
        logger.info(f"Request: {request.method} {request.path}")

        # Preflight must work even when configuration is broken
        if request.method == 'OPTIONS':
            return preflight_response()

        return get_handler().handle(request)

    except ExpenseTrackerException as e:
        logger.error(f"Application error: {e.message}")
        return error_response(e.message, status_code=e.status_code)
    except json.JSONDecodeError as e:
        logger.error(f"Malformed request body: {str(e)}")
        return error_response(str(e), status_code=error_status(e))
    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        return error_response("Internal server error", status_code=error_status(e))
