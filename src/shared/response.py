"""Response utilities for Lambda functions."""

import json
from typing import Any, Dict, Optional
from datetime import datetime, date
from decimal import Decimal


GENERIC_ERROR_MESSAGE = "Oops! Grab a cup of coffee and give it a few minutes."

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Origin, x-client-info, apikey, Content-Type, Accept, authorization",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS, PUT, DELETE"
}


class DecimalEncoder(json.JSONEncoder):
    """JSON encoder for Decimal and datetime objects."""

    def default(self, obj):
        if isinstance(obj, Decimal):
            return float(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


def _headers(json_body: bool, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    headers = dict(CORS_HEADERS)
    if json_body:
        headers["Content-Type"] = "application/json"
    if extra:
        headers.update(extra)
    return headers


def json_response(
    data: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Create a JSON response.

    Args:
        data: Response body, serialized as-is
        status_code: HTTP status code (default: 200)
        headers: Optional additional headers

    Returns:
        Lambda proxy response dictionary
    """
    return {
        "statusCode": status_code,
        "headers": _headers(True, headers),
        "body": json.dumps(data, cls=DecimalEncoder)
    }


def created_response() -> Dict[str, Any]:
    """Create a 201 response with an empty body."""
    return {
        "statusCode": 201,
        "headers": _headers(True),
        "body": ""
    }


def preflight_response() -> Dict[str, Any]:
    """Create the CORS preflight response."""
    return {
        "statusCode": 200,
        "headers": _headers(False),
        "body": ""
    }


def error_response(message: str, status_code: int = 500) -> Dict[str, Any]:
    """
    Create an error response.

    Server errors always carry the generic message so store and
    configuration details never reach the caller.

    Args:
        message: Error message
        status_code: HTTP status code (default: 500)

    Returns:
        Lambda proxy response dictionary
    """
    if status_code >= 500:
        message = GENERIC_ERROR_MESSAGE

    return json_response({"error": message}, status_code=status_code)

