"""Route table for the expense function."""

import re
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

from shared.exceptions import MethodNotAllowedError, NotFoundError, RouteNotImplementedError


class PathShape(Enum):
    """Shapes of path the function answers on."""

    COLLECTION = 'collection'  # .../expense
    ITEM = 'item'  # .../expense/{id}


class Route(Enum):
    """Operations reachable over HTTP."""

    PREFLIGHT = 'preflight'
    CREATE_EXPENSE = 'create_expense'
    READ_EXPENSES = 'read_expenses'
    GET_EXPENSE = 'get_expense'
    UPDATE_EXPENSE = 'update_expense'
    DELETE_EXPENSE = 'delete_expense'


ROUTES: Dict[Tuple[str, PathShape], Route] = {
    ('POST', PathShape.COLLECTION): Route.CREATE_EXPENSE,
    ('PUT', PathShape.COLLECTION): Route.CREATE_EXPENSE,
    ('GET', PathShape.COLLECTION): Route.READ_EXPENSES,
    ('GET', PathShape.ITEM): Route.GET_EXPENSE,
    ('PUT', PathShape.ITEM): Route.UPDATE_EXPENSE,
    ('DELETE', PathShape.ITEM): Route.DELETE_EXPENSE,
}

UNIMPLEMENTED_ROUTES = frozenset({
    Route.GET_EXPENSE,
    Route.UPDATE_EXPENSE,
    Route.DELETE_EXPENSE,
})

# Any prefix is allowed so stage names and /functions/v1 style mounts still match
_EXPENSE_PATH = re.compile(r'^(?:.*/)?expense(?:/(?P<id>[^/]+))?/?$')


class ResolvedRoute(NamedTuple):
    route: Route
    expense_id: Optional[str] = None


def path_shape(path: str) -> Tuple[Optional[PathShape], Optional[str]]:
    """
    Classify a request path.

    Args:
        path: Request path

    Returns:
        (shape, expense_id); shape is None when the path is not an expense path
    """
    match = _EXPENSE_PATH.match(path or '')
    if not match:
        return None, None

    expense_id = match.group('id')
    if expense_id:
        return PathShape.ITEM, expense_id
    return PathShape.COLLECTION, None


def resolve_route(method: str, path: str) -> ResolvedRoute:
    """
    Resolve a method and path to a route.

    Args:
        method: HTTP method
        path: Request path

    Returns:
        The resolved route and the expense id from the path, if any

    Raises:
        NotFoundError: If the path is not an expense path
        MethodNotAllowedError: If the method is not routed for the path
        RouteNotImplementedError: If the route is declared but not built
    """
    method = (method or '').upper()
    if method == 'OPTIONS':
        return ResolvedRoute(Route.PREFLIGHT)

    shape, expense_id = path_shape(path)
    if shape is None:
        raise NotFoundError(f"No route for {path}")

    route = ROUTES.get((method, shape))
    if route is None:
        raise MethodNotAllowedError(f"Method {method} not allowed on {path}")

    if route in UNIMPLEMENTED_ROUTES:
        raise RouteNotImplementedError(f"{method} {path} is not implemented")

    return ResolvedRoute(route, expense_id)
