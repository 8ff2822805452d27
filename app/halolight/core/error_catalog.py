from dataclasses import dataclass
from fastapi import status


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str
    status_code: int


class ErrorCatalog:
    ROUTE_NOT_FOUND = ErrorDefinition(
        "ROUTE_NOT_FOUND",
        "Route references a parent that is not registered",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    DUPLICATE_ROUTE = ErrorDefinition(
        "DUPLICATE_ROUTE",
        "Route path registered more than once",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    ROUTE_CYCLE = ErrorDefinition(
        "ROUTE_CYCLE",
        "Route hierarchy contains a cycle",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    INVALID_ROUTE_CONFIG = ErrorDefinition(
        "INVALID_ROUTE_CONFIG",
        "Route configuration is invalid",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    PATH_NOT_FOUND = ErrorDefinition("PATH_NOT_FOUND", "Path not found", status.HTTP_404_NOT_FOUND)
    PERMISSION_DENIED = ErrorDefinition(
        "PERMISSION_DENIED",
        "Permission denied",
        status.HTTP_403_FORBIDDEN,
    )
    VALIDATION_ERROR = ErrorDefinition(
        "VALIDATION_ERROR",
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
    INTERNAL_ERROR = ErrorDefinition(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)


class RouteNotFound(AppError):
    def __init__(self, path: str, parent_path: str):
        self.path = path
        self.parent_path = parent_path
        super().__init__(ErrorCatalog.ROUTE_NOT_FOUND, {"path": path, "parent_path": parent_path})


class DuplicateRoute(AppError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(ErrorCatalog.DUPLICATE_ROUTE, {"path": path})


class RouteCycle(AppError):
    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(ErrorCatalog.ROUTE_CYCLE, {"cycle": cycle})


class InvalidRouteConfig(AppError):
    def __init__(self, source: str, reason: object):
        self.source = source
        super().__init__(ErrorCatalog.INVALID_ROUTE_CONFIG, {"source": source, "reason": reason})


class UnresolvedPath(AppError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(ErrorCatalog.PATH_NOT_FOUND, {"path": path})
