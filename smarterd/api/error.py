from uuid import UUID

from fastapi import status

from smarterd.domain.errors import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from smarterd.libs.result import Error

# One status per error kind
STATUS_BY_KIND = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthorizationError: status.HTTP_403_FORBIDDEN,
    BusinessRuleError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the HTTP exception matching the error kind"""
    status_code = STATUS_BY_KIND.get(type(error))
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


def parse_uuid(value: str, code: str, label: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error(code, f"Invalid {label} ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
