# server/core/errors.py

from fastapi import status


class SheetAppError(Exception):
    """
    Base class for errors raised by the stores and route dependencies.
    Each subclass maps onto one HTTP status; main.py renders them as
    {"detail": message} responses.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationFailed(SheetAppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidFormat(ValidationFailed):
    pass


class Conflict(SheetAppError):
    status_code = status.HTTP_409_CONFLICT


class Unauthorized(SheetAppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(SheetAppError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(SheetAppError):
    status_code = status.HTTP_404_NOT_FOUND


class Internal(SheetAppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ServiceUnavailable(SheetAppError):
    # The backup endpoint reports a missing or failing script as a plain 500.
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
