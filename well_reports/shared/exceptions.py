"""
Standardized exception hierarchy for the application.
Provides clear, typed exceptions with proper error context.
"""
from typing import Optional, Dict, Any
from enum import Enum

from fastapi import status


class ErrorCode(str, Enum):
    """Standardized error codes for the application"""
    # Domain errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Infrastructure errors
    DATABASE_ERROR = "DATABASE_ERROR"
    SECURITY_ERROR = "SECURITY_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    NOT_FOUND_ERROR = "NOT_FOUND_ERROR"


class ApplicationException(Exception):
    """Base exception for all application-specific errors"""

    http_status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        """Extra response headers for this error, if any"""
        return None


class DomainException(ApplicationException):
    """Exceptions from the domain layer"""
    pass


class ValidationException(DomainException):
    """Missing or malformed request data"""

    http_status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        context = {}
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = str(value)

        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            context=context
        )


class UnauthenticatedException(DomainException):
    """Missing or unusable credentials.

    The message is fixed so clients cannot tell which check failed.
    """

    http_status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Access denied. Authentication required."):
        super().__init__(message=message, error_code=ErrorCode.UNAUTHENTICATED)

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class ForbiddenException(DomainException):
    """Authenticated identity lacks the required role"""

    http_status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Access denied. You are not authorized."):
        super().__init__(message=message, error_code=ErrorCode.FORBIDDEN)


class NotFoundException(DomainException):
    """Requested record does not exist"""

    http_status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, entity: Optional[str] = None, entity_id: Optional[str] = None):
        context = {}
        if entity:
            context["entity"] = entity
        if entity_id:
            context["id"] = entity_id

        super().__init__(
            message=message,
            error_code=ErrorCode.NOT_FOUND_ERROR,
            context=context
        )


class InvalidTokenException(DomainException):
    """Token failed signature or structure verification.

    Raised by the token service only; the authorization gate turns it into
    UnauthenticatedException before it reaches a client.
    """

    http_status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid token", cause: Optional[Exception] = None):
        super().__init__(message=message, error_code=ErrorCode.INVALID_TOKEN, cause=cause)


class InfrastructureException(ApplicationException):
    """Exceptions from the infrastructure layer"""
    pass


class DatabaseException(InfrastructureException):
    """Database-related errors.

    The message goes to the client as-is, so it must stay generic; the
    underlying error is kept on `cause` for logging.
    """

    def __init__(self, message: str, operation: Optional[str] = None, cause: Optional[Exception] = None):
        context = {}
        if operation:
            context["operation"] = operation

        super().__init__(
            message=message,
            error_code=ErrorCode.DATABASE_ERROR,
            context=context,
            cause=cause
        )


class SecurityException(InfrastructureException):
    """Password hashing or token signing failed"""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.SECURITY_ERROR,
            cause=cause
        )
