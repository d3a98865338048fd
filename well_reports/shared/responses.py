"""
Standardized response models for consistent API responses.
Provides typed, structured responses for success and error cases.
"""
from typing import Optional, Dict, Any, Generic, TypeVar
from pydantic import BaseModel
from datetime import datetime, timezone
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from .exceptions import ApplicationException

T = TypeVar('T')


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResponseMetadata(BaseModel):
    """Metadata for API responses"""
    timestamp: datetime
    request_id: Optional[str] = None
    version: str = "1.0.0"


class SuccessResponse(BaseModel, Generic[T]):
    """Standardized success response"""
    success: bool = True
    data: T
    metadata: ResponseMetadata
    message: Optional[str] = None


class ErrorDetail(BaseModel):
    """Detailed error information"""
    error_code: str
    message: str
    context: Optional[Dict[str, Any]] = None
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standardized error response"""
    success: bool = False
    error: ErrorDetail
    metadata: ResponseMetadata


class ResponseBuilder:
    """Builder for creating standardized responses"""

    @staticmethod
    def success(
        data: Any,
        message: Optional[str] = None,
        request_id: Optional[str] = None
    ) -> SuccessResponse:
        """Build a success response"""
        return SuccessResponse(
            data=data,
            message=message,
            metadata=ResponseMetadata(
                timestamp=_utcnow(),
                request_id=request_id
            )
        )

    @staticmethod
    def error(
        exception: ApplicationException,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Build an error response from an exception"""
        error_payload = ErrorResponse(
            error=ErrorDetail(
                error_code=exception.error_code.value,
                message=exception.message,
                context=exception.context,
                field=exception.context.get("field")
            ),
            metadata=ResponseMetadata(
                timestamp=_utcnow(),
                request_id=request_id
            )
        )
        return JSONResponse(
            status_code=exception.http_status_code,
            content=jsonable_encoder(error_payload),
            headers=exception.headers
        )
