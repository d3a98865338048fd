"""
API schemas for the well reports endpoints.
These are DTOs (Data Transfer Objects) for the API layer, separate from domain entities.

Request fields are all optional on purpose: presence is checked by the
services so that a missing field is reported as a 400, not a schema error.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List


class RegisterRequest(BaseModel):
    """Self-service registration."""
    username: Optional[str] = Field(None, description="Login name")
    password: Optional[str] = Field(None, description="Plaintext password; only its hash is stored")
    role: Optional[str] = Field(None, description="Role name, e.g. 'admin' or 'operator'")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "jdoe", "password": "s3cret", "role": "operator"}}
    )


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    token: str = Field(..., description="Bearer token for the Authorization header")
    role: str = Field(..., description="Role of the logged-in user")


class UserResponse(BaseModel):
    """Public view of a user (never includes the password hash)."""
    id: str
    username: str
    role: str


class WellCreateRequest(BaseModel):
    name: Optional[str] = Field(None, description="Name of the well")
    location: Optional[str] = Field(None, description="Location of the well")


class WellResponse(BaseModel):
    id: str
    name: str
    location: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class ReportCreateRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    pressure: Optional[float] = Field(None, allow_inf_nan=False, description="Measured well pressure")
    well_status: Optional[str] = Field(None, alias="wellStatus", description="Reported state of the well")
    temperature: Optional[float] = Field(None, allow_inf_nan=False, description="Measured temperature")
    well: Optional[str] = Field(None, description="Id of the well the report refers to")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Morning round",
                "content": "Valve B replaced",
                "pressure": 212.5,
                "wellStatus": "producing",
                "temperature": 68.0,
                "well": "3f2a0c9e5b7d4e0f9a1b2c3d4e5f6a7b"
            }
        }
    )


class UserRefResponse(BaseModel):
    id: str
    username: str


class WellRefResponse(BaseModel):
    id: str
    name: str


class ReportResponse(BaseModel):
    id: str
    title: str
    content: str
    pressure: float
    well_status: str = Field(..., alias="wellStatus")
    temperature: float
    created_by: Optional[UserRefResponse] = Field(None, alias="createdBy")
    well: Optional[WellRefResponse] = None
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


class ReportPageResponse(BaseModel):
    """Paginated report listing envelope."""
    items: List[ReportResponse]
    total_pages: int = Field(..., alias="totalPages", description="ceil(total reports / limit)")
    current_page: int = Field(..., alias="currentPage", description="Requested page number")

    model_config = ConfigDict(populate_by_name=True)


class ReportRecordResponse(BaseModel):
    """A report as stored: references are raw ids."""
    id: str
    title: str
    content: str
    pressure: float
    well_status: str = Field(..., alias="wellStatus")
    temperature: float
    created_by: str = Field(..., alias="createdBy")
    well: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)
