from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Report(BaseModel):
    """Domain entity for an operational report on a well"""
    id: str = Field(description="Unique identifier for the report")
    title: str = Field(description="Report title")
    content: str = Field(description="Free-text body of the report")
    pressure: float = Field(description="Measured well pressure")
    well_status: str = Field(description="Reported state of the well")
    temperature: float = Field(description="Measured temperature")
    created_by: str = Field(description="Id of the user who filed the report")
    well_id: str = Field(description="Id of the well the report refers to")
    created_at: datetime = Field(description="Timestamp of record creation")


class UserRef(BaseModel):
    """Resolved reference to the report author"""
    id: str
    username: str


class WellRef(BaseModel):
    """Resolved reference to the reported well"""
    id: str
    name: str


class ReportView(BaseModel):
    """Report as read back for listing, with references resolved.

    References are not enforced by storage; a reference whose target is gone
    resolves to None.
    """
    id: str
    title: str
    content: str
    pressure: float
    well_status: str
    temperature: float
    created_by: Optional[UserRef] = None
    well: Optional[WellRef] = None
    created_at: datetime
