from datetime import datetime
from pydantic import BaseModel, Field


class Well(BaseModel):
    """Domain entity for an oil well"""
    id: str = Field(description="Unique identifier for the well")
    name: str = Field(description="Name of the well")
    location: str = Field(description="Location of the well")
    created_at: datetime = Field(description="Timestamp of record creation")
