from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """Domain entity for a registered user"""
    id: str = Field(description="Unique identifier for the user")
    username: str = Field(description="Login name; uniqueness is not enforced")
    password_hash: str = Field(description="Salted one-way hash of the password")
    role: str = Field(description="Free-form role name, e.g. 'admin' or 'operator'")
    created_at: Optional[datetime] = Field(None, description="Timestamp of registration")
