"""Company schemas - Pydantic models for responses"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CompanyResponse(BaseModel):
    id: str
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class CompanyUserResponse(BaseModel):
    """A member of a company"""

    id: str
    email: str
    name: Optional[str] = None
    surname: Optional[str] = None
    avatar: Optional[str] = None
    createdAt: Optional[datetime] = None  # When the user joined the company
