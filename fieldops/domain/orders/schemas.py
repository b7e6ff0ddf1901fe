"""Working order schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class WorkingOrderCreate(BaseModel):
    """Schema for creating a working order under a project"""

    title: str
    contactId: str


class WorkingOrderUpdate(BaseModel):
    title: Optional[str] = None
    isActive: Optional[bool] = None


class WorkingOrderCounts(BaseModel):
    taskDetails: int = 0
    tasks: int = 0


class WorkingOrderResponse(BaseModel):
    """Schema for working order response"""

    id: str
    companyId: str
    contactId: str
    projectId: str
    title: str
    isActive: bool
    createdAt: Optional[datetime] = None
    counts: Optional[WorkingOrderCounts] = None
