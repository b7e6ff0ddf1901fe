"""Task domain schemas - Pydantic models for job order creation and task responses"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field


class CaseRef(BaseModel):
    """Project (case) the job order is created for"""

    id: Optional[str] = None  # projectId
    name: Optional[str] = None
    customerId: Optional[str] = None  # contactId
    customerName: Optional[str] = None


class WorkingOrderChoice(BaseModel):
    """Either a new working order (title) or an existing one (id)"""

    isNew: bool = True
    id: Optional[str] = None
    title: Optional[str] = None


class TaskDetailsChoice(BaseModel):
    """Either a new task detail template or an existing one (id)"""

    isNew: bool = True
    id: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None  # Category name, matched against TaskCategory
    instructions: list[str] = Field(default_factory=list)


class RepeatingInput(BaseModel):
    enabled: bool = False
    frequency: Optional[str] = None
    endDate: Optional[str] = None  # ISO date string


class ScheduleInput(BaseModel):
    enabled: bool = False
    shiftType: Optional[str] = None
    date: Optional[str] = None  # ISO date string
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    repeating: RepeatingInput = Field(default_factory=RepeatingInput)


class TeamRef(BaseModel):
    id: str
    name: str
    code: str
    color: Optional[str] = None


class UserRef(BaseModel):
    id: str
    name: Optional[str] = None
    surname: Optional[str] = None
    email: str


class AssignedResources(BaseModel):
    teams: list[TeamRef] = Field(default_factory=list)
    teamUsers: list[UserRef] = Field(default_factory=list)
    individualUsers: list[UserRef] = Field(default_factory=list)


class JobOrderCreate(BaseModel):
    """Schema for creating a job order (working order + task detail + task + assignments)"""

    case: CaseRef
    workingOrder: WorkingOrderChoice
    taskDetails: TaskDetailsChoice
    schedule: ScheduleInput = Field(default_factory=ScheduleInput)
    assignedResources: AssignedResources = Field(default_factory=AssignedResources)


class JobOrderResult(BaseModel):
    taskId: str
    workingOrderId: str
    taskDetailId: str


class TaskStatusUpdate(BaseModel):
    status: str


class InstructionsCompletedUpdate(BaseModel):
    instructionsCompleted: list[bool]


class TaskAssignmentResponse(BaseModel):
    id: str
    userId: str
    teamId: Optional[str] = None
    userName: Optional[str] = None
    userSurname: Optional[str] = None
    userEmail: str
    teamName: Optional[str] = None
    teamCode: Optional[str] = None
    teamColor: Optional[str] = None
    assignmentType: str


class TaskResponse(BaseModel):
    """Schema for task response"""

    id: str
    companyId: str
    contactId: str
    projectId: str
    workingOrderId: str
    taskDetailId: str
    categoryId: Optional[str] = None
    categoryName: Optional[str] = None
    taskDetailTitle: str
    instructions: list[str]
    instructionsCompleted: list[bool]
    scheduleEnabled: bool
    shiftType: Optional[str] = None
    scheduledDate: Optional[date] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None
    isRepeating: bool
    repeatFrequency: Optional[str] = None
    repeatEndDate: Optional[date] = None
    status: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    assignments: list[TaskAssignmentResponse] = Field(default_factory=list)
