"""Task router - FastAPI endpoints for job orders and tasks"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import verify_company_access
from ...database import get_db
from ...models import Task
from .schemas import (
    InstructionsCompletedUpdate,
    JobOrderCreate,
    JobOrderResult,
    TaskAssignmentResponse,
    TaskResponse,
    TaskStatusUpdate,
)
from .service import TaskService

router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["Tasks"],
    dependencies=[Depends(verify_company_access)],
)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    """Dependency injection for TaskService"""
    return TaskService(db)


def _task_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        companyId=task.company_id,
        contactId=task.contact_id,
        projectId=task.project_id,
        workingOrderId=task.working_order_id,
        taskDetailId=task.task_detail_id,
        categoryId=task.category_id,
        categoryName=task.category_name,
        taskDetailTitle=task.task_detail_title,
        instructions=task.instructions or [],
        instructionsCompleted=task.instructions_completed or [],
        scheduleEnabled=task.schedule_enabled,
        shiftType=task.shift_type,
        scheduledDate=task.scheduled_date,
        startTime=task.start_time,
        endTime=task.end_time,
        isRepeating=task.is_repeating,
        repeatFrequency=task.repeat_frequency,
        repeatEndDate=task.repeat_end_date,
        status=task.status,
        createdAt=task.created_at,
        updatedAt=task.updated_at,
        assignments=[
            TaskAssignmentResponse(
                id=a.id,
                userId=a.user_id,
                teamId=a.team_id,
                userName=a.user_name,
                userSurname=a.user_surname,
                userEmail=a.user_email,
                teamName=a.team_name,
                teamCode=a.team_code,
                teamColor=a.team_color,
                assignmentType=a.assignment_type,
            )
            for a in task.assignments
        ],
    )


@router.post("/job-orders", response_model=JobOrderResult, status_code=201)
async def create_job_order(
    company_id: str,
    data: JobOrderCreate,
    service: TaskService = Depends(get_task_service),
):
    """Create a complete job order (working order + task detail + task + assignments)"""
    return service.create_job_order(company_id, data)


@router.get("/tasks", response_model=list[TaskResponse])
async def get_tasks(
    company_id: str,
    service: TaskService = Depends(get_task_service),
):
    """Get all tasks for a company"""
    return [_task_response(task) for task in service.get_tasks(company_id)]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(
    company_id: str,
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    return _task_response(service.get_task(company_id, task_id))


@router.patch("/tasks/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    company_id: str,
    task_id: str,
    data: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service),
):
    task = service.update_task_status(company_id, task_id, data.status)
    return _task_response(task)


@router.patch("/tasks/{task_id}/instructions", response_model=TaskResponse)
async def update_instructions(
    company_id: str,
    task_id: str,
    data: InstructionsCompletedUpdate,
    service: TaskService = Depends(get_task_service),
):
    """Replace the per-instruction completion flags"""
    task = service.update_instructions_completed(company_id, task_id, data.instructionsCompleted)
    return _task_response(task)
