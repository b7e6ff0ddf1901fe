"""Task service - Job order creation and task lifecycle operations"""

import logging

from sqlalchemy.orm import Session

from ...errors import InvalidStatusTransitionError, NotFoundError, ValidationError
from ...models import Task, TaskAssignment
from ...unit_of_work import UnitOfWork
from .assignments import merge_assignees
from .repository import TaskRepository
from .resolvers import resolve_task_detail, resolve_working_order
from .schemas import JobOrderCreate, JobOrderResult
from .snapshot import build_schedule_fields, build_task_snapshot

logger = logging.getLogger(__name__)

INITIAL_TASK_STATUS = "open"

# Allowed status changes; setting the current status again is a no-op
TASK_STATUS_TRANSITIONS = {
    "open": {"in_progress", "cancelled"},
    "in_progress": {"open", "completed", "cancelled"},
    "completed": {"in_progress"},
    "cancelled": {"open"},
}


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


def validate_job_order(company_id: str, data: JobOrderCreate) -> None:
    """Check required fields before anything is written"""
    if _is_blank(company_id):
        raise ValidationError("Company ID is required")
    if _is_blank(data.case.id):
        raise ValidationError("Case ID is required")
    if _is_blank(data.case.customerId):
        raise ValidationError("Customer ID is required")

    working_order = data.workingOrder
    if working_order.isNew and _is_blank(working_order.title):
        raise ValidationError("Working order title is required")
    if not working_order.isNew and _is_blank(working_order.id):
        raise ValidationError("Working order ID is required when isNew is false")

    task_details = data.taskDetails
    if task_details.isNew and _is_blank(task_details.title):
        raise ValidationError("Task details title is required")
    if not task_details.isNew and _is_blank(task_details.id):
        raise ValidationError("Task detail ID is required when isNew is false")


class TaskService:
    """Service layer for task business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = TaskRepository()

    def create_job_order(self, company_id: str, data: JobOrderCreate) -> JobOrderResult:
        """
        Create a complete job order in one transaction.

        Resolves (or creates) the working order and task detail, snapshots the
        task detail into a new task, and assigns each selected person once.
        Any failure rolls the whole operation back.
        """
        validate_job_order(company_id, data)
        schedule_fields = build_schedule_fields(data.schedule)
        resources = data.assignedResources
        project_id = data.case.id
        contact_id = data.case.customerId

        logger.info(f"📝 Creating job order for company_id: {company_id}, project_id: {project_id}")

        with UnitOfWork(self.db) as uow:
            working_order_id = resolve_working_order(
                uow, company_id, project_id, contact_id, data.workingOrder
            )
            task_detail = resolve_task_detail(
                uow, company_id, project_id, contact_id, working_order_id, data.taskDetails
            )
            task_detail_id = task_detail.id
            snapshot = build_task_snapshot(task_detail)

            task = uow.add(
                Task(
                    company_id=company_id,
                    contact_id=contact_id,
                    project_id=project_id,
                    working_order_id=working_order_id,
                    task_detail_id=task_detail_id,
                    status=INITIAL_TASK_STATUS,
                    **snapshot.as_columns(),
                    **schedule_fields,
                )
            )
            task_id = task.id

            memberships = self.repo.get_team_memberships(
                uow.session, company_id, [team.id for team in resources.teams]
            )
            teams = [team for team in resources.teams if team.id in memberships]
            if len(teams) != len(resources.teams):
                logger.warning(
                    f"⚠️ Ignoring {len(resources.teams) - len(teams)} team(s) "
                    f"outside company {company_id}"
                )
            assignees = merge_assignees(
                teams, resources.teamUsers, resources.individualUsers, memberships
            )
            for position, entry in enumerate(assignees):
                uow.add(
                    TaskAssignment(
                        task_id=task_id,
                        position=position,
                        user_id=entry.user_id,
                        team_id=entry.team_id,
                        user_name=entry.name,
                        user_surname=entry.surname,
                        user_email=entry.email,
                        team_name=entry.team_name,
                        team_code=entry.team_code,
                        team_color=entry.team_color,
                        assignment_type=entry.assignment_type,
                    )
                )

            uow.commit()

        logger.info(
            f"✅ Job order created: task={task_id}, working_order={working_order_id}, "
            f"task_detail={task_detail_id}, assignments={len(assignees)}"
        )
        return JobOrderResult(
            taskId=task_id, workingOrderId=working_order_id, taskDetailId=task_detail_id
        )

    def get_tasks(self, company_id: str) -> list[Task]:
        return self.repo.get_tasks(self.db, company_id)

    def get_task(self, company_id: str, task_id: str) -> Task:
        task = self.repo.get_task_by_id(self.db, task_id, company_id)
        if not task:
            raise NotFoundError("Task not found", details={"id": task_id})
        return task

    def update_task_status(self, company_id: str, task_id: str, status: str) -> Task:
        if _is_blank(status):
            raise ValidationError("Status is required")
        status = status.strip()

        task = self.get_task(company_id, task_id)
        if status == task.status:
            return task

        if status not in TASK_STATUS_TRANSITIONS.get(task.status, set()):
            raise InvalidStatusTransitionError(task.status, status)

        logger.info(f"🔄 Task {task_id} status: {task.status} → {status}")
        return self.repo.update_task(self.db, task, status=status)

    def update_instructions_completed(
        self, company_id: str, task_id: str, instructions_completed: list[bool]
    ) -> Task:
        if not isinstance(instructions_completed, list) or not all(
            isinstance(flag, bool) for flag in instructions_completed
        ):
            raise ValidationError("Instructions completed must be an array of booleans")

        task = self.get_task(company_id, task_id)
        expected = len(task.instructions or [])
        if len(instructions_completed) != expected:
            raise ValidationError(
                f"Instructions completed must have exactly {expected} entries",
                details={"expected": expected, "received": len(instructions_completed)},
            )

        return self.repo.update_task(
            self.db, task, instructions_completed=list(instructions_completed)
        )
