"""
Working order and task detail resolution for job order creation.

Both resolvers either reuse an existing row of the company or stage a new one
through the caller's unit of work. Neither commits.
"""

import logging

from ...errors import NotFoundError, ValidationError
from ...models import TaskDetail, WorkingOrder
from ...unit_of_work import UnitOfWork
from ..orders.repository import WorkingOrderRepository
from .repository import TaskRepository
from .schemas import TaskDetailsChoice, WorkingOrderChoice

logger = logging.getLogger(__name__)


def resolve_working_order(
    uow: UnitOfWork,
    company_id: str,
    project_id: str,
    contact_id: str,
    choice: WorkingOrderChoice,
) -> str:
    """Return the id of a new or reused working order"""
    if choice.isNew:
        order = uow.add(
            WorkingOrder(
                company_id=company_id,
                contact_id=contact_id,
                project_id=project_id,
                title=choice.title,
            )
        )
        logger.debug(f"Staged working order {order.id}")
        return order.id

    if not choice.id:
        raise ValidationError("Working order ID is required when isNew is false")

    order = WorkingOrderRepository.get_order_by_id(uow.session, choice.id, company_id)
    if not order or not order.is_active:
        raise NotFoundError("Working order not found", details={"id": choice.id})
    if order.project_id != project_id:
        raise ValidationError(
            "Working order belongs to a different project",
            details={"id": choice.id, "projectId": project_id},
        )
    return order.id


def resolve_task_detail(
    uow: UnitOfWork,
    company_id: str,
    project_id: str,
    contact_id: str,
    working_order_id: str,
    choice: TaskDetailsChoice,
) -> TaskDetail:
    """Return the new or reused task detail row, freshly read for snapshotting"""
    if choice.isNew:
        category_name = choice.category
        category = (
            TaskRepository.get_category_by_name(uow.session, company_id, category_name)
            if category_name
            else None
        )
        task_detail = uow.add(
            TaskDetail(
                company_id=company_id,
                contact_id=contact_id,
                project_id=project_id,
                working_order_id=working_order_id,
                category_id=category.id if category else None,
                category_name=category_name,
                title=choice.title,
                instructions=list(choice.instructions),
            )
        )
        task_detail_id = task_detail.id
    else:
        if not choice.id:
            raise ValidationError("Task detail ID is required when isNew is false")
        task_detail_id = choice.id

    task_detail = TaskRepository.get_task_detail(uow.session, task_detail_id, company_id)
    if not task_detail:
        raise NotFoundError("Task detail not found", details={"id": task_detail_id})
    return task_detail
