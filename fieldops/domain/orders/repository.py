"""Working order repository - Database operations for working orders"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Task, TaskDetail, WorkingOrder


class WorkingOrderRepository:
    """Repository for working order database operations"""

    @staticmethod
    def get_project_orders(db: Session, company_id: str, project_id: str) -> list[WorkingOrder]:
        """Get active working orders for a project, newest first"""
        return (
            db.query(WorkingOrder)
            .filter(
                WorkingOrder.company_id == company_id,
                WorkingOrder.project_id == project_id,
                WorkingOrder.is_active.is_(True),
            )
            .order_by(WorkingOrder.created_at.desc())
            .all()
        )

    @staticmethod
    def get_order_by_id(db: Session, order_id: str, company_id: str) -> Optional[WorkingOrder]:
        return (
            db.query(WorkingOrder)
            .filter(WorkingOrder.id == order_id, WorkingOrder.company_id == company_id)
            .first()
        )

    @staticmethod
    def count_children(db: Session, order_ids: list[str]) -> dict[str, dict[str, int]]:
        """Count task details and tasks per working order"""
        counts = {order_id: {"taskDetails": 0, "tasks": 0} for order_id in order_ids}
        if not order_ids:
            return counts

        detail_rows = (
            db.query(TaskDetail.working_order_id, func.count(TaskDetail.id))
            .filter(TaskDetail.working_order_id.in_(order_ids))
            .group_by(TaskDetail.working_order_id)
        )
        for order_id, count in detail_rows:
            counts[order_id]["taskDetails"] = count

        task_rows = (
            db.query(Task.working_order_id, func.count(Task.id))
            .filter(Task.working_order_id.in_(order_ids))
            .group_by(Task.working_order_id)
        )
        for order_id, count in task_rows:
            counts[order_id]["tasks"] = count

        return counts

    @staticmethod
    def create_order(db: Session, company_id: str, **order_data) -> WorkingOrder:
        """Create a new working order"""
        order = WorkingOrder(company_id=company_id, **order_data)
        db.add(order)
        db.commit()
        db.refresh(order)
        return order

    @staticmethod
    def update_order(db: Session, order: WorkingOrder, **updates) -> WorkingOrder:
        """Update a working order with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(order, key):
                setattr(order, key, value)

        db.commit()
        db.refresh(order)
        return order

    @staticmethod
    def order_belongs_to_company(db: Session, order_id: str, company_id: str) -> bool:
        return (
            db.query(WorkingOrder.id)
            .filter(WorkingOrder.id == order_id, WorkingOrder.company_id == company_id)
            .first()
            is not None
        )
