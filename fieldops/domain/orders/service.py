"""Working order service - Business logic for working order operations"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...errors import NotFoundError, ValidationError
from ...models import WorkingOrder
from .repository import WorkingOrderRepository

logger = logging.getLogger(__name__)


class WorkingOrderService:
    """Service layer for working order business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = WorkingOrderRepository()

    def list_project_orders(self, company_id: str, project_id: str) -> list[WorkingOrder]:
        return self.repo.get_project_orders(self.db, company_id, project_id)

    def count_children(self, orders: list[WorkingOrder]) -> dict[str, dict[str, int]]:
        return self.repo.count_children(self.db, [order.id for order in orders])

    def get_order(self, company_id: str, order_id: str) -> WorkingOrder:
        order = self.repo.get_order_by_id(self.db, order_id, company_id)
        if not order:
            raise NotFoundError("Working order not found", details={"id": order_id})
        return order

    def create_order(
        self, company_id: str, project_id: str, contact_id: str, title: str
    ) -> WorkingOrder:
        """Create a working order outside of the job order flow"""
        title = (title or "").strip()
        if not title:
            raise ValidationError("Working order title is required")
        if not contact_id:
            raise ValidationError("Contact ID is required")

        order = self.repo.create_order(
            self.db, company_id, project_id=project_id, contact_id=contact_id, title=title
        )
        logger.info(f"📝 Created working order {order.id} for project {project_id}")
        return order

    def update_order(
        self,
        company_id: str,
        order_id: str,
        title: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> WorkingOrder:
        order = self.get_order(company_id, order_id)

        updates = {}
        if title is not None:
            if not title.strip():
                raise ValidationError("Working order title cannot be empty")
            updates["title"] = title.strip()
        if is_active is not None:
            updates["is_active"] = is_active

        return self.repo.update_order(self.db, order, **updates)

    def delete_order(self, company_id: str, order_id: str) -> WorkingOrder:
        """Soft delete: the row is kept with is_active=False"""
        order = self.get_order(company_id, order_id)
        order = self.repo.update_order(self.db, order, is_active=False)
        logger.info(f"🗑️ Deactivated working order {order_id}")
        return order

    def order_belongs_to_company(self, order_id: str, company_id: str) -> bool:
        return self.repo.order_belongs_to_company(self.db, order_id, company_id)
