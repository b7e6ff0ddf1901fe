"""Working order router - FastAPI endpoints for working orders"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import verify_company_access
from ...database import get_db
from ...models import WorkingOrder
from .schemas import (
    WorkingOrderCounts,
    WorkingOrderCreate,
    WorkingOrderResponse,
    WorkingOrderUpdate,
)
from .service import WorkingOrderService

router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["Working Orders"],
    dependencies=[Depends(verify_company_access)],
)


def get_order_service(db: Session = Depends(get_db)) -> WorkingOrderService:
    """Dependency injection for WorkingOrderService"""
    return WorkingOrderService(db)


def _order_response(order: WorkingOrder, counts: Optional[dict] = None) -> WorkingOrderResponse:
    return WorkingOrderResponse(
        id=order.id,
        companyId=order.company_id,
        contactId=order.contact_id,
        projectId=order.project_id,
        title=order.title,
        isActive=order.is_active,
        createdAt=order.created_at,
        counts=WorkingOrderCounts(**counts) if counts is not None else None,
    )


@router.get("/projects/{project_id}/orders", response_model=list[WorkingOrderResponse])
async def get_project_orders(
    company_id: str,
    project_id: str,
    service: WorkingOrderService = Depends(get_order_service),
):
    """Get active working orders for a project"""
    orders = service.list_project_orders(company_id, project_id)
    counts = service.count_children(orders)
    return [_order_response(order, counts[order.id]) for order in orders]


@router.post(
    "/projects/{project_id}/orders", response_model=WorkingOrderResponse, status_code=201
)
async def create_order(
    company_id: str,
    project_id: str,
    data: WorkingOrderCreate,
    service: WorkingOrderService = Depends(get_order_service),
):
    order = service.create_order(company_id, project_id, data.contactId, data.title)
    return _order_response(order)


@router.get("/orders/{order_id}", response_model=WorkingOrderResponse)
async def get_order(
    company_id: str,
    order_id: str,
    service: WorkingOrderService = Depends(get_order_service),
):
    order = service.get_order(company_id, order_id)
    counts = service.count_children([order])
    return _order_response(order, counts[order.id])


@router.patch("/orders/{order_id}", response_model=WorkingOrderResponse)
async def update_order(
    company_id: str,
    order_id: str,
    data: WorkingOrderUpdate,
    service: WorkingOrderService = Depends(get_order_service),
):
    order = service.update_order(company_id, order_id, title=data.title, is_active=data.isActive)
    return _order_response(order)


@router.delete("/orders/{order_id}", response_model=WorkingOrderResponse)
async def delete_order(
    company_id: str,
    order_id: str,
    service: WorkingOrderService = Depends(get_order_service),
):
    """Soft delete a working order"""
    order = service.delete_order(company_id, order_id)
    return _order_response(order)
