"""Company router - FastAPI endpoints for company details and members"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ...auth import verify_company_access
from ...database import get_db
from ...models import Company
from .schemas import CompanyResponse, CompanyUserResponse
from .service import CompanyService

router = APIRouter(
    prefix="/companies/{company_id}",
    tags=["Companies"],
    dependencies=[Depends(verify_company_access)],
)


def get_company_service(db: Session = Depends(get_db)) -> CompanyService:
    """Dependency injection for CompanyService"""
    return CompanyService(db)


def company_response(company: Company) -> CompanyResponse:
    return CompanyResponse(
        id=company.id,
        name=company.name,
        address=company.address,
        phone=company.phone,
        email=company.email,
        createdAt=company.created_at,
        updatedAt=company.updated_at,
    )


@router.get("", response_model=CompanyResponse)
async def get_company(
    company_id: str,
    service: CompanyService = Depends(get_company_service),
):
    return company_response(service.get_company(company_id))


@router.get("/users", response_model=list[CompanyUserResponse])
async def get_company_users(
    company_id: str,
    search: Optional[str] = Query(None, description="Match email, name or surname"),
    limit: int = Query(50),
    service: CompanyService = Depends(get_company_service),
):
    """Get users that belong to a company"""
    members = service.get_company_users(company_id, search, limit)
    return [
        CompanyUserResponse(
            id=member.user.id,
            email=member.user.email,
            name=member.user.name,
            surname=member.user.surname,
            avatar=member.user.avatar,
            createdAt=member.created_at,
        )
        for member in members
    ]
