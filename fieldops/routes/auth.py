"""Session endpoints for the signed-in user"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..auth import get_current_user
from ..database import get_db
from ..domain.companies.router import company_response
from ..domain.companies.schemas import CompanyResponse
from ..domain.companies.service import CompanyService
from ..models import User

router = APIRouter(prefix="/auth", tags=["Authentication"])


class CurrentUserResponse(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    surname: Optional[str] = None
    avatar: Optional[str] = None
    companies: list[CompanyResponse] = []


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get the current user and the companies they belong to"""
    companies = CompanyService(db).get_user_companies(current_user.id)
    return CurrentUserResponse(
        id=current_user.id,
        email=current_user.email,
        name=current_user.name,
        surname=current_user.surname,
        avatar=current_user.avatar,
        companies=[company_response(company) for company in companies],
    )
