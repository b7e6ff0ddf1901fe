"""Company service - Company details and membership"""

from typing import Optional

from sqlalchemy.orm import Session

from ...errors import NotFoundError, ValidationError
from ...models import Company, CompanyUser
from .repository import CompanyRepository

MAX_USERS_LIMIT = 200


class CompanyService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CompanyRepository()

    def get_company(self, company_id: str) -> Company:
        company = self.repo.get_company_by_id(self.db, company_id)
        if not company:
            raise NotFoundError("Company not found", details={"id": company_id})
        return company

    def get_company_users(
        self, company_id: str, search: Optional[str] = None, limit: int = 50
    ) -> list[CompanyUser]:
        if limit < 1 or limit > MAX_USERS_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_USERS_LIMIT}")
        search = search.strip() if search else None
        return self.repo.get_company_users(self.db, company_id, search or None, limit)

    def user_belongs_to_company(self, user_id: str, company_id: str) -> bool:
        return self.repo.user_belongs_to_company(self.db, user_id, company_id)

    def get_user_companies(self, user_id: str) -> list[Company]:
        return self.repo.get_user_companies(self.db, user_id)
