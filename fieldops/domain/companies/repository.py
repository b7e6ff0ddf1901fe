"""Company repository - Database operations for companies and members"""

from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from ...models import Company, CompanyUser, User


class CompanyRepository:
    """Repository for company database operations"""

    @staticmethod
    def get_company_by_id(db: Session, company_id: str) -> Optional[Company]:
        return db.query(Company).filter(Company.id == company_id).first()

    @staticmethod
    def get_company_users(
        db: Session, company_id: str, search: Optional[str] = None, limit: int = 50
    ) -> list[CompanyUser]:
        """Get members of a company, optionally filtered by email/name/surname"""
        query = (
            db.query(CompanyUser)
            .join(User, CompanyUser.user_id == User.id)
            .options(joinedload(CompanyUser.user))
            .filter(CompanyUser.company_id == company_id)
        )

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    User.email.ilike(pattern),
                    User.name.ilike(pattern),
                    User.surname.ilike(pattern),
                )
            )

        return query.order_by(User.name.asc(), User.email.asc()).limit(limit).all()

    @staticmethod
    def user_belongs_to_company(db: Session, user_id: str, company_id: str) -> bool:
        return (
            db.query(CompanyUser.id)
            .filter(CompanyUser.user_id == user_id, CompanyUser.company_id == company_id)
            .first()
            is not None
        )

    @staticmethod
    def get_user_companies(db: Session, user_id: str) -> list[Company]:
        return (
            db.query(Company)
            .join(CompanyUser, CompanyUser.company_id == Company.id)
            .filter(CompanyUser.user_id == user_id)
            .order_by(Company.name.asc())
            .all()
        )
