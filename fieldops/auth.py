import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from .config import JWT_ALGORITHM, JWT_EXPIRE_MINUTES, SECRET_KEY
from .database import get_db
from .domain.companies.repository import CompanyRepository
from .models import User

logger = logging.getLogger(__name__)

security = HTTPBearer()


def create_access_token(
    user_id: str, email: str, name: Optional[str] = None, expires_minutes: int = JWT_EXPIRE_MINUTES
) -> str:
    """Issue a signed session token for a user"""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "name": name or email,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.warning(f"⚠️ Token verification failed: {e}")
        raise HTTPException(status_code=401, detail="Invalid or expired token") from e

    if not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Token missing subject")
    return payload


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Get current user from the Bearer session token"""
    payload = decode_access_token(credentials.credentials)

    user = db.query(User).filter(User.id == payload["sub"]).first()
    if not user:
        logger.warning(f"⚠️ Token subject {payload['sub']} does not match any user")
        raise HTTPException(status_code=401, detail="User not found")
    return user


async def verify_company_access(
    company_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> User:
    """Reject callers that are not members of the company in the path"""
    if not CompanyRepository.user_belongs_to_company(db, current_user.id, company_id):
        logger.warning(f"🚫 User {current_user.id} denied access to company {company_id}")
        raise HTTPException(status_code=403, detail="Access to this company is denied")
    return current_user
