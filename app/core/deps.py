"""
Dependencies and guards for FastAPI endpoints
"""
from typing import Generator
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.db.session import SessionLocal
from app.core.security import decode_token
from app.models.profile import EmployeeProfile
from app.services.profile_service import ProfileStore
from app.services.request_service import RequestLifecycle
from app.services.request_store import SqlRequestStore


security = HTTPBearer()


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_profile(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> EmployeeProfile:
    """
    Get the acting employee's profile from the JWT token
    """
    try:
        payload = decode_token(credentials.credentials)
    except ValueError:
        payload = {}

    username = payload.get("sub")
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    profile = ProfileStore(db).find_by_username(username)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return profile


def get_request_lifecycle(
    db: Session = Depends(get_db),
    profile: EmployeeProfile = Depends(get_current_profile)
) -> RequestLifecycle:
    """Lifecycle controller bound to the acting employee's request collection"""
    return RequestLifecycle(store=SqlRequestStore(db, profile.username), profile=profile)
