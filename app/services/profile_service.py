"""
Profile service - credential and profile store, signup and password reset
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.core.security import hash_password, verify_password
from app.models.profile import EmployeeProfile
from app.schemas.auth import ForgotPasswordRequest, SignupRequest

logger = logging.getLogger(__name__)

SIGNUP_REQUIRED_FIELDS = (
    "name", "department", "team", "position", "username", "password", "confirm_password"
)


class ProfileStore:
    """
    Employee profiles keyed by username.

    Usernames are unique ignoring case. Lookups by username ignore case too,
    except in verify(), where the username must match exactly as registered.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[EmployeeProfile]:
        if not username:
            return None
        return self.db.query(EmployeeProfile).filter(
            EmployeeProfile.username_key == username.lower()
        ).first()

    def put_profile(self, profile: EmployeeProfile, password: Optional[str] = None) -> EmployeeProfile:
        """Insert or update a profile; a given password replaces the stored credential."""
        profile.username_key = profile.username.lower()
        if password is not None:
            profile.password_hash = hash_password(password)
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def list_all(self) -> List[EmployeeProfile]:
        return self.db.query(EmployeeProfile).order_by(EmployeeProfile.id).all()

    def verify(self, username: str, password: str) -> Optional[EmployeeProfile]:
        """Profile for an exact username whose password matches, else None."""
        profile = self.find_by_username(username)
        if profile is None or profile.username != username:
            return None
        if not verify_password(password, profile.password_hash):
            return None
        return profile


def signup(db: Session, data: SignupRequest) -> EmployeeProfile:
    """
    Register a new employee profile.

    Raises:
        HTTPException: 400 for missing fields or mismatched passwords,
            409 when the username is already taken
    """
    if any(not (getattr(data, name) or "").strip() for name in SIGNUP_REQUIRED_FIELDS):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please fill out all required fields marked with an asterisk (*)."
        )

    if data.password != data.confirm_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match. Please ensure both password fields are identical."
        )

    store = ProfileStore(db)
    if store.find_by_username(data.username) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="This username is already taken. Please choose a unique username."
        )

    profile = EmployeeProfile(
        username=data.username,
        name=data.name,
        employment_type=data.employment_type.value,
        department=data.department,
        team=data.team,
        position=data.position,
        gender=data.gender.value,
        civil_status=data.civil_status.value,
        solo_parent=data.solo_parent.value,
    )
    profile = store.put_profile(profile, password=data.password)
    logger.info("Registered profile %s", profile.username)
    return profile


def reset_password(db: Session, data: ForgotPasswordRequest) -> EmployeeProfile:
    """
    Replace the password of a profile found by username (case-insensitive).

    Raises:
        HTTPException: 400 for missing fields or mismatched passwords,
            404 for an unknown username
    """
    if not data.username or not data.new_password or not data.confirm_new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required."
        )

    if data.new_password != data.confirm_new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match."
        )

    store = ProfileStore(db)
    profile = store.find_by_username(data.username)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Username not found in our records."
        )

    profile = store.put_profile(profile, password=data.new_password)
    logger.info("Password reset for %s", profile.username)
    return profile
