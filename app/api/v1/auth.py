"""
Authentication endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.core.deps import get_db
from app.core.security import create_access_token
from app.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    SignupRequest,
    TokenResponse,
)
from app.schemas.profile import ProfileOut
from app.services.profile_service import ProfileStore, reset_password, signup

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=ProfileOut, status_code=status.HTTP_201_CREATED)
def signup_employee(
    signup_data: SignupRequest,
    db: Session = Depends(get_db)
):
    """Register a new employee profile"""
    return signup(db, signup_data)


@router.post("/login", response_model=TokenResponse)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and return JWT token

    Username must match exactly as registered.
    """
    if not login_data.username or not login_data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and Password are required to log in."
        )

    profile = ProfileStore(db).verify(login_data.username, login_data.password)
    if profile is None:
        logger.warning("Failed login for %s", login_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password. Please verify your credentials."
        )

    access_token = create_access_token({"sub": profile.username})
    return TokenResponse(access_token=access_token)


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
    reset_data: ForgotPasswordRequest,
    db: Session = Depends(get_db)
):
    """Set a new password for a username"""
    reset_password(db, reset_data)
    return MessageResponse(message="Password updated. You can now log in with your new password.")
