"""
Authentication schemas
"""
from typing import Optional
from pydantic import BaseModel, Field

from app.models.profile import CivilStatus, EmploymentType, Gender, YesNo


class LoginRequest(BaseModel):
    """Login request schema"""
    username: str = Field(..., description="Username")
    password: str = Field(..., description="Password")


class TokenResponse(BaseModel):
    """Token response schema"""
    access_token: str
    token_type: str = "bearer"


class SignupRequest(BaseModel):
    """
    Registration form.

    Text fields are optional at the schema level so that the service can
    answer with a single readable message when any of them is blank.
    """
    name: Optional[str] = None
    employment_type: EmploymentType = EmploymentType.REGULAR
    department: Optional[str] = None
    team: Optional[str] = None
    position: Optional[str] = None
    gender: Gender = Gender.MALE
    civil_status: CivilStatus = CivilStatus.SINGLE
    solo_parent: YesNo = YesNo.NO
    username: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None


class ForgotPasswordRequest(BaseModel):
    """Password reset by username"""
    username: Optional[str] = None
    new_password: Optional[str] = None
    confirm_new_password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
