"""
Profile endpoints
"""
from fastapi import APIRouter, Depends
from app.core.deps import get_current_profile
from app.models.profile import EmployeeProfile
from app.schemas.profile import ProfileOut

router = APIRouter()


@router.get("/me", response_model=ProfileOut)
def get_my_profile(current_profile: EmployeeProfile = Depends(get_current_profile)):
    """Get the acting employee's profile"""
    return current_profile
