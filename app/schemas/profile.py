"""
Employee profile schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from app.models.profile import CivilStatus, EmploymentType, Gender, YesNo


class ProfileOut(BaseModel):
    """Profile attributes visible to the employee (never the credential)"""
    username: str
    name: str
    employment_type: EmploymentType
    department: str
    team: str
    position: str
    gender: Gender
    civil_status: CivilStatus
    solo_parent: YesNo
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
