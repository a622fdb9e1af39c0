"""
Database models
"""
from app.models.profile import (
    EmployeeProfile,
    EmploymentType,
    Gender,
    CivilStatus,
    YesNo,
)
from app.models.request import (
    StoredRequest,
    FormType,
    RequestStatus,
    LeaveType,
    DayType,
    AttendanceCategory,
    LetterType,
    CREDITED_LEAVE_TYPES,
)

__all__ = [
    "EmployeeProfile",
    "EmploymentType",
    "Gender",
    "CivilStatus",
    "YesNo",
    "StoredRequest",
    "FormType",
    "RequestStatus",
    "LeaveType",
    "DayType",
    "AttendanceCategory",
    "LetterType",
    "CREDITED_LEAVE_TYPES",
]
