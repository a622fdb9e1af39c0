"""
Self-service request models
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON, Index
from sqlalchemy.sql import func
import enum
from app.db.base import Base


class FormType(str, enum.Enum):
    LEAVE = "Leave Management"
    BUSINESS_TRIP = "Official Business Trip"
    OVERTIME = "Overtime"
    ATTENDANCE = "Attendance Regularization"
    LETTER = "Letter Request"


class RequestStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveType(str, enum.Enum):
    SICK = "Sick Leave"
    VACATION = "Vacation Leave"
    MATERNITY = "Maternity Leave"
    PATERNITY = "Paternity Leave"
    BEREAVEMENT = "Bereavement Leave"
    LWP = "Leave Without Pay"
    SOLO_PARENT = "Solo Parent Leave"


# Leave types drawn from a credit pool (see app.constants.LEAVE_CREDITS)
CREDITED_LEAVE_TYPES = (LeaveType.SICK, LeaveType.VACATION, LeaveType.SOLO_PARENT)


class DayType(str, enum.Enum):
    REGULAR_WORKDAY = "Regular Workday"
    REST_DAY = "Rest Day"
    SPECIAL_HOLIDAY = "Special Non-Working Holiday"
    REGULAR_HOLIDAY = "Regular Holiday"


class AttendanceCategory(str, enum.Enum):
    BRANCH_VISIT = "Branch Visit"
    BUSINESS_MEETING = "Business Meeting"
    FIELD_WORK = "Field Work"
    SCHOOL_VISIT = "School Visit"
    SEMINAR = "Seminar"
    TRAINING = "Training"
    TECHNICAL_ASSISTANCE = "Technical Assistance"
    WORK_FROM_HOME = "Work from Home"


class LetterType(str, enum.Enum):
    BIR_2316 = "BIR 2316"
    COE = "Certificate of Employment (COE)"


class StoredRequest(Base):
    """
    One row per request in an employee's collection.

    The full record lives in ``record_json``; type, status and created_at are
    mirrored into columns for listing. ``position`` keeps the collection order.
    """
    __tablename__ = "self_service_requests"

    id = Column(String(64), primary_key=True)
    owner_username = Column(String, nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    type = Column(String(40), nullable=False)
    status = Column(String(20), nullable=False, default=RequestStatus.PENDING.value)
    record_json = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_self_service_requests_owner_position", "owner_username", "position"),
    )
