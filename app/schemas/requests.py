"""
Self-service request schemas

Drafts are what an employee submits: every payload field is optional so the
policy rules can report a readable "missing field" error instead of a bare
422. Records are finalized requests as stored in the collection; derived
fields (days, hours) only exist on records.
"""
from datetime import date, datetime, time
from decimal import Decimal
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from app.constants import PURPOSE_MAX_LENGTH
from app.models.request import (
    AttendanceCategory,
    DayType,
    FormType,
    LeaveType,
    LetterType,
    RequestStatus,
)

# "date" is also a field name on the overtime schemas
CalendarDate = date


# --- Drafts (submitted form fields) ---


class DraftBase(BaseModel):
    remarks: Optional[str] = Field(None, description="Free-text remarks")

    @model_validator(mode="before")
    @classmethod
    def _blank_to_none(cls, data):
        # "type" is the union tag and must reach the discriminator untouched
        if not isinstance(data, dict):
            return data
        return {
            key: None if key != "type" and isinstance(value, str) and value.strip() == "" else value
            for key, value in data.items()
        }


class LeaveDraft(DraftBase):
    type: Literal["Leave Management"] = "Leave Management"
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    leave_type: Optional[LeaveType] = LeaveType.VACATION


class BusinessTripDraft(DraftBase):
    type: Literal["Official Business Trip"] = "Official Business Trip"
    destination: Optional[str] = None
    departure_date: Optional[date] = None
    return_date: Optional[date] = None
    purpose: Optional[str] = None


class OvertimeDraft(DraftBase):
    type: Literal["Overtime"] = "Overtime"
    date: Optional[CalendarDate] = None
    time_in: Optional[time] = None
    time_out: Optional[time] = None
    day_type: Optional[DayType] = DayType.REGULAR_WORKDAY


class AttendanceDraft(DraftBase):
    type: Literal["Attendance Regularization"] = "Attendance Regularization"
    category: Optional[AttendanceCategory] = AttendanceCategory.WORK_FROM_HOME
    from_date: Optional[date] = None
    end_date: Optional[date] = None
    time_in: Optional[time] = None
    time_out: Optional[time] = None


class LetterDraft(DraftBase):
    type: Literal["Letter Request"] = "Letter Request"
    letter_type: Optional[LetterType] = LetterType.COE
    template_name: Optional[str] = None
    date_needed: Optional[date] = None


DraftUnion = Union[LeaveDraft, BusinessTripDraft, OvertimeDraft, AttendanceDraft, LetterDraft]

AnyDraft = Annotated[DraftUnion, Field(discriminator="type")]


# --- Records (finalized requests) ---


class RecordBase(BaseModel):
    id: str
    status: RequestStatus = RequestStatus.PENDING
    created_at: datetime
    remarks: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class LeaveRecord(RecordBase):
    type: Literal["Leave Management"] = "Leave Management"
    start_date: date
    end_date: date
    leave_type: LeaveType
    days: int


class BusinessTripRecord(RecordBase):
    type: Literal["Official Business Trip"] = "Official Business Trip"
    destination: str
    departure_date: date
    return_date: date
    purpose: str = Field(..., max_length=PURPOSE_MAX_LENGTH)


class OvertimeRecord(RecordBase):
    type: Literal["Overtime"] = "Overtime"
    date: CalendarDate
    time_in: time
    time_out: time
    hours: Decimal
    day_type: DayType


class AttendanceRecord(RecordBase):
    type: Literal["Attendance Regularization"] = "Attendance Regularization"
    category: AttendanceCategory
    from_date: date
    end_date: date
    time_in: time
    time_out: time


class LetterRecord(RecordBase):
    type: Literal["Letter Request"] = "Letter Request"
    letter_type: LetterType
    template_name: Optional[str] = None
    date_needed: date


AnyRequest = Annotated[
    Union[LeaveRecord, BusinessTripRecord, OvertimeRecord, AttendanceRecord, LetterRecord],
    Field(discriminator="type"),
]

request_adapter = TypeAdapter(AnyRequest)
draft_adapter = TypeAdapter(AnyDraft)


def form_type_of(item) -> FormType:
    """FormType of a draft or record."""
    return FormType(item.type)


# --- API envelopes ---


class RequestOut(BaseModel):
    """A stored request plus whether its owner may still change it"""
    request: AnyRequest
    editable: bool


class RequestListResponse(BaseModel):
    items: List[RequestOut]
    total: int


class LeaveBalancesOut(BaseModel):
    """Remaining credit per leave pool"""
    balances: Dict[str, int]


class FormOptionsOut(BaseModel):
    form_types: List[FormType]
    leave_types: List[LeaveType]
    day_types: List[DayType]
    attendance_categories: List[AttendanceCategory]
    letter_types: List[LetterType]
    coe_templates: List[str]
