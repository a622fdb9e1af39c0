"""
Policy validation service - validates self-service request drafts against policy rules

One rule per request type. A rule checks the submitted fields, computes the
derived fields (leave days, overtime hours, lateness marker) and returns
either the validated field values or a PolicyError with a message that can
be shown to the employee as-is. Nothing is raised out of validate_request.
"""
import enum
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence

from app.constants import (
    BACKDATED_MAX_DAYS,
    COE_TEMPLATES,
    EXEMPT_TITLES,
    LATE_MARKER,
    LATE_THRESHOLD,
    PURPOSE_MAX_LENGTH,
)
from app.models.profile import Gender, YesNo
from app.models.request import AttendanceCategory, DayType, FormType, LeaveType, LetterType
from app.services.leave_balance_service import is_credited, remaining_balance
from app.utils.datetime_utils import days_between, hours_between, minutes_of_day, parse_time

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    MISSING_FIELD = "MissingField"
    INVALID_RANGE = "InvalidRange"
    LIMIT_EXCEEDED = "LimitExceeded"
    INSUFFICIENT_CREDIT = "InsufficientCredit"
    MISSING_DEPENDENT_FIELD = "MissingDependentField"
    NOT_ELIGIBLE = "NotEligible"


@dataclass
class PolicyError:
    kind: ErrorKind
    message: str
    field: Optional[str] = None
    remaining: Optional[int] = None


class PolicyViolation(Exception):
    """Raised inside a rule to stop it; converted to a RuleResult by validate_request."""

    def __init__(self, kind: ErrorKind, message: str, field: Optional[str] = None, remaining: Optional[int] = None):
        super().__init__(message)
        self.error = PolicyError(kind=kind, message=message, field=field, remaining=remaining)


@dataclass
class RuleContext:
    """
    Everything a rule may consult besides the draft itself.

    profile: acting employee (gender, solo_parent, position are read)
    requests: current request collection, used for leave balances
    editing_id: id of the record being edited, excluded from balances
    today: the date "today" is measured against
    """
    profile: Any = None
    requests: Sequence = field(default_factory=list)
    editing_id: Optional[str] = None
    today: date = field(default_factory=date.today)


@dataclass
class RuleResult:
    fields: Optional[Dict[str, Any]] = None
    error: Optional[PolicyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _require(draft, names: List[str], message: str) -> None:
    for name in names:
        if getattr(draft, name) in (None, ""):
            raise PolicyViolation(ErrorKind.MISSING_FIELD, message, field=name)


def _days_in_past(value: date, today: date) -> int:
    return (today - value).days


def available_leave_types(profile) -> List[LeaveType]:
    """
    Leave types offered to an employee.

    Sick, Vacation and Leave Without Pay are always offered; Paternity only to
    male and Maternity only to female employees; Solo Parent only when the
    profile is flagged as a solo parent.
    """
    types = [LeaveType.SICK, LeaveType.VACATION, LeaveType.LWP]
    gender = getattr(profile, "gender", None)
    if gender == Gender.MALE:
        types.append(LeaveType.PATERNITY)
    if gender == Gender.FEMALE:
        types.append(LeaveType.MATERNITY)
    if getattr(profile, "solo_parent", None) == YesNo.YES:
        types.append(LeaveType.SOLO_PARENT)
    return types


def is_exempt_position(position: Optional[str]) -> bool:
    """Positions whose title contains an exempt title are never flagged late."""
    if not position:
        return False
    lowered = position.lower()
    return any(title.lower() in lowered for title in EXEMPT_TITLES)


def validate_leave(draft, context: RuleContext) -> Dict[str, Any]:
    _require(
        draft,
        ["start_date", "end_date", "leave_type"],
        "Required fields are missing. Please provide dates and leave type.",
    )

    start, end = draft.start_date, draft.end_date
    if end < start:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            "Submission failed: The End Date cannot be earlier than the Start Date.",
            field="end_date",
        )
    if start > end:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            "Submission failed: The Start Date cannot be after the End Date.",
            field="start_date",
        )

    leave_type = LeaveType(draft.leave_type)
    if leave_type not in available_leave_types(context.profile):
        raise PolicyViolation(
            ErrorKind.NOT_ELIGIBLE,
            f"{leave_type.value} is not available for your profile.",
            field="leave_type",
        )

    days = days_between(start, end)

    if is_credited(leave_type):
        remaining = remaining_balance(leave_type, context.requests, exclude_id=context.editing_id)
        if days > remaining:
            raise PolicyViolation(
                ErrorKind.INSUFFICIENT_CREDIT,
                f"Insufficient credits. You only have {remaining} credits remaining for {leave_type.value}.",
                field="leave_type",
                remaining=remaining,
            )

    return {
        "start_date": start,
        "end_date": end,
        "leave_type": leave_type,
        "days": days,
        "remarks": draft.remarks,
    }


def validate_business_trip(draft, context: RuleContext) -> Dict[str, Any]:
    _require(
        draft,
        ["destination", "departure_date", "return_date", "purpose"],
        "Please fill in all required fields marked with an asterisk (*).",
    )

    departure, ret = draft.departure_date, draft.return_date
    if departure > ret:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            "Departure Date must not be later than the Return Date.",
            field="departure_date",
        )
    if ret < departure:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            "Return Date must not be earlier than the Departure Date.",
            field="return_date",
        )

    if len(draft.purpose) > PURPOSE_MAX_LENGTH:
        raise PolicyViolation(
            ErrorKind.LIMIT_EXCEEDED,
            f"Purpose must not exceed {PURPOSE_MAX_LENGTH} characters.",
            field="purpose",
        )

    return {
        "destination": draft.destination,
        "departure_date": departure,
        "return_date": ret,
        "purpose": draft.purpose,
        "remarks": draft.remarks,
    }


def validate_overtime(draft, context: RuleContext) -> Dict[str, Any]:
    _require(
        draft,
        ["date", "time_in", "time_out"],
        "Please fill in all required time and date fields (*).",
    )

    remarks = (draft.remarks or "").strip()
    if not remarks:
        raise PolicyViolation(
            ErrorKind.MISSING_FIELD,
            "The Remarks field is required. Please provide a reason for the overtime work.",
            field="remarks",
        )

    if _days_in_past(draft.date, context.today) > BACKDATED_MAX_DAYS:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            f"Overtime entries cannot be submitted for dates more than {BACKDATED_MAX_DAYS} days in the past.",
            field="date",
        )

    hours = hours_between(draft.time_in, draft.time_out)
    if hours <= 0:
        raise PolicyViolation(
            ErrorKind.LIMIT_EXCEEDED,
            "Total OT Hours must be greater than 0. Please check your Time In and Time Out.",
            field="time_out",
        )

    return {
        "date": draft.date,
        "time_in": draft.time_in,
        "time_out": draft.time_out,
        "hours": hours,
        "day_type": draft.day_type or DayType.REGULAR_WORKDAY,
        "remarks": remarks,
    }


def mark_late(remarks: Optional[str]) -> str:
    """Prefix remarks with the late marker once."""
    remarks = remarks or ""
    if LATE_MARKER in remarks:
        return remarks
    return f"{LATE_MARKER} {remarks}".strip()


def is_late(time_in, position: Optional[str]) -> bool:
    """Work from Home time-in strictly after the threshold, for non-exempt positions."""
    threshold = minutes_of_day(parse_time(LATE_THRESHOLD))
    return minutes_of_day(parse_time(time_in)) > threshold and not is_exempt_position(position)


def validate_attendance(draft, context: RuleContext) -> Dict[str, Any]:
    _require(
        draft,
        ["category", "from_date", "end_date", "time_in", "time_out"],
        "Please fill in all required date and time fields (*).",
    )

    if _days_in_past(draft.from_date, context.today) > BACKDATED_MAX_DAYS:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            f"Attendance entries cannot be submitted for dates more than {BACKDATED_MAX_DAYS} days in the past.",
            field="from_date",
        )

    if draft.from_date > draft.end_date:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            "The 'From Date' must not be later than the 'End Date'.",
            field="from_date",
        )

    remarks = draft.remarks or ""
    if draft.category == AttendanceCategory.WORK_FROM_HOME:
        if is_late(draft.time_in, getattr(context.profile, "position", None)):
            remarks = mark_late(remarks)

    return {
        "category": draft.category,
        "from_date": draft.from_date,
        "end_date": draft.end_date,
        "time_in": draft.time_in,
        "time_out": draft.time_out,
        "remarks": remarks,
    }


def validate_letter(draft, context: RuleContext) -> Dict[str, Any]:
    _require(draft, ["letter_type", "date_needed"], "Letter type and date needed are required.")

    template_name = draft.template_name
    if draft.letter_type == LetterType.COE:
        if not template_name:
            raise PolicyViolation(
                ErrorKind.MISSING_DEPENDENT_FIELD,
                "Please select a template name for your COE request.",
                field="template_name",
            )
        if template_name not in COE_TEMPLATES:
            raise PolicyViolation(
                ErrorKind.MISSING_DEPENDENT_FIELD,
                f"Unknown COE template: {template_name}.",
                field="template_name",
            )

    if draft.date_needed < context.today:
        raise PolicyViolation(
            ErrorKind.INVALID_RANGE,
            "The 'Date Needed' cannot be in the past. Please select today or a future date.",
            field="date_needed",
        )

    return {
        "letter_type": draft.letter_type,
        "template_name": template_name,
        "date_needed": draft.date_needed,
        "remarks": draft.remarks,
    }


RULES: Dict[FormType, Callable[[Any, RuleContext], Dict[str, Any]]] = {
    FormType.LEAVE: validate_leave,
    FormType.BUSINESS_TRIP: validate_business_trip,
    FormType.OVERTIME: validate_overtime,
    FormType.ATTENDANCE: validate_attendance,
    FormType.LETTER: validate_letter,
}


def validate_request(draft, context: RuleContext) -> RuleResult:
    """
    Run the rule for the draft's request type.

    Returns:
        RuleResult with the validated fields (type included), or with the
        PolicyError that stopped the rule
    """
    form_type = FormType(draft.type)
    rule = RULES[form_type]
    try:
        fields = rule(draft, context)
    except PolicyViolation as violation:
        logger.info(
            "Rejected %s submission: %s (%s)",
            form_type.value, violation.error.message, violation.error.kind.value
        )
        return RuleResult(error=violation.error)

    fields["type"] = form_type.value
    return RuleResult(fields=fields)
