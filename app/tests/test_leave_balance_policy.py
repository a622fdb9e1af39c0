"""
Tests for leave credit balances
"""
from datetime import date, datetime, timezone

import pytest

from app.models.request import LeaveType, RequestStatus
from app.schemas.requests import LeaveRecord, OvertimeRecord
from app.services.leave_balance_service import leave_balances, remaining_balance, used_days

CREATED = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def _leave(request_id, leave_type, days, status=RequestStatus.PENDING):
    return LeaveRecord(
        id=request_id,
        status=status,
        created_at=CREATED,
        start_date=date(2026, 4, 1),
        end_date=date(2026, 4, days),
        leave_type=leave_type,
        days=days,
    )


def test_full_allotment_with_no_requests():
    assert leave_balances([]) == {
        "Sick Leave": 15,
        "Vacation Leave": 15,
        "Solo Parent Leave": 7,
    }


def test_pending_leave_consumes_credit():
    requests = [_leave("a", LeaveType.SICK, 10)]
    assert remaining_balance(LeaveType.SICK, requests) == 5


def test_approved_leave_consumes_credit_and_rejected_does_not():
    requests = [
        _leave("a", LeaveType.VACATION, 4, status=RequestStatus.APPROVED),
        _leave("b", LeaveType.VACATION, 6, status=RequestStatus.REJECTED),
    ]
    assert used_days(LeaveType.VACATION, requests) == 4
    assert remaining_balance(LeaveType.VACATION, requests) == 11


def test_pools_are_independent():
    requests = [_leave("a", LeaveType.SICK, 3), _leave("b", LeaveType.SOLO_PARENT, 2)]
    balances = leave_balances(requests)
    assert balances["Sick Leave"] == 12
    assert balances["Vacation Leave"] == 15
    assert balances["Solo Parent Leave"] == 5


def test_excluded_record_does_not_count():
    requests = [_leave("a", LeaveType.SICK, 10), _leave("b", LeaveType.SICK, 2)]
    assert remaining_balance(LeaveType.SICK, requests, exclude_id="a") == 13


def test_other_request_types_are_ignored():
    overtime = OvertimeRecord(
        id="ot",
        created_at=CREATED,
        date=date(2026, 3, 1),
        time_in="18:00",
        time_out="20:00",
        hours="2.00",
        day_type="Regular Workday",
    )
    assert remaining_balance(LeaveType.SICK, [overtime]) == 15


def test_balance_never_goes_negative():
    requests = [_leave("a", LeaveType.SOLO_PARENT, 5), _leave("b", LeaveType.SOLO_PARENT, 5)]
    assert remaining_balance(LeaveType.SOLO_PARENT, requests) == 0


@pytest.mark.parametrize("leave_type", [LeaveType.MATERNITY, LeaveType.LWP])
def test_uncredited_type_has_no_balance(leave_type):
    with pytest.raises(ValueError):
        remaining_balance(leave_type, [])
