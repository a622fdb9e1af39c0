"""
Leave balance service - remaining credit per leave pool.

- Pools: Sick Leave=15, Vacation Leave=15, Solo Parent Leave=7 (fixed annual allotment).
- Pending and Approved leave consume credit; Rejected leave does not.
- Balances are recomputed from the full request collection on every call,
  so they always agree with the collection (O(n) per call).
- The record being edited is excluded so it never deducts from itself.
"""
from typing import Dict, Iterable, Optional

from app.constants import LEAVE_CREDITS
from app.models.request import CREDITED_LEAVE_TYPES, FormType, LeaveType, RequestStatus

CONSUMING_STATUSES = (RequestStatus.PENDING, RequestStatus.APPROVED)


def is_credited(leave_type) -> bool:
    """Whether the leave type draws from a credit pool."""
    return leave_type in CREDITED_LEAVE_TYPES


def used_days(
    leave_type: LeaveType,
    requests: Iterable,
    exclude_id: Optional[str] = None
) -> int:
    """Days of leave_type consumed by Pending/Approved leave records other than exclude_id."""
    total = 0
    for req in requests:
        if req.type != FormType.LEAVE.value:
            continue
        if req.leave_type != leave_type:
            continue
        if exclude_id is not None and req.id == exclude_id:
            continue
        if req.status not in CONSUMING_STATUSES:
            continue
        total += req.days
    return total


def remaining_balance(
    leave_type: LeaveType,
    requests: Iterable,
    exclude_id: Optional[str] = None
) -> int:
    """
    Remaining credit for a credited leave type.

    Args:
        leave_type: Sick, Vacation or Solo Parent leave
        requests: Full request collection (any variants)
        exclude_id: Id of the record under edit, left out of the sum

    Returns:
        Allotment minus consumed days, never below 0

    Raises:
        ValueError: If leave_type has no credit pool
    """
    if not is_credited(leave_type):
        raise ValueError(f"{getattr(leave_type, 'value', leave_type)} is not tracked as a credit balance")

    allotment = LEAVE_CREDITS[LeaveType(leave_type).value]
    return max(0, allotment - used_days(leave_type, requests, exclude_id))


def leave_balances(requests: Iterable, exclude_id: Optional[str] = None) -> Dict[str, int]:
    """Remaining credit for every pool, keyed by leave type name."""
    snapshot = list(requests)
    return {
        leave_type.value: remaining_balance(leave_type, snapshot, exclude_id)
        for leave_type in CREDITED_LEAVE_TYPES
    }
