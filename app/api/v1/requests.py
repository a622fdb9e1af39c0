"""
Self-service request endpoints
"""
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from app.constants import COE_TEMPLATES
from app.core.deps import get_request_lifecycle
from app.models.request import (
    AttendanceCategory,
    DayType,
    FormType,
    LetterType,
)
from app.schemas.requests import (
    DraftUnion,
    FormOptionsOut,
    LeaveBalancesOut,
    RequestListResponse,
    RequestOut,
)
from app.services.leave_balance_service import leave_balances
from app.services.policy_validator import ErrorKind, PolicyError, available_leave_types
from app.services.request_service import RequestLifecycle, SubmissionResult

router = APIRouter()

DraftBody = Annotated[DraftUnion, Body(discriminator="type")]

ERROR_STATUS = {
    ErrorKind.INSUFFICIENT_CREDIT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_ELIGIBLE: status.HTTP_403_FORBIDDEN,
}


def _raise_policy_error(error: PolicyError) -> None:
    raise HTTPException(
        status_code=ERROR_STATUS.get(error.kind, status.HTTP_400_BAD_REQUEST),
        detail=error.message,
    )


def _submitted(result: SubmissionResult, lifecycle: RequestLifecycle) -> RequestOut:
    if not result.ok:
        _raise_policy_error(result.error)
    return RequestOut(request=result.record, editable=lifecycle.can_edit(result.record))


@router.get("", response_model=RequestListResponse)
def list_my_requests(lifecycle: RequestLifecycle = Depends(get_request_lifecycle)):
    """Get the caller's requests, newest first"""
    items = [
        RequestOut(request=record, editable=lifecycle.can_edit(record))
        for record in lifecycle.list_requests()
    ]
    return RequestListResponse(items=items, total=len(items))


@router.post("", response_model=RequestOut, status_code=status.HTTP_201_CREATED)
def submit_request(
    draft: DraftBody,
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle)
):
    """Submit a new request (discriminated on ``type``)"""
    return _submitted(lifecycle.create(draft), lifecycle)


@router.get("/balances", response_model=LeaveBalancesOut)
def get_my_leave_balances(lifecycle: RequestLifecycle = Depends(get_request_lifecycle)):
    """Remaining credit for Sick, Vacation and Solo Parent leave"""
    return LeaveBalancesOut(balances=leave_balances(lifecycle.list_requests()))


@router.get("/options", response_model=FormOptionsOut)
def get_form_options(lifecycle: RequestLifecycle = Depends(get_request_lifecycle)):
    """Choices for each request form, with leave types filtered for the caller"""
    return FormOptionsOut(
        form_types=list(FormType),
        leave_types=available_leave_types(lifecycle.profile),
        day_types=list(DayType),
        attendance_categories=list(AttendanceCategory),
        letter_types=list(LetterType),
        coe_templates=list(COE_TEMPLATES),
    )


@router.get("/{request_id}", response_model=RequestOut)
def get_request(
    request_id: str,
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle)
):
    record = lifecycle.get(request_id)
    return RequestOut(request=record, editable=lifecycle.can_edit(record))


@router.put("/{request_id}", response_model=RequestOut)
def edit_request(
    request_id: str,
    draft: DraftBody,
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle)
):
    """Edit a request while it is still editable"""
    return _submitted(lifecycle.edit(request_id, draft), lifecycle)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_request(
    request_id: str,
    lifecycle: RequestLifecycle = Depends(get_request_lifecycle)
):
    """Delete a request"""
    if not lifecycle.delete(request_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Request {request_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
