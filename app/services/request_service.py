"""
Request service - lifecycle of self-service requests

- Create: fresh id and timestamp, status Pending, policy rules, prepend, save.
- Edit: only while the record is editable; id and created_at are kept and
  every other field is replaced by the re-validated draft.
- Delete: removes by id; not gated by the edit window.
- Approved/Rejected are set outside this service and make a record immutable.
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional

from fastapi import HTTPException, status

from app.models.request import FormType, RequestStatus
from app.schemas.requests import AnyRequest, request_adapter
from app.services.policy_validator import PolicyError, RuleContext, validate_request
from app.services.request_store import RequestStore
from app.utils.datetime_utils import ensure_utc, is_within_edit_window, now_utc

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    record: Optional[AnyRequest] = None
    error: Optional[PolicyError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_editable(record, now: Optional[datetime] = None) -> bool:
    """
    Whether the owner may still edit a record.

    Inside the edit window, or any Pending business trip regardless of age.
    """
    if is_within_edit_window(record.created_at, record.status, now=now):
        return True
    return record.type == FormType.BUSINESS_TRIP.value and record.status == RequestStatus.PENDING


class RequestLifecycle:
    """
    Create, edit and delete requests in one employee's collection.

    Args:
        store: Request collection store for the acting employee
        profile: Acting employee profile, read by the leave and attendance rules
        clock: Returns the current instant (timezone-aware)
    """

    def __init__(
        self,
        store: RequestStore,
        profile=None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self.store = store
        self.profile = profile
        self.clock = clock

    def _today(self) -> date:
        return ensure_utc(self.clock()).date()

    def _new_id(self, existing: List[AnyRequest]) -> str:
        taken = {r.id for r in existing}
        request_id = uuid.uuid4().hex
        while request_id in taken:
            request_id = uuid.uuid4().hex
        return request_id

    def list_requests(self) -> List[AnyRequest]:
        return self.store.load_all()

    def get(self, request_id: str) -> AnyRequest:
        for record in self.store.load_all():
            if record.id == request_id:
                return record
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Request {request_id} not found"
        )

    def can_edit(self, record) -> bool:
        return is_editable(record, now=self.clock())

    def create(self, draft) -> SubmissionResult:
        """
        Validate and store a new request.

        Returns:
            SubmissionResult with the stored record, or the policy error
            (the collection is left untouched)
        """
        requests = self.store.load_all()
        request_id = self._new_id(requests)
        created_at = ensure_utc(self.clock())

        context = RuleContext(profile=self.profile, requests=requests, today=created_at.date())
        result = validate_request(draft, context)
        if not result.ok:
            return SubmissionResult(error=result.error)

        record = request_adapter.validate_python({
            **result.fields,
            "id": request_id,
            "status": RequestStatus.PENDING,
            "created_at": created_at,
        })
        self.store.save_all([record] + requests)
        logger.info("Created %s request %s", record.type, record.id)
        return SubmissionResult(record=record)

    def edit(self, request_id: str, draft) -> SubmissionResult:
        """
        Re-validate a request with new field values and replace it in place.

        Raises:
            HTTPException: 404 if the request does not exist, 409 if it is no
                longer editable, 400 if the draft changes the request type
        """
        requests = self.store.load_all()
        existing = next((r for r in requests if r.id == request_id), None)
        if existing is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Request {request_id} not found"
            )

        if not self.can_edit(existing):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Request {request_id} is immutable and can no longer be edited"
            )

        if draft.type != existing.type:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"A {existing.type} request cannot be changed into {draft.type}"
            )

        context = RuleContext(
            profile=self.profile,
            requests=requests,
            editing_id=request_id,
            today=self._today(),
        )
        result = validate_request(draft, context)
        if not result.ok:
            return SubmissionResult(error=result.error)

        record = request_adapter.validate_python({
            **result.fields,
            "id": existing.id,
            "status": RequestStatus.PENDING,
            "created_at": existing.created_at,
        })
        self.store.save_all([record if r.id == request_id else r for r in requests])
        logger.info("Edited %s request %s", record.type, record.id)
        return SubmissionResult(record=record)

    def delete(self, request_id: str) -> bool:
        """Remove a request by id. Returns False when there was nothing to remove."""
        requests = self.store.load_all()
        remaining = [r for r in requests if r.id != request_id]
        if len(remaining) == len(requests):
            return False

        self.store.save_all(remaining)
        logger.info("Deleted request %s", request_id)
        return True
