"""
Request collection stores

The lifecycle controller only ever reads and writes an employee's whole
collection: load_all returns a snapshot, save_all replaces it. A save is
one transaction, so a reader never sees a half-written collection.
"""
import logging
from typing import Dict, List, Protocol

from sqlalchemy.orm import Session

from app.models.request import StoredRequest
from app.schemas.requests import AnyRequest, request_adapter
from app.utils.datetime_utils import ensure_utc

logger = logging.getLogger(__name__)


class RequestStore(Protocol):
    """Keyed, persisted request collection."""

    def load_all(self) -> List[AnyRequest]:
        ...

    def save_all(self, requests: List[AnyRequest]) -> None:
        ...


class InMemoryRequestStore:
    """Collection kept in process memory, for one session or for tests."""

    def __init__(self, requests=None):
        self._requests: List[AnyRequest] = list(requests or [])

    def load_all(self) -> List[AnyRequest]:
        return list(self._requests)

    def save_all(self, requests: List[AnyRequest]) -> None:
        self._requests = list(requests)


class SqlRequestStore:
    """
    Collection persisted with SQLAlchemy, one collection per username.

    Each record is stored as its JSON document; list order is kept in the
    ``position`` column.
    """

    def __init__(self, db: Session, owner_username: str):
        self.db = db
        self.owner_username = owner_username

    def _query(self):
        return self.db.query(StoredRequest).filter(
            StoredRequest.owner_username == self.owner_username
        )

    def load_all(self) -> List[AnyRequest]:
        rows = self._query().order_by(StoredRequest.position).all()
        return [request_adapter.validate_python(row.record_json) for row in rows]

    def save_all(self, requests: List[AnyRequest]) -> None:
        existing: Dict[str, StoredRequest] = {row.id: row for row in self._query().all()}
        keep = set()

        try:
            for position, record in enumerate(requests):
                document = request_adapter.dump_python(record, mode="json")
                row = existing.get(record.id)
                if row is None:
                    row = StoredRequest(id=record.id, owner_username=self.owner_username)
                    self.db.add(row)
                row.position = position
                row.type = record.type
                row.status = record.status.value
                row.created_at = ensure_utc(record.created_at)
                row.record_json = document
                keep.add(record.id)

            for request_id, row in existing.items():
                if request_id not in keep:
                    self.db.delete(row)

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.debug("Saved %d requests for %s", len(requests), self.owner_username)
