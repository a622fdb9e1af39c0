"""
Tests for the SQLAlchemy-backed request collection
"""
from datetime import date, datetime, time, timezone
from decimal import Decimal

from sqlalchemy.orm import Session

from app.models.request import StoredRequest
from app.schemas.requests import LeaveRecord, OvertimeDraft, OvertimeRecord
from app.services.request_service import RequestLifecycle
from app.services.request_store import SqlRequestStore

CREATED = datetime(2026, 3, 10, 8, 0, tzinfo=timezone.utc)


def _overtime(request_id):
    return OvertimeRecord(
        id=request_id,
        created_at=CREATED,
        date=date(2026, 3, 9),
        time_in=time(18, 0),
        time_out=time(20, 15),
        hours=Decimal("2.25"),
        day_type="Rest Day",
        remarks="Deployment",
    )


def _leave(request_id):
    return LeaveRecord(
        id=request_id,
        created_at=CREATED,
        start_date=date(2026, 3, 16),
        end_date=date(2026, 3, 17),
        leave_type="Sick Leave",
        days=2,
    )


def test_round_trip_keeps_order_and_values(db: Session):
    store = SqlRequestStore(db, "jdelacruz")
    records = [_overtime("ot-1"), _leave("lv-1")]

    store.save_all(records)
    loaded = store.load_all()

    assert loaded == records
    assert loaded[0].hours == Decimal("2.25")
    assert loaded[0].created_at == CREATED


def test_save_all_replaces_collection(db: Session):
    store = SqlRequestStore(db, "jdelacruz")
    store.save_all([_overtime("ot-1"), _leave("lv-1")])

    store.save_all([_leave("lv-2"), _leave("lv-1")])

    assert [r.id for r in store.load_all()] == ["lv-2", "lv-1"]
    assert db.query(StoredRequest).count() == 2


def test_collections_are_separate_per_owner(db: Session):
    SqlRequestStore(db, "jdelacruz").save_all([_leave("lv-1")])
    SqlRequestStore(db, "msantos").save_all([_overtime("ot-1")])

    assert [r.id for r in SqlRequestStore(db, "jdelacruz").load_all()] == ["lv-1"]
    assert [r.id for r in SqlRequestStore(db, "msantos").load_all()] == ["ot-1"]


def test_empty_collection(db: Session):
    assert SqlRequestStore(db, "nobody").load_all() == []


def test_edit_cycle_survives_reload(db: Session, male_profile):
    lifecycle = RequestLifecycle(
        store=SqlRequestStore(db, male_profile.username),
        profile=male_profile,
        clock=lambda: CREATED,
    )
    created = lifecycle.create(
        OvertimeDraft(date="2026-03-09", time_in="18:00", time_out="20:00", remarks="Deploy")
    ).record

    edited = lifecycle.edit(
        created.id,
        OvertimeDraft(date="2026-03-09", time_in="18:00", time_out="21:20", day_type="Rest Day", remarks="Deploy")
    ).record
    loaded = SqlRequestStore(db, male_profile.username).load_all()

    assert loaded == [edited]
    assert loaded[0].id == created.id
    assert loaded[0].created_at == created.created_at
    assert loaded[0].hours == Decimal("3.33")
    assert loaded[0].day_type == "Rest Day"
