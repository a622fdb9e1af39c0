"""
Pytest configuration and fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.main import app
from app.db.base import Base
from app.core.deps import get_db
from app.models import EmployeeProfile  # noqa: F401  (registers tables)


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed "now" for engine tests: a Tuesday morning, UTC
NOW = datetime(2026, 3, 10, 8, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def male_profile():
    return EmployeeProfile(
        username="jdelacruz",
        name="Juan Dela Cruz",
        employment_type="Regular",
        department="Engineering",
        team="Backend",
        position="Specialist",
        gender="Male",
        civil_status="Married",
        solo_parent="No",
    )


@pytest.fixture
def female_solo_parent_profile():
    return EmployeeProfile(
        username="msantos",
        name="Maria Santos",
        employment_type="Regular",
        department="Finance",
        team="Growth",
        position="Team Leader",
        gender="Female",
        civil_status="Single",
        solo_parent="Yes",
    )
