"""
Tests for authentication endpoints (signup, login, password reset, profile)
"""
import bcrypt
import pytest
from fastapi import status
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.models.profile import EmployeeProfile
from app.services.profile_service import ProfileStore

SIGNUP = {
    "name": "Juan Dela Cruz",
    "department": "Engineering",
    "team": "Backend",
    "position": "Specialist",
    "username": "JDelaCruz",
    "password": "s3cret-pass",
    "confirm_password": "s3cret-pass",
}


@pytest.fixture
def registered(client):
    response = client.post("/api/v1/auth/signup", json=SIGNUP)
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_signup_applies_defaults(registered):
    assert registered["username"] == "JDelaCruz"
    assert registered["employment_type"] == "Regular"
    assert registered["gender"] == "Male"
    assert registered["civil_status"] == "Single"
    assert registered["solo_parent"] == "No"
    assert "password_hash" not in registered


def test_signup_stores_hashed_password(registered, db: Session):
    profile = ProfileStore(db).find_by_username("jdelacruz")
    assert profile.password_hash != SIGNUP["password"]
    assert verify_password(SIGNUP["password"], profile.password_hash)


def test_signup_rejects_taken_username_ignoring_case(client, registered):
    response = client.post("/api/v1/auth/signup", json={**SIGNUP, "username": "jdelacruz"})
    assert response.status_code == status.HTTP_409_CONFLICT


def test_signup_rejects_password_mismatch(client):
    response = client.post("/api/v1/auth/signup", json={**SIGNUP, "confirm_password": "other"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "Passwords do not match" in response.json()["detail"]


def test_signup_rejects_blank_field(client):
    response = client.post("/api/v1/auth/signup", json={**SIGNUP, "team": "  "})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_login_success(client, registered):
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "JDelaCruz", "password": SIGNUP["password"]}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"


def test_login_username_must_match_exactly(client, registered):
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "jdelacruz", "password": SIGNUP["password"]}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_login_wrong_password(client, registered):
    response = client.post(
        "/api/v1/auth/login",
        json={"username": "JDelaCruz", "password": "wrong"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_login_blank_credentials(client):
    response = client.post("/api/v1/auth/login", json={"username": "", "password": ""})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_login_accepts_bcrypt_hash(client, db: Session):
    profile = EmployeeProfile(
        username="legacy",
        name="Legacy User",
        department="Ops",
        team="Night",
        position="Analyst",
    )
    store = ProfileStore(db)
    store.put_profile(profile)
    profile.password_hash = bcrypt.hashpw(b"oldpass", bcrypt.gensalt()).decode("utf-8")
    db.commit()

    response = client.post("/api/v1/auth/login", json={"username": "legacy", "password": "oldpass"})
    assert response.status_code == status.HTTP_200_OK


def test_forgot_password_then_login(client, registered):
    response = client.post(
        "/api/v1/auth/forgot-password",
        json={"username": "jdelacruz", "new_password": "n3w-pass", "confirm_new_password": "n3w-pass"}
    )
    assert response.status_code == status.HTTP_200_OK

    old = client.post("/api/v1/auth/login", json={"username": "JDelaCruz", "password": SIGNUP["password"]})
    new = client.post("/api/v1/auth/login", json={"username": "JDelaCruz", "password": "n3w-pass"})
    assert old.status_code == status.HTTP_401_UNAUTHORIZED
    assert new.status_code == status.HTTP_200_OK


def test_forgot_password_unknown_user(client):
    response = client.post(
        "/api/v1/auth/forgot-password",
        json={"username": "ghost", "new_password": "a", "confirm_new_password": "a"}
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_forgot_password_mismatch(client, registered):
    response = client.post(
        "/api/v1/auth/forgot-password",
        json={"username": "JDelaCruz", "new_password": "a", "confirm_new_password": "b"}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_profile_me(client, registered):
    token = client.post(
        "/api/v1/auth/login",
        json={"username": "JDelaCruz", "password": SIGNUP["password"]}
    ).json()["access_token"]

    response = client.get("/api/v1/profile/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Juan Dela Cruz"


def test_profile_me_rejects_bad_token(client):
    response = client.get("/api/v1/profile/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_hash_password_is_salted():
    assert hash_password("same") != hash_password("same")
