import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def test_successful_registration_returns_user():
    client = TestClient(app)
    payload = {"name": "Asha", "email": "user@example.com", "password": "secret"}
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["email"] == payload["email"]
    assert data["role"] == "STUDENT"
    assert "password" not in data
    assert "hashedPassword" not in data
    assert isinstance(data.get("id"), int)


def test_duplicate_email_returns_400():
    client = TestClient(app)
    payload = {"name": "Dup", "email": "dup@example.com", "password": "secret"}
    first = client.post("/api/auth/register", json=payload)
    assert first.status_code == 201
    second = client.post("/api/auth/register", json=payload)
    assert second.status_code == 400
    assert second.json() == {"success": False, "error": "Email already registered"}


def test_short_password_is_rejected():
    client = TestClient(app)
    response = client.post("/api/auth/register", json={"name": "x", "email": "short@example.com", "password": "123"})
    assert response.status_code == 422
    assert response.json()["success"] is False


def test_user_persisted_in_db():
    client = TestClient(app)
    payload = {"name": "Persist", "email": "persist@example.com", "password": "secret"}
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201

    with SessionLocal() as db:
        user = db.query(User).filter(User.email == payload["email"]).first()
        assert user is not None
        assert user.name == "Persist"
        assert user.hashed_password and user.hashed_password != payload["password"]
