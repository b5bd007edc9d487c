import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.user import User
from backend.app.models.user_session import UserSession


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def register_user(client: TestClient, email: str, password: str):
    return client.post("/api/auth/register", json={"name": "Test User", "email": email, "password": password})


def test_successful_login_returns_token():
    client = TestClient(app)
    register_user(client, "login@example.com", "secret")
    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "secret"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data.get("tokenType") == "bearer"
    assert isinstance(data.get("accessToken"), str) and data["accessToken"]
    assert data.get("expiresAt")


def test_login_records_a_session():
    client = TestClient(app)
    register_user(client, "session@example.com", "secret")
    client.post("/api/auth/login", json={"email": "session@example.com", "password": "secret"})
    client.post("/api/auth/login", json={"email": "session@example.com", "password": "secret"})

    with SessionLocal() as db:
        assert db.query(UserSession).count() == 2


def test_wrong_password_returns_400():
    client = TestClient(app)
    register_user(client, "wrongpw@example.com", "secret")
    response = client.post("/api/auth/login", json={"email": "wrongpw@example.com", "password": "bad"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid credentials"}


def test_missing_hash_returns_400_not_500():
    client = TestClient(app)
    register_user(client, "badhash@example.com", "secret")
    # Manually clear hash
    db = SessionLocal()
    user = db.query(User).filter(User.email == "badhash@example.com").first()
    user.hashed_password = None
    db.add(user)
    db.commit()
    db.close()
    response = client.post("/api/auth/login", json={"email": "badhash@example.com", "password": "secret"})
    assert response.status_code == 400


def test_banned_user_cannot_login():
    client = TestClient(app)
    register_user(client, "banned@example.com", "secret")
    with SessionLocal() as db:
        user = db.query(User).filter(User.email == "banned@example.com").first()
        user.banned = True
        db.commit()
    response = client.post("/api/auth/login", json={"email": "banned@example.com", "password": "secret"})
    assert response.status_code == 400


def test_nonexistent_user_returns_400():
    client = TestClient(app)
    response = client.post("/api/auth/login", json={"email": "nosuch@example.com", "password": "secret"})
    assert response.status_code == 400


def test_logout_ends_the_session():
    client = TestClient(app)
    register_user(client, "logout@example.com", "secret")
    token = client.post("/api/auth/login", json={"email": "logout@example.com", "password": "secret"}).json()[
        "data"
    ]["accessToken"]
    headers = {"Authorization": f"Bearer {token}"}

    response = client.post("/api/auth/logout", headers=headers)
    assert response.status_code == 200

    assert client.get("/api/auth/me", headers=headers).status_code == 401
    with SessionLocal() as db:
        assert db.query(UserSession).count() == 0
