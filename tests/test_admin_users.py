import pytest
from fastapi.testclient import TestClient

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.user import User

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_user(email: str, role: str = "STUDENT", name: str = "User") -> int:
    with SessionLocal() as db:
        user = User(name=name, email=email, hashed_password=get_password_hash(PASSWORD), role=role)
        db.add(user)
        db.commit()
        return user.id


def login(client: TestClient, email: str) -> dict:
    response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['accessToken']}"}


def test_non_admin_cannot_access_admin_endpoints():
    client = TestClient(app)
    create_user("student@example.com")
    headers = login(client, "student@example.com")

    resp = client.get("/api/admin/users", headers=headers)
    assert resp.status_code == 403
    assert resp.json()["success"] is False


def test_anonymous_caller_gets_401():
    client = TestClient(app)
    assert client.get("/api/admin/users").status_code == 401


def test_admin_can_list_and_filter_users():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    create_user("agent1@example.com", role="AGENT", name="Ravi Agent")
    create_user("agent2@example.com", role="AGENT", name="Meena Agent")
    create_user("hr@example.com", role="HR")
    headers = login(client, "admin@example.com")

    resp = client.get("/api/admin/users", headers=headers)
    assert resp.status_code == 200
    assert len(resp.json()["data"]) == 4

    agents = client.get("/api/admin/users", params={"role": "AGENT"}, headers=headers).json()["data"]
    assert [u["email"] for u in agents] == ["agent1@example.com", "agent2@example.com"]

    found = client.get("/api/admin/users", params={"search": "meena"}, headers=headers).json()["data"]
    assert [u["email"] for u in found] == ["agent2@example.com"]


def test_user_search_does_not_expand_wildcards():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    create_user("john_doe@example.com", name="John Doe")
    create_user("johnxdoe@example.com", name="John X")
    headers = login(client, "admin@example.com")

    found = client.get("/api/admin/users", params={"search": "john_doe"}, headers=headers).json()["data"]
    assert [u["email"] for u in found] == ["john_doe@example.com"]
    assert client.get("/api/admin/users", params={"search": "%"}, headers=headers).json()["data"] == []


def test_unknown_role_filter_returns_400():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    headers = login(client, "admin@example.com")
    resp = client.get("/api/admin/users", params={"role": "WIZARD"}, headers=headers)
    assert resp.status_code == 400


def test_admin_can_create_staff_user():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    headers = login(client, "admin@example.com")

    resp = client.post(
        "/api/admin/users",
        json={"name": "New HR", "email": "newhr@example.com", "password": "secret123", "role": "HR"},
        headers=headers,
    )
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["role"] == "HR"
    assert data["banned"] is False

    dup = client.post(
        "/api/admin/users",
        json={"name": "Again", "email": "newhr@example.com", "password": "secret123", "role": "HR"},
        headers=headers,
    )
    assert dup.status_code == 400


def test_admin_can_get_single_user():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    target_id = create_user("target@example.com")
    headers = login(client, "admin@example.com")

    resp = client.get(f"/api/admin/users/{target_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["email"] == "target@example.com"

    missing = client.get("/api/admin/users/9999", headers=headers)
    assert missing.status_code == 404


def test_admin_can_ban_user_and_login_fails():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    target_id = create_user("target@example.com")
    headers = login(client, "admin@example.com")

    resp = client.patch(f"/api/admin/users/{target_id}", json={"banned": True}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["banned"] is True

    login_resp = client.post("/api/auth/login", json={"email": "target@example.com", "password": PASSWORD})
    assert login_resp.status_code == 400


def test_admin_cannot_ban_self():
    client = TestClient(app)
    admin_id = create_user("admin@example.com", role="ADMIN")
    headers = login(client, "admin@example.com")

    resp = client.patch(f"/api/admin/users/{admin_id}", json={"banned": True}, headers=headers)
    assert resp.status_code == 400


def test_admin_cannot_change_own_role():
    client = TestClient(app)
    admin_id = create_user("admin@example.com", role="ADMIN")
    headers = login(client, "admin@example.com")

    resp = client.patch(f"/api/admin/users/{admin_id}", json={"role": "HR"}, headers=headers)
    assert resp.status_code == 400


def test_admin_can_promote_other_user_to_admin():
    client = TestClient(app)
    create_user("admin@example.com", role="ADMIN")
    target_id = create_user("target@example.com")
    headers = login(client, "admin@example.com")

    resp = client.patch(f"/api/admin/users/{target_id}", json={"role": "ADMIN"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["role"] == "ADMIN"

    new_admin_headers = login(client, "target@example.com")
    assert client.get("/api/admin/users", headers=new_admin_headers).status_code == 200
