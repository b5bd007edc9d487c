import pytest
from fastapi.testclient import TestClient

from backend.app.core.security import get_password_hash
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.main import app
from backend.app.models.blog import Blog
from backend.app.models.user import User

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def create_user(email: str, role: str) -> int:
    with SessionLocal() as db:
        user = User(name=email.split("@")[0], email=email, hashed_password=get_password_hash(PASSWORD), role=role)
        db.add(user)
        db.commit()
        return user.id


def login(client: TestClient, email: str) -> dict:
    response = client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['accessToken']}"}


def create_category(client: TestClient, headers: dict, slug: str = "web") -> int:
    resp = client.post("/api/admin/course-categories", json={"title": "Web", "slug": slug}, headers=headers)
    assert resp.status_code == 201
    return resp.json()["data"]["id"]


def test_admin_can_create_and_update_course():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    category_id = create_category(client, headers)

    resp = client.post(
        "/api/admin/courses",
        json={
            "title": "React Bootcamp",
            "slug": "react-bootcamp",
            "categoryId": category_id,
            "fees": 10000,
            "discount": 1000,
            "difficulty": "INTERMEDIATE",
        },
        headers=headers,
    )
    assert resp.status_code == 201
    course = resp.json()["data"]
    assert course["fees"] == 10000
    assert course["category"]["slug"] == "web"

    resp = client.put(f"/api/admin/courses/{course['id']}", json={"discount": 2500}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["discount"] == 2500
    assert resp.json()["data"]["title"] == "React Bootcamp"


@pytest.mark.parametrize(
    "payload",
    [
        {"fees": -1},
        {"fees": 1000, "discount": 1500},
        {"fees": 1000, "discount": -5},
        {"categoryId": 999},
    ],
)
def test_invalid_course_values_return_400(payload):
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    resp = client.post("/api/admin/courses", json={"title": "Bad", "slug": "bad", **payload}, headers=headers)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_discount_update_is_checked_against_stored_fees():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    course_id = client.post(
        "/api/admin/courses", json={"title": "Python", "slug": "python", "fees": 5000}, headers=headers
    ).json()["data"]["id"]

    resp = client.put(f"/api/admin/courses/{course_id}", json={"discount": 6000}, headers=headers)
    assert resp.status_code == 400


def test_duplicate_slug_returns_400():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    create_category(client, headers, slug="web")
    resp = client.post("/api/admin/course-categories", json={"title": "Web 2", "slug": "web"}, headers=headers)
    assert resp.status_code == 400


def test_content_writer_can_write_blogs_but_not_delete():
    client = TestClient(app)
    writer_id = create_user("writer@example.com", "CONTENT_WRITER")
    create_user("admin@example.com", "ADMIN")
    writer = login(client, "writer@example.com")

    resp = client.post(
        "/api/admin/blogs",
        json={"title": "Why Python", "slug": "why-python", "content": "<p>Because.</p>"},
        headers=writer,
    )
    assert resp.status_code == 201
    blog = resp.json()["data"]
    assert blog["authorId"] == writer_id
    assert blog["isPublic"] is False

    assert client.delete(f"/api/admin/blogs/{blog['id']}", headers=writer).status_code == 403
    assert client.post("/api/admin/faqs", json={"question": "Q", "answer": "A", "slug": "q"}, headers=writer).status_code == 403

    admin = login(client, "admin@example.com")
    assert client.delete(f"/api/admin/blogs/{blog['id']}", headers=admin).status_code == 200
    with SessionLocal() as db:
        assert db.query(Blog).count() == 0


def test_toggle_publishes_blog_on_public_site():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    blog_id = client.post(
        "/api/admin/blogs", json={"title": "Draft", "slug": "draft", "content": "..."}, headers=headers
    ).json()["data"]["id"]

    assert client.get("/api/blogs").json()["data"] == []
    assert client.get("/api/blogs/draft").status_code == 404

    resp = client.patch(f"/api/admin/blogs/{blog_id}", json={"isPublic": True}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["isPublic"] is True

    assert [row["slug"] for row in client.get("/api/blogs").json()["data"]] == ["draft"]
    assert client.get("/api/blogs/draft").status_code == 200


def test_public_lists_put_featured_first():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    for name, featured in (("Plain", False), ("Star", True)):
        client.post(
            "/api/admin/placements",
            json={"studentName": name, "companyName": "Acme", "isFeatured": featured},
            headers=headers,
        )
    client.post(
        "/api/admin/placements",
        json={"studentName": "Hidden", "companyName": "Acme", "isPublic": False},
        headers=headers,
    )

    names = [row["studentName"] for row in client.get("/api/placements").json()["data"]]
    assert names == ["Star", "Plain"]


def test_public_course_lookup_by_slug_and_category():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    category_id = create_category(client, headers)
    client.post(
        "/api/admin/courses", json={"title": "React", "slug": "react", "categoryId": category_id}, headers=headers
    )
    client.post("/api/admin/courses", json={"title": "Go", "slug": "go"}, headers=headers)

    assert client.get("/api/courses/react").json()["data"]["title"] == "React"
    assert client.get("/api/courses/missing").status_code == 404
    web = client.get("/api/courses", params={"category": "web"}).json()["data"]
    assert [course["slug"] for course in web] == ["react"]
    assert [c["slug"] for c in client.get("/api/course-categories").json()["data"]] == ["web"]


def test_testimonials_need_approval_before_showing():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    resp = client.post(
        "/api/admin/testimonials",
        json={"studentName": "Anu", "rating": 5, "feedback": "Loved it"},
        headers=headers,
    )
    assert resp.status_code == 201
    assert client.get("/api/testimonials").json()["data"] == []

    invalid = client.post(
        "/api/admin/testimonials", json={"studentName": "Anu", "rating": 9, "feedback": "x"}, headers=headers
    )
    assert invalid.status_code == 422


def test_missing_content_returns_404():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")
    assert client.get("/api/admin/faculties/42", headers=headers).status_code == 404
    assert client.delete("/api/admin/faqs/42", headers=headers).status_code == 404


def test_blog_writers_only_manage_their_own_posts():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    create_user("instructor-a@example.com", "INSTRUCTOR")
    create_user("instructor-b@example.com", "INSTRUCTOR")
    author_a = login(client, "instructor-a@example.com")
    author_b = login(client, "instructor-b@example.com")

    blog_a = client.post(
        "/api/admin/blogs", json={"title": "Mine", "slug": "mine", "content": "..."}, headers=author_a
    ).json()["data"]["id"]
    blog_b = client.post(
        "/api/admin/blogs", json={"title": "Other", "slug": "other", "content": "..."}, headers=author_b
    ).json()["data"]["id"]

    resp = client.put(f"/api/admin/blogs/{blog_a}", json={"title": "Taken over"}, headers=author_b)
    assert resp.status_code == 403
    assert resp.json()["success"] is False
    assert client.patch(f"/api/admin/blogs/{blog_a}", json={"isPublic": True}, headers=author_b).status_code == 403
    assert client.get(f"/api/admin/blogs/{blog_a}", headers=author_b).status_code == 403
    with SessionLocal() as db:
        blog = db.query(Blog).filter(Blog.id == blog_a).one()
        assert blog.title == "Mine"
        assert blog.is_public is False

    listed = client.get("/api/admin/blogs", headers=author_b).json()["data"]
    assert [row["id"] for row in listed] == [blog_b]

    admin = login(client, "admin@example.com")
    assert {row["id"] for row in client.get("/api/admin/blogs", headers=admin).json()["data"]} == {blog_a, blog_b}
    assert client.put(f"/api/admin/blogs/{blog_a}", json={"title": "Edited"}, headers=admin).status_code == 200


def test_blog_and_faq_categories_are_managed_and_listed():
    client = TestClient(app)
    create_user("admin@example.com", "ADMIN")
    headers = login(client, "admin@example.com")

    careers = client.post(
        "/api/admin/blog-categories", json={"title": "Careers", "slug": "careers"}, headers=headers
    )
    assert careers.status_code == 201
    careers_id = careers.json()["data"]["id"]
    hidden_id = client.post(
        "/api/admin/blog-categories",
        json={"title": "Internal", "slug": "internal", "isPublic": False},
        headers=headers,
    ).json()["data"]["id"]
    assert client.post(
        "/api/admin/blog-categories", json={"title": "Dup", "slug": "careers"}, headers=headers
    ).status_code == 400

    for slug, public in (("one", True), ("two", True), ("draft", False)):
        resp = client.post(
            "/api/admin/blogs",
            json={"title": slug, "slug": slug, "categoryId": careers_id, "isPublic": public},
            headers=headers,
        )
        assert resp.status_code == 201
    assert resp.json()["data"]["category"]["slug"] == "careers"
    bad = client.post("/api/admin/blogs", json={"title": "x", "slug": "x", "categoryId": 999}, headers=headers)
    assert bad.status_code == 400

    listed = client.get("/api/blog-categories").json()["data"]
    assert [(row["slug"], row["itemCount"]) for row in listed] == [("careers", 2)]
    assert hidden_id not in [row["id"] for row in listed]
    assert [row["slug"] for row in client.get("/api/blogs", params={"category": "careers"}).json()["data"]] == [
        "two",
        "one",
    ]

    admissions_id = client.post(
        "/api/admin/faq-categories", json={"title": "Admissions", "slug": "admissions"}, headers=headers
    ).json()["data"]["id"]
    resp = client.post(
        "/api/admin/faqs",
        json={"question": "Deadline?", "answer": "June", "slug": "deadline", "categoryId": admissions_id},
        headers=headers,
    )
    assert resp.status_code == 201
    client.post("/api/admin/faqs", json={"question": "Fees?", "answer": "Varies", "slug": "fees"}, headers=headers)

    faq_categories = client.get("/api/faq-categories").json()["data"]
    assert [(row["slug"], row["itemCount"]) for row in faq_categories] == [("admissions", 1)]
    filtered = client.get("/api/faqs", params={"category": "admissions"}).json()["data"]
    assert [row["slug"] for row in filtered] == ["deadline"]

    resp = client.put(f"/api/admin/faq-categories/{admissions_id}", json={"isPublic": False}, headers=headers)
    assert resp.status_code == 200
    assert client.get("/api/faq-categories").json()["data"] == []
    assert client.delete(f"/api/admin/faq-categories/{admissions_id}", headers=headers).status_code == 200


def test_category_admin_requires_admin_role():
    client = TestClient(app)
    create_user("writer@example.com", "CONTENT_WRITER")
    writer = login(client, "writer@example.com")
    resp = client.post("/api/admin/blog-categories", json={"title": "T", "slug": "t"}, headers=writer)
    assert resp.status_code == 403
