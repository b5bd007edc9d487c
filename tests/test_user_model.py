from backend.app.models.user import ROLE_STUDENT, STAFF_ROLES, User


def test_user_model_has_columns():
    column_names = [column.name for column in User.__table__.columns]
    expected = {"id", "name", "email", "hashed_password", "role", "banned", "phone", "created_at"}
    assert expected.issubset(set(column_names))


def test_user_model_primary_key():
    pk_columns = [column.name for column in User.__table__.primary_key.columns]
    assert "id" in pk_columns


def test_staff_roles_exclude_students():
    assert ROLE_STUDENT not in STAFF_ROLES
    assert "ADMIN" in STAFF_ROLES and "AGENT" in STAFF_ROLES
