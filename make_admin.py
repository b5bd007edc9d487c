import sys

from backend.app.db.session import SessionLocal
from backend.app.models.user import ROLE_ADMIN, User


def promote(email: str) -> bool:
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email.strip().lower()).first()
        if user is None:
            return False
        user.role = ROLE_ADMIN
        user.banned = False
        db.commit()
        return True
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python make_admin.py <email>")
        sys.exit(1)
    if promote(sys.argv[1]):
        print(f"OK: {sys.argv[1]} is now an admin")
    else:
        print(f"SKIP: no user with email {sys.argv[1]}")
        sys.exit(1)
