"""Seed the dashboard administrator account."""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app
from models import db
from models.user import User, UserRole, normalize_email

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "AdminPass123")


def seed_admin(email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> str:
    """Create or update a verified admin and return the action taken."""

    email = normalize_email(email)
    admin = User.find_by_email(email)
    if admin is None:
        admin = User(email=email)
        db.session.add(admin)
        action = "created"
    else:
        action = "updated"
    admin.role = UserRole.ADMIN.value
    admin.set_password(password)
    admin.mark_verified()
    db.session.commit()
    return action


def main() -> None:
    app = create_app()
    with app.app_context():
        db.create_all()
        action = seed_admin()
        print(f"Admin user {action}: {normalize_email(ADMIN_EMAIL)}")


if __name__ == "__main__":
    main()
