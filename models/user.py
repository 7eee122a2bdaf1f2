"""User model definition."""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from utils.otp import utcnow

from . import db


class UserRole(str, Enum):
    ADMIN = "Admin"
    USER = "User"


def normalize_email(raw_email: Optional[str]) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""

    return (raw_email or "").strip().lower()


class User(db.Model):
    """An account that can sign in to the portfolio dashboard."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(16), nullable=False, default=UserRole.USER.value)
    verify_code = db.Column(db.String(6), nullable=True)
    verify_code_expiry = db.Column(db.DateTime, nullable=True)
    is_verified = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    @classmethod
    def find_by_email(cls, email: Optional[str]) -> Optional["User"]:
        return cls.query.filter_by(email=normalize_email(email)).first()

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def issue_verify_code(self, code: str, ttl: timedelta, now: Optional[datetime] = None) -> None:
        """Attach an outstanding code that stays valid for ``ttl``."""

        self.verify_code = code
        self.verify_code_expiry = (now or utcnow()) + ttl

    def clear_verify_code(self) -> None:
        self.verify_code = None
        self.verify_code_expiry = None

    def verify_code_expired(self, now: Optional[datetime] = None) -> bool:
        """Return True once ``now`` reaches the stored expiry."""

        if self.verify_code_expiry is None:
            return False
        return (now or utcnow()) >= self.verify_code_expiry

    def verify_code_matches(self, code: str) -> bool:
        return self.verify_code is not None and self.verify_code == code

    def mark_verified(self) -> None:
        """Mark the user as verified and drop the consumed code."""

        self.is_verified = True
        self.clear_verify_code()

    def to_dict(self) -> dict:
        return {"_id": str(self.id), "email": self.email}

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
