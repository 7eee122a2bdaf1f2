"""Tests for the User model helpers."""

from datetime import datetime, timedelta

from models import db
from models.user import User, UserRole, normalize_email
from utils.otp import CODE_MAX, CODE_MIN, generate_code


def test_password_is_hashed(app):
    with app.app_context():
        user = User(email="hash@example.com")
        user.set_password("secret1")
        db.session.add(user)
        db.session.commit()

        assert user.password_hash != "secret1"
        assert user.check_password("secret1") is True
        assert user.check_password("secret2") is False
        assert user.role == UserRole.USER.value
        assert user.is_verified is False


def test_verify_code_expiry_boundary():
    user = User(email="clock@example.com")
    issued = datetime(2024, 1, 1, 12, 0, 0)
    user.issue_verify_code("123456", timedelta(hours=1), now=issued)

    expiry = issued + timedelta(hours=1)
    assert user.verify_code_expiry == expiry
    assert user.verify_code_expired(now=expiry - timedelta(microseconds=1)) is False
    assert user.verify_code_expired(now=expiry) is True
    assert user.verify_code_expired(now=expiry + timedelta(seconds=1)) is True


def test_mark_verified_clears_code_fields():
    user = User(email="verify@example.com", is_verified=False)
    user.issue_verify_code("654321", timedelta(hours=1))

    assert user.verify_code_matches("654321") is True
    user.mark_verified()

    assert user.is_verified is True
    assert user.verify_code is None
    assert user.verify_code_expiry is None
    assert user.verify_code_matches("654321") is False


def test_find_by_email_normalizes(app):
    with app.app_context():
        user = User(email="case@example.com")
        user.set_password("secret1")
        db.session.add(user)
        db.session.commit()

        assert User.find_by_email("  CASE@Example.com ").id == user.id
        assert normalize_email(None) == ""


def test_generate_code_is_six_digits():
    for _ in range(200):
        code = generate_code()
        assert len(code) == 6
        assert code.isdigit()
        assert CODE_MIN <= int(code) <= CODE_MAX
