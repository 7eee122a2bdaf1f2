"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from config import Config  # noqa: E402
from mailers import AbstractMailer, DeliveryResult  # noqa: E402
from models import db  # noqa: E402


class _TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = "test-secret"
    JWT_COOKIE_SECURE = False
    MAIL_BACKEND = "console"
    REQUIRE_VERIFIED_LOGIN = True
    RATE_LIMIT = "1000 per minute"


class RecordingMailer(AbstractMailer):
    """Keeps sent codes in memory; flip ``fail`` to simulate an outage."""

    def __init__(self):
        self.sent: list[tuple[str, str, str]] = []
        self.fail = False

    def send(self, email: str, display_name: str, code: str) -> DeliveryResult:
        if self.fail:
            return DeliveryResult(False, "Failed to send Verification email")
        self.sent.append((email, display_name, code))
        return DeliveryResult(True, "Verification Email sent successfully.")

    def last_code(self, email: str) -> str:
        for sent_email, _, code in reversed(self.sent):
            if sent_email == email:
                return code
        raise AssertionError(f"No code sent to {email}")


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture()
def app(mailer: RecordingMailer) -> Flask:
    """Create a Flask application instance for tests."""

    application = create_app(_TestConfig)
    application.extensions["mailer"] = mailer

    with application.app_context():
        db.create_all()

    yield application

    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a test client for the Flask app."""

    return app.test_client()
