"""Application configuration module."""

import os
from datetime import timedelta


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    """Base configuration for the Flask application."""

    # Core
    APP_ENV = os.getenv("APP_ENV", "development")
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///portfolio.db")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session token, shared by login and the session gate
    JWT_SECRET_KEY = os.getenv("ACCESS_TOKEN_SECRET", SECRET_KEY)
    JWT_ALGORITHM = "HS256"
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "accessToken"
    JWT_ACCESS_COOKIE_PATH = "/"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=2)
    JWT_COOKIE_SECURE = APP_ENV == "production"
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_CSRF_PROTECT = False
    JWT_SESSION_COOKIE = False

    # Verification codes
    VERIFY_CODE_TTL = timedelta(hours=1)
    REQUIRE_VERIFIED_LOGIN = _env_flag("REQUIRE_VERIFIED_LOGIN", True)

    # Mail delivery
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", "console")
    MAIL_SENDER = os.getenv("MAIL_SENDER", "Admin <onboarding@example.com>")
    MAIL_SUBJECT = os.getenv("MAIL_SUBJECT", "Portfolio Admin | Email Verification")
    SMTP_HOST = os.getenv("SMTP_HOST", "localhost")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "465"))
    SMTP_USERNAME = os.getenv("SMTP_USERNAME")
    SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
    SMTP_USE_SSL = _env_flag("SMTP_USE_SSL", True)
    SMTP_TIMEOUT = float(os.getenv("SMTP_TIMEOUT", "10"))

    # Session gate
    LOGIN_PATH = "/login"
    HOME_PATH = "/"
    PUBLIC_PATHS = ("/login", "/forget-password", "/signup")
    PUBLIC_PREFIXES = ("/reset-password", "/verify-code", "/api", "/src/api")
    API_PREFIXES = ("/api", "/src/api")
    GATE_EXEMPT_PREFIXES = ("/static", "/favicon.ico", "/health")

    # CORS
    _raw_origins = os.getenv("ORIGINS", "*")
    if _raw_origins.strip() == "*":
        CORS_ORIGINS = "*"
    else:
        CORS_ORIGINS = [o.strip() for o in _raw_origins.split(",") if o.strip()]

    # Rate limiting
    RATE_LIMIT = os.getenv("RATE_LIMIT", "60 per minute")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_KEY_PREFIX = os.getenv("RATELIMIT_KEY_PREFIX", "")
