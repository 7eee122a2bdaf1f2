"""Request models for the authentication routes."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


def _require_text(value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("must be a non-empty string")
    return value


class _EmailPayload(BaseModel):
    email: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _require_text(value).strip().lower()


class SignupRequest(_EmailPayload):
    password: str

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, value):
        return _require_text(value)


class LoginRequest(SignupRequest):
    pass


class VerifyCodeRequest(_EmailPayload):
    otp: str

    @field_validator("otp", mode="before")
    @classmethod
    def strip_otp(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        return _require_text(value).strip()


class ResetPasswordRequest(VerifyCodeRequest):
    password: str

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, value):
        return _require_text(value)
