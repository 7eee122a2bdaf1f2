"""Typed request payloads."""

from .auth import LoginRequest, ResetPasswordRequest, SignupRequest, VerifyCodeRequest

__all__ = ["LoginRequest", "ResetPasswordRequest", "SignupRequest", "VerifyCodeRequest"]
