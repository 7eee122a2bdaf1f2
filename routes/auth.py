"""Authentication blueprint: signup, code verification, login and logout."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, request
from flask_jwt_extended import (
    create_access_token,
    get_jwt_identity,
    jwt_required,
    set_access_cookies,
)
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import (
    BadRequest,
    Conflict,
    InternalServerError,
    NotFound,
    Unauthorized,
)

from mailers import AbstractMailer
from models import db
from models.user import User, UserRole, normalize_email
from schemas.auth import (
    LoginRequest,
    ResetPasswordRequest,
    SignupRequest,
    VerifyCodeRequest,
)
from utils.otp import generate_code, utcnow
from utils.request_validation import parse_request_model
from utils.responses import api_response

auth_bp = Blueprint("auth", __name__)

SIGNUP_DISPLAY_NAME = "User"
RECOVERY_DISPLAY_NAME = "Admin"


def _mailer() -> AbstractMailer:
    return current_app.extensions["mailer"]


def _issue_code(user: User, display_name: str) -> None:
    """Attach a fresh code to ``user`` and commit only once it is delivered.

    Nothing is written before the mailer returns, so no transaction is held
    open during delivery. A failed delivery discards the pending changes.
    """

    code = generate_code()
    user.issue_verify_code(code, current_app.config["VERIFY_CODE_TTL"], now=utcnow())
    email = user.email

    result = _mailer().send(email, display_name, code)
    if not result.success:
        db.session.rollback()
        current_app.logger.warning(
            "Verification code delivery failed for %s: %s", email, result.message
        )
        raise InternalServerError(result.message)

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        # A concurrent signup created the same email first.
        db.session.rollback()
        current_app.logger.warning("Concurrent signup for %s rejected", email)
        raise Conflict("A signup for this email is already in progress") from exc


def _check_code(user: User, otp: str) -> None:
    if user.verify_code_expired(now=utcnow()):
        raise BadRequest("OTP has expired. Please request a new one.")
    if not user.verify_code_matches(otp):
        raise BadRequest("Invalid OTP")


def _require_user(email: str) -> User:
    user = User.find_by_email(email)
    if user is None:
        raise NotFound("User not found")
    return user


def _cookie_max_age() -> int:
    return int(current_app.config["JWT_ACCESS_TOKEN_EXPIRES"].total_seconds())


@auth_bp.route("/signup", methods=["POST"])
def signup():
    """Create an unverified account, or resend a code to one."""

    payload = parse_request_model(request, SignupRequest, "Email and password are required")

    user = User.find_by_email(payload.email)
    if user is not None and user.is_verified:
        raise Conflict("User already exists with this email")

    if user is None:
        user = User(email=payload.email, role=UserRole.USER.value, is_verified=False)
    user.set_password(payload.password)

    _issue_code(user, SIGNUP_DISPLAY_NAME)
    current_app.logger.info("Verification code issued for signup of %s", user.email)

    return api_response(
        HTTPStatus.CREATED,
        None,
        "Account created. Verification OTP sent to your email.",
    )


@auth_bp.route("/verify-code", methods=["POST"])
def verify_code():
    """Confirm an email address with the code sent at signup."""

    payload = parse_request_model(request, VerifyCodeRequest, "Email and OTP are required")

    user = _require_user(payload.email)
    if user.is_verified:
        raise BadRequest("Account is already verified")
    _check_code(user, payload.otp)

    user.mark_verified()
    db.session.commit()
    current_app.logger.info("Email verified for %s", user.email)

    return api_response(
        HTTPStatus.OK, None, "Email verified successfully. You can now login."
    )


@auth_bp.route("/forget-password/", defaults={"email": ""}, methods=["GET"])
@auth_bp.route("/forget-password/<path:email>", methods=["GET"])
def forget_password(email: str):
    """Send a fresh recovery code to an existing account."""

    email = normalize_email(email)
    if not email:
        raise BadRequest("Email is required")

    user = _require_user(email)
    _issue_code(user, RECOVERY_DISPLAY_NAME)
    current_app.logger.info("Recovery code issued for %s", user.email)

    return api_response(HTTPStatus.OK, {"email": user.email}, "OTP Sent Successfully")


@auth_bp.route("/reset-password", methods=["POST"])
def reset_password():
    """Set a new password using a recovery code."""

    payload = parse_request_model(
        request, ResetPasswordRequest, "Email, OTP and new password are required"
    )

    user = _require_user(payload.email)
    _check_code(user, payload.otp)

    user.set_password(payload.password)
    user.mark_verified()
    db.session.commit()
    current_app.logger.info("Password reset for %s", user.email)

    return api_response(HTTPStatus.OK, None, "Password reset successfully. You can now login.")


@auth_bp.route("/login", methods=["POST"])
def login():
    """Check credentials and set the session cookie."""

    payload = parse_request_model(request, LoginRequest, "Please provide your credentials")

    user = _require_user(payload.email)
    if not user.check_password(payload.password):
        raise Unauthorized("Incorrect Password")
    if current_app.config.get("REQUIRE_VERIFIED_LOGIN") and not user.is_verified:
        raise Unauthorized("Please verify your email before logging in")

    token = create_access_token(
        identity=str(user.id), additional_claims={"email": user.email}
    )
    response = api_response(HTTPStatus.OK, user.to_dict(), "Login successful")
    set_access_cookies(response, token, max_age=_cookie_max_age())
    current_app.logger.info("Session issued for %s", user.email)
    return response


@auth_bp.route("/logout", methods=["DELETE"])
def logout():
    """Expire the session cookie immediately."""

    config = current_app.config
    response = api_response(HTTPStatus.OK, None, "Logged out successfully")
    response.set_cookie(
        config["JWT_ACCESS_COOKIE_NAME"],
        "",
        max_age=0,
        path=config["JWT_ACCESS_COOKIE_PATH"],
        secure=config["JWT_COOKIE_SECURE"],
        httponly=True,
        samesite=config["JWT_COOKIE_SAMESITE"],
    )
    return response


@auth_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    """Return the account behind the current session cookie."""

    identity = get_jwt_identity()
    try:
        user = db.session.get(User, int(identity))
    except (TypeError, ValueError):
        user = None
    if user is None:
        raise NotFound("User not found")
    return api_response(HTTPStatus.OK, user.to_dict(), "Session is valid")
