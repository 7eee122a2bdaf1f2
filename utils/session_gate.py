"""Page-level session gate run ahead of every request."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from flask import Flask, current_app, redirect, request
from flask_jwt_extended import decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError


class RouteClass(str, Enum):
    PUBLIC = "public"
    API = "api"
    PROTECTED = "protected"


def _under(path: str, prefixes: Iterable[str]) -> bool:
    return any(path.startswith(prefix) for prefix in prefixes)


def classify_path(
    path: str,
    public_paths: Iterable[str],
    public_prefixes: Iterable[str],
    api_prefixes: Iterable[str],
) -> RouteClass:
    """Place ``path`` in one of the three gate categories.

    API prefixes are public; they enforce their own per-route authorization.
    """

    if _under(path, api_prefixes):
        return RouteClass.API
    if path in public_paths or _under(path, public_prefixes):
        return RouteClass.PUBLIC
    return RouteClass.PROTECTED


def gate_redirect(
    route_class: RouteClass,
    authenticated: bool,
    login_path: str = "/login",
    home_path: str = "/",
) -> str | None:
    """Return the redirect target for a request, or None to pass through."""

    if not authenticated and route_class is RouteClass.PROTECTED:
        return login_path
    if authenticated and route_class is RouteClass.PUBLIC:
        return home_path
    return None


def session_claims() -> dict | None:
    """Decoded claims of the session cookie, or None when absent or invalid."""

    token = request.cookies.get(current_app.config["JWT_ACCESS_COOKIE_NAME"])
    if not token:
        return None
    try:
        return decode_token(token)
    except (PyJWTError, JWTExtendedException):
        return None


def init_session_gate(app: Flask) -> None:
    """Register the gate as a ``before_request`` hook on ``app``."""

    @app.before_request
    def _session_gate():
        config = current_app.config
        path = request.path
        if _under(path, config["GATE_EXEMPT_PREFIXES"]):
            return None

        route_class = classify_path(
            path,
            config["PUBLIC_PATHS"],
            config["PUBLIC_PREFIXES"],
            config["API_PREFIXES"],
        )
        # API routes authorize per route; skip decoding the cookie for them.
        if route_class is RouteClass.API:
            return None

        target = gate_redirect(
            route_class,
            authenticated=session_claims() is not None,
            login_path=config["LOGIN_PATH"],
            home_path=config["HOME_PATH"],
        )
        if target is None:
            return None
        return redirect(target)
