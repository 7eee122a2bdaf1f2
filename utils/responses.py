"""Uniform JSON envelope for API responses."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Response, jsonify


def api_response(status_code: int, data: Any = None, message: str = "Success") -> Response:
    """Build a success envelope; callers branch on ``success``."""

    response = jsonify(
        {
            "statusCode": int(status_code),
            "data": data,
            "message": message,
            "success": int(status_code) < HTTPStatus.BAD_REQUEST,
        }
    )
    response.status_code = int(status_code)
    return response


def error_response(status_code: int, message: str, errors: list | None = None) -> Response:
    response = jsonify(
        {
            "statusCode": int(status_code),
            "data": None,
            "message": message,
            "success": False,
            "errors": errors or [],
        }
    )
    response.status_code = int(status_code)
    return response
