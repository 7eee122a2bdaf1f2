"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from typing import TypeVar

from flask import Request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import BadRequest

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestValidationError(BadRequest):
    """A 400 carrying per-field error entries for the response envelope."""

    def __init__(self, description: str, errors: list[dict] | None = None):
        super().__init__(description)
        self.errors = errors or []


def parse_json_request(req: Request, *, allow_empty: bool = False) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request JSON body is required.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise BadRequest("Request JSON body must not be empty.")

    return data


def parse_request_model(req: Request, model: type[ModelT], message: str) -> ModelT:
    """Validate the JSON body against ``model`` once, or raise a 400.

    ``message`` is the user-facing summary; field-level detail goes into the
    ``errors`` list of the envelope.
    """

    payload = parse_json_request(req, allow_empty=True)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        raise RequestValidationError(message, errors) from exc
