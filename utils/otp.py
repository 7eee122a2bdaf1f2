"""One-time verification code helpers."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime

CODE_MIN = 100000
CODE_MAX = 999999


def generate_code() -> str:
    """Return a 6-digit code drawn uniformly from [100000, 999999]."""

    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how expiries are stored."""

    return datetime.now(UTC).replace(tzinfo=None)
