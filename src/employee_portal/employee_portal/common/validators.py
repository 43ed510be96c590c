from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.(com|in|info|org|net|co|io)$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_matching(value: str, confirmation: str) -> str:
    if value != confirmation:
        raise ValidationError("Passwords do not match")
    return value


def normalize_email(value: str) -> str:
    return (value or "").strip().lower()


def require_email(value: str) -> str:
    email = normalize_email(value)
    if not _EMAIL_RE.match(email):
        raise ValidationError("Please enter a valid email like example@gmail.com")
    return email
