"""Employee login password rule and hashing helpers.

The employee password is never chosen by the user: it is derived from three
profile fields so that HR can tell a new hire their credentials::

    last 3 chars of employee code + "#" + last 4 digits of phone + "@" + birth year

Only the werkzeug hash of the derived value is stored.
"""
from __future__ import annotations

from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import coerce_date
from ..core.constants import MISSING_BIRTH_YEAR


def birth_year(date_of_birth: Any) -> str:
    parsed = coerce_date(date_of_birth)
    if parsed is None:
        return MISSING_BIRTH_YEAR
    return f"{parsed.year:04d}"


def derive_employee_password(employee_code: str | None, phone: str | None, date_of_birth: Any) -> str:
    # Short codes and phones are used whole, never padded.
    code_part = (employee_code or "").strip()[-3:]
    phone_part = (phone or "").strip()[-4:]
    return f"{code_part}#{phone_part}@{birth_year(date_of_birth)}"


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except (ValueError, TypeError):
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False
