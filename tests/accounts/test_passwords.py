from __future__ import annotations

from datetime import date, datetime

import pytest

from src.employee_portal.employee_portal.accounts.passwords import (
    birth_year,
    derive_employee_password,
    hash_password,
    verify_password,
)


def test_derive_uses_last_code_phone_digits_and_birth_year():
    assert derive_employee_password("EMP047", "9876543210", date(1995, 3, 12)) == "047#3210@1995"


def test_short_code_and_phone_are_used_whole():
    assert derive_employee_password("12", "123", "1990-05-01") == "12#123@1990"


@pytest.mark.parametrize("dob", [None, "", "not-a-date", 12345])
def test_missing_or_unparseable_birth_date_becomes_0000(dob):
    assert derive_employee_password("EMP001", "5551234", dob).endswith("@0000")


def test_birth_year_accepts_driver_and_form_values():
    assert birth_year(datetime(1988, 1, 2, 0, 0)) == "1988"
    assert birth_year("02/01/1988") == "1988"
    assert birth_year("1988-01-02T00:00:00Z") == "1988"


def test_derive_is_deterministic():
    args = ("EMP900", "+91 98450 12345", "2001-12-31")
    assert derive_employee_password(*args) == derive_employee_password(*args)


def test_hash_roundtrip_and_bad_hash():
    h = hash_password("047#3210@1995")
    assert h != "047#3210@1995"
    assert verify_password(h, "047#3210@1995")
    assert not verify_password(h, "047#3210@1994")
    assert not verify_password("CHANGE_ME", "anything")
