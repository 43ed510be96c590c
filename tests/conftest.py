from __future__ import annotations

from datetime import datetime

import pytest

from fakes import make_container


@pytest.fixture
def fixed_now():
    # Wednesday
    return datetime(2026, 3, 11, 9, 30, 0)


@pytest.fixture
def container(tmp_path):
    return make_container(tmp_path / "uploads")
