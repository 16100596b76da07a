from __future__ import annotations

import pytest

from .feeds import FakeFetch


@pytest.fixture
def fake_fetch() -> FakeFetch:
    return FakeFetch()
