from __future__ import annotations

import random
from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # Monday; the Saturday-anchored week started on 2026-10-17
    return datetime(2026, 10, 19, 10, 0, 0)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20261019)
