from __future__ import annotations

import random

import pytest

from tests.helpers import make_state


@pytest.fixture
def state():
    return make_state()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2021)
