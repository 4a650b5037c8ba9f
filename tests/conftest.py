"""Shared test fixtures."""

import random

import pytest

from pyhumantime import Instant


@pytest.fixture
def rng():
    return random.Random(20180214)


@pytest.fixture
def valentines():
    """2018-02-14T00:28:07Z."""
    return Instant(1_518_568_087)


