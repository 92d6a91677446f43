"""
Pytest configuration and fixtures
"""
from datetime import datetime

import pytest

from commonlibs.utils.datetime import KOREA_ZONE, to_epoch_millis


def _kst_millis(*args) -> int:
    """Epoch milliseconds of a KST wall-clock time, e.g. kst_millis(2025, 8, 1)."""
    return to_epoch_millis(KOREA_ZONE.localize(datetime(*args)))


@pytest.fixture
def kst():
    """Fixed reference timezone"""
    return KOREA_ZONE


@pytest.fixture
def aug_first_millis():
    """2025-08-01 00:00:00 KST as epoch milliseconds"""
    return 1753974000000


@pytest.fixture
def kst_millis():
    """Converter from KST wall-clock fields to epoch milliseconds"""
    return _kst_millis
