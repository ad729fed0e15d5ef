"""
Shared fixtures.
"""

from datetime import date

import pytest

from qlkit.settings import Settings, saved_settings


@pytest.fixture(autouse=True)
def restore_evaluation_date():
    """Every test leaves the global evaluation date as it found it."""
    with saved_settings() as settings:
        yield settings


@pytest.fixture
def evaluation_date():
    """Pin the evaluation date used by instruments."""
    d = date(2024, 1, 15)
    Settings.instance().evaluation_date = d
    return d
