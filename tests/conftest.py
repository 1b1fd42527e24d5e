"""
Shared fixtures for the scheduler tests.

All tests are pure unit tests: no storage, no network, fixed clock.
"""

from datetime import datetime, timezone

import pytest

from srs_core.sm2 import SM2Scheduler, create_card
from srs_core.sm2.config import ENV_VARS


# Fixed reference time used across tests
NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_scheduler_env(monkeypatch):
    """Keep SRS_* variables from the developer's shell or .env out of tests."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def now():
    return NOW


@pytest.fixture
def scheduler():
    """Scheduler with default configuration (1 / 365 / 1 / 2.5)."""
    return SM2Scheduler()


@pytest.fixture
def base_card():
    """Never-reviewed card created at NOW."""
    return create_card("test-card-1", "phrase-1", now=NOW)
