"""Pytest configuration.

Settings and the logger are process-wide caches; each test starts from a
fresh, testing-environment configuration.
"""

import os
from unittest.mock import patch

import pytest

from httpproblem.core.config import get_settings
from httpproblem.core.container import get_logger
from httpproblem.presentation.recorder import ResponseRecorder


@pytest.fixture(autouse=True)
def isolated_settings():
    """Run each test with HTTPPROBLEM_ENVIRONMENT=testing and empty caches."""
    with patch.dict(os.environ, {"HTTPPROBLEM_ENVIRONMENT": "testing"}):
        get_settings.cache_clear()
        get_logger.cache_clear()
        yield
    get_settings.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def recorder() -> ResponseRecorder:
    """Fresh in-memory response sink."""
    return ResponseRecorder()
