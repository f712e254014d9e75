"""Runtime environment types.

Used by Settings and the logger composition root to pick environment-specific
behavior (human-readable logs in development, JSON logs in testing/CI).
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
