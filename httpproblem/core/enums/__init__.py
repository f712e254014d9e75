"""Core enums package.

Usage:
    from httpproblem.core.enums import Environment
"""

from httpproblem.core.enums.environment import Environment

__all__ = ["Environment"]
