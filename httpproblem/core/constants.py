"""Centralized constants for wire-level details.

These are fixed by RFC 7807 and are NOT environment-specific configuration.
For overridable settings use `httpproblem/core/config.py` instead.

Example:
    >>> from httpproblem.core.constants import CONTENT_PROBLEM_DETAILS
    >>> sink.set_header(CONTENT_TYPE_HEADER, CONTENT_PROBLEM_DETAILS)
"""

# =============================================================================
# Media Types and Headers
# =============================================================================

CONTENT_PROBLEM_DETAILS: str = "application/problem+json"
"""MIME type to use when returning a problem details object as JSON."""

CONTENT_TYPE_HEADER: str = "Content-Type"
"""Canonical name of the content type header."""


# =============================================================================
# Problem Type Identifiers
# =============================================================================

DEFAULT_TYPE_BASE_URL: str = "https://httpstatuses.com/"
"""Base of the generic per-status type URI (`<base><status>`)."""


# =============================================================================
# Status Codes
# =============================================================================

HTTP_BAD_REQUEST: int = 400
"""Status used by validation problems."""

HTTP_INTERNAL_SERVER_ERROR: int = 500
"""Fallback status for errors that carry no status of their own."""

VALIDATION_DETAIL_DEFAULT: str = "Validation error"
"""Default detail message of a validation problem."""
