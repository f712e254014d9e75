"""HTTP status code to canonical title lookup.

Covers the 4xx/5xx codes registered with IANA plus two informal codes used
operationally by proxies (499, 599). The informal codes live in their own
table so they stay separable from the registered set.

Every title is unique and in title case, except "I'm a teapot" which is kept
verbatim from RFC 2324.

Usage:
    from httpproblem.domain.status_catalog import title_for, type_for

    title_for(404)   # 'Not Found'
    type_for(404)    # 'https://httpstatuses.com/404'
"""

from collections.abc import Mapping
from types import MappingProxyType

from httpproblem.core.config import get_settings

_IANA_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    402: "Payment Required",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    406: "Not Acceptable",
    407: "Proxy Authentication Required",
    408: "Request Timeout",
    409: "Conflict",
    410: "Gone",
    411: "Length Required",
    412: "Precondition Failed",
    413: "Payload Too Large",
    414: "URI Too Long",
    415: "Unsupported Media Type",
    416: "Range Not Satisfiable",
    417: "Expectation Failed",
    418: "I'm a teapot",
    421: "Misdirected Request",
    422: "Unprocessable Entity",
    423: "Locked",
    424: "Failed Dependency",
    425: "Too Early",
    426: "Upgrade Required",
    428: "Precondition Required",
    429: "Too Many Requests",
    431: "Request Header Fields Too Large",
    451: "Unavailable For Legal Reasons",
    500: "Internal Server Error",
    501: "Not Implemented",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
    505: "HTTP Version Not Supported",
    506: "Variant Also Negotiates",
    507: "Insufficient Storage",
    508: "Loop Detected",
    510: "Not Extended",
    511: "Network Authentication Required",
}

# Not in the IANA registry; nginx and some load balancers emit these.
_INFORMAL_TITLES: dict[int, str] = {
    499: "Client Closed Request",
    599: "Network Connect Timeout",
}

STATUS_TITLES: Mapping[int, str] = MappingProxyType(_IANA_TITLES | _INFORMAL_TITLES)
"""Read-only view of every covered status and its title."""


def title_for(status: int) -> str:
    """Return the canonical title for a status, or "" if not catalogued."""
    return STATUS_TITLES.get(status, "")


def type_for(status: int) -> str:
    """Return the default problem type URI for a status.

    Built for any integer, catalogued or not.
    """
    return f"{get_settings().type_base_url}{status}"


def is_informal(status: int) -> bool:
    """Whether the status is one of the unregistered operational codes."""
    return status in _INFORMAL_TITLES
