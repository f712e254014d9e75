"""In-memory ResponseSink.

Records what a problem writer sends so it can be inspected in tests or turned
into a framework response. Like a standard HTTP response writer, the status
defaults to 200 and only the first `set_status` call takes effect.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from fastapi import Response

from httpproblem.core.constants import CONTENT_TYPE_HEADER


@dataclass
class ResponseRecorder:
    """Response sink that keeps headers, status and body in memory.

    Attributes:
        headers: Response headers (last set wins per name).
        status_code: Status written, 200 until set.
        body: Bytes written so far.
        status_written: Whether a status has been set.
    """

    headers: dict[str, str] = field(default_factory=dict)
    status_code: int = 200
    body: bytearray = field(default_factory=bytearray)
    status_written: bool = False

    def set_header(self, name: str, value: str) -> None:
        self.headers[name.title()] = value

    def set_status(self, status: int) -> None:
        if self.status_written:
            return
        self.status_code = status
        self.status_written = True

    def write(self, data: bytes) -> None:
        self.status_written = True
        self.body.extend(data)

    @property
    def content_type(self) -> str | None:
        return self.headers.get(CONTENT_TYPE_HEADER)

    def json(self) -> Any:
        """Decode the recorded body as JSON."""
        return json.loads(self.body)

    def to_response(self) -> Response:
        """Build a FastAPI Response carrying the recorded status, headers and body."""
        headers = {k: v for k, v in self.headers.items() if k != CONTENT_TYPE_HEADER}
        return Response(
            content=bytes(self.body),
            status_code=self.status_code,
            headers=headers,
            media_type=self.content_type,
        )
