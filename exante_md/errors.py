"""Error types raised by the market data client.

Transport failures (DNS, connection refused, timeouts) are not wrapped:
the underlying ``requests`` exception reaches the caller as-is.
"""

from __future__ import annotations


class ExanteError(Exception):
    """Base class for errors produced by this package."""


class ExanteHTTPError(ExanteError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str, url: str):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status_code} for {url}: {body[:200]}")


class ResponseParseError(ExanteError, ValueError):
    """The response body is not JSON, or not the JSON shape the endpoint promises."""

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(f"{message} ({url})")


class FieldNotFoundError(ExanteError, KeyError):
    """A requested field is absent from an otherwise valid response."""

    def __init__(self, field: str, url: str):
        self.field = field
        self.url = url
        super().__init__(field)

    def __str__(self) -> str:
        return f"Field {self.field!r} not found in response from {self.url}"
