from __future__ import annotations

from typing import Optional


class KlipyError(RuntimeError):
    """Root of every error raised by the SDK."""


class ConfigurationError(KlipyError):
    """API key / customer id missing or changed after setup."""


class APIError(KlipyError):
    """Raised for request pipeline failures."""


class InvalidURLError(APIError):
    """Endpoint path or parameters could not form a valid URL."""


class NetworkTransportError(APIError):
    """Connection-level failure (timeout, DNS, TLS, reset)."""


class HTTPStatusError(APIError):
    """Response status outside 200-299."""

    def __init__(self, status_code: int, body: Optional[bytes] = None):
        self.status_code = status_code
        self.body = body or b""
        super().__init__(f"HTTP error {status_code}: {self.body[:200]!r}")

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


class DecodingError(APIError):
    """Response body did not match the expected shape."""
