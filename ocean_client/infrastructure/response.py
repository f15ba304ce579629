"""The Response wrapper returned next to every decoded payload."""

import dataclasses
from datetime import datetime, timezone
from typing import Optional

import httpx

from .api_models import Links, Meta

HEADER_RATE_LIMIT = "RateLimit-Limit"
HEADER_RATE_REMAINING = "RateLimit-Remaining"
HEADER_RATE_RESET = "RateLimit-Reset"


def _int_header(headers: httpx.Headers, name: str) -> int:
    try:
        return int(headers.get(name, 0))
    except ValueError:
        return 0


def _reset_time(epoch: int) -> Optional[datetime]:
    if not epoch:
        return None
    try:
        return datetime.fromtimestamp(epoch, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


@dataclasses.dataclass(frozen=True)
class Rate:
    """
    The request budget reported by the API on every response.

    This is telemetry only; the client never throttles on it.
    """

    limit: int = 0
    remaining: int = 0
    reset: Optional[datetime] = None

    @classmethod
    def from_headers(cls, headers: httpx.Headers) -> "Rate":
        """Read the reserved rate-limit headers, leaving absent ones unset."""
        reset = _reset_time(_int_header(headers, HEADER_RATE_RESET))
        return cls(
            limit=_int_header(headers, HEADER_RATE_LIMIT),
            remaining=_int_header(headers, HEADER_RATE_REMAINING),
            reset=reset,
        )

    def __str__(self) -> str:
        reset = self.reset.isoformat() if self.reset else "unknown"
        return f"{self.remaining}/{self.limit} requests left, resets at {reset}"


@dataclasses.dataclass
class Response:
    """
    The raw httpx response plus pagination and rate-limit data.

    ``links`` and ``meta`` are only set for list responses that carry them.
    """

    http_response: httpx.Response
    rate: Rate = dataclasses.field(default_factory=Rate)
    links: Optional[Links] = None
    meta: Optional[Meta] = None

    @classmethod
    def from_httpx(cls, http_response: httpx.Response) -> "Response":
        return cls(
            http_response=http_response,
            rate=Rate.from_headers(http_response.headers),
        )

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers
