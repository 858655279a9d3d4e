import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import StrEnum
from typing import Mapping, Optional

from loguru import logger


class RateLimitStatus(StrEnum):
    UNKNOWN = "unknown"
    OK = "ok"
    OVERLIMIT = "overlimit"


@dataclass(frozen=True)
class RateLimitDescriptor:
    """Quota information read from a single Buildkite response.

    All values stay at zero when the response carried no rate-limit headers.
    """

    limit: int = 0
    remaining: int = 0
    reset: int = 0
    reset_at: Optional[datetime] = None
    status: RateLimitStatus = RateLimitStatus.UNKNOWN

    @property
    def is_empty(self) -> bool:
        return self.limit == 0 and self.remaining == 0 and self.reset == 0

    @property
    def seconds_until_reset(self) -> int:
        if self.reset_at is None:
            return self.reset
        return max(0, int(self.reset_at.timestamp() - time.time()))

    def as_dict(self) -> dict[str, object]:
        return {
            "limit": self.limit,
            "remaining": self.remaining,
            "reset": self.reset,
            "reset_at": self.reset_at.isoformat() if self.reset_at else None,
            "status": self.status.value,
        }


LIMIT_HEADERS = ("ratelimit-limit", "x-ratelimit-limit")
REMAINING_HEADERS = ("ratelimit-remaining", "x-ratelimit-remaining")
RESET_HEADERS = ("ratelimit-reset", "x-ratelimit-reset", "retry-after")

RATE_LIMIT_STATUS_CODE = 429


def _lowercase(headers: Mapping[str, str]) -> dict[str, str]:
    return {key.lower(): value for key, value in headers.items()}


def _read_int(headers: Mapping[str, str], names: tuple[str, ...]) -> Optional[int]:
    for name in names:
        raw = headers.get(name)
        if raw is None:
            continue
        try:
            return int(float(raw.strip()))
        except (ValueError, OverflowError):
            logger.debug(f"Ignoring non-numeric rate limit header {name}={raw!r}")
    return None


def parse_rate_limit(
    headers: Mapping[str, str], status_code: Optional[int] = None
) -> RateLimitDescriptor:
    """Build a descriptor from response headers.

    Buildkite reports ``RateLimit-Reset`` as seconds until the window resets;
    the absolute ``reset_at`` is derived from the time of parsing.
    """
    lowered = _lowercase(headers)
    limit = _read_int(lowered, LIMIT_HEADERS)
    remaining = _read_int(lowered, REMAINING_HEADERS)
    reset = _read_int(lowered, RESET_HEADERS)

    if status_code == RATE_LIMIT_STATUS_CODE or (
        limit is not None and remaining == 0
    ):
        status = RateLimitStatus.OVERLIMIT
    elif limit is not None:
        status = RateLimitStatus.OK
    else:
        status = RateLimitStatus.UNKNOWN

    reset_at = None
    if reset is not None:
        try:
            reset_at = datetime.now(timezone.utc) + timedelta(seconds=reset)
        except OverflowError:
            logger.debug(f"Ignoring out of range rate limit reset {reset}")

    return RateLimitDescriptor(
        limit=limit or 0,
        remaining=remaining or 0,
        reset=reset or 0,
        reset_at=reset_at,
        status=status,
    )
