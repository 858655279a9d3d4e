from datetime import datetime, timezone

import httpx
import pytest

from buildkite.clients.rate_limit import (
    RateLimitDescriptor,
    RateLimitStatus,
    parse_rate_limit,
)


def test_parse_buildkite_headers() -> None:
    headers = httpx.Headers(
        {
            "RateLimit-Limit": "20000",
            "RateLimit-Remaining": "19850",
            "RateLimit-Reset": "42",
        }
    )

    descriptor = parse_rate_limit(headers, 200)

    assert descriptor.limit == 20000
    assert descriptor.remaining == 19850
    assert descriptor.reset == 42
    assert descriptor.status == RateLimitStatus.OK
    assert descriptor.reset_at is not None
    assert descriptor.reset_at > datetime.now(timezone.utc)
    assert 0 < descriptor.seconds_until_reset <= 42


def test_parse_x_prefixed_headers() -> None:
    descriptor = parse_rate_limit(
        {"X-RateLimit-Limit": "5000", "X-RateLimit-Remaining": "0"}, 200
    )

    assert descriptor.limit == 5000
    assert descriptor.remaining == 0
    assert descriptor.status == RateLimitStatus.OVERLIMIT


def test_missing_headers_yield_zero_descriptor() -> None:
    descriptor = parse_rate_limit({}, 200)

    assert descriptor == RateLimitDescriptor()
    assert descriptor.is_empty
    assert descriptor.status == RateLimitStatus.UNKNOWN


def test_too_many_requests_is_overlimit_with_retry_after() -> None:
    descriptor = parse_rate_limit({"Retry-After": "30"}, 429)

    assert descriptor.status == RateLimitStatus.OVERLIMIT
    assert descriptor.reset == 30
    assert descriptor.limit == 0


def test_non_numeric_headers_are_ignored() -> None:
    descriptor = parse_rate_limit(
        {"RateLimit-Limit": "lots", "RateLimit-Remaining": "10"}, 200
    )

    assert descriptor.limit == 0
    assert descriptor.remaining == 10
    assert descriptor.status == RateLimitStatus.UNKNOWN


@pytest.mark.parametrize("value", ["inf", "1e400", "-inf"])
def test_overflowing_reset_is_ignored(value: str) -> None:
    descriptor = parse_rate_limit(
        {"RateLimit-Limit": "100", "RateLimit-Remaining": "10", "RateLimit-Reset": value},
        200,
    )

    assert descriptor.reset == 0
    assert descriptor.reset_at is None
    assert descriptor.status == RateLimitStatus.OK


def test_huge_reset_keeps_seconds_without_absolute_time() -> None:
    descriptor = parse_rate_limit({"RateLimit-Reset": "99999999999999999"}, 200)

    assert descriptor.reset == 99999999999999999
    assert descriptor.reset_at is None


def test_as_dict() -> None:
    descriptor = RateLimitDescriptor(limit=10, remaining=3, reset=5)

    assert descriptor.as_dict() == {
        "limit": 10,
        "remaining": 3,
        "reset": 5,
        "reset_at": None,
        "status": "unknown",
    }
