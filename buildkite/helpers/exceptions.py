from typing import List, Optional

from port_ocean.exceptions.core import OceanAbortException

from buildkite.clients.rate_limit import RateLimitDescriptor


class BuildkiteClientError(Exception):
    """Base error for every Buildkite call.

    Carries whatever rate-limit information was read before the failure.
    """

    def __init__(
        self, message: str, rate_limit: Optional[RateLimitDescriptor] = None
    ) -> None:
        super().__init__(message)
        self.rate_limit = rate_limit or RateLimitDescriptor()


class AuthenticationError(BuildkiteClientError, OceanAbortException):
    """Raised when the token source cannot produce a token."""


class MissingCredentialsError(AuthenticationError):
    """Raised when no API token is configured."""


class TransportError(BuildkiteClientError):
    def __init__(
        self,
        status_code: int,
        body: str,
        rate_limit: Optional[RateLimitDescriptor] = None,
        message: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            message or f"Buildkite API request failed with status {status_code}: {body}",
            rate_limit,
        )


class DecodeError(BuildkiteClientError):
    """Raised when a response body is not JSON or has an unexpected shape."""


class GraphQLResponseError(BuildkiteClientError):
    def __init__(
        self, messages: List[str], rate_limit: Optional[RateLimitDescriptor] = None
    ) -> None:
        self.messages = messages
        super().__init__(
            "GraphQL errors occurred:\n" + "\n".join(f"- {m}" for m in messages),
            rate_limit,
        )


class DirectoryListError(BuildkiteClientError):
    """Raised by the directory client, naming the listing that failed."""
