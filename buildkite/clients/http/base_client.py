from abc import ABC
from typing import Any, Dict, Optional, Tuple

import httpx
from loguru import logger
from port_ocean.utils import http_async_client

from buildkite.clients.auth.abstract_authenticator import AbstractTokenSource
from buildkite.clients.rate_limit import RateLimitDescriptor, parse_rate_limit
from buildkite.helpers.exceptions import (
    AuthenticationError,
    BuildkiteClientError,
    DecodeError,
    TransportError,
)


class AbstractBuildkiteClient(ABC):
    """Shared request plumbing for the GraphQL and REST Buildkite APIs.

    Every request asks the token source for fresh headers and performs exactly
    one round trip; retries belong to the HTTP executor or to the caller.
    """

    def __init__(
        self,
        base_url: str,
        token_source: AbstractTokenSource,
        http_client: Optional[httpx.AsyncClient] = None,
        log_payloads: bool = False,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token_source = token_source
        self._http_client = http_client
        self.log_payloads = log_payloads

    @property
    def client(self) -> httpx.AsyncClient:
        return self._http_client or http_async_client

    async def headers(self) -> Dict[str, str]:
        try:
            headers = await self.token_source.get_headers()
        except BuildkiteClientError:
            raise
        except Exception as exc:
            raise AuthenticationError(
                f"Failed to obtain a Buildkite access token: {exc}"
            ) from exc
        return headers.as_dict()

    async def make_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Tuple[httpx.Response, RateLimitDescriptor]:
        headers = await self.headers()
        try:
            response = await self.client.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                headers=headers,
            )
            response.raise_for_status()

        except httpx.HTTPStatusError as exc:
            response = exc.response
            rate_limit = parse_rate_limit(response.headers, response.status_code)
            logger.error(
                f"Buildkite API error for {method} {url}: Status {response.status_code}, "
                f"Response: {response.text}"
            )
            raise TransportError(
                response.status_code, response.text, rate_limit
            ) from exc

        except httpx.HTTPError as exc:
            logger.error(f"HTTP error for {method} {url}: {exc}")
            raise TransportError(
                status_code=0,
                body="",
                message=f"HTTP error for {method} {url}: {exc}",
            ) from exc

        rate_limit = parse_rate_limit(response.headers, response.status_code)
        logger.debug(
            f"Successfully fetched {method} {url}, "
            f"rate limit {rate_limit.remaining}/{rate_limit.limit} remaining"
        )
        return response, rate_limit

    def decode_json(
        self, response: httpx.Response, rate_limit: RateLimitDescriptor
    ) -> Any:
        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Buildkite returned a non-JSON body: {exc}", rate_limit
            ) from exc
        if self.log_payloads:
            logger.debug(f"Buildkite response payload: {body}")
        return body
