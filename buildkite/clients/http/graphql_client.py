from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from buildkite.clients.http.base_client import AbstractBuildkiteClient
from buildkite.clients.rate_limit import RateLimitDescriptor
from buildkite.helpers.exceptions import DecodeError, GraphQLResponseError

GRAPHQL_URL = "https://graphql.buildkite.com/v1"

ResponseModelT = TypeVar("ResponseModelT", bound=BaseModel)


class GraphQLClient(AbstractBuildkiteClient):
    """Executes a single GraphQL document against the Buildkite GraphQL API."""

    def __init__(self, base_url: str = GRAPHQL_URL, **kwargs: Any) -> None:
        super().__init__(base_url=base_url, **kwargs)

    @staticmethod
    def build_graphql_payload(
        query: str, variables: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        return payload

    def _handle_graphql_errors(
        self, body: Any, rate_limit: RateLimitDescriptor
    ) -> None:
        if not isinstance(body, dict) or not body.get("errors"):
            return

        messages = [
            error.get("message", str(error)) if isinstance(error, dict) else str(error)
            for error in body["errors"]
        ]
        raise GraphQLResponseError(messages, rate_limit)

    async def query(
        self,
        query: str,
        response_model: Type[ResponseModelT],
        variables: Optional[Dict[str, Any]] = None,
    ) -> Tuple[ResponseModelT, RateLimitDescriptor]:
        """Send ``query`` and decode the reply into ``response_model``.

        Returns the decoded model together with the rate-limit descriptor of
        the response.
        """
        if self.log_payloads:
            logger.debug(f"GraphQL query: {query}")

        response, rate_limit = await self.make_request(
            "POST",
            self.base_url,
            json_data=self.build_graphql_payload(query, variables),
        )
        body = self.decode_json(response, rate_limit)
        self._handle_graphql_errors(body, rate_limit)

        try:
            return response_model.parse_obj(body), rate_limit
        except ValidationError as exc:
            raise DecodeError(
                f"Unexpected {response_model.__name__} shape: {exc}", rate_limit
            ) from exc
