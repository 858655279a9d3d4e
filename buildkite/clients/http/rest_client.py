from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import ValidationError

from buildkite.clients.http.base_client import AbstractBuildkiteClient
from buildkite.helpers.exceptions import DecodeError
from buildkite.models import Organization

API_URL = "https://api.buildkite.com/v2"
MAX_PAGE_SIZE = 100


class RestClient(AbstractBuildkiteClient):
    def __init__(self, base_url: str = API_URL, **kwargs: Any) -> None:
        super().__init__(base_url=base_url, **kwargs)

    @staticmethod
    def unpaginated_params(params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Query parameters asking for the first page at the maximum size."""
        params = dict(params or {})
        params["page"] = "1"
        params["per_page"] = str(MAX_PAGE_SIZE)
        return params

    async def list_organizations(self) -> List[Organization]:
        url = f"{self.base_url}/organizations"
        response, rate_limit = await self.make_request(
            "GET", url, params=self.unpaginated_params()
        )
        body = self.decode_json(response, rate_limit)
        if not isinstance(body, list):
            raise DecodeError(
                f"Expected a list of organizations, got {type(body).__name__}",
                rate_limit,
            )

        try:
            organizations = [Organization.parse_obj(item) for item in body]
        except ValidationError as exc:
            raise DecodeError(f"Unexpected organization shape: {exc}", rate_limit) from exc

        logger.info(f"Fetched {len(organizations)} Buildkite organizations")
        return organizations
