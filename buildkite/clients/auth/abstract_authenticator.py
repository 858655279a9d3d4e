from abc import ABC, abstractmethod
from typing import Dict

from pydantic import BaseModel, Field

USER_AGENT = "port-ocean/buildkite-integration"


class BuildkiteToken(BaseModel):
    token: str


class BuildkiteHeaders(BaseModel):
    authorization: str = Field(alias="Authorization")
    accept: str = Field(alias="Accept", default="application/json")
    user_agent: str = Field(alias="User-Agent", default=USER_AGENT)

    def as_dict(self) -> Dict[str, str]:
        return self.dict(by_alias=True)


class AbstractTokenSource(ABC):
    """Produces a bearer token for each outgoing request.

    Implementations own token freshness; callers ask again on every request.
    """

    @abstractmethod
    async def get_token(self) -> BuildkiteToken:
        pass

    async def get_headers(self) -> BuildkiteHeaders:
        token = await self.get_token()
        return BuildkiteHeaders(Authorization=f"Bearer {token.token}")
