from loguru import logger

from buildkite.clients.auth.abstract_authenticator import (
    AbstractTokenSource,
    BuildkiteToken,
)
from buildkite.helpers.exceptions import MissingCredentialsError


class ApiTokenSource(AbstractTokenSource):
    def __init__(self, token: str) -> None:
        if not token:
            raise MissingCredentialsError("A Buildkite API access token is required")
        self._token = BuildkiteToken(token=token)

    async def get_token(self) -> BuildkiteToken:
        logger.debug("Using Buildkite API access token.")
        return self._token
