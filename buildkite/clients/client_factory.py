from typing import Any, Dict, List, Optional

from loguru import logger
from port_ocean.context.ocean import ocean

from buildkite.clients.auth.abstract_authenticator import AbstractTokenSource
from buildkite.clients.auth.api_token_authenticator import ApiTokenSource
from buildkite.clients.directory_client import BuildkiteDirectoryClient
from buildkite.clients.http.graphql_client import GRAPHQL_URL, GraphQLClient
from buildkite.clients.http.rest_client import API_URL, RestClient
from buildkite.helpers.exceptions import MissingCredentialsError


def integration_config(token_source: AbstractTokenSource) -> Dict[str, Any]:
    config = ocean.integration_config
    return {
        "token_source": token_source,
        "log_payloads": bool(config.get("log_queries", False)),
    }


def get_configured_organizations() -> List[str]:
    """Organization slugs selected in the integration config, empty for all."""
    organizations = ocean.integration_config.get("buildkite_organizations") or []
    if isinstance(organizations, str):
        organizations = [
            slug.strip() for slug in organizations.split(",") if slug.strip()
        ]
    return list(organizations)


class BuildkiteClientFactory:
    _instance: Optional[BuildkiteDirectoryClient] = None

    @classmethod
    def get_client(cls) -> BuildkiteDirectoryClient:
        if cls._instance is None:
            cls._instance = cls.create_client()
        return cls._instance

    @classmethod
    def create_client(cls) -> BuildkiteDirectoryClient:
        config = ocean.integration_config
        token = config.get("buildkite_token")
        if not token:
            raise MissingCredentialsError(
                "buildkite_token is required in integration configuration"
            )

        token_source = ApiTokenSource(token)
        logger.info("Creating Buildkite directory client")
        return BuildkiteDirectoryClient(
            graphql_client=GraphQLClient(
                base_url=str(config.get("graphql_url") or GRAPHQL_URL),
                **integration_config(token_source),
            ),
            rest_client=RestClient(
                base_url=str(config.get("api_url") or API_URL),
                **integration_config(token_source),
            ),
        )

    @classmethod
    def clear_instance(cls) -> None:
        cls._instance = None


def create_directory_client() -> BuildkiteDirectoryClient:
    return BuildkiteClientFactory.get_client()
