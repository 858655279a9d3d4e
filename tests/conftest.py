from typing import Any, Callable, Dict, Generator
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from port_ocean.context.ocean import initialize_port_ocean_context, ocean
from port_ocean.exceptions.context import PortOceanContextAlreadyInitializedError

from buildkite.clients.auth.api_token_authenticator import ApiTokenSource
from buildkite.clients.client_factory import BuildkiteClientFactory
from buildkite.clients.directory_client import BuildkiteDirectoryClient
from buildkite.clients.http.graphql_client import GraphQLClient
from buildkite.clients.http.rest_client import RestClient

TEST_INTEGRATION_CONFIG: Dict[str, Any] = {
    "buildkite_token": "mock-buildkite-token",
    "buildkite_organizations": ["acme"],
    "graphql_url": "https://graphql.buildkite.com/v1",
    "api_url": "https://api.buildkite.com/v2",
    "log_queries": False,
}

RequestHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def mock_ocean_context() -> None:
    """Initialize the PortOcean context with a mocked application."""
    try:
        mock_ocean_app = MagicMock()
        mock_ocean_app.config.integration.config = dict(TEST_INTEGRATION_CONFIG)
        mock_ocean_app.integration_router = MagicMock()
        mock_ocean_app.integration.on_start.side_effect = lambda function: function
        mock_ocean_app.integration.on_resync.side_effect = (
            lambda function, kind: function
        )
        mock_ocean_app.port_client = MagicMock()
        mock_ocean_app.cache_provider = AsyncMock()
        mock_ocean_app.cache_provider.get.return_value = None

        initialize_port_ocean_context(mock_ocean_app)
    except PortOceanContextAlreadyInitializedError:
        pass

    ocean.integration_config.clear()
    ocean.integration_config.update(TEST_INTEGRATION_CONFIG)


@pytest.fixture(autouse=True)
def clear_client_factory() -> Generator[None, None, None]:
    BuildkiteClientFactory.clear_instance()
    yield
    BuildkiteClientFactory.clear_instance()


@pytest.fixture
def token_source() -> ApiTokenSource:
    return ApiTokenSource("test-token")


@pytest.fixture
def mock_transport() -> Callable[[RequestHandler], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by ``handler``."""

    def _client(handler: RequestHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _client


@pytest.fixture
def graphql_client(token_source: ApiTokenSource) -> GraphQLClient:
    return GraphQLClient(token_source=token_source, http_client=MagicMock())


@pytest.fixture
def rest_client(token_source: ApiTokenSource) -> RestClient:
    return RestClient(token_source=token_source, http_client=MagicMock())


@pytest.fixture
def directory_client(
    graphql_client: GraphQLClient, rest_client: RestClient
) -> BuildkiteDirectoryClient:
    return BuildkiteDirectoryClient(graphql_client, rest_client)
