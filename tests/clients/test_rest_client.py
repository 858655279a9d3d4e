from typing import Any, Callable, Dict, List

import httpx
import pytest

from buildkite.clients.auth.api_token_authenticator import ApiTokenSource
from buildkite.clients.http.rest_client import API_URL, RestClient
from buildkite.helpers.exceptions import DecodeError, TransportError

ORGANIZATION: Dict[str, Any] = {
    "id": "0b461f65-e7be-4c80-888a-ef11d81fd971",
    "graphql_id": "T3JnYW5pemF0aW9uLS0tMGI0NjFmNjU=",
    "url": "https://api.buildkite.com/v2/organizations/acme",
    "web_url": "https://buildkite.com/acme",
    "name": "ACME Inc",
    "slug": "acme",
    "pipelines_url": "https://api.buildkite.com/v2/organizations/acme/pipelines",
    "agents_url": "https://api.buildkite.com/v2/organizations/acme/agents",
    "emojis_url": "https://api.buildkite.com/v2/organizations/acme/emojis",
    "created_at": "2015-05-09T21:05:59.874Z",
}


@pytest.mark.asyncio
async def test_list_organizations_fetches_first_page(
    mock_transport: Callable[..., httpx.AsyncClient], token_source: ApiTokenSource
) -> None:
    requests: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[ORGANIZATION])

    client = RestClient(token_source=token_source, http_client=mock_transport(handler))
    organizations = await client.list_organizations()

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "GET"
    assert request.url.path == "/v2/organizations"
    assert dict(request.url.params) == {"page": "1", "per_page": "100"}
    assert request.headers["Authorization"] == "Bearer test-token"

    assert [org.slug for org in organizations] == ["acme"]
    assert organizations[0].name == "ACME Inc"
    assert organizations[0].created_at is not None
    assert organizations[0].created_at.year == 2015


def test_unpaginated_params_override_paging() -> None:
    assert RestClient.unpaginated_params({"page": "7", "q": "x"}) == {
        "page": "1",
        "per_page": "100",
        "q": "x",
    }


def test_default_base_url() -> None:
    client = RestClient(token_source=ApiTokenSource("t"))

    assert client.base_url == API_URL


@pytest.mark.asyncio
async def test_list_organizations_failure(
    mock_transport: Callable[..., httpx.AsyncClient], token_source: ApiTokenSource
) -> None:
    client = RestClient(
        token_source=token_source,
        http_client=mock_transport(
            lambda request: httpx.Response(401, json={"message": "Authentication required"})
        ),
    )

    with pytest.raises(TransportError) as exc_info:
        await client.list_organizations()

    assert exc_info.value.status_code == 401
    assert "Authentication required" in exc_info.value.body


@pytest.mark.asyncio
async def test_list_organizations_rejects_non_list_body(
    mock_transport: Callable[..., httpx.AsyncClient], token_source: ApiTokenSource
) -> None:
    client = RestClient(
        token_source=token_source,
        http_client=mock_transport(
            lambda request: httpx.Response(200, json={"slug": "acme"})
        ),
    )

    with pytest.raises(DecodeError):
        await client.list_organizations()
