import pytest

from buildkite.clients.auth.abstract_authenticator import USER_AGENT
from buildkite.clients.auth.api_token_authenticator import ApiTokenSource
from buildkite.helpers.exceptions import AuthenticationError, MissingCredentialsError


@pytest.mark.asyncio
async def test_api_token_source_builds_bearer_headers() -> None:
    headers = await ApiTokenSource("bk-token").get_headers()

    assert headers.as_dict() == {
        "Authorization": "Bearer bk-token",
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }


def test_empty_token_is_rejected() -> None:
    with pytest.raises(MissingCredentialsError) as exc_info:
        ApiTokenSource("")

    assert isinstance(exc_info.value, AuthenticationError)
