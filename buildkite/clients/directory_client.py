from abc import ABC, abstractmethod
from typing import List, NoReturn, Optional

from loguru import logger

from buildkite.clients.http.graphql_client import GraphQLClient
from buildkite.clients.http.rest_client import RestClient
from buildkite.helpers.exceptions import BuildkiteClientError, DirectoryListError
from buildkite.helpers.projection import (
    project_team_grants,
    project_teams,
    project_users,
)
from buildkite.helpers.queries import (
    build_info_query,
    build_team_members_query,
    build_teams_query,
    build_users_query,
)
from buildkite.models import (
    InfoQueryResponse,
    Organization,
    Page,
    Team,
    TeamGrant,
    TeamMembersQueryResponse,
    TeamsQueryResponse,
    User,
    UsersQueryResponse,
    ViewerInfo,
)


class DirectoryClient(ABC):
    """Pull-based listing of Buildkite identities.

    Every call performs one request and returns one page; the caller feeds
    ``Page.next_cursor`` back in until it comes back as ``None``.
    """

    @abstractmethod
    async def get_info(self) -> ViewerInfo: ...

    @abstractmethod
    async def list_users(self, org_slug: str, cursor: Optional[str]) -> Page[User]: ...

    @abstractmethod
    async def list_teams(self, org_slug: str, cursor: Optional[str]) -> Page[Team]: ...

    @abstractmethod
    async def list_team_grants(
        self, team_slug: str, cursor: Optional[str]
    ) -> Page[TeamGrant]: ...

    @abstractmethod
    async def list_organizations(self) -> List[Organization]: ...


def _raise_list_error(message: str, exc: BuildkiteClientError) -> NoReturn:
    raise DirectoryListError(f"{message}: {exc}", exc.rate_limit) from exc


class BuildkiteDirectoryClient(DirectoryClient):
    def __init__(self, graphql_client: GraphQLClient, rest_client: RestClient) -> None:
        self.graphql_client = graphql_client
        self.rest_client = rest_client

    async def get_info(self) -> ViewerInfo:
        try:
            response, rate_limit = await self.graphql_client.query(
                build_info_query(), InfoQueryResponse
            )
        except BuildkiteClientError as exc:
            _raise_list_error("Error getting viewer info", exc)
        return ViewerInfo(user=response.data.viewer.user, rate_limit=rate_limit)

    async def list_users(self, org_slug: str, cursor: Optional[str]) -> Page[User]:
        try:
            response, rate_limit = await self.graphql_client.query(
                build_users_query(org_slug, cursor), UsersQueryResponse
            )
        except BuildkiteClientError as exc:
            _raise_list_error(f"Error getting users of organization {org_slug}", exc)

        users, next_cursor = project_users(response)
        logger.debug(f"Fetched {len(users)} users of organization {org_slug}")
        return Page(items=users, next_cursor=next_cursor, rate_limit=rate_limit)

    async def list_teams(self, org_slug: str, cursor: Optional[str]) -> Page[Team]:
        try:
            response, rate_limit = await self.graphql_client.query(
                build_teams_query(org_slug, cursor), TeamsQueryResponse
            )
        except BuildkiteClientError as exc:
            _raise_list_error(f"Error getting teams of organization {org_slug}", exc)

        teams, next_cursor = project_teams(response, org_slug)
        logger.debug(f"Fetched {len(teams)} teams of organization {org_slug}")
        return Page(items=teams, next_cursor=next_cursor, rate_limit=rate_limit)

    async def list_team_grants(
        self, team_slug: str, cursor: Optional[str]
    ) -> Page[TeamGrant]:
        try:
            response, rate_limit = await self.graphql_client.query(
                build_team_members_query(team_slug, cursor), TeamMembersQueryResponse
            )
        except BuildkiteClientError as exc:
            _raise_list_error(f"Error getting team members for {team_slug}", exc)

        grants, next_cursor = project_team_grants(response, team_slug)
        logger.debug(f"Fetched {len(grants)} memberships of team {team_slug}")
        return Page(items=grants, next_cursor=next_cursor, rate_limit=rate_limit)

    async def list_organizations(self) -> List[Organization]:
        try:
            return await self.rest_client.list_organizations()
        except BuildkiteClientError as exc:
            _raise_list_error("Error listing organizations", exc)
