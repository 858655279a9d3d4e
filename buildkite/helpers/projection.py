"""Flatten GraphQL edge/node connections into domain lists.

Buildkite connections are walked in server order. The next-page cursor is the
id of the last node seen; a page without edges ends pagination.
"""

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from buildkite.models import (
    Team,
    TeamGrant,
    TeamMembersQueryResponse,
    TeamsQueryResponse,
    User,
    UsersQueryResponse,
)

EdgeT = TypeVar("EdgeT")
ItemT = TypeVar("ItemT")


def project_edges(
    edges: Sequence[EdgeT],
    extract: Callable[[EdgeT], ItemT],
    cursor_of: Callable[[EdgeT], str],
) -> Tuple[List[ItemT], Optional[str]]:
    items: List[ItemT] = []
    next_cursor: Optional[str] = None
    for edge in edges:
        items.append(extract(edge))
        next_cursor = cursor_of(edge)
    return items, next_cursor


def project_users(
    response: UsersQueryResponse,
) -> Tuple[List[User], Optional[str]]:
    return project_edges(
        response.data.organization.members.edges,
        extract=lambda edge: edge.node.user,
        cursor_of=lambda edge: edge.node.id,
    )


def project_teams(
    response: TeamsQueryResponse, org_slug: str
) -> Tuple[List[Team], Optional[str]]:
    return project_edges(
        response.data.organization.teams.edges,
        extract=lambda edge: edge.node.copy(update={"org_slug": org_slug}),
        cursor_of=lambda edge: edge.node.id,
    )


def project_team_grants(
    response: TeamMembersQueryResponse, team_slug: str
) -> Tuple[List[TeamGrant], Optional[str]]:
    return project_edges(
        response.data.team.members.edges,
        extract=lambda edge: TeamGrant(
            team_id=team_slug,
            principal_id=edge.node.user.id,
            role=edge.node.role,
        ),
        cursor_of=lambda edge: edge.node.id,
    )
