from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from buildkite.clients.rate_limit import RateLimitDescriptor


class Organization(BaseModel):
    id: str
    graphql_id: Optional[str] = None
    slug: str
    name: str
    url: Optional[str] = None
    web_url: Optional[str] = None
    pipelines_url: Optional[str] = None
    agents_url: Optional[str] = None
    emojis_url: Optional[str] = None
    created_at: Optional[datetime] = None


class User(BaseModel):
    id: str
    email: Optional[str] = None
    name: Optional[str] = None


class Team(BaseModel):
    id: str
    slug: str
    name: Optional[str] = None
    # never part of the GraphQL payload, attached from the query context
    org_slug: str = ""

    @property
    def resource_id(self) -> str:
        return f"{self.org_slug}/{self.slug}"


class TeamGrant(BaseModel):
    team_id: str
    principal_id: str
    role: Optional[str] = None


# GraphQL response shapes. Only the fields the queries select are modelled.


class _MemberNode(BaseModel):
    id: str
    role: Optional[str] = None
    user: User


class _MemberEdge(BaseModel):
    node: _MemberNode


class _MemberConnection(BaseModel):
    edges: List[_MemberEdge] = Field(default_factory=list)


class _TeamEdge(BaseModel):
    node: Team


class _TeamConnection(BaseModel):
    edges: List[_TeamEdge] = Field(default_factory=list)


class _OrganizationMembers(BaseModel):
    members: _MemberConnection


class _OrganizationTeams(BaseModel):
    teams: _TeamConnection


class _TeamMembers(BaseModel):
    members: _MemberConnection


class _Viewer(BaseModel):
    user: Optional[User] = None


class _UsersData(BaseModel):
    organization: _OrganizationMembers


class _TeamsData(BaseModel):
    organization: _OrganizationTeams


class _TeamMembersData(BaseModel):
    team: _TeamMembers


class _InfoData(BaseModel):
    viewer: _Viewer


class UsersQueryResponse(BaseModel):
    data: _UsersData


class TeamsQueryResponse(BaseModel):
    data: _TeamsData


class TeamMembersQueryResponse(BaseModel):
    data: _TeamMembersData


class InfoQueryResponse(BaseModel):
    data: _InfoData


T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a cursor-paginated listing.

    ``next_cursor`` is ``None`` once the server returned no edges, which is
    the only signal that pagination is over.
    """

    items: List[T] = field(default_factory=list)
    next_cursor: Optional[str] = None
    rate_limit: RateLimitDescriptor = field(default_factory=RateLimitDescriptor)

    @property
    def has_next_page(self) -> bool:
        return self.next_cursor is not None

    @property
    def pagination_token(self) -> str:
        return self.next_cursor or ""


@dataclass
class ViewerInfo:
    user: Optional[User]
    rate_limit: RateLimitDescriptor = field(default_factory=RateLimitDescriptor)
