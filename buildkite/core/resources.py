"""Raw items handed to Ocean for the user, team, grant and organization kinds.

The mapping in the port app config turns these into entities; this module only
decides identifiers and which fields are exposed.
"""

from typing import Any, Optional

from port_ocean.core.ocean_types import RAW_ITEM

from buildkite.helpers.utils import MEMBER_ENTITLEMENT, USER_PRINCIPAL_TYPE
from buildkite.models import Organization, Team, TeamGrant, User


def entitlement_id(team_id: str, slug: str = MEMBER_ENTITLEMENT) -> str:
    return f"{team_id}:{slug}"


def grant_id(grant: TeamGrant) -> str:
    return f"grant:team:{grant.team_id}:{grant.principal_id}"


def user_resource(user: User, parent_resource_id: Optional[str] = None) -> RAW_ITEM:
    return {
        "id": user.id,
        "display_name": user.name or "",
        "email": user.email or "",
        "status": "enabled",
        "profile": {"id": user.id, "email": user.email or ""},
        "parent_resource_id": parent_resource_id,
    }


def team_resource(team: Team) -> RAW_ITEM:
    team_id = team.resource_id
    return {
        "id": team_id,
        "graphql_id": team.id,
        "display_name": team.name or team.slug,
        "slug": team.slug,
        "org_slug": team.org_slug,
        "parent_resource_id": team.org_slug,
        "entitlements": [
            {
                "id": entitlement_id(team_id),
                "slug": MEMBER_ENTITLEMENT,
                "display_name": f"{team.name or team.slug} Team Member",
                "description": f"Member of {team.name or team.slug} team",
                "grantable_to": [USER_PRINCIPAL_TYPE],
            }
        ],
    }


def team_grant(grant: TeamGrant, include_role: bool = True) -> RAW_ITEM:
    item: dict[str, Any] = {
        "id": grant_id(grant),
        "entitlement": entitlement_id(grant.team_id),
        "resource": grant.team_id,
        "principal": {"id": grant.principal_id, "type": USER_PRINCIPAL_TYPE},
    }
    if include_role:
        item["role"] = grant.role
    return item


def organization_resource(organization: Organization) -> RAW_ITEM:
    return {
        "id": organization.slug,
        "graphql_id": organization.graphql_id,
        "display_name": organization.name,
        "web_url": organization.web_url,
        "created_at": (
            organization.created_at.isoformat() if organization.created_at else None
        ),
    }
