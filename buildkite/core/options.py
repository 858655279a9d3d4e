from typing import List, NotRequired, Required, TypedDict


class OrganizationIdentifier(TypedDict):
    organization: Required[str]


class ListOrganizationOptions(TypedDict):
    """Options for listing organizations."""

    organizations: NotRequired[List[str]]


class ListUserOptions(OrganizationIdentifier):
    """Options for listing the members of an organization."""


class ListTeamOptions(OrganizationIdentifier):
    """Options for listing the teams of an organization."""


class ListTeamMembershipOptions(OrganizationIdentifier):
    """Options for listing team memberships across an organization."""

    include_roles: NotRequired[bool]
