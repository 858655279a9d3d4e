from enum import StrEnum


class ObjectKind(StrEnum):
    """Resource kinds exported by the Buildkite integration."""

    ORGANIZATION = "buildkite-organization"
    USER = "buildkite-user"
    TEAM = "buildkite-team"
    TEAM_MEMBERSHIP = "buildkite-team-membership"


MEMBER_ENTITLEMENT = "member"
USER_PRINCIPAL_TYPE = "user"
