from buildkite.core.exporters.organization_exporter import OrganizationExporter
from buildkite.core.exporters.team_exporter import TeamExporter
from buildkite.core.exporters.team_membership_exporter import TeamMembershipExporter
from buildkite.core.exporters.user_exporter import UserExporter

__all__ = [
    "OrganizationExporter",
    "TeamExporter",
    "TeamMembershipExporter",
    "UserExporter",
]
