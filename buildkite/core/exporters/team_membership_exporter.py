from functools import partial

from loguru import logger
from port_ocean.core.ocean_types import ASYNC_GENERATOR_RESYNC_TYPE

from buildkite.core.exporters.abstract_exporter import AbstractBuildkiteExporter
from buildkite.core.options import ListTeamMembershipOptions
from buildkite.core.resources import team_grant


class TeamMembershipExporter(AbstractBuildkiteExporter):
    async def get_paginated_resources(
        self, options: ListTeamMembershipOptions
    ) -> ASYNC_GENERATOR_RESYNC_TYPE:
        """Walk every team of the organization and page through its members."""
        organization = options["organization"]
        include_roles = options.get("include_roles", True)

        async for team_page in self.iterate_pages(
            partial(self.client.list_teams, organization)
        ):
            for team in team_page.items:
                async for page in self.iterate_pages(
                    partial(self.client.list_team_grants, team.resource_id)
                ):
                    if not page.items:
                        continue
                    logger.info(
                        f"Fetched batch of {len(page.items)} memberships of team {team.resource_id}"
                    )
                    yield [team_grant(grant, include_roles) for grant in page.items]
