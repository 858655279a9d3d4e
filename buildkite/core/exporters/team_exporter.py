from functools import partial

from loguru import logger
from port_ocean.core.ocean_types import ASYNC_GENERATOR_RESYNC_TYPE

from buildkite.core.exporters.abstract_exporter import AbstractBuildkiteExporter
from buildkite.core.options import ListTeamOptions
from buildkite.core.resources import team_resource


class TeamExporter(AbstractBuildkiteExporter):
    async def get_paginated_resources(
        self, options: ListTeamOptions
    ) -> ASYNC_GENERATOR_RESYNC_TYPE:
        organization = options["organization"]

        async for page in self.iterate_pages(
            partial(self.client.list_teams, organization)
        ):
            if not page.items:
                continue
            logger.info(
                f"Fetched batch of {len(page.items)} teams from organization {organization}"
            )
            yield [team_resource(team) for team in page.items]
