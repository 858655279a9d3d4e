from functools import partial

from loguru import logger
from port_ocean.core.ocean_types import ASYNC_GENERATOR_RESYNC_TYPE

from buildkite.core.exporters.abstract_exporter import AbstractBuildkiteExporter
from buildkite.core.options import ListUserOptions
from buildkite.core.resources import user_resource


class UserExporter(AbstractBuildkiteExporter):
    async def get_paginated_resources(
        self, options: ListUserOptions
    ) -> ASYNC_GENERATOR_RESYNC_TYPE:
        organization = options["organization"]

        async for page in self.iterate_pages(
            partial(self.client.list_users, organization)
        ):
            if not page.items:
                continue
            logger.info(
                f"Fetched batch of {len(page.items)} users from organization {organization}"
            )
            yield [user_resource(user, organization) for user in page.items]
