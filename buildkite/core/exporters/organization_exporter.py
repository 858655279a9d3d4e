from loguru import logger
from port_ocean.core.ocean_types import ASYNC_GENERATOR_RESYNC_TYPE

from buildkite.core.exporters.abstract_exporter import AbstractBuildkiteExporter
from buildkite.core.options import ListOrganizationOptions
from buildkite.core.resources import organization_resource


class OrganizationExporter(AbstractBuildkiteExporter):
    async def get_paginated_resources(
        self, options: ListOrganizationOptions
    ) -> ASYNC_GENERATOR_RESYNC_TYPE:
        """Yield the visible organizations, narrowed to the selected slugs if any."""
        selected = set(options.get("organizations") or [])
        organizations = await self.client.list_organizations()

        if selected:
            organizations = [org for org in organizations if org.slug in selected]
            missing = selected - {org.slug for org in organizations}
            if missing:
                logger.warning(
                    f"Configured organizations not visible to the token: {sorted(missing)}"
                )

        logger.info(f"Exporting {len(organizations)} Buildkite organizations")
        if organizations:
            yield [organization_resource(org) for org in organizations]
