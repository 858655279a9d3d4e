from typing import cast

from loguru import logger
from port_ocean.context.event import event
from port_ocean.context.ocean import ocean
from port_ocean.core.ocean_types import ASYNC_GENERATOR_RESYNC_TYPE
from port_ocean.utils.async_iterators import stream_async_iterators_tasks

from buildkite.clients.client_factory import (
    create_directory_client,
    get_configured_organizations,
)
from buildkite.clients.directory_client import DirectoryClient
from buildkite.core.exporters import (
    OrganizationExporter,
    TeamExporter,
    TeamMembershipExporter,
    UserExporter,
)
from buildkite.core.options import (
    ListOrganizationOptions,
    ListTeamMembershipOptions,
    ListTeamOptions,
    ListUserOptions,
)
from buildkite.helpers.utils import ObjectKind
from integration import BuildkiteTeamMembershipConfig


async def get_organization_slugs(client: DirectoryClient) -> list[str]:
    configured = get_configured_organizations()
    if configured:
        return configured
    return [org.slug for org in await client.list_organizations()]


@ocean.on_start()
async def on_start() -> None:
    logger.info("Starting Port Ocean Buildkite integration")
    info = await create_directory_client().get_info()
    if info.user:
        logger.info(f"Authenticated to Buildkite as {info.user.name} ({info.user.id})")


@ocean.on_resync(ObjectKind.ORGANIZATION)
async def resync_organizations(kind: str) -> ASYNC_GENERATOR_RESYNC_TYPE:
    logger.info(f"Starting resync for kind: {kind}")

    exporter = OrganizationExporter(create_directory_client())
    async for organizations in exporter.get_paginated_resources(
        ListOrganizationOptions(organizations=get_configured_organizations())
    ):
        yield organizations


@ocean.on_resync(ObjectKind.USER)
async def resync_users(kind: str) -> ASYNC_GENERATOR_RESYNC_TYPE:
    logger.info(f"Starting resync for kind: {kind}")

    client = create_directory_client()
    exporter = UserExporter(client)
    tasks = (
        exporter.get_paginated_resources(ListUserOptions(organization=slug))
        for slug in await get_organization_slugs(client)
    )
    async for users in stream_async_iterators_tasks(*tasks):
        yield users


@ocean.on_resync(ObjectKind.TEAM)
async def resync_teams(kind: str) -> ASYNC_GENERATOR_RESYNC_TYPE:
    logger.info(f"Starting resync for kind: {kind}")

    client = create_directory_client()
    exporter = TeamExporter(client)
    tasks = (
        exporter.get_paginated_resources(ListTeamOptions(organization=slug))
        for slug in await get_organization_slugs(client)
    )
    async for teams in stream_async_iterators_tasks(*tasks):
        yield teams


@ocean.on_resync(ObjectKind.TEAM_MEMBERSHIP)
async def resync_team_memberships(kind: str) -> ASYNC_GENERATOR_RESYNC_TYPE:
    logger.info(f"Starting resync for kind: {kind}")

    config = cast(BuildkiteTeamMembershipConfig, event.resource_config)
    client = create_directory_client()
    exporter = TeamMembershipExporter(client)
    tasks = (
        exporter.get_paginated_resources(
            ListTeamMembershipOptions(
                organization=slug,
                include_roles=config.selector.include_roles,
            )
        )
        for slug in await get_organization_slugs(client)
    )
    async for memberships in stream_async_iterators_tasks(*tasks):
        yield memberships
