from typing import Literal

from pydantic import Field
from port_ocean.core.handlers.port_app_config.api import APIPortAppConfig
from port_ocean.core.handlers.port_app_config.models import (
    PortAppConfig,
    ResourceConfig,
    Selector,
)
from port_ocean.core.integrations.base import BaseIntegration

from buildkite.helpers.utils import ObjectKind


class BuildkiteTeamMembershipSelector(Selector):
    include_roles: bool = Field(
        default=True,
        alias="includeRoles",
        description="Include the member's team role (MEMBER or MAINTAINER) in each membership",
    )


class BuildkiteTeamMembershipConfig(ResourceConfig):
    selector: BuildkiteTeamMembershipSelector
    kind: Literal[ObjectKind.TEAM_MEMBERSHIP]


class BuildkitePortAppConfig(PortAppConfig):
    resources: list[BuildkiteTeamMembershipConfig | ResourceConfig] = Field(
        default_factory=list,
        description="Specify the resources to include in the sync",
    )


class BuildkiteIntegration(BaseIntegration):
    class AppConfigHandlerClass(APIPortAppConfig):
        CONFIG_CLASS = BuildkitePortAppConfig
