from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Awaitable, Callable, Optional, TypeVar

from loguru import logger
from port_ocean.core.ocean_types import ASYNC_GENERATOR_RESYNC_TYPE

from buildkite.clients.directory_client import DirectoryClient
from buildkite.models import Page

ItemT = TypeVar("ItemT")


class AbstractBuildkiteExporter(ABC):
    def __init__(self, client: DirectoryClient) -> None:
        self.client = client

    @staticmethod
    async def iterate_pages(
        fetch_page: Callable[[Optional[str]], Awaitable[Page[ItemT]]],
    ) -> AsyncIterator[Page[ItemT]]:
        """Request pages until the client reports no further cursor."""
        cursor: Optional[str] = None
        while True:
            page = await fetch_page(cursor)
            logger.debug(
                f"Received page of {len(page.items)} items, "
                f"rate limit {page.rate_limit.remaining}/{page.rate_limit.limit} remaining"
            )
            yield page
            if not page.has_next_page:
                return
            cursor = page.next_cursor

    @abstractmethod
    def get_paginated_resources(self, options: Any) -> ASYNC_GENERATOR_RESYNC_TYPE: ...
