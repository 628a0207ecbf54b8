from __future__ import annotations

import logging
from typing import Optional

from klipy.core.api import endpoints
from klipy.core.api.base import APIClient
from klipy.core.dto.ack import AckDTO
from klipy.core.dto.category import CategoriesDTO
from klipy.core.dto.media import MediaDomainModel, MediaType, media_page_from_wire
from klipy.core.dto.page import PaginatedResult
from klipy.core.errors import ConfigurationError


DEFAULT_PER_PAGE = 24
DEFAULT_LOCALE = "ka"

logger = logging.getLogger(__name__)


class MediaService:
    """
    Domain façade for one media type (gifs, stickers or clips).

    Guarantees:
    - One endpoint descriptor per call, built fresh
    - Returns DTOs only
    - Stateless apart from the customer id captured at construction
    """

    def __init__(
        self,
        client: APIClient,
        base_url: str,
        customer_id: Optional[str],
        media_type: MediaType,
    ):
        if not customer_id:
            raise ConfigurationError("customer id is required to build a media service")
        if media_type is MediaType.AD:
            raise ConfigurationError("ad slots have no media service")

        self._client = client
        self._base_url = base_url
        self._customer_id = customer_id
        self.media_type = media_type

    @property
    def customer_id(self) -> str:
        return self._customer_id

    def _decode_page(self, payload) -> PaginatedResult[MediaDomainModel]:
        return media_page_from_wire(payload, self.media_type)

    # ---------------------------------------------------------
    # Feeds
    # ---------------------------------------------------------

    async def fetch_trending(
        self,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        locale: str = DEFAULT_LOCALE,
    ) -> PaginatedResult[MediaDomainModel]:
        endpoint = endpoints.Trending(
            self.media_type,
            page=page,
            per_page=per_page,
            customer_id=self._customer_id,
            locale=locale,
        )
        return await self._client.request(endpoint, self._base_url, self._decode_page)

    async def search(
        self,
        query: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
        locale: str = DEFAULT_LOCALE,
    ) -> PaginatedResult[MediaDomainModel]:
        logger.debug(f"search {self.media_type.value} q={query!r} page={page}")
        endpoint = endpoints.Search(
            self.media_type,
            query=query,
            page=page,
            per_page=per_page,
            customer_id=self._customer_id,
            locale=locale,
        )
        return await self._client.request(endpoint, self._base_url, self._decode_page)

    async def fetch_categories(self) -> CategoriesDTO:
        endpoint = endpoints.Categories(self.media_type)
        return await self._client.request(endpoint, self._base_url, CategoriesDTO.from_wire)

    async def fetch_recent(
        self,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> PaginatedResult[MediaDomainModel]:
        endpoint = endpoints.Recent(
            self.media_type,
            customer_id=self._customer_id,
            page=page,
            per_page=per_page,
        )
        return await self._client.request(endpoint, self._base_url, self._decode_page)

    # ---------------------------------------------------------
    # Fire-and-forget
    # ---------------------------------------------------------

    async def hide_from_recent(self, slug: str) -> AckDTO:
        endpoint = endpoints.HideFromRecent(self.media_type, customer_id=self._customer_id, slug=slug)
        return await self._client.request_ack(endpoint, self._base_url)

    async def track_view(self, slug: str) -> AckDTO:
        endpoint = endpoints.View(self.media_type, slug=slug, customer_id=self._customer_id)
        return await self._client.request_ack(endpoint, self._base_url)

    async def track_share(self, slug: str) -> AckDTO:
        endpoint = endpoints.Share(self.media_type, slug=slug, customer_id=self._customer_id)
        return await self._client.request_ack(endpoint, self._base_url)

    async def report(self, slug: str, reason: str) -> AckDTO:
        endpoint = endpoints.Report(
            self.media_type,
            slug=slug,
            customer_id=self._customer_id,
            reason=reason,
        )
        return await self._client.request_ack(endpoint, self._base_url)
