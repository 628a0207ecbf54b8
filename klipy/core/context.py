from __future__ import annotations

import logging
from typing import Optional

import aiohttp

from klipy.core.api.base import APIClient
from klipy.core.api.contracts import AdParametersProvider, UserAgentLoader
from klipy.core.config import KlipyConfig
from klipy.core.dto.media import MediaType
from klipy.core.errors import ConfigurationError
from klipy.core.http_client import HttpClient
from klipy.core.media_service import MediaService
from klipy.core.user_agent import UserAgentStore

logger = logging.getLogger(__name__)


class KlipyContext:
    """
    Shared SDK dependencies (config + HTTP client + pipeline).

    Use a single instance for app lifetime; services built from it share one
    aiohttp session.
    """

    def __init__(
        self,
        config: Optional[KlipyConfig] = None,
        *,
        http_client: Optional[HttpClient] = None,
        session: Optional[aiohttp.ClientSession] = None,
        ad_parameters: Optional[AdParametersProvider] = None,
        user_agent: Optional[UserAgentStore] = None,
    ):
        self.config = config
        self.user_agent = user_agent or UserAgentStore()
        self._http_client = http_client or HttpClient(config.http_client_config() if config else None)
        self.client = APIClient(
            self._http_client,
            session=session,
            ad_parameters=ad_parameters,
            user_agent=self.user_agent,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def setup(self, api_key: str, customer_id: Optional[str] = None) -> None:
        """
        Set the API key and optional customer id.

        The API key cannot change once set.
        """
        if self.config is not None and self.config.api_key != api_key:
            raise ConfigurationError("API key is already set and cannot be changed")
        if self.config is None:
            self.config = KlipyConfig(api_key, customer_id)
            self._http_client.config = self.config.http_client_config()
        else:
            self.config.update_customer_id(customer_id)
        logger.info(f"Klipy configured (customer id set: {bool(customer_id)})")

    def update_customer_id(self, customer_id: Optional[str]) -> None:
        self._require_config().update_customer_id(customer_id)

    def _require_config(self) -> KlipyConfig:
        if self.config is None:
            raise ConfigurationError("Klipy not configured. Call setup(api_key, customer_id) first.")
        return self.config

    async def load_user_agent(self, loader: Optional[UserAgentLoader] = None) -> str:
        return await self.user_agent.ensure_loaded(loader)

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------

    def _service(self, media_type: MediaType) -> MediaService:
        config = self._require_config()
        if not config.customer_id:
            raise ConfigurationError("Klipy not configured. Call setup(api_key, customer_id) first.")
        return MediaService(self.client, config.api_url, config.customer_id, media_type)

    @property
    def gifs(self) -> MediaService:
        return self._service(MediaType.GIF)

    @property
    def stickers(self) -> MediaService:
        return self._service(MediaType.STICKER)

    @property
    def clips(self) -> MediaService:
        return self._service(MediaType.CLIP)

    def create_media_service(self, media_type: MediaType) -> Optional[MediaService]:
        """Service for ``media_type``; ``None`` for ad slots."""
        if media_type is MediaType.AD:
            return None
        return self._service(media_type)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        await self._http_client.close_async_session()

    async def __aenter__(self) -> "KlipyContext":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
