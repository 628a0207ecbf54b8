"""
Centralized HTTP client configuration.

Provides aiohttp session management for the request pipeline with:
- JSON API headers
- Connection pool limits
- Connect / read timeouts

Cancellation and timeout policy live here, in the transport; the request
pipeline never retries.
"""

from __future__ import annotations

import logging
import socket
from typing import Dict, Optional

import aiohttp
from aiohttp import ClientTimeout, TCPConnector

logger = logging.getLogger(__name__)


# Headers for API requests (JSON expected). User-Agent is attached per request.
API_HEADERS = {
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
}


class HttpClientConfig:
    """Central HTTP client configuration."""

    def __init__(
        self,
        max_connections_per_host: int = 10,
        max_total_connections: int = 100,
        connect_timeout: float = 30,
        read_timeout: float = 60,
        total_timeout: Optional[float] = None,
    ):
        self.max_connections_per_host = max_connections_per_host
        self.max_total_connections = max_total_connections
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.total_timeout = total_timeout

    def client_timeout(self) -> ClientTimeout:
        return ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.read_timeout,
        )


class HttpClient:
    """
    Async HTTP session factory.

    One session is created lazily and shared by every service built from
    the same context.
    """

    def __init__(self, config: Optional[HttpClientConfig] = None):
        self.config = config or HttpClientConfig()
        self._async_session: Optional[aiohttp.ClientSession] = None

    async def create_async_session(self, headers: Optional[Dict[str, str]] = None) -> aiohttp.ClientSession:
        """
        Create a configured aiohttp.ClientSession.

        Args:
            headers: Optional headers to use (defaults to API_HEADERS)

        Returns:
            Configured aiohttp.ClientSession
        """
        connector = TCPConnector(
            limit=self.config.max_total_connections,
            limit_per_host=self.config.max_connections_per_host,
            ttl_dns_cache=300,
            family=socket.AF_UNSPEC,
            force_close=False,
        )

        session = aiohttp.ClientSession(
            connector=connector,
            timeout=self.config.client_timeout(),
            headers=headers or API_HEADERS,
            raise_for_status=False,
        )
        logger.debug(
            f"Async session created (limit={self.config.max_total_connections}, "
            f"per_host={self.config.max_connections_per_host})"
        )

        self._async_session = session
        return session

    async def get_async_session(self) -> aiohttp.ClientSession:
        """Get existing session or create new one."""
        if self._async_session is None or self._async_session.closed:
            return await self.create_async_session()
        return self._async_session

    async def close_async_session(self) -> None:
        if self._async_session:
            await self._async_session.close()
            self._async_session = None
