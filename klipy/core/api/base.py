"""
Request pipeline shared by every media service.

Contract:
- One network attempt per call (no retry, no cache)
- Failures surface as exactly one of InvalidURLError, NetworkTransportError,
  HTTPStatusError or DecodingError
- Decoding is delegated to a caller-supplied ``decode`` callable
- An ad parameter provider that fails leaves the parameters unformed, so it
  surfaces as InvalidURLError with the provider's exception as the cause
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

import aiohttp
from yarl import URL

from klipy.core.ad_parameters import merge_ad_parameters
from klipy.core.api.contracts import AdParametersProvider, UserAgentSource
from klipy.core.api.endpoints import APIEndpoint, ParameterEncoding, describe
from klipy.core.dto.ack import AckDTO
from klipy.core.errors import (
    DecodingError,
    HTTPStatusError,
    InvalidURLError,
    NetworkTransportError,
)
from klipy.core.http_client import HttpClient

T = TypeVar("T")

logger = logging.getLogger(__name__)


def resolve_url(base_url: str, path: str) -> URL:
    """Join ``base_url`` (treated as a directory) and a relative path."""
    try:
        base = URL(str(base_url))
    except (TypeError, ValueError) as e:
        raise InvalidURLError(f"Invalid base URL {base_url!r}: {e}") from e

    if not base.is_absolute() or base.scheme not in ("http", "https"):
        raise InvalidURLError(f"Base URL must be absolute http(s): {base_url!r}")

    base_path = base.raw_path if base.raw_path.endswith("/") else base.raw_path + "/"
    try:
        return base.with_path(base_path + path.lstrip("/"), encoded=True)
    except (TypeError, ValueError) as e:
        raise InvalidURLError(f"Cannot join {base_url!r} and {path!r}: {e}") from e


def _query_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise InvalidURLError(f"Parameter {key!r} is not a scalar: {type(value).__name__}")


class APIClient:
    """
    Builds, sends and decodes requests described by endpoint descriptors.

    Ad parameters and the user agent come from injected collaborators; both
    are optional so the pipeline can run without any platform setup.
    """

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        ad_parameters: Optional[AdParametersProvider] = None,
        user_agent: Optional[UserAgentSource] = None,
    ):
        self.http_client = http_client or HttpClient()
        self._session = session
        self.ad_parameters = ad_parameters
        self.user_agent = user_agent

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    async def request(self, endpoint: APIEndpoint, base_url: str, decode: Callable[[Any], T]) -> T:
        """
        Execute ``endpoint`` against ``base_url`` and decode the JSON body.

        Args:
            endpoint: Descriptor of the call
            base_url: ``<scheme+host>/api/v1/<apiKey>/``
            decode: Maps the parsed JSON payload to the result type

        Raises:
            InvalidURLError, NetworkTransportError, HTTPStatusError, DecodingError
        """
        logger.info(f"API Request: {endpoint.method.value} {endpoint.path}")
        _, body = await self._send(endpoint, base_url)
        return self._decode(body, decode)

    async def request_ack(self, endpoint: APIEndpoint, base_url: str) -> AckDTO:
        """Execute a fire-and-forget call; any 2xx is success, body ignored."""
        logger.info(f"API Request: {endpoint.method.value} {endpoint.path} (fire-and-forget)")
        status, _ = await self._send(endpoint, base_url)
        return AckDTO(status=status)

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    async def build_request(self, endpoint: APIEndpoint, base_url: str) -> Dict[str, Any]:
        """
        Returns the keyword arguments for ``ClientSession.request``.
        """
        url = resolve_url(base_url, endpoint.path)
        headers: Dict[str, str] = {}
        request: Dict[str, Any] = {"method": endpoint.method.value, "url": url, "headers": headers}

        params = endpoint.parameters
        logger.debug(f"Endpoint: {describe(endpoint)}")

        if endpoint.encoding is ParameterEncoding.URL:
            merged = merge_ad_parameters(params, await self._ad_parameters())
            if merged:
                query = {k: _query_value(k, v) for k, v in merged.items()}
                try:
                    request["url"] = url.update_query(query)
                except (TypeError, ValueError) as e:
                    raise InvalidURLError(f"Cannot encode query for {endpoint.path!r}: {e}") from e
        elif params is not None:
            merged = merge_ad_parameters(params, await self._ad_parameters())
            try:
                request["data"] = json.dumps(merged).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise InvalidURLError(f"Cannot encode body for {endpoint.path!r}: {e}") from e
            headers["Content-Type"] = "application/json"

        user_agent = self.user_agent.value if self.user_agent is not None else ""
        if user_agent:
            headers["User-Agent"] = user_agent
        else:
            logger.debug("User agent empty, using session default")

        if endpoint.headers:
            headers.update(endpoint.headers)

        logger.debug(f"Final URL: {request['url']}")
        return request

    async def _ad_parameters(self) -> Dict[str, Any]:
        if self.ad_parameters is None:
            return {}
        try:
            return dict(await self.ad_parameters.parameters())
        except Exception as e:
            logger.error(f"Ad parameter provider failed: {e!r}")
            raise InvalidURLError(f"Cannot build request parameters: {e!r}") from e

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is not None and not self._session.closed:
            return self._session
        return await self.http_client.get_async_session()

    async def _send(self, endpoint: APIEndpoint, base_url: str) -> Tuple[int, bytes]:
        request = await self.build_request(endpoint, base_url)
        session = await self._get_session()

        try:
            async with session.request(**request) as resp:
                status = resp.status
                body = await resp.read()
        except aiohttp.InvalidURL as e:
            raise InvalidURLError(f"Invalid request URL: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.warning(f"Network error for {endpoint.method.value} {endpoint.path}: {e!r}")
            raise NetworkTransportError(f"Request to {endpoint.path} failed: {e!r}") from e

        logger.debug(f"HTTP Status Code: {status} ({len(body)} bytes)")
        if not 200 <= status <= 299:
            logger.warning(f"HTTP error {status} for {endpoint.method.value} {endpoint.path}")
            raise HTTPStatusError(status, body)
        return status, body

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(body: bytes, decode: Callable[[Any], T]) -> T:
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Response is not valid JSON: {body[:200]!r}")
            raise DecodingError(f"Response is not valid JSON: {e}") from e

        try:
            return decode(payload)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Response does not match expected shape: {e!r}")
            raise DecodingError(f"Response does not match expected shape: {e!r}") from e
