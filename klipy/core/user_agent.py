from __future__ import annotations

import asyncio
import logging
from typing import Optional

from klipy.core.api.contracts import UserAgentLoader

logger = logging.getLogger(__name__)


FALLBACK_USER_AGENT = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 18_1 like Mac OS X) "
    "AppleWebKit/605.1.15 (KHTML, like Gecko) Mobile/15E148)"
)


class UserAgentStore:
    """
    Process-wide user agent, written at most once.

    Readers see either ``""`` (not loaded yet) or the final string.
    """

    def __init__(self, value: Optional[str] = None):
        self._value = value or ""
        self._lock = asyncio.Lock()

    @property
    def value(self) -> str:
        return self._value

    async def ensure_loaded(self, loader: Optional[UserAgentLoader] = None) -> str:
        if self._value:
            return self._value

        async with self._lock:
            if self._value:
                return self._value

            resolved = ""
            if loader is not None:
                try:
                    resolved = (await loader()) or ""
                except Exception as e:
                    logger.warning(f"User agent loader failed: {e}")
            if not resolved:
                logger.info("Using fallback user agent")
                resolved = FALLBACK_USER_AGENT

            self._value = resolved
            logger.debug(f"User agent set: {resolved}")
            return self._value
