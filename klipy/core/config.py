from __future__ import annotations

import logging
import os
from typing import Optional

from klipy.core.errors import ConfigurationError
from klipy.core.http_client import HttpClientConfig

logger = logging.getLogger(__name__)


DEFAULT_BASE_URL = "https://api.klipy.co/api/v1/"


# ------------ Safe env helpers (tolerate empty/invalid) ------------
def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v not in (None, "") else default


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v in (None, "", "None", "null"):
        return default
    try:
        return float(v)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={v!r}")
        return default


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v in (None, "", "None", "null"):
        return default
    try:
        return int(v)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={v!r}")
        return default


class KlipyConfig:
    """
    SDK configuration passed explicitly to the context.

    The API key is fixed for the lifetime of the object; the customer id may
    be changed or cleared later.
    """

    def __init__(
        self,
        api_key: str,
        customer_id: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        connect_timeout: float = 30,
        read_timeout: float = 60,
        max_connections: int = 100,
    ):
        if not api_key:
            raise ConfigurationError("API key is required")
        self._api_key = api_key
        self.customer_id = customer_id or None
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.max_connections = max_connections

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def api_url(self) -> str:
        """``<base_url><api_key>/`` - root for every endpoint path."""
        return f"{self.base_url}{self._api_key}/"

    def update_customer_id(self, customer_id: Optional[str]) -> None:
        """Set a new customer id, or clear it with ``None``."""
        self.customer_id = customer_id or None

    def http_client_config(self) -> HttpClientConfig:
        return HttpClientConfig(
            max_total_connections=self.max_connections,
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
        )

    @classmethod
    def from_env(cls) -> "KlipyConfig":
        api_key = _env_str("KLIPY_API_KEY")
        if not api_key:
            raise ConfigurationError("KLIPY_API_KEY is not set")
        return cls(
            api_key,
            _env_str("KLIPY_CUSTOMER_ID"),
            base_url=_env_str("KLIPY_BASE_URL", DEFAULT_BASE_URL),
            connect_timeout=_env_float("KLIPY_CONNECT_TIMEOUT", 30),
            read_timeout=_env_float("KLIPY_READ_TIMEOUT", 60),
            max_connections=_env_int("KLIPY_MAX_CONNECTIONS", 100),
        )

    def __repr__(self) -> str:
        return f"KlipyConfig(base_url={self.base_url!r}, customer_id={self.customer_id!r})"
