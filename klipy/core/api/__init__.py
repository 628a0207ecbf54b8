from klipy.core.api.base import APIClient, resolve_url
from klipy.core.api.endpoints import (
    MEDIA_ENDPOINTS,
    APIEndpoint,
    HTTPMethod,
    ParameterEncoding,
)

__all__ = [
    "APIClient",
    "APIEndpoint",
    "HTTPMethod",
    "MEDIA_ENDPOINTS",
    "ParameterEncoding",
    "resolve_url",
]
