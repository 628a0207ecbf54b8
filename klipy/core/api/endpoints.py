"""
Endpoint descriptors.

Each logical API call is one frozen dataclass. The set of operations is
closed: ``MEDIA_ENDPOINTS`` lists every descriptor a media service can
build, and each descriptor is constructed fresh per call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union
from urllib.parse import quote

from klipy.core.dto.media import MediaType

Scalar = Union[str, int, float, bool]


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class ParameterEncoding(str, Enum):
    URL = "url"
    JSON = "json"


def _segment(value: str) -> str:
    # resource ids are always a single path segment
    return quote(str(value), safe="")


class APIEndpoint:
    """
    Minimal descriptor contract: path, method, parameters, encoding, headers.
    """

    @property
    def path(self) -> str:
        raise NotImplementedError

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.GET

    @property
    def parameters(self) -> Optional[Dict[str, Scalar]]:
        return None

    @property
    def encoding(self) -> ParameterEncoding:
        if self.method in (HTTPMethod.GET, HTTPMethod.DELETE):
            return ParameterEncoding.URL
        return ParameterEncoding.JSON

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


@dataclass(frozen=True)
class MediaEndpoint(APIEndpoint):
    media_type: MediaType

    @property
    def prefix(self) -> str:
        return self.media_type.path_prefix


# ----------------------------------------------------------------------
# Feeds
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Trending(MediaEndpoint):
    page: int
    per_page: int
    customer_id: str
    locale: str

    @property
    def path(self) -> str:
        return f"{self.prefix}/trending"

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            "customer_id": self.customer_id,
            "locale": self.locale,
        }


@dataclass(frozen=True)
class Search(MediaEndpoint):
    query: str
    page: int
    per_page: int
    customer_id: str
    locale: str

    @property
    def path(self) -> str:
        return f"{self.prefix}/search"

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {
            "q": self.query,
            "page": self.page,
            "per_page": self.per_page,
            "customer_id": self.customer_id,
            "locale": self.locale,
        }


@dataclass(frozen=True)
class Categories(MediaEndpoint):
    @property
    def path(self) -> str:
        return f"{self.prefix}/categories"


@dataclass(frozen=True)
class Recent(MediaEndpoint):
    customer_id: str
    page: int
    per_page: int

    @property
    def path(self) -> str:
        return f"{self.prefix}/recent/{_segment(self.customer_id)}"

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {"page": self.page, "per_page": self.per_page}


@dataclass(frozen=True)
class HideFromRecent(MediaEndpoint):
    customer_id: str
    slug: str

    @property
    def path(self) -> str:
        return f"{self.prefix}/recent/{_segment(self.customer_id)}"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.DELETE

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {"slug": self.slug}


# ----------------------------------------------------------------------
# Tracking (fire-and-forget)
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class View(MediaEndpoint):
    slug: str
    customer_id: str

    @property
    def path(self) -> str:
        return f"{self.prefix}/view/{_segment(self.slug)}"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {"customer_id": self.customer_id}


@dataclass(frozen=True)
class Share(MediaEndpoint):
    slug: str
    customer_id: str

    @property
    def path(self) -> str:
        return f"{self.prefix}/share/{_segment(self.slug)}"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {"customer_id": self.customer_id}


@dataclass(frozen=True)
class Report(MediaEndpoint):
    slug: str
    customer_id: str
    reason: str

    @property
    def path(self) -> str:
        return f"{self.prefix}/report/{_segment(self.slug)}"

    @property
    def method(self) -> HTTPMethod:
        return HTTPMethod.POST

    @property
    def parameters(self) -> Dict[str, Scalar]:
        return {"customer_id": self.customer_id, "reason": self.reason}


MEDIA_ENDPOINTS: Tuple[type, ...] = (
    Trending,
    Search,
    Categories,
    Recent,
    HideFromRecent,
    View,
    Share,
    Report,
)


def describe(endpoint: APIEndpoint) -> Dict[str, Any]:
    """Plain-dict view of a descriptor, used for logging."""
    return {
        "path": endpoint.path,
        "method": endpoint.method.value,
        "parameters": endpoint.parameters,
        "encoding": endpoint.encoding.value,
        "headers": endpoint.headers,
    }
