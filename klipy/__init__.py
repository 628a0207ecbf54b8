"""Klipy media SDK: feeds of gifs, stickers and clips plus row layout."""

from klipy.core.ad_parameters import AdParameters, DeviceInfo
from klipy.core.config import KlipyConfig
from klipy.core.context import KlipyContext
from klipy.core.dto import (
    AckDTO,
    CategoriesDTO,
    MediaDomainModel,
    MediaFile,
    MediaFileVariant,
    MediaType,
    PaginatedResult,
)
from klipy.core.errors import (
    APIError,
    ConfigurationError,
    DecodingError,
    HTTPStatusError,
    InvalidURLError,
    KlipyError,
    NetworkTransportError,
)
from klipy.core.media_service import MediaService
from klipy.layout import MediaRow, Size, fit_in_box, layout_rows

__version__ = "0.1.0"

__all__ = [
    "AckDTO",
    "AdParameters",
    "APIError",
    "CategoriesDTO",
    "ConfigurationError",
    "DecodingError",
    "DeviceInfo",
    "HTTPStatusError",
    "InvalidURLError",
    "KlipyConfig",
    "KlipyContext",
    "KlipyError",
    "MediaDomainModel",
    "MediaFile",
    "MediaFileVariant",
    "MediaRow",
    "MediaService",
    "MediaType",
    "NetworkTransportError",
    "PaginatedResult",
    "Size",
    "fit_in_box",
    "layout_rows",
]
