from klipy.core.dto.media import (
    AdContentProperties,
    MediaDomainModel,
    MediaFile,
    MediaFileVariant,
    MediaType,
    media_page_from_wire,
)
from klipy.core.dto.page import GridMeta, PaginatedResult
from klipy.core.dto.category import CategoriesDTO, ContentType, MediaCategory
from klipy.core.dto.ack import AckDTO

__all__ = [
    # Media
    "AdContentProperties",
    "MediaDomainModel",
    "MediaFile",
    "MediaFileVariant",
    "MediaType",
    "media_page_from_wire",

    # Paging
    "GridMeta",
    "PaginatedResult",

    # Categories
    "CategoriesDTO",
    "ContentType",
    "MediaCategory",

    # Tracking
    "AckDTO",
]
