from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from klipy.core.dto.page import PaginatedResult


class MediaType(str, Enum):
    GIF = "gif"
    STICKER = "sticker"
    CLIP = "clip"
    AD = "ad"

    @property
    def path_prefix(self) -> str:
        if self is MediaType.AD:
            raise ValueError("ad slots have no API path")
        return f"{self.value}s"


@dataclass(frozen=True, slots=True)
class MediaFileVariant:
    url: str
    width: int
    height: int

    @classmethod
    def from_wire(cls, raw: Dict[str, Any]) -> "MediaFileVariant":
        return cls(
            url=str(raw["url"]),
            width=int(raw.get("width") or 0),
            height=int(raw.get("height") or 0),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {"url": self.url, "width": self.width, "height": self.height}


@dataclass(frozen=True, slots=True)
class MediaFile:
    # gif is the sizing source for layout; webp is always shipped alongside
    gif: MediaFileVariant
    webp: MediaFileVariant
    mp4: Optional[MediaFileVariant] = None

    @classmethod
    def from_wire(cls, raw: Dict[str, Any]) -> "MediaFile":
        mp4 = raw.get("mp4")
        return cls(
            gif=MediaFileVariant.from_wire(raw["gif"]),
            webp=MediaFileVariant.from_wire(raw["webp"]),
            mp4=MediaFileVariant.from_wire(mp4) if mp4 else None,
        )

    def to_wire(self) -> Dict[str, Any]:
        out = {"gif": self.gif.to_wire(), "webp": self.webp.to_wire()}
        if self.mp4 is not None:
            out["mp4"] = self.mp4.to_wire()
        return out


@dataclass(frozen=True, slots=True)
class AdContentProperties:
    width: int
    height: int
    content: str


_TIERS = ("hd", "md", "sm", "xs")


AD_SLOTS_PER_PAGE = 1_000_000

_loose_ad_ids = itertools.count(1)


def _ad_id(slot: Optional[Tuple[int, int]]) -> int:
    """
    Negative id for an ad slot that arrived without one.

    With a ``(page, position)`` slot the id is stable across refetches of the
    same page and unique across pages. Ads decoded outside a page take the
    next value of a process-wide counter.
    """
    if slot is None:
        return -next(_loose_ad_ids)
    page, position = slot
    return -((page + 1) * AD_SLOTS_PER_PAGE + position + 1)


@dataclass(frozen=True, eq=False)
class MediaDomainModel:
    """
    Uniform item representation for gifs, stickers, clips and ad slots.

    Equality and hashing use ``id`` only so refreshed pages diff cleanly
    against items already on screen.
    """

    id: int
    title: str
    slug: str
    type: MediaType
    blur_preview: Optional[str] = None
    ad_content_properties: Optional[AdContentProperties] = None

    hd: Optional[MediaFile] = None
    md: Optional[MediaFile] = None
    sm: Optional[MediaFile] = None
    xs: Optional[MediaFile] = None
    single_file: Optional[MediaFile] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaDomainModel):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # ------------------------------------------------------------------
    # Resolution selection
    # ------------------------------------------------------------------

    @property
    def media_file(self) -> Optional[MediaFile]:
        """Playback asset: single file, then hd, md, sm, xs."""
        return _first(self.single_file, self.hd, self.md, self.sm, self.xs)

    @property
    def preview_file(self) -> Optional[MediaFile]:
        """Thumbnail asset: single file, then sm, xs, md, hd."""
        return _first(self.single_file, self.sm, self.xs, self.md, self.hd)

    @property
    def compact_file(self) -> Optional[MediaFile]:
        return _first(self.single_file, self.md, self.hd, self.sm, self.xs)

    @property
    def is_ad(self) -> bool:
        return self.type is MediaType.AD

    # ------------------------------------------------------------------
    # Sizing
    # ------------------------------------------------------------------

    def preview_sizing_for(self, height: float):
        from klipy.layout.sizing import preview_sizing_for

        return preview_sizing_for(self, height)

    def sizing_in_box(self, max_width: Optional[float] = None, max_height: Optional[float] = None):
        from klipy.layout.sizing import item_sizing_in_box

        return item_sizing_in_box(self, max_width=max_width, max_height=max_height)

    # ------------------------------------------------------------------
    # Wire mapping
    # ------------------------------------------------------------------

    @classmethod
    def from_wire(
        cls,
        raw: Dict[str, Any],
        default_type: MediaType = MediaType.GIF,
        slot: Optional[Tuple[int, int]] = None,
    ) -> "MediaDomainModel":
        """
        Decode one feed item.

        ``slot`` is the item's ``(page, position)`` and only matters for ad
        slots without an id.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"media item must be an object, got {type(raw).__name__}")

        media_type = MediaType(raw.get("type") or default_type.value)

        if media_type is MediaType.AD:
            content = str(raw.get("content") or "")
            ad_props = AdContentProperties(
                width=int(raw.get("width") or 0),
                height=int(raw.get("height") or 0),
                content=content,
            )
            return cls(
                id=int(raw["id"]) if raw.get("id") is not None else _ad_id(slot),
                title=str(raw.get("title") or ""),
                slug=str(raw.get("slug") or ""),
                type=media_type,
                ad_content_properties=ad_props,
            )

        files = raw.get("file") or {}
        tiers: Dict[str, Optional[MediaFile]] = {t: None for t in _TIERS}
        single_file = None
        if any(t in files for t in _TIERS):
            for tier in _TIERS:
                if files.get(tier):
                    tiers[tier] = MediaFile.from_wire(files[tier])
        elif "gif" in files:
            single_file = MediaFile.from_wire(files)

        return cls(
            id=int(raw["id"]),
            title=str(raw.get("title") or ""),
            slug=str(raw["slug"]),
            type=media_type,
            blur_preview=raw.get("blur_preview"),
            single_file=single_file,
            **tiers,
        )

    def to_wire(self) -> Dict[str, Any]:
        if self.is_ad:
            props = self.ad_content_properties
            return {
                "id": self.id,
                "type": self.type.value,
                "content": props.content if props else "",
                "width": props.width if props else 0,
                "height": props.height if props else 0,
            }

        if self.single_file is not None:
            files = self.single_file.to_wire()
        else:
            files = {
                tier: getattr(self, tier).to_wire()
                for tier in _TIERS
                if getattr(self, tier) is not None
            }
        out: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "type": self.type.value,
            "file": files,
        }
        if self.blur_preview is not None:
            out["blur_preview"] = self.blur_preview
        return out


def _first(*files: Optional[MediaFile]) -> Optional[MediaFile]:
    for f in files:
        if f is not None:
            return f
    return None


def media_page_from_wire(
    payload: Dict[str, Any],
    default_type: MediaType = MediaType.GIF,
) -> PaginatedResult[MediaDomainModel]:
    """
    Decode a feed page, numbering id-less ad slots by page and position.
    """
    page = int(payload["data"]["current_page"])
    positions = itertools.count()

    def decode(raw: Any) -> MediaDomainModel:
        return MediaDomainModel.from_wire(raw, default_type, slot=(page, next(positions)))

    return PaginatedResult.from_wire(payload, decode)
