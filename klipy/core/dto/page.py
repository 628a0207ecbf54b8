from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class GridMeta:
    item_min_width: int
    ad_max_resize_percent: int

    @classmethod
    def from_wire(cls, raw: Dict[str, Any]) -> "GridMeta":
        return cls(
            item_min_width=int(raw["item_min_width"]),
            ad_max_resize_percent=int(raw["ad_max_resize_percent"]),
        )

    def to_wire(self) -> Dict[str, Any]:
        return {
            "item_min_width": self.item_min_width,
            "ad_max_resize_percent": self.ad_max_resize_percent,
        }


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    One page of a feed, fresh per fetch.

    Merging pages into a growing list is the caller's job; nothing here
    caches or dedupes across pages.
    """

    items: List[T]
    current_page: int
    per_page: int
    has_next: bool
    grid_meta: GridMeta

    @classmethod
    def from_wire(cls, payload: Dict[str, Any], decode_item: Callable[[Any], T]) -> "PaginatedResult[T]":
        """
        Decode the ``{result, data: {data, current_page, ...}}`` envelope.
        """
        data = payload["data"]
        raw_items = data["data"]
        if not isinstance(raw_items, list):
            raise TypeError("paginated 'data' must be a list")
        return cls(
            items=[decode_item(raw) for raw in raw_items],
            current_page=int(data["current_page"]),
            per_page=int(data["per_page"]),
            has_next=bool(data["has_next"]),
            grid_meta=GridMeta.from_wire(data["meta"]),
        )

    def to_wire(self, encode_item: Callable[[T], Any], result: bool = True) -> Dict[str, Any]:
        return {
            "result": result,
            "data": {
                "data": [encode_item(item) for item in self.items],
                "current_page": self.current_page,
                "per_page": self.per_page,
                "has_next": self.has_next,
                "meta": self.grid_meta.to_wire(),
            },
        }
