from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ContentType(str, Enum):
    TRENDING = "trending"
    RECENTS = "recents"
    NONE = "none"


@dataclass(frozen=True)
class MediaCategory:
    name: str
    query: Optional[str] = None
    preview_url: Optional[str] = None
    type: ContentType = ContentType.NONE

    @property
    def search_term(self) -> str:
        return self.query or self.name


@dataclass(frozen=True)
class CategoriesDTO:
    locale: Optional[str]
    categories: List[MediaCategory] = field(default_factory=list)

    @classmethod
    def from_wire(cls, payload: Any) -> "CategoriesDTO":
        # data is either {"locale", "categories": [...]} or a bare list
        data = payload["data"]
        locale = None
        if isinstance(data, dict):
            locale = data.get("locale")
            raw_categories = data["categories"]
        else:
            raw_categories = data
        if not isinstance(raw_categories, list):
            raise TypeError("categories must be a list")

        categories = []
        for raw in raw_categories:
            if isinstance(raw, str):
                categories.append(MediaCategory(name=raw))
            else:
                categories.append(
                    MediaCategory(
                        name=str(raw["category"]),
                        query=raw.get("query"),
                        preview_url=raw.get("preview_url"),
                    )
                )
        return cls(locale=locale, categories=categories)

    def with_builtin_tabs(self) -> List[MediaCategory]:
        """Recents and Trending tabs followed by the server categories."""
        return [
            MediaCategory(name="Recents", type=ContentType.RECENTS),
            MediaCategory(name="Trending", type=ContentType.TRENDING),
            *self.categories,
        ]
