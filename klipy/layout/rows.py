"""
Justified row packing.

Items are placed left to right at a fixed height; a row closes as soon as
the next item would push it past ``max_width``. Greedy and stable: input
order is never changed to improve packing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from klipy.core.dto.media import MediaDomainModel
from klipy.layout.sizing import preview_sizing_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaRow:
    items: Tuple[MediaDomainModel, ...]
    row_height: float
    row_width: float

    @property
    def id(self) -> str:
        return "-".join(str(item.id) for item in self.items)

    def possible_height(self, for_width: float) -> float:
        """Row height after scaling the row to ``for_width``."""
        if for_width <= 0 or self.row_width <= 0:
            return 0
        return self.row_height * (for_width / self.row_width)


def layout_rows(
    items: Iterable[MediaDomainModel],
    row_height: float,
    max_width: float,
) -> List[MediaRow]:
    rows: List[MediaRow] = []
    current: List[MediaDomainModel] = []
    current_width = 0.0
    current_height = row_height

    for item in items:
        size = preview_sizing_for(item, row_height)
        if size.is_zero:
            logger.debug(f"Skipping item {item.id}: degenerate size")
            continue

        if current and current_width + size.width > max_width:
            rows.append(MediaRow(tuple(current), current_height, current_width))
            current = []
            current_width = 0.0
            current_height = row_height

        current.append(item)
        current_width += size.width
        current_height = max(current_height, size.height)

    if current:
        rows.append(MediaRow(tuple(current), current_height, current_width))

    return rows
