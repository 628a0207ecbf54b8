from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from klipy.core.dto.media import MediaDomainModel


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    ZERO: ClassVar["Size"]

    @property
    def is_zero(self) -> bool:
        return self.width <= 0 or self.height <= 0


Size.ZERO = Size(0, 0)


def preview_sizing_for(item: MediaDomainModel, height: float) -> Size:
    """
    Size of ``item`` rendered at ``height``.

    Ads keep their declared size. Other items scale the preview gif's aspect
    ratio; anything degenerate comes back as ``Size.ZERO``.
    """
    if item.is_ad:
        props = item.ad_content_properties
        if props is None or props.width <= 0 or props.height <= 0:
            return Size.ZERO
        return Size(props.width, props.height)

    preview = item.preview_file
    if preview is None:
        return Size.ZERO

    content_width = preview.gif.width
    content_height = preview.gif.height
    if content_width <= 0 or content_height <= 0 or height <= 0:
        return Size.ZERO

    return Size(height * (content_width / content_height), height)


def fit_in_box(
    width: float,
    height: float,
    max_width: Optional[float] = None,
    max_height: Optional[float] = None,
) -> Size:
    """
    Scale ``width x height`` into a box, preserving aspect ratio.

    With both bounds the smaller ratio wins so the result fits entirely;
    with one bound only that ratio is used; with none the result is
    ``Size.ZERO``.
    """
    if width <= 0 or height <= 0:
        return Size.ZERO

    if max_width is not None and max_height is not None:
        scale = min(max_width / width, max_height / height)
    elif max_width is not None:
        scale = max_width / width
    elif max_height is not None:
        scale = max_height / height
    else:
        return Size.ZERO

    if scale <= 0:
        return Size.ZERO
    return Size(width * scale, height * scale)


def item_sizing_in_box(
    item: MediaDomainModel,
    max_width: Optional[float] = None,
    max_height: Optional[float] = None,
) -> Size:
    if item.is_ad:
        props = item.ad_content_properties
        if props is None:
            return Size.ZERO
        return fit_in_box(props.width, props.height, max_width, max_height)

    preview = item.preview_file
    if preview is None:
        return Size.ZERO
    return fit_in_box(preview.gif.width, preview.gif.height, max_width, max_height)
