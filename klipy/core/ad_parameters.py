"""
Ad / device parameters appended to every request.

The ad server sizes interleaved ad slots from these values, so they travel
with feed requests (query string) and tracking calls (JSON body) alike.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


AD_MIN_WIDTH = 50
AD_MIN_HEIGHT = 50
AD_MAX_HEIGHT = 200
AD_HORIZONTAL_INSET = 20


@dataclass(frozen=True)
class DeviceInfo:
    os: str
    os_version: int
    make: str
    model: str
    screen_width: int
    screen_height: int
    pixel_ratio: int = 1
    advertising_id: Optional[str] = None
    language: str = "EN"


class AdParameters:
    """Builds the ``ad-*`` parameter set for one device."""

    def __init__(self, device: DeviceInfo):
        self.device = device

    def as_dict(self) -> Dict[str, Any]:
        d = self.device
        params: Dict[str, Any] = {
            # Device info
            "ad-os": d.os,
            "ad-osv": d.os_version,
            "ad-make": d.make,
            "ad-model": d.model,
            "ad-device-w": d.screen_width,
            "ad-device-h": d.screen_height,
            "ad-pxratio": d.pixel_ratio,

            # Ad dimensions
            "ad-min-width": AD_MIN_WIDTH,
            "ad-max-width": d.screen_width - AD_HORIZONTAL_INSET,
            "ad-min-height": AD_MIN_HEIGHT,
            "ad-max-height": AD_MAX_HEIGHT,

            "ad-language": d.language,
        }
        if d.advertising_id:
            params["ad-ifa"] = d.advertising_id
        return params

    async def parameters(self) -> Dict[str, Any]:
        return self.as_dict()


def merge_ad_parameters(
    params: Optional[Mapping[str, Any]],
    ad_params: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    """
    Merge ad parameters into request parameters.

    Keys already present in ``params`` always win over ad-supplied ones.
    """
    merged = dict(ad_params or {})
    collisions = set(merged) & set(params or {})
    if collisions:
        logger.debug(f"Ad parameters shadowed by request parameters: {sorted(collisions)}")
    merged.update(params or {})
    return merged
