from klipy.core.config import KlipyConfig
from klipy.core.context import KlipyContext
from klipy.core.media_service import MediaService

__all__ = [
    "KlipyConfig",
    "KlipyContext",
    "MediaService",
]
