from __future__ import annotations

from dibapi.models.cache import CacheEntry
from dibapi.models.content import ContentPayload, HeadData, HeadItems

__all__ = [
    # cache
    "CacheEntry",
    # content
    "ContentPayload",
    "HeadData",
    "HeadItems",
]
