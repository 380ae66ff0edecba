"""
lichta.engines.cache
--------------------
Caller-owned store of built lunar year tables.

Tables are immutable and fully determined by their key, so two threads
building the same key produce equal values; insertion is insert-once and
reads take no lock.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

from ..core.types import LunarYear

logger = logging.getLogger(__name__)

# (year, utc_offset, midnight_tolerance, apparent_longitude)
CacheKey = Tuple[int, float, float, bool]


class LunarYearCache:
    def __init__(self) -> None:
        self._tables: Dict[CacheKey, LunarYear] = {}
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Optional[LunarYear]:
        return self._tables.get(key)

    def put(self, key: CacheKey, table: LunarYear) -> LunarYear:
        """Store `table` unless the key is already present; return the stored table."""
        with self._lock:
            return self._tables.setdefault(key, table)

    def get_or_build(self, key: CacheKey, build: Callable[[], LunarYear]) -> LunarYear:
        table = self._tables.get(key)
        if table is not None:
            return table
        logger.debug("cache miss for %s", key)
        return self.put(key, build())

    def clear(self) -> None:
        with self._lock:
            self._tables.clear()

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, key: object) -> bool:
        return key in self._tables
