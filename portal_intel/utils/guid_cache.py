"""Position to portal GUID cache.

Remembers which portal was last seen at a given micro-degree coordinate so
that lookups by position can skip scanning the live collections. The cache is
an accelerator only: a miss means *unknown*, never *no portal there*.

Size is bounded by a garbage collector triggered from :meth:`record`. When the
running insertion counter exceeds ``gc_limit`` the entries are ranked by the
time they were *inserted* and only the newest ``gc_keep`` survive. Reads do
not refresh an entry, so a frequently queried but old coordinate can be
evicted before a fresh one-off insert.

Not thread safe; the map client runs on a single thread.
"""

import logging
import time
from typing import Callable, Dict, Optional, Tuple

from portal_intel.components import Position
from portal_intel.config import DEFAULT_GUID_CACHE_CONFIG, GuidCacheConfig
from portal_intel.types import PortalGUID

logger = logging.getLogger(__name__)

CacheEntry = Tuple[PortalGUID, float]


class GuidPositionCache:
    """Bounded mapping from ``Position`` to ``(guid, inserted_at)``."""

    def __init__(
        self,
        config: GuidCacheConfig = DEFAULT_GUID_CACHE_CONFIG,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self._clock = clock
        self._entries: Dict[Position, CacheEntry] = {}
        self._level = 0

    @property
    def level(self) -> int:
        """Insertions since the last GC, seeded with the surviving entry count."""
        return self._level

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, position: object) -> bool:
        return position in self._entries

    def lookup(self, position: Position) -> Optional[PortalGUID]:
        """Return the GUID last recorded at ``position``, if still cached."""
        entry = self._entries.get(position)
        if entry is None:
            return None
        return entry[0]

    def inserted_at(self, position: Position) -> Optional[float]:
        entry = self._entries.get(position)
        if entry is None:
            return None
        return entry[1]

    def record(self, guid: PortalGUID, position: Position) -> None:
        """Store ``guid`` at ``position``, replacing any previous entry."""
        self._entries[position] = (guid, self._clock())
        self._level += 1
        if self._level > self.config.gc_limit:
            self.collect()

    def collect(self) -> int:
        """Drop all but the ``gc_keep`` most recently inserted entries.

        Returns:
            int: Number of entries removed.
        """
        # sorted() is stable, so equal timestamps keep dict insertion order.
        ranked = sorted(
            self._entries.items(), key=lambda item: item[1][1], reverse=True
        )
        dropped = ranked[self.config.gc_keep :]
        for position, _ in dropped:
            del self._entries[position]
        self._level = len(self._entries)
        logger.debug(
            "guid cache gc: dropped %d entries, kept %d",
            len(dropped),
            len(self._entries),
        )
        return len(dropped)

    def clear(self) -> None:
        self._entries.clear()
        self._level = 0
