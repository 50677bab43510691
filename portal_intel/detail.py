"""Portal detail source.

The map client keeps full portal records fetched on demand in a separate
cache. Lookups here only need ``get(guid)``; anything with that method
satisfies :class:`PortalDetailSource`.
"""

from typing import Mapping, Optional, Protocol

from pyrsistent import PMap, pmap

from portal_intel.components import PortalDetail
from portal_intel.types import PortalGUID


class PortalDetailSource(Protocol):
    def get(self, guid: PortalGUID) -> Optional[PortalDetail]: ...


class InMemoryPortalDetails:
    """Detail source backed by a persistent map.

    ``put`` replaces the internal map rather than mutating it, so a reader
    holding ``entries`` keeps a stable view.
    """

    def __init__(
        self, entries: Optional[Mapping[PortalGUID, PortalDetail]] = None
    ) -> None:
        self.entries: PMap[PortalGUID, PortalDetail] = pmap(entries or {})

    def get(self, guid: PortalGUID) -> Optional[PortalDetail]:
        return self.entries.get(guid)

    def put(self, guid: PortalGUID, detail: PortalDetail) -> None:
        self.entries = self.entries.set(guid, detail)

    def __len__(self) -> int:
        return len(self.entries)
