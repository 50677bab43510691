from dataclasses import dataclass
from typing import Optional

from portal_intel.types import E6


@dataclass(frozen=True)
class PortalDetail:
    """Full portal record fetched out of band and kept by the detail cache.

    Only the coordinate is used here; the entry may be stale.
    """

    lat_e6: E6
    lng_e6: E6
    title: Optional[str] = None
    team: Optional[str] = None
    res_count: Optional[int] = None
