"""Position component.

Immutable micro-degree coordinates. Stored in ``State.position`` keyed by
portal GUID, and embedded in link endpoints and field vertices.
"""

from dataclasses import dataclass
from typing import Tuple

from portal_intel.types import E6


@dataclass(frozen=True)
class Position:
    """Geographic coordinate in integer micro-degrees.

    Two positions are equal iff both components match exactly; there is no
    floating point tolerance.

    Attributes:
        lat_e6: Latitude x 1,000,000.
        lng_e6: Longitude x 1,000,000.
    """

    lat_e6: E6
    lng_e6: E6

    def to_latlng(self) -> Tuple[float, float]:
        """Return ``(lat, lng)`` in degrees."""
        return self.lat_e6 / 1e6, self.lng_e6 / 1e6

    @classmethod
    def from_latlng(cls, lat: float, lng: float) -> "Position":
        """Build a position from degrees, rounding to the nearest micro-degree."""
        return cls(round(lat * 1e6), round(lng * 1e6))
