"""portal_intel.components
=========================

Aggregate import surface for the value objects stored in a
:class:`portal_intel.state.State` snapshot or returned by queries::

    from portal_intel.components import Position, Portal, Link, Field

All components are frozen ``@dataclass`` value objects with no behavior beyond
small conversions.
"""

from .ap_gain import ApGain
from .detail import PortalDetail
from .field import Field
from .link import Link, LinkEndpoint
from .portal import Portal
from .position import Position

__all__ = [
    "ApGain",
    "Field",
    "Link",
    "LinkEndpoint",
    "Portal",
    "PortalDetail",
    "Position",
]
