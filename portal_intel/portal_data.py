"""Portal data tools.

Caller-facing surface for UI panels and scoring tools. Every function takes
the current :class:`portal_intel.state.State` snapshot explicitly; position
lookups additionally share one process-wide :class:`GuidPositionCache`
created at import time, unless the caller passes its own.

Examples
--------
>>> from portal_intel.portal_data import (
...     find_portal_guid_by_position_e6,
...     push_portal_guid_position_cache,
... )
>>> from portal_intel.state import State
>>> push_portal_guid_position_cache("p1", 10000000, 20000000)
>>> find_portal_guid_by_position_e6(State(), 10000000, 20000000)
'p1'
"""

from typing import Optional

from portal_intel.components import Position
from portal_intel.state import State
from portal_intel.types import E6, PortalGUID
from portal_intel.utils import lookup
from portal_intel.utils.ap_gain import get_portal_ap_gain, portal_ap_gain_maths
from portal_intel.utils.guid_cache import GuidPositionCache
from portal_intel.utils.lookup import find_portal_latlng
from portal_intel.utils.relations import (
    get_portal_fields,
    get_portal_fields_count,
    get_portal_links,
    get_portal_links_count,
)

guid_position_cache = GuidPositionCache()


def find_portal_guid_by_position_e6(
    state: State,
    lat_e6: E6,
    lng_e6: E6,
    cache: Optional[GuidPositionCache] = None,
) -> Optional[PortalGUID]:
    """Return the GUID of the portal at the given coordinate, or ``None``."""
    return lookup.find_portal_guid_by_position_e6(
        state, lat_e6, lng_e6, cache if cache is not None else guid_position_cache
    )


def push_portal_guid_position_cache(
    guid: PortalGUID,
    lat_e6: E6,
    lng_e6: E6,
    cache: Optional[GuidPositionCache] = None,
) -> None:
    """Remember that ``guid`` was seen at the given coordinate."""
    target = cache if cache is not None else guid_position_cache
    target.record(guid, Position(lat_e6, lng_e6))


def push_state_guid_positions(
    state: State, cache: Optional[GuidPositionCache] = None
) -> int:
    """Record every portal location the snapshot knows about.

    Live portals, field vertices and link endpoints are pushed in that order,
    so a live portal's own coordinate is written first and any endpoint that
    shares it afterwards.

    Returns:
        int: Number of records pushed.
    """
    target = cache if cache is not None else guid_position_cache
    pushed = 0
    for guid in state.portal:
        position = state.position.get(guid)
        if position is None:
            continue
        target.record(guid, position)
        pushed += 1
    for field in state.field.values():
        for point in field.points:
            target.record(point.guid, point.position)
            pushed += 1
    for link in state.link.values():
        for endpoint in (link.origin, link.destination):
            target.record(endpoint.guid, endpoint.position)
            pushed += 1
    return pushed


__all__ = [
    "find_portal_guid_by_position_e6",
    "find_portal_latlng",
    "get_portal_ap_gain",
    "get_portal_fields",
    "get_portal_fields_count",
    "get_portal_links",
    "get_portal_links_count",
    "guid_position_cache",
    "portal_ap_gain_maths",
    "push_portal_guid_position_cache",
    "push_state_guid_positions",
]
