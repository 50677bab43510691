"""Portal location lookups.

Resolve a coordinate to a portal GUID, or a GUID to a coordinate, using every
source of portal locations available: the position cache, live portals, the
detail cache, and the endpoints embedded in fields and links. Each lookup is
an ordered series of tiers returning on the first hit; an empty source is
simply a tier that finds nothing.

Live portals only cover what is rendered right now. Links and fields often
reference portals outside that set, which is why they are searched at all.
"""

from typing import Optional

from portal_intel.components import Position
from portal_intel.detail import PortalDetailSource
from portal_intel.state import State
from portal_intel.types import E6, PortalGUID
from portal_intel.utils.guid_cache import GuidPositionCache


def find_portal_guid_by_position(
    state: State, position: Position, cache: Optional[GuidPositionCache] = None
) -> Optional[PortalGUID]:
    """Return the GUID of the portal at ``position``, or ``None`` if unknown.

    Tiers, in order: position cache, live portals, field vertices, link
    endpoints (origin before destination).

    Args:
        state (State): Current map snapshot.
        position (Position): Exact coordinate to resolve.
        cache (GuidPositionCache | None): Position cache to consult first.

    Returns:
        PortalGUID | None: The first match found, else ``None``.
    """
    if cache is not None:
        guid = cache.lookup(position)
        if guid is not None:
            return guid

    for guid, pos in state.position.items():
        if guid in state.portal and pos == position:
            return guid

    for field in state.field.values():
        for point in field.points:
            if point.position == position:
                return point.guid

    for link in state.link.values():
        if link.origin.position == position:
            return link.origin.guid
        if link.destination.position == position:
            return link.destination.guid

    return None


def find_portal_guid_by_position_e6(
    state: State,
    lat_e6: E6,
    lng_e6: E6,
    cache: Optional[GuidPositionCache] = None,
) -> Optional[PortalGUID]:
    """Micro-degree convenience wrapper for :func:`find_portal_guid_by_position`."""
    return find_portal_guid_by_position(state, Position(lat_e6, lng_e6), cache)


def find_portal_latlng(
    state: State,
    guid: PortalGUID,
    details: Optional[PortalDetailSource] = None,
) -> Optional[Position]:
    """Return the best known coordinate of portal ``guid``.

    A live portal's own position always wins. Otherwise the (possibly stale)
    detail cache is tried, then field vertices, then link endpoints.

    Args:
        state (State): Current map snapshot.
        guid (PortalGUID): Portal to locate.
        details (PortalDetailSource | None): Out-of-band portal detail cache.

    Returns:
        Position | None: Coordinate if any source knows the portal, else ``None``.
    """
    if guid in state.portal:
        live = state.position.get(guid)
        if live is not None:
            return live

    if details is not None:
        detail = details.get(guid)
        if detail is not None:
            return Position(detail.lat_e6, detail.lng_e6)

    for field in state.field.values():
        for point in field.points:
            if point.guid == guid:
                return point.position

    for link in state.link.values():
        if link.origin.guid == guid:
            return link.origin.position
        if link.destination.guid == guid:
            return link.destination.position

    return None
