"""Link and field membership queries.

Plain scans over the live ``link`` and ``field`` stores. Results only reflect
what the map layer has materialized, so counts may undershoot what the full
portal details would report.
"""

from dataclasses import dataclass
from typing import List, Tuple

from portal_intel.state import State
from portal_intel.types import FieldGUID, LinkGUID, PortalGUID


@dataclass(frozen=True)
class PortalLinks:
    """Links touching a portal, split by direction.

    Attributes:
        in_: Links whose destination is the portal.
        out: Links whose origin is the portal.
    """

    in_: Tuple[LinkGUID, ...] = ()
    out: Tuple[LinkGUID, ...] = ()

    def __len__(self) -> int:
        return len(self.in_) + len(self.out)


def get_portal_links(state: State, guid: PortalGUID) -> PortalLinks:
    """Return incoming and outgoing live links of ``guid``.

    A link from a portal to itself would be listed in both directions.
    """
    incoming: List[LinkGUID] = []
    outgoing: List[LinkGUID] = []
    for link_guid, link in state.link.items():
        if link.origin.guid == guid:
            outgoing.append(link_guid)
        if link.destination.guid == guid:
            incoming.append(link_guid)
    return PortalLinks(in_=tuple(incoming), out=tuple(outgoing))


def get_portal_links_count(state: State, guid: PortalGUID) -> int:
    return len(get_portal_links(state, guid))


def get_portal_fields(state: State, guid: PortalGUID) -> List[FieldGUID]:
    """Return live fields having ``guid`` as one of their vertices."""
    return [
        field_guid
        for field_guid, field in state.field.items()
        if any(point.guid == guid for point in field.points)
    ]


def get_portal_fields_count(state: State, guid: PortalGUID) -> int:
    return len(get_portal_fields(state, guid))
