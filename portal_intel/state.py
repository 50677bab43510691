"""Immutable map snapshot.

This module defines the frozen :class:`State` object holding every entity the
map layer has currently materialized: portals, links and fields. Queries in
:mod:`portal_intel.utils` are pure functions over a ``State``; the map layer
builds a new snapshot whenever its data changes and hands it to callers.

Design notes:

* Collections are **persistent maps** (``pyrsistent.PMap``) keyed by GUID.
    A scan over a snapshot can never observe a half-applied update.
* A portal is *live* iff its GUID is a key of ``portal``. Its coordinate lives
    in the parallel ``position`` store.
* Links and fields carry their own copies of endpoint GUIDs and coordinates,
    so they may reference portals absent from ``portal``.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

from pyrsistent import PMap, pmap

from portal_intel.components import Field, Link, Portal, Position
from portal_intel.types import FieldGUID, LinkGUID, PortalGUID


@dataclass(frozen=True)
class State:
    """Read-only snapshot of the rendered map entities.

    Attributes:
        portal (PMap[PortalGUID, Portal]): Live portal summaries.
        position (PMap[PortalGUID, Position]): Live coordinate of each portal.
        link (PMap[LinkGUID, Link]): Live links.
        field (PMap[FieldGUID, Field]): Live fields.
    """

    portal: PMap[PortalGUID, Portal] = pmap()
    position: PMap[PortalGUID, Position] = pmap()
    link: PMap[LinkGUID, Link] = pmap()
    field: PMap[FieldGUID, Field] = pmap()

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse view of the non-empty stores, for diagnostics."""
        description: PMap[str, Any] = pmap()
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if len(value) == 0:
                continue
            description = description.set(name, value)
        return description


def make_state(
    portals: Optional[Iterable[Tuple[PortalGUID, Position, Portal]]] = None,
    links: Optional[Mapping[LinkGUID, Link]] = None,
    fields: Optional[Mapping[FieldGUID, Field]] = None,
) -> State:
    """Build a ``State`` from plain Python collections.

    Args:
        portals: ``(guid, position, portal)`` triples.
        links: Link GUID to ``Link``.
        fields: Field GUID to ``Field``.

    Returns:
        State: Snapshot with persistent copies of the inputs.
    """
    portal: dict[PortalGUID, Portal] = {}
    position: dict[PortalGUID, Position] = {}
    for guid, pos, data in portals or ():
        portal[guid] = data
        position[guid] = pos
    return State(
        portal=pmap(portal),
        position=pmap(position),
        link=pmap(links or {}),
        field=pmap(fields or {}),
    )
