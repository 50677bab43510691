from typing import Dict, List, Sequence, Tuple

from pyrsistent import pmap

from portal_intel.components import Field, Link, LinkEndpoint, Portal, Position
from portal_intel.state import State
from portal_intel.types import FieldGUID, LinkGUID, PortalGUID

E6Pair = Tuple[int, int]


class FakeClock:
    """Manually advanced clock for deterministic cache timestamps."""

    def __init__(self, start: float = 1000.0, step: float = 1.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current


def endpoint(guid: PortalGUID, pos: E6Pair) -> LinkEndpoint:
    return LinkEndpoint(guid=guid, position=Position(*pos))


def make_link(origin: Tuple[PortalGUID, E6Pair], dest: Tuple[PortalGUID, E6Pair]) -> Link:
    return Link(origin=endpoint(*origin), destination=endpoint(*dest))


def make_field(points: Sequence[Tuple[PortalGUID, E6Pair]]) -> Field:
    return Field(points=tuple(endpoint(guid, pos) for guid, pos in points))


def make_map_state(
    portals: Dict[PortalGUID, Tuple[E6Pair, int]] | None = None,
    links: Dict[LinkGUID, Link] | None = None,
    fields: Dict[FieldGUID, Field] | None = None,
) -> State:
    """Build a snapshot from ``{guid: ((lat_e6, lng_e6), res_count)}`` plus links/fields."""
    portal: Dict[PortalGUID, Portal] = {}
    position: Dict[PortalGUID, Position] = {}
    for guid, (pos, res_count) in (portals or {}).items():
        portal[guid] = Portal(res_count=res_count)
        position[guid] = Position(*pos)
    return State(
        portal=pmap(portal),
        position=pmap(position),
        link=pmap(links or {}),
        field=pmap(fields or {}),
    )


def make_triangle_state() -> Tuple[State, List[PortalGUID]]:
    """Three live portals A, B, C with links A->B, B->C, C->A and field F over them."""
    a, b, c = "A", "B", "C"
    coords: Dict[PortalGUID, E6Pair] = {
        a: (10000000, 20000000),
        b: (10001000, 20000000),
        c: (10000000, 20001000),
    }
    state = make_map_state(
        portals={a: (coords[a], 8), b: (coords[b], 4), c: (coords[c], 0)},
        links={
            "L1": make_link((a, coords[a]), (b, coords[b])),
            "L2": make_link((b, coords[b]), (c, coords[c])),
            "L3": make_link((c, coords[c]), (a, coords[a])),
        },
        fields={"F": make_field([(a, coords[a]), (b, coords[b]), (c, coords[c])])},
    )
    return state, [a, b, c]
