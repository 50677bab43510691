from dataclasses import dataclass

from portal_intel.components.position import Position
from portal_intel.types import PortalGUID


@dataclass(frozen=True)
class LinkEndpoint:
    """A portal reference carried by a link or field.

    Links and fields embed the GUID and location of the portals they touch, so
    they can locate portals that are not rendered themselves.
    """

    guid: PortalGUID
    position: Position


@dataclass(frozen=True)
class Link:
    """Directed link from ``origin`` to ``destination``."""

    origin: LinkEndpoint
    destination: LinkEndpoint
