from dataclasses import dataclass
from typing import Tuple

from portal_intel.components.link import LinkEndpoint


@dataclass(frozen=True)
class Field:
    """Triangular control field anchored on three portals.

    Attributes:
        points:
            The three vertices. Order carries no meaning for membership.
    """

    points: Tuple[LinkEndpoint, LinkEndpoint, LinkEndpoint]

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the field stays hashable.
        points = tuple(self.points)
        if len(points) != 3:
            raise ValueError(f"Field needs exactly 3 points, got {len(points)}")
        object.__setattr__(self, "points", points)
