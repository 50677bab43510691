from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Portal:
    """Summary data for a portal currently materialized on the map.

    Attributes:
        res_count:
            Number of deployed resonators, 0..8.
        team:
            Owning faction code, if known.
        level:
            Portal level, if known.
        title:
            Display title, if the summary carried one.
    """

    res_count: int = 0
    team: Optional[str] = None
    level: Optional[int] = None
    title: Optional[str] = None
