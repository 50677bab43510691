"""Configuration constants.

Frozen dataclasses with module-level defaults. Pass a custom instance where a
caller needs different thresholds or rewards.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GuidCacheConfig:
    """Thresholds for the position-to-GUID cache garbage collector.

    Attributes:
        gc_limit: Run GC once the insertion counter exceeds this.
        gc_keep: Number of most recently inserted entries kept by GC.
    """

    gc_limit: int = 15000
    gc_keep: int = 10000

    def __post_init__(self) -> None:
        if self.gc_keep <= 0 or self.gc_limit <= 0:
            raise ValueError("gc_limit and gc_keep must be positive")
        if self.gc_keep > self.gc_limit:
            raise ValueError(
                f"gc_keep ({self.gc_keep}) must not exceed gc_limit ({self.gc_limit})"
            )


@dataclass(frozen=True)
class ApRewards:
    """AP reward table for portal actions."""

    deploy_resonator: int = 125
    capture_portal: int = 500
    completion_bonus: int = 250
    destroy_resonator: int = 75
    destroy_link: int = 187
    destroy_field: int = 750


DEFAULT_GUID_CACHE_CONFIG = GuidCacheConfig()
DEFAULT_AP_REWARDS = ApRewards()
