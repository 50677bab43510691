from dataclasses import dataclass


@dataclass(frozen=True)
class ApGain:
    """AP available at a portal.

    Attributes:
        friendly_ap: AP for a friendly agent filling the portal up.
        enemy_ap: AP for an enemy agent destroying and recapturing it.
        destroy_ap: Resonator, link and field destruction combined.
        destroy_reso_ap: Resonator destruction alone.
        capture_ap: Capturing the emptied portal from scratch.
    """

    friendly_ap: int
    enemy_ap: int
    destroy_ap: int
    destroy_reso_ap: int
    capture_ap: int
