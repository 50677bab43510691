"""AP gain estimates.

Derived only from the summary data on screen: resonator count, plus the links
and fields the map currently shows for the portal. AP for upgrading
resonators or deploying mods is not counted.
"""

from typing import Optional

from portal_intel.components import ApGain
from portal_intel.config import DEFAULT_AP_REWARDS, ApRewards
from portal_intel.state import State
from portal_intel.types import PortalGUID
from portal_intel.utils.relations import get_portal_fields_count, get_portal_links_count

MAX_RESONATORS = 8


def portal_ap_gain_maths(
    res_count: int,
    link_count: int,
    field_count: int,
    rewards: ApRewards = DEFAULT_AP_REWARDS,
) -> ApGain:
    """Compute AP available at a portal from its counts.

    Inputs are not validated; counts outside ``0..8`` resonators or negative
    link/field counts give extrapolated, meaningless numbers.

    Args:
        res_count (int): Deployed resonators, 0..8.
        link_count (int): Links attached to the portal.
        field_count (int): Fields anchored on the portal.
        rewards (ApRewards): Reward table.

    Returns:
        ApGain: Friendly and enemy AP breakdown.
    """
    deploy_ap = (MAX_RESONATORS - res_count) * rewards.deploy_resonator
    if res_count == 0:
        deploy_ap += rewards.capture_portal
    if res_count != MAX_RESONATORS:
        deploy_ap += rewards.completion_bonus
    friendly_ap = deploy_ap

    destroy_reso_ap = res_count * rewards.destroy_resonator
    destroy_link_ap = link_count * rewards.destroy_link
    destroy_field_ap = field_count * rewards.destroy_field
    capture_ap = (
        rewards.capture_portal
        + MAX_RESONATORS * rewards.deploy_resonator
        + rewards.completion_bonus
    )
    destroy_ap = destroy_reso_ap + destroy_link_ap + destroy_field_ap

    return ApGain(
        friendly_ap=friendly_ap,
        enemy_ap=destroy_ap + capture_ap,
        destroy_ap=destroy_ap,
        destroy_reso_ap=destroy_reso_ap,
        capture_ap=capture_ap,
    )


def get_portal_ap_gain(
    state: State, guid: PortalGUID, rewards: ApRewards = DEFAULT_AP_REWARDS
) -> Optional[ApGain]:
    """Return the AP estimate for a live portal, or ``None`` if not live."""
    portal = state.portal.get(guid)
    if portal is None:
        return None
    return portal_ap_gain_maths(
        portal.res_count,
        get_portal_links_count(state, guid),
        get_portal_fields_count(state, guid),
        rewards,
    )
