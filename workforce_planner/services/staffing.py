# workforce_planner/services/staffing.py

import math
from typing import Dict

from ..models.domain import StaffAllocation, StaffBreakdown
from .constants import STAFF_TYPE_DISTRIBUTION, CONTRACTOR_BUFFER


def ceil_share(total: float, share: float) -> int:
    """ceil(total * share), ignoring float noise such as 10 * 0.7 = 7.000000000000001."""
    return math.ceil(round(total * share, 6))


def _tier(needed: int, available: int) -> StaffAllocation:
    return StaffAllocation(needed=needed, available=available, gap=max(0, needed - available))


def allocate_staff(total_staff_needed: int, availability: Dict[str, int]) -> StaffBreakdown:
    """
    Match required headcount against the roster, tier by tier.

    Needed per tier is ceil(total * share) at 70% boxme / 20% veteran /
    10% seasonal, so the tiers can add up to slightly more than the total.
    Gaps are clamped at zero; contractors cover the summed gap plus 20%.
    """
    boxme = _tier(
        ceil_share(total_staff_needed, STAFF_TYPE_DISTRIBUTION["boxme"]),
        availability.get("boxme", 0),
    )
    veteran = _tier(
        ceil_share(total_staff_needed, STAFF_TYPE_DISTRIBUTION["veteran"]),
        availability.get("veteran", 0),
    )
    seasonal = _tier(
        ceil_share(total_staff_needed, STAFF_TYPE_DISTRIBUTION["seasonal"]),
        availability.get("seasonal", 0),
    )

    total_gap = boxme.gap + seasonal.gap + veteran.gap

    return StaffBreakdown(
        boxme=boxme,
        seasonal=seasonal,
        veteran=veteran,
        total_needed=total_staff_needed,
        total_available=boxme.available + seasonal.available + veteran.available,
        total_gap=total_gap,
        contractor_needed=ceil_share(total_gap, CONTRACTOR_BUFFER),
    )
