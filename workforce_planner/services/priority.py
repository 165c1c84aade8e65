# workforce_planner/services/priority.py
"""
Priority-based split of the day's work into six delivery-urgency buckets.

Staff tiers are handed out from a pool seeded with the *available*
headcount. Buckets draw in order P1 -> P6, so when the pool runs dry the
least urgent buckets get less than their target.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.domain import PriorityBucket, StaffBreakdown, StaffType
from ..utils.helpers import round2
from .constants import (
    DEFAULT_PRIORITY_DISTRIBUTION,
    PRIORITY_BUCKETS,
    PRIORITY_TIER_SPLIT,
    SHIFT_HOURS,
)
from .work_hours import calculate_staff_needed


POOL_TIERS = (StaffType.BOXME.value, StaffType.VETERAN.value, StaffType.SEASONAL.value)


@dataclass
class StaffPool:
    """Remaining headcount per tier; lives for one allocation call only."""
    boxme: int
    seasonal: int
    veteran: int

    @classmethod
    def from_breakdown(cls, staff: StaffBreakdown) -> "StaffPool":
        return cls(
            boxme=staff.boxme.available,
            seasonal=staff.seasonal.available,
            veteran=staff.veteran.available,
        )

    def draw(self, tier: str, target: int) -> int:
        """Take up to `target` people of a tier out of the pool."""
        remaining = getattr(self, tier)
        taken = max(0, min(target, remaining))
        setattr(self, tier, remaining - taken)
        return taken


def split_headcount(staff_needed: int, split: Dict[str, float]) -> Dict[str, int]:
    """
    Tier targets for one bucket that add up to exactly `staff_needed`.

    Each tier gets floor(staff_needed * share); the people left over go to
    the largest fractional parts, ties broken in split order.
    """
    raw = {tier: round(staff_needed * share, 6) for tier, share in split.items()}
    targets = {tier: math.floor(value) for tier, value in raw.items()}
    leftover = staff_needed - sum(targets.values())
    by_remainder = sorted(raw, key=lambda tier: raw[tier] - targets[tier], reverse=True)
    for tier in by_remainder[:max(0, leftover)]:
        targets[tier] += 1
    return targets


def allocate_by_priority(
    total_orders: int,
    total_hours: float,
    total_staff: int,
    staff_breakdown: StaffBreakdown,
    priority_distribution: Optional[Dict[int, float]] = None,
) -> List[PriorityBucket]:
    """
    Split orders and hours over P1..P6 and assign staff tiers to each bucket.

    Args:
        total_orders: Forecast orders for the day.
        total_hours: Routed work hours for the day.
        total_staff: Overall headcount needed (kept for callers that report it
            next to the buckets; bucket staffing is derived from bucket hours).
        staff_breakdown: Output of allocate_staff(); only `available` is used.
        priority_distribution: {priority: share}, defaults to
            10/20/35/20/10/5. Missing priorities get a 0 share.

    Returns:
        Six PriorityBucket objects, P1 first.
    """
    distribution = priority_distribution or DEFAULT_PRIORITY_DISTRIBUTION
    pool = StaffPool.from_breakdown(staff_breakdown)
    buckets: List[PriorityBucket] = []

    for bucket in PRIORITY_BUCKETS:
        priority = bucket["priority"]
        share = distribution.get(priority, 0.0)

        orders = math.floor(round(total_orders * share, 6))
        hours = round2(total_hours * share)
        staff_needed = calculate_staff_needed(hours, SHIFT_HOURS)

        targets = split_headcount(staff_needed, PRIORITY_TIER_SPLIT[priority])
        allocated = {tier: pool.draw(tier, targets[tier]) for tier in POOL_TIERS}

        buckets.append(
            PriorityBucket(
                priority=priority,
                name=bucket["name"],
                description=bucket["description"],
                cutoff_time=bucket["cutoff_time"],
                orders=orders,
                hours=hours,
                staff_needed=staff_needed,
                staff_allocated={
                    "boxme": allocated["boxme"],
                    "seasonal": allocated["seasonal"],
                    "veteran": allocated["veteran"],
                },
            )
        )

    return buckets
