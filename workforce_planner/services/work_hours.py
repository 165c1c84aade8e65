# workforce_planner/services/work_hours.py

import math
from typing import Dict

from ..models.domain import WorkHoursBreakdown, AlertLevel
from ..utils.helpers import round2
from .constants import (
    WORK_TYPE_DISTRIBUTION,
    ALERT_THRESHOLDS,
    SHIFT_HOURS,
    WORK_HOURS_BUFFER,
)


def calculate_work_hours(
    orders: int,
    avg_processing_minutes: float,
    efficiency: float = 1.0,
) -> float:
    """
    Work hours for `orders` at `avg_processing_minutes` each, scaled by the
    packing-method efficiency factor.

    The buffered figure is computed but the returned hours are un-buffered;
    callers that want the 15% buffer apply it themselves.
    """
    base_hours = (orders * avg_processing_minutes) / 60
    adjusted_hours = base_hours * efficiency
    with_buffer = adjusted_hours * WORK_HOURS_BUFFER  # noqa: F841  (not applied)
    return round2(adjusted_hours)


def distribute_work_hours(total_hours: float) -> WorkHoursBreakdown:
    """Split total hours 70/20/5/5 into pick / pack / moving / return."""
    return WorkHoursBreakdown(
        pick=round2(total_hours * WORK_TYPE_DISTRIBUTION["pick"]),
        pack=round2(total_hours * WORK_TYPE_DISTRIBUTION["pack"]),
        moving=round2(total_hours * WORK_TYPE_DISTRIBUTION["moving"]),
        return_=round2(total_hours * WORK_TYPE_DISTRIBUTION["return"]),
        total=total_hours,
    )


def calculate_staff_needed(hours: float, shift_hours: float = SHIFT_HOURS) -> int:
    """Headcount for `hours` of work; a partial shift still needs a full person."""
    return math.ceil(hours / shift_hours)


def determine_alert_level(contractor_needed: int, gap_total: int) -> AlertLevel:
    """
    Thresholds:
      critical: contractors >= 100 or gap >= 60
      warning:  contractors >= 50  or gap >= 30
    """
    if (
        contractor_needed >= ALERT_THRESHOLDS["contractor_critical"]
        or gap_total >= ALERT_THRESHOLDS["gap_critical"]
    ):
        return AlertLevel.CRITICAL
    if (
        contractor_needed >= ALERT_THRESHOLDS["contractor_warning"]
        or gap_total >= ALERT_THRESHOLDS["gap_warning"]
    ):
        return AlertLevel.WARNING
    return AlertLevel.OK


def work_type_split(total_hours: float) -> Dict[str, float]:
    """Un-rounded 70/20/5/5 split, used by the legacy calculation."""
    return {k: total_hours * share for k, share in WORK_TYPE_DISTRIBUTION.items()}
