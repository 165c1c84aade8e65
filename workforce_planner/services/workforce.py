# workforce_planner/services/workforce.py
"""
Workforce calculation pipeline.

    forecast orders + customer configs
        -> route_all_orders()            method breakdown
        -> calculate_staff_needed()      headcount
        -> allocate_staff()              tier gaps / contractors
        -> allocate_by_priority()        (optional) P1..P6 buckets
        -> calculate_costs() / calculate_cost_analysis()
        -> generate_all_recommendations()

Every stage only reads what the previous ones produced; nothing here
touches the database.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Dict, List, Optional, Any

from ..models.domain import (
    AlertLevel,
    CustomerConfig,
    WorkforceCalculationResult,
    WorkforceSummary,
)
from ..utils.helpers import round2, to_vnd
from .constants import (
    CONTRACTOR_BUFFER,
    CONTRACTOR_COSTS,
    LEGACY_AVG_COST_PER_HOUR,
    SHIFT_HOURS,
    STAFF_TYPE_DISTRIBUTION,
    WORK_HOURS_BUFFER,
)
from .costs import apply_method_costs, calculate_cost_analysis, calculate_costs
from .priority import allocate_by_priority
from .recommendations import generate_all_recommendations
from .routing import (
    DistributionStrategy,
    build_customer_breakdown,
    equal_split,
    route_all_orders,
)
from .staffing import allocate_staff, ceil_share
from .work_hours import (
    calculate_staff_needed,
    determine_alert_level,
    distribute_work_hours,
    work_type_split,
)


def calculate_workforce(
    forecast_date: date,
    forecast_orders: int,
    customers: List[CustomerConfig],
    availability: Dict[str, int],
    customer_breakdown: bool = True,
    priority_analysis: bool = False,
    include_recommendations: bool = True,
    priority_distribution: Optional[Dict[int, float]] = None,
    distribute: DistributionStrategy = equal_split,
    today: Optional[date] = None,
) -> WorkforceCalculationResult:
    """
    Run the full v2 calculation for one forecast date.

    Args:
        forecast_date: Day being planned.
        forecast_orders: Resolved forecast order count (>= 0).
        customers: Active customer configurations; may be empty.
        availability: {"boxme", "seasonal", "veteran"} headcount on the roster.
        customer_breakdown: Add the per-customer routing view.
        priority_analysis: Add the P1..P6 buckets (and their recommendations).
        include_recommendations: Generate recommendations at all.
        priority_distribution: Override of the default P1..P6 shares.
        distribute: How forecast orders are split over customers.
        today: Reference date for "days away" in staff alerts.

    Returns:
        WorkforceCalculationResult, freshly built for this call.
    """
    method_breakdown = route_all_orders(forecast_orders, customers, distribute)

    total_hours = sum(m.hours for m in method_breakdown)
    total_staff = calculate_staff_needed(total_hours, SHIFT_HOURS)

    staff = allocate_staff(total_staff, availability)
    work_hours = distribute_work_hours(total_hours)

    priority_breakdown = None
    if priority_analysis:
        priority_breakdown = allocate_by_priority(
            forecast_orders, total_hours, total_staff, staff, priority_distribution
        )

    cost_breakdown = calculate_costs(staff, total_hours)
    cost_analysis = calculate_cost_analysis(method_breakdown, staff, total_hours)
    method_breakdown = apply_method_costs(method_breakdown, cost_analysis)

    alert_level = determine_alert_level(staff.contractor_needed, staff.total_gap)

    recommendations = []
    if include_recommendations:
        recommendations = generate_all_recommendations(
            customers,
            method_breakdown,
            staff,
            cost_analysis,
            forecast_date,
            priority_breakdown=priority_breakdown,
            today=today,
        )

    return WorkforceCalculationResult(
        forecast_date=forecast_date.isoformat(),
        summary=WorkforceSummary(
            total_orders=forecast_orders,
            total_hours=round2(total_hours),
            total_staff=total_staff,
            total_cost=cost_breakdown.total,
            alert_level=alert_level,
            contractor_needed=staff.contractor_needed,
        ),
        breakdown_by_method=method_breakdown,
        staff_allocation=staff,
        work_hours=work_hours,
        cost_breakdown=cost_breakdown,
        cost_analysis=cost_analysis,
        recommendations=recommendations,
        breakdown_by_customer=(
            build_customer_breakdown(forecast_orders, customers, distribute)
            if customer_breakdown
            else None
        ),
        breakdown_by_priority=priority_breakdown,
    )


def calculate_legacy_workforce(
    total_orders: int,
    avg_orders_per_hour: float,
    availability: Dict[str, int],
) -> Dict[str, Any]:
    """
    Single-rate calculation behind the first version of the dashboard.

    Hours carry an explicit 15% buffer here, and the gap is computed on
    total headcount rather than per tier.
    """
    total_hours = (total_orders / avg_orders_per_hour) * WORK_HOURS_BUFFER
    work_hours = work_type_split(total_hours)
    work_hours["total"] = total_hours

    total_staff = math.ceil(total_hours / SHIFT_HOURS)
    staff_needed = {
        "boxme": ceil_share(total_staff, STAFF_TYPE_DISTRIBUTION["boxme"]),
        "veteran": ceil_share(total_staff, STAFF_TYPE_DISTRIBUTION["veteran"]),
        "seasonal": ceil_share(total_staff, STAFF_TYPE_DISTRIBUTION["seasonal"]),
        "total": total_staff,
    }

    total_available = sum(availability.get(k, 0) for k in ("boxme", "seasonal", "veteran"))
    gap_total = max(0, total_staff - total_available)
    contractor_needed = ceil_share(gap_total, CONTRACTOR_BUFFER)

    costs = {
        "regular": to_vnd(total_staff * SHIFT_HOURS * LEGACY_AVG_COST_PER_HOUR),
        "contractor_bonus": to_vnd(contractor_needed * CONTRACTOR_COSTS["bonus_per_person"]),
        "meals": to_vnd(contractor_needed * CONTRACTOR_COSTS["meal_per_person"]),
    }
    costs["total"] = costs["regular"] + costs["contractor_bonus"] + costs["meals"]

    if contractor_needed > 100:
        alert_level = AlertLevel.CRITICAL
    elif contractor_needed > 50:
        alert_level = AlertLevel.WARNING
    else:
        alert_level = AlertLevel.OK

    return {
        "total_orders": total_orders,
        "work_hours": work_hours,
        "staff_needed": staff_needed,
        "availability": dict(availability),
        "gap_total": gap_total,
        "contractor_needed": contractor_needed,
        "costs": costs,
        "alert_level": alert_level.value,
    }
