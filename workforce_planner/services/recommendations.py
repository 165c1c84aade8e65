# workforce_planner/services/recommendations.py
"""
Rule-based recommendations for a workforce calculation.

Five independent generators (Field Table, Pre-pack, staff, cost, priority)
each return zero or more Recommendation objects; generate_all_recommendations
concatenates them and does a stable sort HIGH -> MEDIUM -> LOW.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import List, Optional

from ..models.domain import (
    CostAnalysis,
    CustomerConfig,
    MethodBreakdown,
    PackingMethod,
    PriorityBucket,
    Recommendation,
    RecommendationCategory as Category,
    RecommendationPriority as Priority,
    RecommendationType as RecType,
    StaffBreakdown,
)
from ..utils.helpers import round_half_up, to_vnd
from .constants import (
    ALERT_THRESHOLDS,
    DEFAULT_PRODUCTIVITY,
    HIRING_LEAD_TIME_DAYS,
    PACKING_METHOD_EFFICIENCY,
    SHIFT_HOURS,
    STAFF_COST_PER_HOUR,
)
from .costs import contractor_extra_cost

# Rule parameters
FIELD_TABLE_CATEGORIES = ("COSMETICS", "BABY")
FIELD_TABLE_MIN_SHARE = 30
FIELD_TABLE_MIN_ORDERS = 1000
FIELD_TABLE_HIGH_SAVINGS = 1_000_000
FIELD_TABLE_MIN_UTILIZATION = 20

PREPACK_CATEGORIES = ("BABY", "FOOD")
PREPACK_MIN_SHARE = 20
PREPACK_MIN_ORDERS = 500
PREPACK_HIGH_SAVINGS = 500_000
PREPACK_QUOTA_ALERT_PCT = 90
PREPACK_QUOTA_GROWTH = 1.5
PREPACK_SUGGESTED_QUOTA = 2000

BOXME_GAP_INSIGHT = 20
CONTRACTOR_COST_INSIGHT = 5_000_000
DAILY_SAVINGS_HIGH = 1_000_000
STANDARD_SHARE_INSIGHT = 0.7
P1_HIGH_VOLUME = 5000
DELAYABLE_SHARE_INSIGHT = 15

SAVINGS_HORIZON_DAYS = 30

PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


def _whole(value: float) -> int:
    """Whole number for messages, halves rounded up."""
    return int(round_half_up(value))


def _find_method(breakdown: List[MethodBreakdown], method: PackingMethod) -> Optional[MethodBreakdown]:
    return next((m for m in breakdown if m.method == method), None)


def _total_orders(breakdown: List[MethodBreakdown]) -> int:
    return sum(m.orders for m in breakdown)


def _switch_savings(potential_orders: int, efficiency: float):
    """(hours saved per day, VND saved over the savings horizon)."""
    current_hours = potential_orders * DEFAULT_PRODUCTIVITY["avg_processing_minutes"] / 60
    time_saved = current_hours - current_hours * efficiency
    cost_saved = to_vnd(
        time_saved * STAFF_COST_PER_HOUR["boxme"] * SAVINGS_HORIZON_DAYS
    )
    return time_saved, cost_saved


def generate_field_table_recommendations(
    customers: List[CustomerConfig],
    method_breakdown: List[MethodBreakdown],
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []
    standard = _find_method(method_breakdown, PackingMethod.STANDARD)
    field_table = _find_method(method_breakdown, PackingMethod.FIELD_TABLE)
    total_orders = _total_orders(method_breakdown)

    for customer in customers:
        if not customer.operations.field_table_enabled:
            single_sku_share = customer.category_share(*FIELD_TABLE_CATEGORIES)
            if single_sku_share > FIELD_TABLE_MIN_SHARE:
                potential_orders = (
                    math.floor(standard.orders * single_sku_share / 100) if standard else 0
                )
                if potential_orders > FIELD_TABLE_MIN_ORDERS:
                    time_saved, cost_saved = _switch_savings(
                        potential_orders, PACKING_METHOD_EFFICIENCY[PackingMethod.FIELD_TABLE]
                    )
                    recommendations.append(
                        Recommendation(
                            type=RecType.OPTIMIZATION,
                            category=Category.FIELD_TABLE,
                            priority=(
                                Priority.HIGH
                                if cost_saved > FIELD_TABLE_HIGH_SAVINGS
                                else Priority.MEDIUM
                            ),
                            message=f"Enable Field Table for {customer.name}",
                            impact={
                                "orders_affected": potential_orders,
                                "time_saved_hours": round_half_up(time_saved, 1),
                                "cost_saved_vnd": cost_saved,
                            },
                            action=f"Set field_table_enabled for customer {customer.code}",
                        )
                    )
        else:
            utilization = (field_table.orders / total_orders * 100) if field_table and total_orders else 0
            if utilization < FIELD_TABLE_MIN_UTILIZATION:
                recommendations.append(
                    Recommendation(
                        type=RecType.INSIGHT,
                        category=Category.FIELD_TABLE,
                        priority=Priority.LOW,
                        message=f"Field Table underutilized for {customer.name} ({_whole(utilization)}%)",
                        impact={"orders_affected": field_table.orders if field_table else 0},
                        action=f"Review SKU/weight limits or expand hero SKU list for customer {customer.code}",
                    )
                )

    return recommendations


def generate_prepack_recommendations(
    customers: List[CustomerConfig],
    method_breakdown: List[MethodBreakdown],
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []
    standard = _find_method(method_breakdown, PackingMethod.STANDARD)
    prepack = _find_method(method_breakdown, PackingMethod.PREPACK)

    for customer in customers:
        ops = customer.operations

        if not ops.prepack_enabled:
            heavy_share = customer.category_share(*PREPACK_CATEGORIES)
            if heavy_share > PREPACK_MIN_SHARE:
                potential_orders = (
                    math.floor(standard.orders * heavy_share / 100) if standard else 0
                )
                if potential_orders > PREPACK_MIN_ORDERS:
                    time_saved, cost_saved = _switch_savings(
                        potential_orders, PACKING_METHOD_EFFICIENCY[PackingMethod.PREPACK]
                    )
                    recommendations.append(
                        Recommendation(
                            type=RecType.OPTIMIZATION,
                            category=Category.PREPACK,
                            priority=(
                                Priority.HIGH if cost_saved > PREPACK_HIGH_SAVINGS else Priority.MEDIUM
                            ),
                            message=f"Enable Pre-pack for {customer.name}",
                            impact={
                                "orders_affected": potential_orders,
                                "time_saved_hours": round_half_up(time_saved, 1),
                                "cost_saved_vnd": cost_saved,
                            },
                            action=(
                                f"Set prepack_enabled for customer {customer.code} "
                                f"with a weekly quota of {PREPACK_SUGGESTED_QUOTA}"
                            ),
                        )
                    )

        if ops.prepack_enabled and ops.prepack_weekly_quota > 0:
            weekly_orders = prepack.orders * 7 if prepack else 0
            quota_utilization = weekly_orders / ops.prepack_weekly_quota * 100
            if quota_utilization > PREPACK_QUOTA_ALERT_PCT:
                recommendations.append(
                    Recommendation(
                        type=RecType.ALERT,
                        category=Category.PREPACK,
                        priority=Priority.MEDIUM,
                        message=(
                            f"Pre-pack quota almost full for {customer.name} "
                            f"({_whole(quota_utilization)}%)"
                        ),
                        # Orders over quota; 0 while still under it
                        impact={"orders_affected": max(0, math.floor(weekly_orders - ops.prepack_weekly_quota))},
                        action=(
                            "Increase prepack_weekly_quota to "
                            f"{math.ceil(ops.prepack_weekly_quota * PREPACK_QUOTA_GROWTH)}"
                        ),
                    )
                )

    return recommendations


def generate_staff_alerts(
    staff: StaffBreakdown,
    forecast_date: date,
    today: Optional[date] = None,
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []
    today = today or date.today()
    days_until = (forecast_date - today).days
    orders_at_risk = math.floor(
        staff.total_gap * SHIFT_HOURS * DEFAULT_PRODUCTIVITY["avg_orders_per_hour"]
    )

    if staff.total_gap >= ALERT_THRESHOLDS["gap_critical"]:
        recommendations.append(
            Recommendation(
                type=RecType.ALERT,
                category=Category.STAFF,
                priority=Priority.HIGH,
                message=f"Critical staff shortage on {forecast_date.isoformat()} ({days_until} days away)",
                impact={"gap_total": staff.total_gap, "orders_at_risk": orders_at_risk},
                action=(
                    f"Hire {staff.contractor_needed} contractors immediately. "
                    f"Lead time: {HIRING_LEAD_TIME_DAYS} days minimum."
                ),
            )
        )
    elif staff.total_gap >= ALERT_THRESHOLDS["gap_warning"]:
        hiring_date = forecast_date - timedelta(days=HIRING_LEAD_TIME_DAYS)
        recommendations.append(
            Recommendation(
                type=RecType.ALERT,
                category=Category.STAFF,
                priority=Priority.MEDIUM,
                message=f"Staff shortage warning for {forecast_date.isoformat()}",
                impact={"gap_total": staff.total_gap, "orders_at_risk": orders_at_risk},
                action=(
                    f"Plan to hire {staff.contractor_needed} contractors. "
                    f"Recommended hiring date: {hiring_date.isoformat()}"
                ),
            )
        )

    if staff.boxme.gap > BOXME_GAP_INSIGHT:
        recommendations.append(
            Recommendation(
                type=RecType.INSIGHT,
                category=Category.STAFF,
                priority=Priority.MEDIUM,
                message=f"Boxme staff shortage: {staff.boxme.gap} needed",
                impact={"gap_total": staff.boxme.gap},
                action="Consider hiring full-time Boxme staff or training seasonal workers",
            )
        )

    contractor_cost = contractor_extra_cost(staff)
    if contractor_cost > CONTRACTOR_COST_INSIGHT:
        recommendations.append(
            Recommendation(
                type=RecType.INSIGHT,
                category=Category.COST,
                priority=Priority.LOW,
                message=f"High contractor costs expected: {_whole(contractor_cost / 1_000_000)}M VND",
                impact={"cost_saved_vnd": contractor_cost},
                action="Consider negotiating bulk contractor rates or hiring permanent staff",
            )
        )

    return recommendations


def generate_cost_recommendations(
    cost_analysis: CostAnalysis,
    method_breakdown: List[MethodBreakdown],
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []

    daily_savings = cost_analysis.savings_potential.total
    if daily_savings > DAILY_SAVINGS_HIGH:
        recommendations.append(
            Recommendation(
                type=RecType.OPTIMIZATION,
                category=Category.COST,
                priority=Priority.HIGH,
                message=f"Potential cost savings: {round_half_up(daily_savings / 1_000_000, 1)}M VND/day",
                impact={"cost_saved_vnd": daily_savings * SAVINGS_HORIZON_DAYS},
                action="Enable Field Table and Pre-pack for eligible customers to achieve these savings",
            )
        )

    standard = _find_method(method_breakdown, PackingMethod.STANDARD)
    total_orders = _total_orders(method_breakdown)
    if standard and total_orders and standard.orders / total_orders > STANDARD_SHARE_INSIGHT:
        recommendations.append(
            Recommendation(
                type=RecType.INSIGHT,
                category=Category.COST,
                priority=Priority.MEDIUM,
                message=f"{_whole(standard.orders / total_orders * 100)}% orders use Standard packing",
                impact={"orders_affected": standard.orders},
                action="Review customer configurations to enable more efficient packing methods",
            )
        )

    return recommendations


def generate_priority_recommendations(buckets: List[PriorityBucket]) -> List[Recommendation]:
    recommendations: List[Recommendation] = []

    p1 = next((b for b in buckets if b.priority == 1), None)
    if p1 and p1.orders > P1_HIGH_VOLUME:
        recommendations.append(
            Recommendation(
                type=RecType.ALERT,
                category=Category.PRIORITY,
                priority=Priority.HIGH,
                message=f"High P1 (Instant) volume: {p1.orders} orders",
                impact={"orders_affected": p1.orders},
                action="Allocate best staff (Boxme + Veterans) to P1 orders. Process before 8am cutoff.",
            )
        )

    delayable = sum(b.orders for b in buckets if b.priority >= 5)
    total_orders = sum(b.orders for b in buckets)
    if delayable > 0 and total_orders:
        delayable_pct = delayable / total_orders * 100
        if delayable_pct > DELAYABLE_SHARE_INSIGHT:
            recommendations.append(
                Recommendation(
                    type=RecType.INSIGHT,
                    category=Category.PRIORITY,
                    priority=Priority.LOW,
                    message=f"{_whole(delayable_pct)}% orders are delayable (P5-P6)",
                    impact={"orders_affected": delayable},
                    action="Consider delaying non-urgent orders if capacity constrained",
                )
            )

    return recommendations


def generate_all_recommendations(
    customers: List[CustomerConfig],
    method_breakdown: List[MethodBreakdown],
    staff: StaffBreakdown,
    cost_analysis: CostAnalysis,
    forecast_date: date,
    priority_breakdown: Optional[List[PriorityBucket]] = None,
    today: Optional[date] = None,
) -> List[Recommendation]:
    recommendations: List[Recommendation] = []
    recommendations.extend(generate_field_table_recommendations(customers, method_breakdown))
    recommendations.extend(generate_prepack_recommendations(customers, method_breakdown))
    recommendations.extend(generate_staff_alerts(staff, forecast_date, today=today))
    recommendations.extend(generate_cost_recommendations(cost_analysis, method_breakdown))
    if priority_breakdown is not None:
        recommendations.extend(generate_priority_recommendations(priority_breakdown))

    # sorted() is stable: ties keep generator order
    return sorted(recommendations, key=lambda r: PRIORITY_ORDER[r.priority])
