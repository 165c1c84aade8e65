# workforce_planner/services/costs.py

from typing import List

from ..models.domain import (
    CostAnalysis,
    CostBreakdown,
    MethodBreakdown,
    MethodCost,
    PackingMethod,
    SavingsPotential,
    StaffBreakdown,
    StaffTypeCost,
)
from ..utils.helpers import to_vnd
from .constants import (
    CONTRACTOR_COSTS,
    PACKING_METHOD_EFFICIENCY,
    SHIFT_HOURS,
    STAFF_COST_PER_HOUR,
)


def calculate_costs(staff: StaffBreakdown, total_hours: float) -> CostBreakdown:
    """
    Daily cost of the allocation: one shift per needed person at the tier
    rate, plus bonus and meal for every contractor.
    """
    regular_staff_cost = to_vnd(
        staff.boxme.needed * SHIFT_HOURS * STAFF_COST_PER_HOUR["boxme"]
        + staff.seasonal.needed * SHIFT_HOURS * STAFF_COST_PER_HOUR["seasonal"]
        + staff.veteran.needed * SHIFT_HOURS * STAFF_COST_PER_HOUR["veteran"]
    )
    contractor_bonus = to_vnd(staff.contractor_needed * CONTRACTOR_COSTS["bonus_per_person"])
    meal_cost = to_vnd(staff.contractor_needed * CONTRACTOR_COSTS["meal_per_person"])

    return CostBreakdown(
        regular_staff=regular_staff_cost,
        contractor_bonus=contractor_bonus,
        meals=meal_cost,
        total=regular_staff_cost + contractor_bonus + meal_cost,
    )


def contractor_extra_cost(staff: StaffBreakdown) -> int:
    """Bonus + meals for the contractors of a staff breakdown."""
    return staff.contractor_needed * (
        CONTRACTOR_COSTS["bonus_per_person"] + CONTRACTOR_COSTS["meal_per_person"]
    )


def _staff_type_cost(count: int, staff_type: str) -> StaffTypeCost:
    rate = STAFF_COST_PER_HOUR[staff_type]
    return StaffTypeCost(count=count, cost_per_hour=rate, total=count * SHIFT_HOURS * rate)


def calculate_cost_analysis(
    method_breakdown: List[MethodBreakdown],
    staff: StaffBreakdown,
    total_hours: float,
) -> CostAnalysis:
    """
    Itemized cost view by packing method and by staff type, plus the daily
    savings if all Standard hours ran at Field Table or Pre-pack speed.

    Method costs use a blended boxme/seasonal hourly rate and are reported
    alongside, not summed into, total_cost. The savings figures are upper
    bounds, not one feasible action.
    """
    blended_rate = (STAFF_COST_PER_HOUR["boxme"] + STAFF_COST_PER_HOUR["seasonal"]) / 2

    by_method = {m.value: MethodCost() for m in PackingMethod}
    for method in method_breakdown:
        by_method[method.method.value] = MethodCost(
            hours=method.hours,
            staff=method.staff,
            cost=to_vnd(method.hours * blended_rate),
        )

    by_staff_type = {
        "boxme": _staff_type_cost(staff.boxme.needed, "boxme"),
        "seasonal": _staff_type_cost(staff.seasonal.needed, "seasonal"),
        "veteran": _staff_type_cost(staff.veteran.needed, "veteran"),
        "contractor": _staff_type_cost(staff.contractor_needed, "contractor"),
    }
    total_cost = sum(c.total for c in by_staff_type.values())

    savings = SavingsPotential()
    standard = next(
        (m for m in method_breakdown if m.method == PackingMethod.STANDARD), None
    )
    if standard is not None:
        # Saved hours are priced per hour at the boxme rate
        hourly_value = STAFF_COST_PER_HOUR["boxme"]

        field_table_saved = standard.hours - standard.hours * PACKING_METHOD_EFFICIENCY[PackingMethod.FIELD_TABLE]
        prepack_saved = standard.hours - standard.hours * PACKING_METHOD_EFFICIENCY[PackingMethod.PREPACK]

        savings.field_table_boost = to_vnd(field_table_saved * hourly_value)
        savings.prepack_boost = to_vnd(prepack_saved * hourly_value)
        savings.total = savings.field_table_boost + savings.prepack_boost

    return CostAnalysis(
        by_method=by_method,
        by_staff_type=by_staff_type,
        total_cost=total_cost,
        savings_potential=savings,
    )


def apply_method_costs(
    method_breakdown: List[MethodBreakdown],
    analysis: CostAnalysis,
) -> List[MethodBreakdown]:
    """Copy of the method breakdown with each entry's cost filled in."""
    return [
        MethodBreakdown(
            method=m.method,
            orders=m.orders,
            hours=m.hours,
            staff=m.staff,
            cost=analysis.by_method[m.method.value].cost,
            percentage=m.percentage,
        )
        for m in method_breakdown
    ]
