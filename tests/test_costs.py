from workforce_planner.models.domain import MethodBreakdown, PackingMethod
from workforce_planner.services.costs import (
    apply_method_costs,
    calculate_cost_analysis,
    calculate_costs,
    contractor_extra_cost,
)
from workforce_planner.services.staffing import allocate_staff


def _staff():
    return allocate_staff(100, {"boxme": 50, "seasonal": 5, "veteran": 10})


def test_calculate_costs():
    costs = calculate_costs(_staff(), 800)
    assert costs.regular_staff == 19440000
    assert costs.contractor_bonus == 2100000
    assert costs.meals == 1260000
    assert costs.total == 22800000


def test_contractor_extra_cost():
    assert contractor_extra_cost(_staff()) == 42 * 80000


def test_cost_analysis_by_staff_type_and_total():
    breakdown = [MethodBreakdown(PackingMethod.STANDARD, orders=3000, hours=100.0, staff=13)]
    analysis = calculate_cost_analysis(breakdown, _staff(), 100.0)

    assert analysis.by_staff_type["boxme"].total == 14000000
    assert analysis.by_staff_type["contractor"].count == 42
    assert analysis.by_staff_type["contractor"].cost_per_hour == 22000
    assert analysis.by_staff_type["contractor"].total == 7392000
    assert analysis.total_cost == 26832000
    # independent of calculate_costs()
    assert analysis.total_cost != calculate_costs(_staff(), 100.0).total


def test_cost_analysis_by_method_and_savings():
    breakdown = [
        MethodBreakdown(PackingMethod.FIELD_TABLE, orders=1000, hours=20.0, staff=3),
        MethodBreakdown(PackingMethod.STANDARD, orders=3000, hours=100.0, staff=13),
    ]
    analysis = calculate_cost_analysis(breakdown, _staff(), 120.0)

    assert analysis.by_method["FIELD_TABLE"].cost == 450000
    assert analysis.by_method["STANDARD"].cost == 2250000
    assert analysis.by_method["PREPACK"].cost == 0
    # 70h and 50h saved, each priced at the boxme hourly rate
    assert analysis.savings_potential.field_table_boost == 1750000
    assert analysis.savings_potential.prepack_boost == 1250000
    assert analysis.savings_potential.total == 3000000


def test_no_savings_without_standard_volume():
    breakdown = [MethodBreakdown(PackingMethod.FIELD_TABLE, orders=1000, hours=20.0, staff=3)]
    analysis = calculate_cost_analysis(breakdown, _staff(), 20.0)
    assert analysis.savings_potential.total == 0


def test_apply_method_costs_returns_copies():
    breakdown = [MethodBreakdown(PackingMethod.STANDARD, orders=3000, hours=100.0, staff=13)]
    analysis = calculate_cost_analysis(breakdown, _staff(), 100.0)
    priced = apply_method_costs(breakdown, analysis)
    assert priced[0].cost == 2250000
    assert breakdown[0].cost == 0


def test_savings_priced_per_hour_not_per_shift():
    # one shift of Standard work: 5.6h and 4h saved at 25,000 VND/h
    breakdown = [MethodBreakdown(PackingMethod.STANDARD, orders=240, hours=8.0, staff=1)]
    savings = calculate_cost_analysis(breakdown, _staff(), 8.0).savings_potential
    assert savings.field_table_boost == 140000
    assert savings.prepack_boost == 100000
