# workforce_planner/services/routing.py
"""
Order routing across packing methods.

Each customer's forecast share is sliced by product-mix category, every
slice is routed to Field Table, Pre-pack or Standard, and the routed
orders/hours are summed per method.
"""

import math
from typing import Callable, Dict, List

from ..models.domain import (
    CustomerConfig,
    CustomerBreakdown,
    MethodBreakdown,
    OrderRoutingInput,
    PackingMethod,
    ProductMixEntry,
    RoutingDecision,
)
from ..utils.helpers import round2, round_half_up, to_vnd
from .constants import (
    DEFAULT_PRODUCTIVITY,
    PACKING_METHOD_EFFICIENCY,
    STAFF_COST_PER_HOUR,
    TIME_SAVED_PERCENTAGE,
)
from .work_hours import calculate_staff_needed, calculate_work_hours

# (total_orders, customers) -> order count per customer, same order as customers
DistributionStrategy = Callable[[int, List[CustomerConfig]], List[int]]

GENERAL_MIX = ProductMixEntry(
    category_code="GENERAL",
    category_name="General",
    percentage=100.0,
    avg_processing_minutes=DEFAULT_PRODUCTIVITY["avg_processing_minutes"],
)


# ---------- distribution strategies ----------

def equal_split(total_orders: int, customers: List[CustomerConfig]) -> List[int]:
    """Same share for every customer; the integer remainder is dropped."""
    if not customers:
        return []
    per_customer = total_orders // len(customers)
    return [per_customer for _ in customers]


def weighted_split(weights: Dict[str, float]) -> DistributionStrategy:
    """
    Build a strategy that splits orders by customer weight (e.g. historical
    order share keyed by customer id). Customers without a weight get 0.
    Falls back to an equal split when no customer carries any weight.
    """

    def _split(total_orders: int, customers: List[CustomerConfig]) -> List[int]:
        total_weight = sum(max(0.0, weights.get(c.id, 0.0)) for c in customers)
        if total_weight <= 0:
            return equal_split(total_orders, customers)
        return [
            math.floor(total_orders * max(0.0, weights.get(c.id, 0.0)) / total_weight)
            for c in customers
        ]

    return _split


# ---------- single routing decision ----------

def route_orders(order: OrderRoutingInput, customer: CustomerConfig) -> RoutingDecision:
    """
    Pick the fastest packing method the order qualifies for:
    Field Table, then Pre-pack, then Standard (always eligible).
    """
    ops = customer.operations

    if ops.field_table_enabled:
        is_eligible = (
            order.sku_count <= ops.field_table_max_sku
            and order.item_count <= ops.field_table_max_items
            and order.weight_kg <= ops.field_table_max_weight
            and (len(ops.field_table_hero_skus) == 0 or order.is_hero_sku)
        )
        if is_eligible:
            return RoutingDecision(
                method=PackingMethod.FIELD_TABLE,
                orders=order.order_count,
                reason="Eligible for Field Table: Single SKU, lightweight, simple",
                eligible=True,
                time_saved_percentage=TIME_SAVED_PERCENTAGE[PackingMethod.FIELD_TABLE],
            )

    if ops.prepack_enabled and order.category_code:
        is_eligible = (
            order.category_code in ops.prepack_categories
            and order.weight_kg >= ops.prepack_min_weight
        )
        if is_eligible:
            return RoutingDecision(
                method=PackingMethod.PREPACK,
                orders=order.order_count,
                reason=f"Eligible for Pre-pack: {order.category_code} category, heavy item",
                eligible=True,
                time_saved_percentage=TIME_SAVED_PERCENTAGE[PackingMethod.PREPACK],
            )

    return RoutingDecision(
        method=PackingMethod.STANDARD,
        orders=order.order_count,
        reason="Standard processing required",
        eligible=True,
        time_saved_percentage=TIME_SAVED_PERCENTAGE[PackingMethod.STANDARD],
    )


# ---------- aggregation ----------

def _empty_totals() -> Dict[PackingMethod, Dict[str, float]]:
    return {m: {"orders": 0, "hours": 0.0} for m in PackingMethod}


def route_customer_orders(
    customer_orders: int,
    customer: CustomerConfig,
) -> Dict[PackingMethod, Dict[str, float]]:
    """
    Route one customer's orders slice by slice over its product mix.

    Returns {method: {"orders": int, "hours": float}} with un-rounded hours.
    """
    totals = _empty_totals()
    product_mix = customer.product_mix or [GENERAL_MIX]

    for product in product_mix:
        product_orders = math.floor(customer_orders * (product.percentage / 100))

        # Per-slice order shape is not known at forecast level: assume a
        # single light item.
        routing = route_orders(
            OrderRoutingInput(
                order_count=product_orders,
                customer_id=customer.id,
                category_code=product.category_code,
                sku_count=1,
                item_count=1,
                weight_kg=0.5,
            ),
            customer,
        )

        hours = calculate_work_hours(
            product_orders,
            product.avg_processing_minutes,
            PACKING_METHOD_EFFICIENCY[routing.method],
        )
        totals[routing.method]["orders"] += product_orders
        totals[routing.method]["hours"] += hours

    return totals


def _to_breakdown(
    totals: Dict[PackingMethod, Dict[str, float]],
    total_orders: int,
) -> List[MethodBreakdown]:
    breakdown: List[MethodBreakdown] = []
    for method in PackingMethod:
        data = totals.get(method)
        if not data or data["orders"] <= 0:
            continue
        percentage = (
            round_half_up(data["orders"] / total_orders * 100, 1) if total_orders else 0.0
        )
        breakdown.append(
            MethodBreakdown(
                method=method,
                orders=int(data["orders"]),
                hours=round2(data["hours"]),
                staff=calculate_staff_needed(data["hours"]),
                cost=0,  # filled in by the cost analysis
                percentage=percentage,
            )
        )
    return breakdown


def route_all_orders(
    total_orders: int,
    customers: List[CustomerConfig],
    distribute: DistributionStrategy = equal_split,
) -> List[MethodBreakdown]:
    """
    Route the whole forecast and return one MethodBreakdown per method that
    received orders.

    With no customer configuration at all, everything is processed as
    Standard at the default processing time. Floor truncation at each
    split means routed orders can sum to slightly less than total_orders.
    """
    if not customers:
        totals = {
            PackingMethod.STANDARD: {
                "orders": total_orders,
                "hours": calculate_work_hours(
                    total_orders, DEFAULT_PRODUCTIVITY["avg_processing_minutes"], 1.0
                ),
            }
        }
        return _to_breakdown(totals, total_orders)

    totals = _empty_totals()
    for customer, customer_orders in zip(customers, distribute(total_orders, customers)):
        for method, data in route_customer_orders(customer_orders, customer).items():
            totals[method]["orders"] += data["orders"]
            totals[method]["hours"] += data["hours"]

    return _to_breakdown(totals, total_orders)


def build_customer_breakdown(
    total_orders: int,
    customers: List[CustomerConfig],
    distribute: DistributionStrategy = equal_split,
) -> List[CustomerBreakdown]:
    """Per-customer view of the same routing, priced at the blended hourly rate."""
    blended_rate = (STAFF_COST_PER_HOUR["boxme"] + STAFF_COST_PER_HOUR["seasonal"]) / 2
    result: List[CustomerBreakdown] = []

    for customer, customer_orders in zip(customers, distribute(total_orders, customers)):
        totals = route_customer_orders(customer_orders, customer)
        hours = sum(t["hours"] for t in totals.values())
        result.append(
            CustomerBreakdown(
                customer_id=customer.id,
                customer_name=customer.name,
                orders=customer_orders,
                methods={
                    "field_table": int(totals[PackingMethod.FIELD_TABLE]["orders"]),
                    "prepack": int(totals[PackingMethod.PREPACK]["orders"]),
                    "standard": int(totals[PackingMethod.STANDARD]["orders"]),
                },
                hours=round2(hours),
                staff=calculate_staff_needed(hours),
                cost=to_vnd(hours * blended_rate),
            )
        )

    return result
