# workforce_planner/services/customer_config.py
"""
Builds CustomerConfig / availability inputs for the calculation from the
database tables.
"""

import json
from datetime import date
from typing import Dict, List, Optional

from sqlmodel import Session, select

from ..config import settings
from ..models.customer import Customer, CustomerOperations, CustomerProductMix
from ..models.domain import CustomerConfig, OperationsConfig, ProductMixEntry
from ..models.workforce import StaffAvailability

# Used when a product-mix row has no processing time recorded
DEFAULT_MIX_PROCESSING_MINUTES = 2.5


def _json_list(raw: Optional[str]) -> List[str]:
    """Decode a JSON list column; anything unreadable counts as empty."""
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return [str(v) for v in value] if isinstance(value, list) else []


def to_operations_config(ops: Optional[CustomerOperations]) -> OperationsConfig:
    if ops is None:
        return OperationsConfig()
    return OperationsConfig(
        field_table_enabled=bool(ops.field_table_enabled),
        field_table_max_sku=ops.field_table_max_sku or 1,
        field_table_max_items=ops.field_table_max_items or 5,
        field_table_max_weight=ops.field_table_max_weight or 1.0,
        field_table_hero_skus=_json_list(ops.field_table_hero_skus),
        prepack_enabled=bool(ops.prepack_enabled),
        prepack_categories=_json_list(ops.prepack_categories),
        prepack_min_weight=ops.prepack_min_weight if ops.prepack_min_weight is not None else 5.0,
        prepack_weekly_quota=ops.prepack_weekly_quota or 0,
        requires_camera=bool(ops.requires_camera),
        quality_check_level=ops.quality_check_level or "STANDARD",
    )


def to_customer_config(session: Session, customer: Customer) -> CustomerConfig:
    ops = session.get(CustomerOperations, customer.id)
    mix_rows = session.exec(
        select(CustomerProductMix).where(CustomerProductMix.customer_id == customer.id)
    ).all()

    return CustomerConfig(
        id=customer.id,
        code=customer.code,
        name=customer.name,
        tier=customer.tier or "STANDARD",
        operations=to_operations_config(ops),
        product_mix=[
            ProductMixEntry(
                category_code=m.category_code,
                category_name=m.category_name,
                percentage=m.percentage,
                avg_processing_minutes=m.avg_processing_minutes or DEFAULT_MIX_PROCESSING_MINUTES,
            )
            for m in mix_rows
        ],
    )


def load_customer_configs(session: Session) -> List[CustomerConfig]:
    """All active customers with their operations rules and product mix."""
    customers = session.exec(
        select(Customer).where(Customer.is_active == True).order_by(Customer.code)  # noqa: E712
    ).all()
    return [to_customer_config(session, c) for c in customers]


def load_staff_availability(session: Session, work_date: date) -> Dict[str, int]:
    """Roster headcount for a date, or the configured defaults if none is recorded."""
    row = session.get(StaffAvailability, work_date)
    if row is None:
        return settings.default_availability()
    return {"boxme": row.boxme, "seasonal": row.seasonal, "veteran": row.veteran}
