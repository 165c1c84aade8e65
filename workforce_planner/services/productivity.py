# workforce_planner/services/productivity.py
"""
Productivity standards: list, edit, and the average rate used by the
single-rate calculation.
"""

from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from ..models.workforce import ProductivityStandard
from ..utils.helpers import utcnow
from .constants import DEFAULT_PRODUCTIVITY
from .event_logger import log_event


def list_standards(
    session: Session,
    staff_level: Optional[str] = None,
    work_type: Optional[str] = None,
    product_group: Optional[str] = None,
) -> List[ProductivityStandard]:
    stmt = select(ProductivityStandard).where(ProductivityStandard.is_active == True)  # noqa: E712
    if staff_level:
        stmt = stmt.where(ProductivityStandard.staff_level == staff_level)
    if work_type:
        stmt = stmt.where(ProductivityStandard.work_type == work_type)
    if product_group:
        stmt = stmt.where(ProductivityStandard.product_group == product_group)
    stmt = stmt.order_by(
        ProductivityStandard.staff_level,
        ProductivityStandard.work_type,
        ProductivityStandard.product_group,
    )
    return session.exec(stmt).all()


def update_standard(
    session: Session,
    standard_id: int,
    changes: Dict[str, Any],
) -> Optional[ProductivityStandard]:
    """
    Apply field changes to one standard. Returns None when the id is unknown.
    """
    standard = session.get(ProductivityStandard, standard_id)
    if standard is None:
        return None

    for key, value in changes.items():
        setattr(standard, key, value)
    standard.updated_at = utcnow()
    session.add(standard)

    log_event(
        session,
        "PRODUCTIVITY_UPDATED",
        f"Productivity standard {standard_id} ({standard.staff_level}/{standard.work_type}) updated.",
        metadata={"fields": sorted(changes)},
    )
    session.commit()
    session.refresh(standard)
    return standard


def average_orders_per_hour(session: Session) -> float:
    """Mean orders/hour over active standards; the default rate when there are none."""
    rates = [s.orders_per_hour for s in list_standards(session)]
    if not rates:
        return float(DEFAULT_PRODUCTIVITY["avg_orders_per_hour"])
    return sum(rates) / len(rates)
