# workforce_planner/services/customer_stats.py
"""
Per-customer order counts over the recent past, split by packing method.
"""

from datetime import date, timedelta
from typing import Any, Dict

import pandas as pd
from sqlmodel import Session, select

from ..models.customer import CustomerDailyOrders
from ..models.domain import PackingMethod
from ..utils.helpers import round2


def customer_order_stats(session: Session, customer_id: str, today: date) -> Dict[str, Any]:
    """
    Order totals for one customer: all time, today, trailing 7 and 30 days,
    the 30-day daily average, and all-time orders per packing method.
    """
    rows = session.exec(
        select(CustomerDailyOrders).where(CustomerDailyOrders.customer_id == customer_id)
    ).all()

    if not rows:
        empty = {
            "total_orders": 0,
            "orders_today": 0,
            "orders_this_week": 0,
            "orders_this_month": 0,
            "avg_per_day": 0.0,
        }
        empty.update({f"{m.value.lower()}_orders": 0 for m in PackingMethod})
        return empty

    df = pd.DataFrame(
        [{"order_date": r.order_date, "method": r.packing_method, "orders": r.orders} for r in rows]
    )

    def since(start: date) -> int:
        return int(df.loc[df["order_date"] >= start, "orders"].sum())

    month = since(today - timedelta(days=30))
    by_method = df.groupby("method")["orders"].sum()

    stats: Dict[str, Any] = {
        "total_orders": int(df["orders"].sum()),
        "orders_today": int(df.loc[df["order_date"] == today, "orders"].sum()),
        "orders_this_week": since(today - timedelta(days=7)),
        "orders_this_month": month,
        "avg_per_day": round2(month / 30),
    }
    for m in PackingMethod:
        stats[f"{m.value.lower()}_orders"] = int(by_method.get(m.value, 0))
    return stats
