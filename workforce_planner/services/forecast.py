# workforce_planner/services/forecast.py
"""
Baseline order forecast.

Not a model: trailing 30-day average, scaled by peak calendar events or a
weekend uplift, with a little noise. Good enough to drive the workforce
calculation until a real forecaster is plugged in.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
from sqlmodel import Session, select

from ..models.forecast import CalendarEvent, DailyForecast, OrderHistory
from .event_logger import log_event

DEFAULT_BASELINE_ORDERS = 15000
BASELINE_WINDOW_DAYS = 30
WEEKEND_MULTIPLIER = 1.3
NOISE_PCT = 0.05
LOWER_BOUND_FACTOR = 0.85
UPPER_BOUND_FACTOR = 1.2


def history_frame(session: Session, start: date, end: date) -> pd.DataFrame:
    """Daily actual orders in [start, end] as a DataFrame (order_date, orders)."""
    rows = session.exec(
        select(OrderHistory)
        .where(OrderHistory.order_date >= start, OrderHistory.order_date <= end)
        .order_by(OrderHistory.order_date)
    ).all()
    return pd.DataFrame(
        [{"order_date": r.order_date, "orders": r.orders} for r in rows],
        columns=["order_date", "orders"],
    )


def baseline_orders(session: Session, today: date) -> float:
    df = history_frame(session, today - timedelta(days=BASELINE_WINDOW_DAYS), today)
    if df.empty:
        return float(DEFAULT_BASELINE_ORDERS)
    return float(df["orders"].mean())


def _peak_events(session: Session, start: date, end: date) -> Dict[date, CalendarEvent]:
    events = session.exec(
        select(CalendarEvent).where(
            CalendarEvent.event_date >= start,
            CalendarEvent.event_date <= end,
            CalendarEvent.is_peak == True,  # noqa: E712
        )
    ).all()
    return {e.event_date: e for e in events}


def generate_forecasts(
    session: Session,
    horizon: int = 30,
    today: Optional[date] = None,
    rng: Optional[np.random.Generator] = None,
) -> List[DailyForecast]:
    """
    Create (or replace) DailyForecast rows for the next `horizon` days.
    """
    today = today or date.today()
    rng = rng or np.random.default_rng()

    base_avg = baseline_orders(session, today)
    peaks = _peak_events(session, today, today + timedelta(days=horizon))

    forecasts: List[DailyForecast] = []
    for i in range(1, horizon + 1):
        forecast_date = today + timedelta(days=i)
        peak = peaks.get(forecast_date)

        value = base_avg
        if peak is not None:
            value *= peak.expected_multiplier
        elif forecast_date.weekday() >= 5:
            value *= WEEKEND_MULTIPLIER

        value = int(round(value * rng.uniform(1 - NOISE_PCT, 1 + NOISE_PCT)))

        row = session.get(DailyForecast, forecast_date) or DailyForecast(
            forecast_date=forecast_date,
            baseline_forecast=0,
            final_forecast=0,
            lower_bound=0,
            upper_bound=0,
        )
        row.baseline_forecast = int(round(base_avg))
        row.final_forecast = value
        row.lower_bound = int(round(value * LOWER_BOUND_FACTOR))
        row.upper_bound = int(round(value * UPPER_BOUND_FACTOR))
        row.is_peak_day = peak is not None
        row.peak_multiplier = peak.expected_multiplier if peak is not None else 1.0
        row.notes = peak.event_name if peak is not None else None
        session.add(row)
        forecasts.append(row)

    log_event(
        session,
        "FORECAST_GENERATED",
        f"Generated {len(forecasts)} forecasts from baseline {round(base_avg)} orders/day.",
    )
    session.commit()
    for row in forecasts:
        session.refresh(row)
    return forecasts


def get_forecast_orders(session: Session, forecast_date: date) -> Optional[int]:
    row = session.get(DailyForecast, forecast_date)
    if row is None or not row.final_forecast:
        return None
    return row.final_forecast


def forecast_chart(session: Session, days: int = 30, today: Optional[date] = None) -> List[Dict]:
    """History for the last `days` days followed by forecasts for the next `days`."""
    today = today or date.today()
    chart: List[Dict] = []

    history = history_frame(session, today - timedelta(days=days), today)
    for rec in history.to_dict("records"):
        chart.append(
            {"date": rec["order_date"].isoformat(), "actual": int(rec["orders"]), "isPeak": False}
        )

    forecasts = session.exec(
        select(DailyForecast)
        .where(
            DailyForecast.forecast_date >= today,
            DailyForecast.forecast_date <= today + timedelta(days=days),
        )
        .order_by(DailyForecast.forecast_date)
    ).all()
    for f in forecasts:
        chart.append(
            {
                "date": f.forecast_date.isoformat(),
                "forecast": f.final_forecast,
                "lowerBound": f.lower_bound,
                "upperBound": f.upper_bound,
                "isPeak": f.is_peak_day,
                "peakLabel": f.notes,
            }
        )
    return chart
