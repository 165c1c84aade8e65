# workforce_planner/services/kpis.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

import pandas as pd
from sqlmodel import Session, select

from ..models.forecast import CalendarEvent, DailyForecast
from ..utils.helpers import round_half_up
from .forecast import DEFAULT_BASELINE_ORDERS
from .workforce_store import latest_calculation

ACCURACY_WINDOW_DAYS = 7
DEFAULT_ACCURACY = 85.0


@dataclass
class KPIValue:
    name: str
    value: float
    unit: str
    target: float | None
    alert_status: str  # "GREEN" | "AMBER" | "RED"
    detail: Optional[dict] = None


def _next_peak(session: Session, today: date) -> CalendarEvent | None:
    return session.exec(
        select(CalendarEvent)
        .where(CalendarEvent.event_date > today, CalendarEvent.is_peak == True)  # noqa: E712
        .order_by(CalendarEvent.event_date)
    ).first()


def forecast_accuracy(session: Session, today: date) -> float:
    """100 - MAPE over forecasts with recorded actuals in the last week."""
    rows = session.exec(
        select(DailyForecast).where(
            DailyForecast.actual_orders != None,  # noqa: E711
            DailyForecast.forecast_date >= today - timedelta(days=ACCURACY_WINDOW_DAYS),
            DailyForecast.forecast_date <= today,
        )
    ).all()
    df = pd.DataFrame(
        [{"forecast": r.final_forecast, "actual": r.actual_orders} for r in rows if r.actual_orders],
        columns=["forecast", "actual"],
    )
    if df.empty:
        return DEFAULT_ACCURACY
    mape = ((df["forecast"] - df["actual"]).abs() * 100.0 / df["actual"]).mean()
    return 100.0 - min(float(mape), 100.0)


def compute_kpis(session: Session, today: Optional[date] = None) -> List[KPIValue]:
    """
    Dashboard tiles:

      - Today's forecast orders
      - Next peak day (days until)
      - Today's workforce gap
      - Forecast accuracy %
    """
    today = today or date.today()

    # ---------- 1) Today's forecast ----------
    forecast = session.get(DailyForecast, today)
    today_orders = forecast.final_forecast if forecast else 0
    kpi_forecast = KPIValue(
        name="Today's Forecast",
        value=float(today_orders),
        unit="orders",
        target=None,
        alert_status="AMBER" if forecast and forecast.is_peak_day else "GREEN",
    )

    # ---------- 2) Next peak day ----------
    peak = _next_peak(session, today)
    if peak:
        days_until = (peak.event_date - today).days
        if days_until > 14:
            peak_alert = "GREEN"
        elif days_until > 7:
            peak_alert = "AMBER"
        else:
            peak_alert = "RED"
        kpi_peak = KPIValue(
            name="Next Peak Day",
            value=float(days_until),
            unit="days",
            target=None,
            alert_status=peak_alert,
            detail={
                "date": peak.event_date.isoformat(),
                "name": peak.event_name,
                "days_until": days_until,
                "forecast": int(round_half_up(peak.expected_multiplier * DEFAULT_BASELINE_ORDERS)),
            },
        )
    else:
        kpi_peak = KPIValue(
            name="Next Peak Day", value=0.0, unit="days", target=None, alert_status="GREEN"
        )

    # ---------- 3) Workforce gap ----------
    calc = latest_calculation(session, today)
    gap = calc.gap_total if calc else 0
    if gap >= 60:
        gap_alert = "RED"
    elif gap >= 30:
        gap_alert = "AMBER"
    else:
        gap_alert = "GREEN"
    kpi_gap = KPIValue(
        name="Workforce Gap",
        value=float(gap),
        unit="staff",
        target=0.0,
        alert_status=gap_alert,
    )

    # ---------- 4) Forecast accuracy ----------
    accuracy = forecast_accuracy(session, today)
    if accuracy >= 90.0:
        acc_alert = "GREEN"
    elif accuracy >= 80.0:
        acc_alert = "AMBER"
    else:
        acc_alert = "RED"
    kpi_accuracy = KPIValue(
        name="Forecast Accuracy %",
        value=round(accuracy, 2),
        unit="%",
        target=90.0,
        alert_status=acc_alert,
    )

    return [kpi_forecast, kpi_peak, kpi_gap, kpi_accuracy]
