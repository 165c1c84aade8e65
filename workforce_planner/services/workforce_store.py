# workforce_planner/services/workforce_store.py

import json
from datetime import date
from typing import Any, Dict, Optional

from sqlmodel import Session, select

from ..config import settings
from ..models.domain import AlertLevel, WorkforceCalculationResult
from ..models.workforce import HiringAlert, WorkforceRecommendation
from ..utils.helpers import format_vnd, round2
from .event_logger import log_event


def maybe_raise_hiring_alert(
    session: Session,
    forecast_date: date,
    contractor_needed: int,
    alert_level: str,
    today: Optional[date] = None,
) -> Optional[HiringAlert]:
    """
    Queue a pending hiring alert when the day is not "ok" and still within
    the hiring window (1..N days ahead).
    """
    if alert_level == AlertLevel.OK.value:
        return None

    today = today or date.today()
    days_until = (forecast_date - today).days
    if not (0 < days_until <= settings.hiring_alert_window_days):
        return None

    alert = HiringAlert(
        forecast_date=forecast_date,
        alert_date=today,
        days_until_event=days_until,
        contractors_needed=contractor_needed,
        alert_level=alert_level,
    )
    session.add(alert)
    log_event(
        session,
        "HIRING_ALERT",
        f"{alert_level.upper()}: {contractor_needed} contractors needed for "
        f"{forecast_date.isoformat()} ({days_until} days away).",
        metadata={"forecast_date": forecast_date.isoformat(), "contractors_needed": contractor_needed},
    )
    return alert


def save_calculation(
    session: Session,
    forecast_date: date,
    result: WorkforceCalculationResult,
    today: Optional[date] = None,
) -> WorkforceRecommendation:
    """Persist a v2 calculation and raise a hiring alert if warranted."""
    summary = result.summary
    row = WorkforceRecommendation(
        forecast_date=forecast_date,
        method="v2",
        total_orders=summary.total_orders,
        total_hours=summary.total_hours,
        total_staff=summary.total_staff,
        gap_total=result.staff_allocation.total_gap,
        contractor_needed=summary.contractor_needed,
        total_cost=summary.total_cost,
        alert_level=summary.alert_level.value,
        result_json=json.dumps(result.to_dict()),
    )
    session.add(row)

    log_event(
        session,
        "WORKFORCE_CALCULATED",
        f"v2 calculation for {forecast_date.isoformat()}: {summary.total_orders} orders, "
        f"{summary.total_staff} staff, cost {format_vnd(summary.total_cost)}, "
        f"alert={summary.alert_level.value}.",
        metadata={"gap_total": result.staff_allocation.total_gap, "total_cost": summary.total_cost},
    )
    maybe_raise_hiring_alert(
        session, forecast_date, summary.contractor_needed, summary.alert_level.value, today=today
    )

    session.commit()
    session.refresh(row)
    return row


def save_legacy_calculation(
    session: Session,
    forecast_date: date,
    result: Dict[str, Any],
    today: Optional[date] = None,
) -> WorkforceRecommendation:
    row = WorkforceRecommendation(
        forecast_date=forecast_date,
        method="legacy",
        total_orders=result["total_orders"],
        total_hours=round2(result["work_hours"]["total"]),
        total_staff=result["staff_needed"]["total"],
        gap_total=result["gap_total"],
        contractor_needed=result["contractor_needed"],
        total_cost=result["costs"]["total"],
        alert_level=result["alert_level"],
        result_json=json.dumps(result),
    )
    session.add(row)
    maybe_raise_hiring_alert(
        session, forecast_date, result["contractor_needed"], result["alert_level"], today=today
    )
    session.commit()
    session.refresh(row)
    return row


def latest_calculation(session: Session, forecast_date: date) -> Optional[WorkforceRecommendation]:
    return session.exec(
        select(WorkforceRecommendation)
        .where(WorkforceRecommendation.forecast_date == forecast_date)
        .order_by(WorkforceRecommendation.created_at.desc())
    ).first()
