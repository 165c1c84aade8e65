# workforce_planner/api/workforce.py
"""
Workforce calculation endpoints.
"""

from datetime import date
from typing import Dict, List, Optional

from dateutil import parser as dateparser
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlmodel import Session, select

from ..database import get_session
from ..models.workforce import HiringAlert, WorkforceRecommendation
from ..services.customer_config import load_customer_configs, load_staff_availability
from ..services.forecast import get_forecast_orders
from ..services.productivity import average_orders_per_hour
from ..services.workforce import calculate_legacy_workforce, calculate_workforce
from ..services.workforce_store import save_calculation, save_legacy_calculation

router = APIRouter(tags=["workforce"])


# ============ Request Models ============

class WorkforceCalculateRequest(BaseModel):
    forecast_date: Optional[str] = None
    forecast_orders: Optional[int] = Field(default=None, ge=0)
    customer_breakdown: bool = True
    priority_analysis: bool = False
    include_recommendations: bool = True
    priority_distribution: Optional[Dict[int, float]] = None


class LegacyCalculateRequest(BaseModel):
    forecast_date: Optional[str] = None
    avg_orders_per_hour: Optional[float] = Field(default=None, gt=0)


def _parse_forecast_date(raw: Optional[str]) -> date:
    if not raw:
        raise HTTPException(status_code=400, detail="forecast_date is required")
    try:
        return dateparser.isoparse(raw).date()
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid forecast_date: {raw}")


def _resolve_forecast_orders(session: Session, forecast_date: date, supplied: Optional[int]) -> int:
    if supplied is not None:
        return supplied
    orders = get_forecast_orders(session, forecast_date)
    if orders is None:
        raise HTTPException(
            status_code=404,
            detail=(
                f"No forecast found for date {forecast_date.isoformat()}. "
                "Please generate forecast first."
            ),
        )
    return orders


# ============ Endpoints ============

@router.post("/api/workforce/calculate/v2")
def workforce_calculate_v2(
    body: WorkforceCalculateRequest,
    session: Session = Depends(get_session),
):
    """
    Route forecast orders across packing methods and return staffing,
    costs and recommendations for the date.
    """
    forecast_date = _parse_forecast_date(body.forecast_date)
    total_orders = _resolve_forecast_orders(session, forecast_date, body.forecast_orders)

    customers = load_customer_configs(session)
    if not customers:
        raise HTTPException(
            status_code=500,
            detail="No customer configurations found. Please seed customer data.",
        )

    availability = load_staff_availability(session, forecast_date)

    result = calculate_workforce(
        forecast_date=forecast_date,
        forecast_orders=total_orders,
        customers=customers,
        availability=availability,
        customer_breakdown=body.customer_breakdown,
        priority_analysis=body.priority_analysis,
        include_recommendations=body.include_recommendations,
        priority_distribution=body.priority_distribution,
    )
    save_calculation(session, forecast_date, result)
    return result.to_dict()


@router.post("/api/workforce/calculate")
def workforce_calculate(
    body: LegacyCalculateRequest,
    session: Session = Depends(get_session),
):
    """
    Single-rate calculation: orders / productivity with a 15% buffer. The
    rate defaults to the mean of the active productivity standards.
    Requires a stored forecast for the date.
    """
    forecast_date = _parse_forecast_date(body.forecast_date)
    orders = get_forecast_orders(session, forecast_date)
    if orders is None:
        raise HTTPException(status_code=404, detail="Forecast not found for this date")

    result = calculate_legacy_workforce(
        total_orders=orders,
        avg_orders_per_hour=body.avg_orders_per_hour or average_orders_per_hour(session),
        availability=load_staff_availability(session, forecast_date),
    )
    row = save_legacy_calculation(session, forecast_date, result)
    result["id"] = row.id
    result["forecast_date"] = forecast_date.isoformat()
    return {"success": True, "recommendation": result}


@router.get("/api/workforce/history")
def workforce_history(limit: int = 30, session: Session = Depends(get_session)):
    rows: List[WorkforceRecommendation] = session.exec(
        select(WorkforceRecommendation)
        .order_by(WorkforceRecommendation.created_at.desc())
        .limit(limit)
    ).all()
    return [
        {
            "id": r.id,
            "forecast_date": r.forecast_date.isoformat(),
            "method": r.method,
            "total_orders": r.total_orders,
            "total_staff": r.total_staff,
            "gap_total": r.gap_total,
            "contractor_needed": r.contractor_needed,
            "total_cost": r.total_cost,
            "alert_level": r.alert_level,
        }
        for r in rows
    ]


@router.get("/api/alerts")
def get_alerts(session: Session = Depends(get_session)):
    """Pending hiring alerts for upcoming days, soonest first."""
    alerts = session.exec(
        select(HiringAlert)
        .where(HiringAlert.status == "pending", HiringAlert.days_until_event > 0)
        .order_by(HiringAlert.forecast_date)
        .limit(10)
    ).all()
    return {"alerts": alerts}
