# workforce_planner/api/forecast.py

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlmodel import Session, select

from ..database import get_session
from ..models.forecast import DailyForecast
from ..services.forecast import forecast_chart, generate_forecasts

router = APIRouter(tags=["forecast"])


class GenerateForecastRequest(BaseModel):
    horizon: int = Field(default=30, ge=1, le=365)


@router.post("/api/forecast/generate")
def generate(body: Optional[GenerateForecastRequest] = None, session: Session = Depends(get_session)):
    horizon = body.horizon if body else 30
    forecasts = generate_forecasts(session, horizon=horizon)
    return {
        "success": True,
        "forecasts_generated": len(forecasts),
        "message": f"Generated {len(forecasts)} forecasts",
    }


@router.get("/api/forecast/chart")
def chart(days: int = 30, session: Session = Depends(get_session)):
    return {"data": forecast_chart(session, days=days)}


@router.get("/api/calendar")
def calendar(month: Optional[str] = None, session: Session = Depends(get_session)):
    """Forecasts for a month given as YYYY-MM (defaults to the current month)."""
    month = month or date.today().strftime("%Y-%m")
    try:
        year, mon = (int(p) for p in month.split("-"))
        start = date(year, mon, 1)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid month: {month}")
    end = date(year + 1, 1, 1) if mon == 12 else date(year, mon + 1, 1)
    rows = session.exec(
        select(DailyForecast)
        .where(DailyForecast.forecast_date >= start, DailyForecast.forecast_date < end)
        .order_by(DailyForecast.forecast_date)
    ).all()
    return {"calendar": rows}
