from typing import Optional
from datetime import date, datetime
from sqlmodel import SQLModel, Field

from ..utils.helpers import utcnow


class OrderHistory(SQLModel, table=True):
    """Actual order volume per day, used as the forecast baseline."""
    order_date: date = Field(primary_key=True)
    orders: int


class CalendarEvent(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    event_date: date = Field(index=True)
    event_name: str
    is_peak: bool = False
    expected_multiplier: float = 1.0


class DailyForecast(SQLModel, table=True):
    forecast_date: date = Field(primary_key=True)
    model_version: str = "baseline-v1"
    baseline_forecast: int
    final_forecast: int
    lower_bound: int
    upper_bound: int
    is_peak_day: bool = False
    peak_multiplier: float = 1.0
    notes: Optional[str] = None
    actual_orders: Optional[int] = None
    created_at: datetime = Field(default_factory=utcnow)
