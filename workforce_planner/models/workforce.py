from typing import Optional
from datetime import date, datetime
from sqlmodel import SQLModel, Field

from ..utils.helpers import utcnow


class StaffAvailability(SQLModel, table=True):
    """Roster snapshot: headcount available per staff tier on a date."""
    work_date: date = Field(primary_key=True)
    boxme: int = 0
    seasonal: int = 0
    veteran: int = 0


class WorkforceRecommendation(SQLModel, table=True):
    """
    Stores the headline numbers of one workforce calculation.

    Fields:
        forecast_date:     date the calculation was made for
        method:            "v2" (routed) or "legacy" (single productivity rate)
        total_orders:      forecast orders used as input
        total_hours:       projected work hours
        total_staff:       headcount needed (8h shifts)
        gap_total:         summed shortfall across staff tiers
        contractor_needed: contractors to recruit (20% buffer over the gap)
        total_cost:        daily cost estimate in VND
        alert_level:       "ok" | "warning" | "critical"
        result_json:       full serialized result for the dashboard
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    forecast_date: date = Field(index=True)
    method: str = "v2"
    total_orders: int
    total_hours: float
    total_staff: int
    gap_total: int
    contractor_needed: int
    total_cost: int
    alert_level: str
    result_json: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)


class HiringAlert(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    forecast_date: date
    alert_date: date
    days_until_event: int
    contractors_needed: int
    alert_level: str
    status: str = "pending"  # pending, acknowledged, resolved


class Event(SQLModel, table=True):
    event_id: str = Field(primary_key=True)
    event_type: str
    description: str
    event_date: datetime
    metadata_json: Optional[str] = None


class ProductivityStandard(SQLModel, table=True):
    """
    Measured orders-per-hour for one staff level / work type / product group.

    The percentile and threshold columns come from historical throughput;
    the multipliers adjust the base rate for faster packing methods and rush days.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    staff_level: str = Field(index=True)  # boxme, seasonal, veteran
    work_type: str = Field(index=True)    # pick, pack, moving, return
    product_group: str = "GENERAL"
    orders_per_hour: float
    percentile_50: Optional[float] = None
    percentile_75: Optional[float] = None
    percentile_90: Optional[float] = None
    min_threshold: Optional[float] = None
    max_threshold: Optional[float] = None
    field_table_multiplier: float = 1.0
    prepack_multiplier: float = 1.0
    rush_multiplier: float = 1.0
    is_active: bool = True
    updated_at: datetime = Field(default_factory=utcnow)
