# workforce_planner/api/settings.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from sqlmodel import Session

from ..config import Settings, get_settings
from ..database import get_session
from ..services.productivity import list_standards, update_standard

router = APIRouter(prefix="/api/settings", tags=["settings"])


class ProductivityUpdateRequest(BaseModel):
    orders_per_hour: Optional[float] = Field(default=None, gt=0)
    percentile_50: Optional[float] = None
    percentile_75: Optional[float] = None
    percentile_90: Optional[float] = None
    min_threshold: Optional[float] = None
    max_threshold: Optional[float] = None
    field_table_multiplier: Optional[float] = Field(default=None, gt=0)
    prepack_multiplier: Optional[float] = Field(default=None, gt=0)
    rush_multiplier: Optional[float] = Field(default=None, gt=0)
    is_active: Optional[bool] = None


@router.get("/productivity")
def get_productivity_standards(
    staff_level: Optional[str] = None,
    work_type: Optional[str] = None,
    product_group: Optional[str] = None,
    session: Session = Depends(get_session),
):
    standards = list_standards(session, staff_level, work_type, product_group)
    return {"standards": standards}


@router.put("/productivity/{standard_id}")
def put_productivity_standard(
    standard_id: int,
    body: ProductivityUpdateRequest,
    session: Session = Depends(get_session),
):
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")
    standard = update_standard(session, standard_id, changes)
    if standard is None:
        raise HTTPException(status_code=404, detail="Productivity standard not found")
    return {"success": True, "message": "Productivity standard updated", "standard": standard}


@router.get("/workforce")
def get_workforce_settings(config: Settings = Depends(get_settings)):
    """Shift length, roster fallback and alert window currently in effect."""
    return {
        "shift_hours": config.shift_hours,
        "default_availability": config.default_availability(),
        "hiring_alert_window_days": config.hiring_alert_window_days,
    }
