# workforce_planner/api/kpi.py

from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List

from ..database import get_session
from ..services.kpis import compute_kpis

router = APIRouter(prefix="/api/dashboard", tags=["kpi"])


@router.get("/kpis", response_model=List[dict])
def get_dashboard_kpis(session: Session = Depends(get_session)):
    """
    Compute dashboard KPIs on the fly.

    Returns a list like:
    [
      {"name": "Workforce Gap", "value": 35.0, "unit": "staff", "target": 0.0, "alert_status": "AMBER", "detail": null},
      ...
    ]
    """
    kpis = compute_kpis(session)
    # Convert dataclasses to simple dicts for JSON
    return [k.__dict__ for k in kpis]
