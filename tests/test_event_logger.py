import json
from datetime import date

from sqlmodel import select

from workforce_planner.models.workforce import Event, WorkforceRecommendation
from workforce_planner.services.event_logger import log_event


def test_log_event_persists(session):
    log_event(session, "FORECAST_GENERATED", "Generated 7 forecasts.", metadata={"horizon": 7})
    log_event(session, "HIRING_ALERT", "No metadata.")
    session.commit()

    events = session.exec(select(Event).order_by(Event.event_type)).all()
    assert [e.event_type for e in events] == ["FORECAST_GENERATED", "HIRING_ALERT"]
    assert events[0].event_id.startswith("EVT-")
    assert json.loads(events[0].metadata_json) == {"horizon": 7}
    assert events[1].metadata_json is None
    assert events[0].event_date is not None


def test_timestamp_defaults_are_saved(session):
    row = WorkforceRecommendation(
        forecast_date=date(2025, 11, 11),
        total_orders=1,
        total_hours=1.0,
        total_staff=1,
        gap_total=0,
        contractor_needed=0,
        total_cost=0,
        alert_level="ok",
    )
    assert row.created_at.tzinfo is not None
    session.add(row)
    session.commit()
    session.refresh(row)
    assert row.id is not None
