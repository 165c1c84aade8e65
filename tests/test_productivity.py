from datetime import date

from sqlmodel import select

from workforce_planner.models.forecast import DailyForecast
from workforce_planner.models.workforce import Event, ProductivityStandard
from workforce_planner.services.productivity import (
    average_orders_per_hour,
    list_standards,
    update_standard,
)


def _standards(session):
    session.add_all(
        [
            ProductivityStandard(staff_level="boxme", work_type="pick", product_group="COSMETICS", orders_per_hour=45),
            ProductivityStandard(staff_level="boxme", work_type="pack", product_group="COSMETICS", orders_per_hour=35),
            ProductivityStandard(staff_level="seasonal", work_type="pick", product_group="BABY", orders_per_hour=35),
            ProductivityStandard(
                staff_level="veteran", work_type="pick", product_group="BABY",
                orders_per_hour=100, is_active=False,
            ),
        ]
    )
    session.commit()


def test_list_standards_active_and_sorted(session):
    _standards(session)

    rows = list_standards(session)
    assert [(s.staff_level, s.work_type) for s in rows] == [
        ("boxme", "pack"), ("boxme", "pick"), ("seasonal", "pick"),
    ]
    assert [s.work_type for s in list_standards(session, staff_level="boxme", work_type="pick")] == ["pick"]
    assert list_standards(session, product_group="FASHION") == []


def test_average_ignores_inactive_standards(session):
    _standards(session)
    assert average_orders_per_hour(session) == 115 / 3


def test_average_defaults_without_standards(session):
    assert average_orders_per_hour(session) == 30.0


def test_update_standard(session):
    _standards(session)
    standard = list_standards(session, staff_level="seasonal")[0]
    before = standard.updated_at

    updated = update_standard(session, standard.id, {"orders_per_hour": 40.0, "rush_multiplier": 1.2})
    assert updated.orders_per_hour == 40.0
    assert updated.rush_multiplier == 1.2
    assert updated.updated_at >= before

    events = session.exec(select(Event)).all()
    assert [e.event_type for e in events] == ["PRODUCTIVITY_UPDATED"]


def test_update_unknown_standard(session):
    assert update_standard(session, 999, {"orders_per_hour": 40.0}) is None


# ---------- /api/settings ----------

def test_productivity_endpoints(client, session):
    _standards(session)

    data = client.get("/api/settings/productivity", params={"staff_level": "boxme"}).json()
    assert [s["orders_per_hour"] for s in data["standards"]] == [35, 45]

    standard_id = data["standards"][0]["id"]
    resp = client.put(f"/api/settings/productivity/{standard_id}", json={"orders_per_hour": 38})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Productivity standard updated"
    assert session.get(ProductivityStandard, standard_id).orders_per_hour == 38


def test_productivity_update_errors(client, session):
    _standards(session)
    assert client.put("/api/settings/productivity/999", json={"orders_per_hour": 38}).status_code == 404
    assert client.put("/api/settings/productivity/1", json={}).status_code == 400
    assert client.put("/api/settings/productivity/1", json={"orders_per_hour": 0}).status_code == 422


def test_workforce_settings(client):
    data = client.get("/api/settings/workforce").json()
    assert data["shift_hours"] == 8
    assert set(data["default_availability"]) == {"boxme", "seasonal", "veteran"}


def test_legacy_calculate_uses_stored_productivity(client, seeded_session):
    seeded_session.add_all(
        [
            ProductivityStandard(staff_level="boxme", work_type="pick", orders_per_hour=45),
            ProductivityStandard(staff_level="boxme", work_type="pack", orders_per_hour=35),
        ]
    )
    seeded_session.add(
        DailyForecast(
            forecast_date=date(2025, 11, 11),
            baseline_forecast=12000,
            final_forecast=12000,
            lower_bound=10200,
            upper_bound=14400,
        )
    )
    seeded_session.commit()

    resp = client.post("/api/workforce/calculate", json={"forecast_date": "2025-11-11"})
    assert resp.status_code == 200
    # 12000 / 40 orders per hour * 1.15 = 345 hours -> 44 people
    assert resp.json()["recommendation"]["staff_needed"]["total"] == 44

    resp = client.post(
        "/api/workforce/calculate",
        json={"forecast_date": "2025-11-11", "avg_orders_per_hour": 30},
    )
    assert resp.json()["recommendation"]["staff_needed"]["total"] == 58
