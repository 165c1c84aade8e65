import json
from datetime import date, timedelta

from sqlmodel import select

from workforce_planner.models.forecast import DailyForecast
from workforce_planner.models.workforce import Event, HiringAlert, StaffAvailability, WorkforceRecommendation


def _forecast(session, forecast_date, orders):
    session.add(
        DailyForecast(
            forecast_date=forecast_date,
            baseline_forecast=orders,
            final_forecast=orders,
            lower_bound=int(orders * 0.85),
            upper_bound=int(orders * 1.2),
        )
    )
    session.commit()


# ---------- /api/workforce/calculate/v2 ----------

def test_calculate_v2(client, seeded_session):
    resp = client.post(
        "/api/workforce/calculate/v2",
        json={"forecast_date": "2025-11-11", "forecast_orders": 12000},
    )
    assert resp.status_code == 200
    data = resp.json()

    assert data["success"] is True
    assert data["forecast_date"] == "2025-11-11"
    assert data["summary"]["total_staff"] == 45
    assert [m["method"] for m in data["breakdown_by_method"]] == ["FIELD_TABLE", "STANDARD"]
    # no roster row: default availability 150 / 50 / 30 covers everyone
    assert data["staff_allocation"]["total_gap"] == 0
    assert data["summary"]["total_cost"] == 8928000
    # inactive customer is not part of the calculation
    assert [c["customer_id"] for c in data["breakdown_by_customer"]] == ["c1", "c2"]

    rows = seeded_session.exec(select(WorkforceRecommendation)).all()
    assert len(rows) == 1
    assert rows[0].method == "v2"
    assert rows[0].total_staff == 45
    events = seeded_session.exec(select(Event).where(Event.event_type == "WORKFORCE_CALCULATED")).all()
    assert len(events) == 1
    assert json.loads(events[0].metadata_json) == {"gap_total": 0, "total_cost": 8928000}
    assert "cost 8.928.000 ₫" in events[0].description


def test_calculate_v2_uses_stored_forecast_and_roster(client, seeded_session):
    forecast_date = date(2025, 11, 11)
    _forecast(seeded_session, forecast_date, 12000)
    seeded_session.add(StaffAvailability(work_date=forecast_date, boxme=20, seasonal=5, veteran=5))
    seeded_session.commit()

    resp = client.post(
        "/api/workforce/calculate/v2",
        json={"forecast_date": "2025-11-11", "priority_analysis": True},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["summary"]["total_orders"] == 12000
    assert data["summary"]["contractor_needed"] == 20
    assert len(data["breakdown_by_priority"]) == 6


def test_calculate_v2_requires_date(client, seeded_session):
    resp = client.post("/api/workforce/calculate/v2", json={"forecast_orders": 100})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "forecast_date is required"

    resp = client.post("/api/workforce/calculate/v2", json={"forecast_date": "11/11/2025"})
    assert resp.status_code == 400


def test_calculate_v2_without_forecast(client, seeded_session):
    resp = client.post("/api/workforce/calculate/v2", json={"forecast_date": "2025-11-11"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == (
        "No forecast found for date 2025-11-11. Please generate forecast first."
    )


def test_calculate_v2_zero_forecast_is_missing(client, seeded_session):
    _forecast(seeded_session, date(2025, 11, 11), 0)
    resp = client.post("/api/workforce/calculate/v2", json={"forecast_date": "2025-11-11"})
    assert resp.status_code == 404


def test_calculate_v2_without_customers(client):
    resp = client.post(
        "/api/workforce/calculate/v2",
        json={"forecast_date": "2025-11-11", "forecast_orders": 1000},
    )
    assert resp.status_code == 500
    assert "No customer configurations found" in resp.json()["detail"]


def test_calculate_v2_rejects_negative_orders(client, seeded_session):
    resp = client.post(
        "/api/workforce/calculate/v2",
        json={"forecast_date": "2025-11-11", "forecast_orders": -5},
    )
    assert resp.status_code == 422


def test_critical_calculation_raises_hiring_alert(client, seeded_session):
    forecast_date = date.today() + timedelta(days=3)
    resp = client.post(
        "/api/workforce/calculate/v2",
        json={"forecast_date": forecast_date.isoformat(), "forecast_orders": 100000},
    )
    assert resp.status_code == 200
    assert resp.json()["summary"]["alert_level"] == "critical"

    alerts = client.get("/api/alerts").json()["alerts"]
    assert len(alerts) == 1
    assert alerts[0]["days_until_event"] == 3
    assert alerts[0]["contractors_needed"] == 176
    assert alerts[0]["alert_level"] == "critical"
    assert alerts[0]["status"] == "pending"


def test_no_hiring_alert_outside_window(client, seeded_session):
    forecast_date = date.today() + timedelta(days=30)
    client.post(
        "/api/workforce/calculate/v2",
        json={"forecast_date": forecast_date.isoformat(), "forecast_orders": 100000},
    )
    assert seeded_session.exec(select(HiringAlert)).all() == []


# ---------- /api/workforce/calculate (legacy) ----------

def test_legacy_calculate(client, seeded_session):
    forecast_date = date(2025, 11, 11)
    _forecast(seeded_session, forecast_date, 12000)
    seeded_session.add(StaffAvailability(work_date=forecast_date, boxme=20, seasonal=5, veteran=5))
    seeded_session.commit()

    resp = client.post("/api/workforce/calculate", json={"forecast_date": "2025-11-11"})
    assert resp.status_code == 200
    rec = resp.json()["recommendation"]
    assert rec["forecast_date"] == "2025-11-11"
    assert rec["staff_needed"]["total"] == 58
    assert rec["contractor_needed"] == 34
    assert rec["costs"]["total"] == 12928000

    history = client.get("/api/workforce/history").json()
    assert [h["method"] for h in history] == ["legacy"]
    assert history[0]["id"] == rec["id"]


def test_legacy_calculate_without_forecast(client, seeded_session):
    resp = client.post("/api/workforce/calculate", json={"forecast_date": "2025-11-11"})
    assert resp.status_code == 404


# ---------- customers ----------

def test_list_customers(client, seeded_session):
    data = client.get("/api/customers").json()
    assert [c["code"] for c in data["customers"]] == ["C1", "C2", "C3"]


def test_customer_detail_and_config(client, seeded_session):
    detail = client.get("/api/customers/c2").json()
    assert detail["customer"]["name"] == "Mixed Goods"
    assert sorted(m["category_code"] for m in detail["product_mix"]) == ["FASHION", "FOOD"]

    config = client.get("/api/customers/c1/config").json()
    assert config["operations"]["field_table_enabled"] is True
    assert config["operations"]["field_table_hero_skus"] == []
    assert config["product_mix"][0]["category_code"] == "COSMETICS"


def test_unknown_customer(client, seeded_session):
    assert client.get("/api/customers/nope").status_code == 404
    assert client.get("/api/customers/nope/config").status_code == 404


# ---------- forecast & dashboard ----------

def test_generate_forecast_and_chart(client, session):
    resp = client.post("/api/forecast/generate", json={"horizon": 7})
    assert resp.status_code == 200
    assert resp.json()["forecasts_generated"] == 7

    chart = client.get("/api/forecast/chart", params={"days": 7}).json()["data"]
    forecasts = [p for p in chart if "forecast" in p]
    assert len(forecasts) == 7
    assert all(p["lowerBound"] <= p["forecast"] <= p["upperBound"] for p in forecasts)


def test_calendar_rejects_bad_month(client, session):
    assert client.get("/api/calendar", params={"month": "2025-13"}).status_code == 400
    assert client.get("/api/calendar", params={"month": "soon"}).status_code == 400
    assert client.get("/api/calendar", params={"month": "2025-11"}).json() == {"calendar": []}


def test_dashboard_kpis(client, session):
    kpis = client.get("/api/dashboard/kpis").json()
    assert [k["name"] for k in kpis] == [
        "Today's Forecast",
        "Next Peak Day",
        "Workforce Gap",
        "Forecast Accuracy %",
    ]
    assert kpis[3]["value"] == 85.0
    assert kpis[3]["alert_status"] == "AMBER"
