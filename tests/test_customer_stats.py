from datetime import date, timedelta

from workforce_planner.models.customer import CustomerDailyOrders
from workforce_planner.services.customer_stats import customer_order_stats


def _orders(session, today):
    rows = [
        ("c1", 0, "FIELD_TABLE", 100),
        ("c1", 0, "STANDARD", 200),
        ("c1", 3, "STANDARD", 50),
        ("c1", 10, "PREPACK", 70),
        ("c1", 40, "STANDARD", 1000),
        ("c2", 0, "STANDARD", 999),
    ]
    session.add_all(
        CustomerDailyOrders(
            customer_id=cid,
            order_date=today - timedelta(days=days_ago),
            packing_method=method,
            orders=orders,
        )
        for cid, days_ago, method, orders in rows
    )
    session.commit()


def test_customer_order_stats(seeded_session, today):
    _orders(seeded_session, today)

    stats = customer_order_stats(seeded_session, "c1", today)
    assert stats == {
        "total_orders": 1420,
        "orders_today": 300,
        "orders_this_week": 350,
        "orders_this_month": 420,
        "avg_per_day": 14.0,
        "field_table_orders": 100,
        "prepack_orders": 70,
        "standard_orders": 1250,
    }


def test_customer_without_orders(seeded_session, today):
    stats = customer_order_stats(seeded_session, "c3", today)
    assert stats["total_orders"] == 0
    assert stats["standard_orders"] == 0
    assert stats["avg_per_day"] == 0.0


def test_customer_stats_endpoint(client, seeded_session):
    _orders(seeded_session, date.today())

    resp = client.get("/api/customers/c1/stats")
    assert resp.status_code == 200
    assert resp.json()["stats"]["orders_today"] == 300
    assert resp.json()["stats"]["prepack_orders"] == 70

    assert client.get("/api/customers/nope/stats").status_code == 404
