import json
from datetime import date, timedelta

from sqlmodel import Session, select

from .database import engine
from .models.customer import Customer, CustomerDailyOrders, CustomerOperations, CustomerProductMix
from .models.forecast import CalendarEvent, OrderHistory
from .models.workforce import ProductivityStandard, StaffAvailability


def seed_master_data() -> bool:
    """
    Seeds customers, operations rules, product mix, productivity standards,
    per-customer daily orders, peak calendar, order history and a short
    staff roster into the database.
    Skips seeding if the Customer table is non-empty.
    Returns True when anything was written.
    """
    today = date.today()

    with Session(engine) as session:
        # Skip if already seeded
        if session.exec(select(Customer)).first():
            return False

        # === Customers ===
        customers = [
            Customer(id="cus-001", code="LAMTHAO", name="Lam Thao Cosmetics", tier="PREMIUM"),
            Customer(id="cus-002", code="BIBOMART", name="Bibo Mart", tier="PREMIUM"),
            Customer(id="cus-003", code="COOLMATE", name="Coolmate", tier="STANDARD"),
            Customer(id="cus-004", code="HASAKI", name="Hasaki Beauty", tier="STANDARD"),
            Customer(id="cus-005", code="GREENFOOD", name="Green Food Market", tier="BASIC"),
        ]
        session.add_all(customers)

        # === Operations rules ===
        operations = [
            CustomerOperations(
                customer_id="cus-001",
                field_table_enabled=True,
                field_table_max_sku=1,
                field_table_max_items=5,
                field_table_max_weight=1.0,
                field_table_hero_skus=json.dumps([]),
                requires_camera=True,
                quality_check_level="HIGH",
            ),
            CustomerOperations(
                customer_id="cus-002",
                field_table_enabled=False,
                prepack_enabled=True,
                prepack_categories=json.dumps(["BABY", "FOOD"]),
                prepack_min_weight=0.5,
                prepack_weekly_quota=8000,
            ),
            CustomerOperations(
                customer_id="cus-003",
                field_table_enabled=True,
                field_table_max_sku=2,
                field_table_max_items=3,
                field_table_max_weight=1.5,
                field_table_hero_skus=json.dumps(["CM-TEE-01", "CM-SHORT-02"]),
            ),
            CustomerOperations(customer_id="cus-004", field_table_enabled=False),
            CustomerOperations(
                customer_id="cus-005",
                prepack_enabled=True,
                prepack_categories=json.dumps(["FOOD"]),
                prepack_min_weight=5.0,
                prepack_weekly_quota=3000,
            ),
        ]
        session.add_all(operations)

        # === Product mix ===
        mix = [
            ("cus-001", "COSMETICS", "Cosmetics", 70, 1.8),
            ("cus-001", "PERSONAL_CARE", "Personal care", 30, 2.0),
            ("cus-002", "BABY", "Baby & mother", 55, 3.0),
            ("cus-002", "FOOD", "Food & milk", 25, 3.5),
            ("cus-002", "TOYS", "Toys", 20, 2.5),
            ("cus-003", "FASHION", "Fashion", 85, 2.2),
            ("cus-003", "ACCESSORIES", "Accessories", 15, 1.5),
            ("cus-004", "COSMETICS", "Cosmetics", 60, 1.8),
            ("cus-004", "BABY", "Baby care", 15, 2.5),
            ("cus-004", "HEALTH", "Health", 25, 2.0),
            ("cus-005", "FOOD", "Food", 80, 3.5),
            ("cus-005", "HOUSEHOLD", "Household", 20, None),
        ]
        session.add_all(
            CustomerProductMix(
                customer_id=cid,
                category_code=code,
                category_name=name,
                percentage=pct,
                avg_processing_minutes=minutes,
            )
            for cid, code, name, pct, minutes in mix
        )

        # === Productivity standards (orders per hour) ===
        standards = [
            ("boxme", "pick", "COSMETICS", 45, 55, 65, 30, 80),
            ("boxme", "pack", "COSMETICS", 30, 38, 45, 20, 60),
            ("boxme", "pick", "FASHION", 40, 50, 60, 25, 75),
            ("boxme", "pack", "FASHION", 35, 42, 50, 22, 65),
            ("veteran", "pick", "COSMETICS", 50, 60, 70, 35, 90),
            ("veteran", "pack", "COSMETICS", 35, 43, 50, 25, 65),
            ("seasonal", "pick", "BABY", 35, 42, 48, 20, 60),
            ("seasonal", "pack", "BABY", 25, 30, 35, 15, 45),
        ]
        session.add_all(
            ProductivityStandard(
                staff_level=level,
                work_type=work,
                product_group=group,
                orders_per_hour=rate,
                percentile_50=rate,
                percentile_75=p75,
                percentile_90=p90,
                min_threshold=low,
                max_threshold=high,
            )
            for level, work, group, rate, p75, p90, low, high in standards
        )

        # === Per-customer daily orders (last 30 days, by method) ===
        customer_volume = {
            "cus-001": (4000, {"FIELD_TABLE": 0.4, "STANDARD": 0.6}),
            "cus-002": (3500, {"PREPACK": 0.3, "STANDARD": 0.7}),
            "cus-003": (3000, {"FIELD_TABLE": 0.5, "STANDARD": 0.5}),
            "cus-004": (2500, {"STANDARD": 1.0}),
            "cus-005": (2000, {"PREPACK": 0.2, "STANDARD": 0.8}),
        }
        daily_orders = []
        for i in range(0, 30):
            d = today - timedelta(days=i)
            for cid, (base, split) in customer_volume.items():
                volume = base + (i % 5) * 100
                for method, share in split.items():
                    daily_orders.append(
                        CustomerDailyOrders(
                            customer_id=cid,
                            order_date=d,
                            packing_method=method,
                            orders=round(volume * share),
                        )
                    )
        session.add_all(daily_orders)

        # === Peak calendar (double-day sales) ===
        events = []
        for year in (today.year, today.year + 1):
            for month in range(1, 13):
                events.append(
                    CalendarEvent(
                        event_date=date(year, month, month),
                        event_name=f"{month}.{month} Sale",
                        is_peak=True,
                        expected_multiplier=3.5 if month in (11, 12) else 2.0,
                    )
                )
            events.append(
                CalendarEvent(
                    event_date=date(year, 11, 25),
                    event_name="Black Friday",
                    is_peak=True,
                    expected_multiplier=2.5,
                )
            )
        session.add_all(events)

        # === Order history (last 60 days) ===
        history = []
        for i in range(1, 61):
            d = today - timedelta(days=i)
            base = 15000 + (i % 7) * 350
            if d.weekday() >= 5:
                base = int(base * 1.3)
            history.append(OrderHistory(order_date=d, orders=base))
        session.add_all(history)

        # === Roster for the next two weeks ===
        session.add_all(
            StaffAvailability(
                work_date=today + timedelta(days=i),
                boxme=150,
                seasonal=50,
                veteran=30,
            )
            for i in range(0, 14)
        )

        session.commit()
    return True
