import json
from datetime import date

from workforce_planner.models.customer import Customer, CustomerOperations, CustomerProductMix
from workforce_planner.models.workforce import StaffAvailability
from workforce_planner.services.customer_config import (
    DEFAULT_MIX_PROCESSING_MINUTES,
    load_customer_configs,
    load_staff_availability,
    to_customer_config,
)


def test_load_customer_configs(seeded_session):
    configs = load_customer_configs(seeded_session)

    assert [c.id for c in configs] == ["c1", "c2"]
    c1, c2 = configs
    assert c1.operations.field_table_enabled
    assert c1.operations.field_table_hero_skus == []
    assert c1.category_share("COSMETICS") == 100
    assert not c2.operations.field_table_enabled
    assert c2.category_share("FASHION", "FOOD") == 100


def test_customer_without_operations_row(session):
    customer = Customer(id="x1", code="X1", name="Bare")
    session.add(customer)
    session.add(
        CustomerProductMix(
            customer_id="x1", category_code="TOYS", category_name="Toys", percentage=100,
        )
    )
    session.commit()

    config = to_customer_config(session, customer)
    assert not config.operations.field_table_enabled
    assert not config.operations.prepack_enabled
    assert config.product_mix[0].avg_processing_minutes == DEFAULT_MIX_PROCESSING_MINUTES


def test_bad_json_lists_read_as_empty(session):
    customer = Customer(id="x2", code="X2", name="Broken")
    session.add(customer)
    session.add(
        CustomerOperations(
            customer_id="x2",
            prepack_enabled=True,
            prepack_categories="FOOD,BABY",
            field_table_hero_skus=json.dumps({"sku": 1}),
        )
    )
    session.commit()

    ops = to_customer_config(session, customer).operations
    assert ops.prepack_categories == []
    assert ops.field_table_hero_skus == []


def test_staff_availability(session):
    session.add(StaffAvailability(work_date=date(2025, 11, 11), boxme=20, seasonal=5, veteran=5))
    session.commit()

    assert load_staff_availability(session, date(2025, 11, 11)) == {"boxme": 20, "seasonal": 5, "veteran": 5}
    assert load_staff_availability(session, date(2025, 11, 12)) == {"boxme": 150, "seasonal": 50, "veteran": 30}
