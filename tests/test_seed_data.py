from datetime import date

from sqlmodel import SQLModel, Session, create_engine, select
from sqlmodel.pool import StaticPool

from workforce_planner import seed_data
from workforce_planner.models.customer import CustomerDailyOrders
from workforce_planner.models.domain import PackingMethod
from workforce_planner.models.workforce import StaffAvailability
from workforce_planner.services.customer_config import load_customer_configs, load_staff_availability
from workforce_planner.services.customer_stats import customer_order_stats
from workforce_planner.services.productivity import average_orders_per_hour, list_standards
from workforce_planner.services.workforce import calculate_workforce


def test_seed_master_data(monkeypatch):
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    monkeypatch.setattr(seed_data, "engine", engine)

    assert seed_data.seed_master_data() is True
    assert seed_data.seed_master_data() is False

    with Session(engine) as session:
        customers = load_customer_configs(session)
        assert [c.code for c in customers] == ["BIBOMART", "COOLMATE", "GREENFOOD", "HASAKI", "LAMTHAO"]
        assert len(session.exec(select(StaffAvailability)).all()) == 14

        availability = load_staff_availability(session, date.today())
        result = calculate_workforce(date.today(), 15000, customers, availability)

    methods = {m.method for m in result.breakdown_by_method}
    assert methods == {PackingMethod.FIELD_TABLE, PackingMethod.PREPACK, PackingMethod.STANDARD}
    assert len(result.breakdown_by_customer) == 5


def test_seed_productivity_and_customer_orders(monkeypatch):
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    monkeypatch.setattr(seed_data, "engine", engine)
    seed_data.seed_master_data()

    with Session(engine) as session:
        assert len(list_standards(session)) == 8
        assert average_orders_per_hour(session) == 36.875

        stats = customer_order_stats(session, "cus-004", date.today())
        assert stats["orders_today"] == 2500
        assert stats["field_table_orders"] == 0
        assert stats["prepack_orders"] == 0
        assert len(session.exec(select(CustomerDailyOrders)).all()) == 30 * 9
