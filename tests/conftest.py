import json
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlmodel.pool import StaticPool

from workforce_planner import models  # noqa: F401  (register tables)
from workforce_planner.database import get_session
from workforce_planner.main import app
from workforce_planner.models.customer import Customer, CustomerOperations, CustomerProductMix
from workforce_planner.models.domain import CustomerConfig, OperationsConfig, ProductMixEntry


@pytest.fixture
def field_table_customer() -> CustomerConfig:
    return CustomerConfig(
        id="c1",
        code="C1",
        name="Cosmetics Co",
        operations=OperationsConfig(
            field_table_enabled=True,
            field_table_max_sku=1,
            field_table_max_items=5,
            field_table_max_weight=1.0,
            field_table_hero_skus=[],
        ),
        product_mix=[ProductMixEntry("COSMETICS", "Cosmetics", 100, 2.0)],
    )


@pytest.fixture
def standard_customer() -> CustomerConfig:
    return CustomerConfig(
        id="c2",
        code="C2",
        name="Mixed Goods",
        operations=OperationsConfig(),
        product_mix=[
            ProductMixEntry("FASHION", "Fashion", 50, 3.0),
            ProductMixEntry("FOOD", "Food", 50, 3.0),
        ],
    )


@pytest.fixture
def session():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_session(session: Session) -> Session:
    """Two customers mirroring field_table_customer / standard_customer."""
    session.add_all(
        [
            Customer(id="c1", code="C1", name="Cosmetics Co"),
            Customer(id="c2", code="C2", name="Mixed Goods"),
            Customer(id="c3", code="C3", name="Retired", is_active=False),
        ]
    )
    session.add_all(
        [
            CustomerOperations(
                customer_id="c1",
                field_table_enabled=True,
                field_table_hero_skus=json.dumps([]),
            ),
            CustomerOperations(customer_id="c2"),
        ]
    )
    session.add_all(
        [
            CustomerProductMix(
                customer_id="c1", category_code="COSMETICS", category_name="Cosmetics",
                percentage=100, avg_processing_minutes=2.0,
            ),
            CustomerProductMix(
                customer_id="c2", category_code="FASHION", category_name="Fashion",
                percentage=50, avg_processing_minutes=3.0,
            ),
            CustomerProductMix(
                customer_id="c2", category_code="FOOD", category_name="Food",
                percentage=50, avg_processing_minutes=3.0,
            ),
        ]
    )
    session.commit()
    return session


@pytest.fixture
def today() -> date:
    return date(2025, 11, 1)
