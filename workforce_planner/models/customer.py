from typing import Optional
from datetime import date
from sqlmodel import SQLModel, Field


class Customer(SQLModel, table=True):
    id: str = Field(primary_key=True)
    code: str = Field(index=True)
    name: str
    tier: str = "STANDARD"  # PREMIUM, STANDARD, BASIC
    is_active: bool = True


class CustomerOperations(SQLModel, table=True):
    customer_id: str = Field(primary_key=True, foreign_key="customer.id")

    field_table_enabled: bool = False
    field_table_max_sku: int = 1
    field_table_max_items: int = 5
    field_table_max_weight: float = 1.0
    field_table_hero_skus: Optional[str] = None  # JSON list of SKU codes

    prepack_enabled: bool = False
    prepack_categories: Optional[str] = None     # JSON list of category codes
    prepack_min_weight: float = 5.0
    prepack_weekly_quota: int = 0

    requires_camera: bool = False
    quality_check_level: str = "STANDARD"


class CustomerProductMix(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    customer_id: str = Field(foreign_key="customer.id", index=True)
    category_code: str
    category_name: str
    percentage: float
    avg_processing_minutes: Optional[float] = None


class CustomerDailyOrders(SQLModel, table=True):
    """Orders shipped for one customer on one day, by packing method."""
    id: Optional[int] = Field(default=None, primary_key=True)
    customer_id: str = Field(foreign_key="customer.id", index=True)
    order_date: date = Field(index=True)
    packing_method: str  # FIELD_TABLE, PREPACK, STANDARD
    orders: int
