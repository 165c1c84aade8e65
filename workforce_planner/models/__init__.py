from .customer import Customer, CustomerOperations, CustomerProductMix, CustomerDailyOrders
from .forecast import OrderHistory, CalendarEvent, DailyForecast
from .workforce import (
    StaffAvailability,
    WorkforceRecommendation,
    HiringAlert,
    Event,
    ProductivityStandard,
)

__all__ = [
    "Customer",
    "CustomerOperations",
    "CustomerProductMix",
    "CustomerDailyOrders",
    "OrderHistory",
    "CalendarEvent",
    "DailyForecast",
    "StaffAvailability",
    "WorkforceRecommendation",
    "HiringAlert",
    "Event",
    "ProductivityStandard",
]
