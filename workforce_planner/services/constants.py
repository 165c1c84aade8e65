# workforce_planner/services/constants.py
"""
Rate and ratio tables shared by the workforce calculation services.

All money is VND. Treat these as read-only; callers that need different
numbers pass their own tables (e.g. a custom priority distribution).
"""

from ..config import settings
from ..models.domain import PackingMethod

# Fraction of Standard processing time each method needs
PACKING_METHOD_EFFICIENCY = {
    PackingMethod.FIELD_TABLE: 0.30,  # 70% faster
    PackingMethod.PREPACK: 0.50,      # 50% time saved
    PackingMethod.STANDARD: 1.00,     # baseline
}

TIME_SAVED_PERCENTAGE = {
    PackingMethod.FIELD_TABLE: 70,
    PackingMethod.PREPACK: 50,
    PackingMethod.STANDARD: 0,
}

STAFF_COST_PER_HOUR = {
    "boxme": 25000,
    "seasonal": 20000,
    "veteran": 24000,
    "contractor": 22000,
}

CONTRACTOR_COSTS = {
    "bonus_per_person": 50000,
    "meal_per_person": 30000,
}

WORK_TYPE_DISTRIBUTION = {
    "pick": 0.70,
    "pack": 0.20,
    "moving": 0.05,
    "return": 0.05,
}

STAFF_TYPE_DISTRIBUTION = {
    "boxme": 0.70,
    "veteran": 0.20,
    "seasonal": 0.10,
}

DEFAULT_PRODUCTIVITY = {
    "avg_orders_per_hour": 30,
    "avg_processing_minutes": 2.0,
}

ALERT_THRESHOLDS = {
    "contractor_warning": 50,
    "contractor_critical": 100,
    "gap_warning": 30,
    "gap_critical": 60,
}

SHIFT_HOURS = settings.shift_hours
WORK_HOURS_BUFFER = 1.15        # breaks, delays
CONTRACTOR_BUFFER = 1.20        # no-shows, attrition
HIRING_LEAD_TIME_DAYS = 7
LEGACY_AVG_COST_PER_HOUR = 22000

# Delivery-urgency buckets, most urgent first
PRIORITY_BUCKETS = [
    {"priority": 1, "name": "P1 Instant", "description": "Instant delivery, ship within hours", "cutoff_time": "08:00"},
    {"priority": 2, "name": "P2 Same Day", "description": "Same-day delivery", "cutoff_time": "12:00"},
    {"priority": 3, "name": "P3 Express", "description": "Express next-day delivery", "cutoff_time": "16:00"},
    {"priority": 4, "name": "P4 Standard", "description": "Standard 2-3 day delivery", "cutoff_time": "20:00"},
    {"priority": 5, "name": "P5 Economy", "description": "Economy delivery, flexible dispatch", "cutoff_time": None},
    {"priority": 6, "name": "P6 Delayed", "description": "Bulky or delayable orders", "cutoff_time": None},
]

DEFAULT_PRIORITY_DISTRIBUTION = {
    1: 0.10,
    2: 0.20,
    3: 0.35,
    4: 0.20,
    5: 0.10,
    6: 0.05,
}

# Target staff-tier mix per urgency band (boxme / veteran / seasonal)
PRIORITY_TIER_SPLIT = {
    1: {"boxme": 0.60, "veteran": 0.30, "seasonal": 0.10},
    2: {"boxme": 0.60, "veteran": 0.30, "seasonal": 0.10},
    3: {"boxme": 0.50, "veteran": 0.20, "seasonal": 0.30},
    4: {"boxme": 0.50, "veteran": 0.20, "seasonal": 0.30},
    5: {"boxme": 0.30, "veteran": 0.10, "seasonal": 0.60},
    6: {"boxme": 0.30, "veteran": 0.10, "seasonal": 0.60},
}
