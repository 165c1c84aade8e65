# workforce_planner/models/domain.py
"""
Workforce domain models - plain dataclasses consumed and produced by the
calculation services.

Nothing in here touches the database; the SQLModel tables in the sibling
modules are converted into these objects before a calculation starts.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Dict, Any, List


class PackingMethod(str, Enum):
    """Packing methods, fastest first."""
    FIELD_TABLE = "FIELD_TABLE"
    PREPACK = "PREPACK"
    STANDARD = "STANDARD"


class StaffType(str, Enum):
    BOXME = "boxme"
    SEASONAL = "seasonal"
    VETERAN = "veteran"
    CONTRACTOR = "contractor"


class AlertLevel(str, Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class RecommendationType(str, Enum):
    OPTIMIZATION = "OPTIMIZATION"
    ALERT = "ALERT"
    INSIGHT = "INSIGHT"


class RecommendationCategory(str, Enum):
    FIELD_TABLE = "FIELD_TABLE"
    PREPACK = "PREPACK"
    STAFF = "STAFF"
    COST = "COST"
    PRIORITY = "PRIORITY"


class RecommendationPriority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


# ============ Customer configuration ============

@dataclass(frozen=True)
class OperationsConfig:
    """Packing-method eligibility rules for one customer."""
    field_table_enabled: bool = False
    field_table_max_sku: int = 1
    field_table_max_items: int = 5
    field_table_max_weight: float = 1.0
    field_table_hero_skus: List[str] = field(default_factory=list)

    prepack_enabled: bool = False
    prepack_categories: List[str] = field(default_factory=list)
    prepack_min_weight: float = 5.0
    prepack_weekly_quota: int = 0

    requires_camera: bool = False
    quality_check_level: str = "STANDARD"


@dataclass(frozen=True)
class ProductMixEntry:
    category_code: str
    category_name: str
    percentage: float               # share of the customer's volume, 0-100
    avg_processing_minutes: float


@dataclass(frozen=True)
class CustomerConfig:
    id: str
    code: str
    name: str
    tier: str = "STANDARD"          # PREMIUM | STANDARD | BASIC
    operations: OperationsConfig = field(default_factory=OperationsConfig)
    product_mix: List[ProductMixEntry] = field(default_factory=list)

    def category_share(self, *category_codes: str) -> float:
        """Combined product-mix percentage of the given categories."""
        return sum(
            p.percentage for p in self.product_mix if p.category_code in category_codes
        )


# ============ Routing ============

@dataclass(frozen=True)
class OrderRoutingInput:
    order_count: int
    customer_id: str
    category_code: Optional[str] = None
    sku_count: int = 1
    item_count: int = 1
    weight_kg: float = 0.5
    is_hero_sku: bool = False


@dataclass(frozen=True)
class RoutingDecision:
    method: PackingMethod
    orders: int
    reason: str
    eligible: bool
    time_saved_percentage: int = 0


@dataclass
class MethodBreakdown:
    method: PackingMethod
    orders: int
    hours: float
    staff: int
    cost: int = 0
    percentage: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["method"] = self.method.value
        return data


@dataclass
class CustomerBreakdown:
    customer_id: str
    customer_name: str
    orders: int
    methods: Dict[str, int]         # field_table / prepack / standard order counts
    hours: float
    staff: int
    cost: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============ Hours & staffing ============

@dataclass
class WorkHoursBreakdown:
    pick: float
    pack: float
    moving: float
    return_: float
    total: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pick": self.pick,
            "pack": self.pack,
            "moving": self.moving,
            "return": self.return_,
            "total": self.total,
        }


@dataclass
class StaffAllocation:
    needed: int
    available: int
    gap: int


@dataclass
class StaffBreakdown:
    boxme: StaffAllocation
    seasonal: StaffAllocation
    veteran: StaffAllocation
    total_needed: int
    total_available: int
    total_gap: int
    contractor_needed: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PriorityBucket:
    priority: int                   # 1 (most urgent) .. 6
    name: str
    description: str
    cutoff_time: Optional[str]
    orders: int
    hours: float
    staff_needed: int
    staff_allocated: Dict[str, int]  # boxme / seasonal / veteran

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============ Costs ============

@dataclass
class CostBreakdown:
    regular_staff: int
    contractor_bonus: int
    meals: int
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MethodCost:
    hours: float = 0.0
    staff: int = 0
    cost: int = 0


@dataclass
class StaffTypeCost:
    count: int
    cost_per_hour: int
    total: int


@dataclass
class SavingsPotential:
    field_table_boost: int = 0
    prepack_boost: int = 0
    total: int = 0


@dataclass
class CostAnalysis:
    by_method: Dict[str, MethodCost]
    by_staff_type: Dict[str, StaffTypeCost]
    total_cost: int
    savings_potential: SavingsPotential

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============ Recommendations ============

@dataclass
class Recommendation:
    """
    One actionable insight or alert.

    `impact` carries any subset of: orders_affected, time_saved_hours,
    cost_saved_vnd, gap_total, orders_at_risk.
    """
    type: RecommendationType
    category: RecommendationCategory
    priority: RecommendationPriority
    message: str
    impact: Dict[str, float] = field(default_factory=dict)
    action: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "category": self.category.value,
            "priority": self.priority.value,
            "message": self.message,
            "impact": dict(self.impact),
            "action": self.action,
        }


# ============ Calculation result ============

@dataclass
class WorkforceSummary:
    total_orders: int
    total_hours: float
    total_staff: int
    total_cost: int
    alert_level: AlertLevel
    contractor_needed: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["alert_level"] = self.alert_level.value
        return data


@dataclass
class WorkforceCalculationResult:
    forecast_date: str
    summary: WorkforceSummary
    breakdown_by_method: List[MethodBreakdown]
    staff_allocation: StaffBreakdown
    work_hours: WorkHoursBreakdown
    cost_breakdown: CostBreakdown
    cost_analysis: CostAnalysis
    recommendations: List[Recommendation]
    breakdown_by_customer: Optional[List[CustomerBreakdown]] = None
    breakdown_by_priority: Optional[List[PriorityBucket]] = None
    success: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict (enums flattened to their values)."""
        data: Dict[str, Any] = {
            "success": self.success,
            "forecast_date": self.forecast_date,
            "summary": self.summary.to_dict(),
            "breakdown_by_method": [m.to_dict() for m in self.breakdown_by_method],
            "staff_allocation": self.staff_allocation.to_dict(),
            "work_hours": self.work_hours.to_dict(),
            "cost_breakdown": self.cost_breakdown.to_dict(),
            "cost_analysis": self.cost_analysis.to_dict(),
            "recommendations": [r.to_dict() for r in self.recommendations],
        }
        if self.breakdown_by_customer is not None:
            data["breakdown_by_customer"] = [c.to_dict() for c in self.breakdown_by_customer]
        if self.breakdown_by_priority is not None:
            data["breakdown_by_priority"] = [p.to_dict() for p in self.breakdown_by_priority]
        return data
