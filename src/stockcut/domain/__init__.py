"""Domain layer - core cut planning logic."""

from .entities import MaterialBin
from .exceptions import (
    ConfigurationError,
    CutPlanError,
    InvalidCutError,
    OptimizerStateError,
)
from .services import (
    AllocationAnalysis,
    CuttingStockOptimizer,
    MultiToolOptimizer,
    PositionFinder,
    ScoringEngine,
    ToolPlan,
    analyze_bins,
)
from .value_objects import (
    EPSILON,
    PROXIMITY,
    CandidatePosition,
    CutInterval,
    CuttingTool,
    HoleGrid,
    Product,
    ProductSpec,
    build_products,
)

__all__ = [
    "AllocationAnalysis",
    "CandidatePosition",
    "ConfigurationError",
    "CutInterval",
    "CutPlanError",
    "CuttingStockOptimizer",
    "CuttingTool",
    "EPSILON",
    "HoleGrid",
    "InvalidCutError",
    "MaterialBin",
    "MultiToolOptimizer",
    "OptimizerStateError",
    "PROXIMITY",
    "PositionFinder",
    "Product",
    "ProductSpec",
    "ScoringEngine",
    "ToolPlan",
    "analyze_bins",
    "build_products",
]
