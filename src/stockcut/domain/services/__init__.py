"""Domain services for cut planning.

This package provides the allocation engine and its collaborators:
- Candidate position enumeration over the hole grid
- Product and position scoring heuristics
- The greedy allocation loop (single tool and per-tool passes)
- Utilization analysis of finished plans
"""

from .allocation import (
    AllocationState,
    CutDecision,
    CuttingStockOptimizer,
    MultiToolOptimizer,
    ToolPlan,
)
from .analysis import AllocationAnalysis, analyze_bins, theoretical_min_bins
from .position_finder import PositionFinder
from .scoring import (
    RankedProduct,
    ScoringEngine,
    position_score,
    product_selection_score,
    rank_products,
)

__all__ = [
    "AllocationAnalysis",
    "AllocationState",
    "CutDecision",
    "CuttingStockOptimizer",
    "MultiToolOptimizer",
    "PositionFinder",
    "RankedProduct",
    "ScoringEngine",
    "ToolPlan",
    "analyze_bins",
    "position_score",
    "product_selection_score",
    "rank_products",
    "theoretical_min_bins",
]
