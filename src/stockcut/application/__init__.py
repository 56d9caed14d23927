"""Application layer - use cases and configuration."""

from .commands import OptimizeCutPlanCommand
from .dtos import CutPlanOutput

__all__ = [
    "CutPlanOutput",
    "OptimizeCutPlanCommand",
]
