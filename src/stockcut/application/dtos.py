"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from stockcut.domain import AllocationAnalysis, HoleGrid, Product, ToolPlan


@dataclass
class CutPlanOutput:
    """Result of planning one configuration.

    Attributes:
        products: Product catalog in configuration order.
        grid: Hole grid the plan was computed on (None if it could not be built).
        plans: One plan per tool, in tool order.
        errors: Problems that prevented planning; empty on success.
    """

    products: tuple[Product, ...] = ()
    grid: HoleGrid | None = None
    plans: dict[str, ToolPlan] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def analyses(self) -> dict[str, AllocationAnalysis]:
        return {name: plan.analysis for name, plan in self.plans.items()}
