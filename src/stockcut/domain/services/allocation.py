"""Greedy allocation of product units onto stock pieces.

The optimizer repeatedly picks the single best (product, position) pair over
all outstanding demand on the active stock piece, commits it, and opens a new
piece only when nothing fits any more. Committed cuts are never revisited.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence

from ..entities import MaterialBin
from ..exceptions import ConfigurationError, OptimizerStateError
from ..value_objects import (
    EPSILON,
    CandidatePosition,
    CutInterval,
    CuttingTool,
    HoleGrid,
    Product,
)
from .analysis import AllocationAnalysis, analyze_bins
from .position_finder import PositionFinder
from .scoring import ScoringEngine

logger = logging.getLogger(__name__)


class AllocationState(Enum):
    """States of the allocation loop."""

    SELECTING = "selecting"
    CUTTING = "cutting"
    OPENING_NEW_BIN = "opening_new_bin"
    DONE = "done"


@dataclass(frozen=True)
class CutDecision:
    """The best cut found during one selection step."""

    product: Product
    position: CandidatePosition
    score: float


class CuttingStockOptimizer:
    """Single-tool greedy cut planner.

    Each instance owns its demand, bins and position memo and can be run
    exactly once.

    Attributes:
        products: Product catalog in input order.
        grid: Hole grid shared by all bins.
        tool: Cutting tool (and kerf) used on every bin of this run.
        position_finder: Memoizing candidate position enumerator.
        scoring: Scoring engine bound to the stock length.
    """

    def __init__(
        self,
        products: Sequence[Product],
        grid: HoleGrid,
        tool: CuttingTool | None = None,
    ) -> None:
        self.products = tuple(products)
        self.grid = grid
        self.tool = tool or CuttingTool("default", 0.0)
        self.position_finder = PositionFinder(grid)
        self.scoring = ScoringEngine(grid.stock_length)

        self._remaining: dict[str, int] = {p.id: p.quantity for p in self.products}
        self._bins: list[MaterialBin] = []
        self._has_run = False
        self._failed = False
        self._steps = 0
        self._open_bin()

    @property
    def bins(self) -> tuple[MaterialBin, ...]:
        """Bins in creation order."""
        return tuple(self._bins)

    @property
    def active_bin(self) -> MaterialBin:
        return self._bins[-1]

    @property
    def remaining(self) -> dict[str, int]:
        """Copy of the outstanding demand per product id."""
        return dict(self._remaining)

    @property
    def steps(self) -> int:
        """Number of cuts committed so far."""
        return self._steps

    @property
    def has_run(self) -> bool:
        return self._has_run

    def has_remaining_demand(self) -> bool:
        return any(quantity > 0 for quantity in self._remaining.values())

    def run(self) -> tuple[MaterialBin, ...]:
        """Allocate every ordered unit and return the bin sequence.

        Raises:
            OptimizerStateError: If the optimizer has already run.
            ConfigurationError: If some product cannot be placed on an
                empty stock piece.
        """
        if self._has_run:
            raise OptimizerStateError("Optimizer has already run")

        # Nothing is mutated until the preconditions hold
        self.check_preconditions()
        self._has_run = True

        logger.info(
            "Allocating %d units of %d products with tool %s (kerf %.3f)",
            sum(self._remaining.values()),
            len(self.products),
            self.tool.name,
            self.tool.kerf,
        )

        state = AllocationState.SELECTING
        decision: CutDecision | None = None
        while state is not AllocationState.DONE:
            if state is AllocationState.SELECTING:
                if not self.has_remaining_demand():
                    state = AllocationState.DONE
                    continue
                decision = self._select_best_cut()
                if decision is not None:
                    state = AllocationState.CUTTING
                else:
                    state = AllocationState.OPENING_NEW_BIN

            elif state is AllocationState.CUTTING:
                assert decision is not None
                self._commit(decision)
                decision = None
                state = AllocationState.SELECTING

            elif state is AllocationState.OPENING_NEW_BIN:
                if self.active_bin.is_empty:
                    # An empty bin that accepts nothing will never progress.
                    self._failed = True
                    outstanding = [pid for pid, q in self._remaining.items() if q > 0]
                    raise ConfigurationError(
                        f"Products {', '.join(outstanding)} cannot be placed on an "
                        f"empty stock piece"
                    )
                self._open_bin()
                state = AllocationState.SELECTING

        logger.info(
            "Tool %s: %d cuts on %d bins",
            self.tool.name,
            self._steps,
            len(self._bins),
        )
        return self.bins

    def analyze(self) -> AllocationAnalysis:
        """Utilization statistics for the finished plan.

        Raises:
            OptimizerStateError: If called before :meth:`run` or after a
                run that failed.
        """
        if not self._has_run:
            raise OptimizerStateError("Optimizer must run before it can be analyzed")
        if self._failed:
            raise OptimizerStateError("Optimizer run failed; there is no plan to analyze")
        return analyze_bins(self.products, self._bins, self.grid.stock_length)

    def check_preconditions(self) -> None:
        """Verify that every product with demand fits on an empty stock piece.

        Raises:
            ConfigurationError: For the first product that is longer than the
                stock or has no feasible hole window.
        """
        for product in self.products:
            if product.quantity <= 0:
                continue
            problem = self.placement_problem(product)
            if problem is not None:
                raise ConfigurationError(problem)

    def placement_problem(self, product: Product) -> str | None:
        """Describe why a product cannot go on an empty stock piece, if it cannot."""
        stock_length = self.grid.stock_length
        if product.length > stock_length + EPSILON:
            return (
                f"Product {product.id} is {product.length:.1f} long, "
                f"longer than the stock length {stock_length:.1f}"
            )
        if product.holes_count > len(self.grid):
            return (
                f"Product {product.id} needs {product.holes_count} holes but the "
                f"grid only has {len(self.grid)}"
            )
        empty = MaterialBin(index=0, stock_length=stock_length, tool=self.tool)
        if not any(
            empty.can_cut(c.start, c.end) for c in self.position_finder.enumerate(product)
        ):
            return f"Product {product.id} has no hole window that fits within the stock"
        return None

    def _select_best_cut(self) -> CutDecision | None:
        """Scan all outstanding products and return the highest scoring cut."""
        active = self.active_bin
        best: CutDecision | None = None
        best_score = -math.inf

        ranked = self.scoring.rank(self.products, self._remaining)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Step %d, remaining: %s",
                self._steps + 1,
                ", ".join(f"{r.product.id}={self._remaining[r.product.id]}" for r in ranked),
            )

        for entry in ranked:
            for position in self.position_finder.find(entry.product, active):
                # Memoized positions may predate cuts made later on this bin.
                if not active.can_cut(position.start, position.end):
                    continue
                score = self.scoring.score_position(position, active)
                if score > best_score:
                    best_score = score
                    best = CutDecision(product=entry.product, position=position, score=score)
        return best

    def _commit(self, decision: CutDecision) -> CutInterval:
        product = decision.product
        position = decision.position
        interval = self.active_bin.cut(position.start, position.end, product.id)
        self._remaining[product.id] -= 1
        self._steps += 1

        logger.debug(
            "Cut %s on bin %d at %.1f - %.1f (score %.3f)",
            product.id,
            self.active_bin.index,
            position.start,
            position.end,
            decision.score,
        )
        return interval

    def _open_bin(self) -> MaterialBin:
        material_bin = MaterialBin(
            index=len(self._bins),
            stock_length=self.grid.stock_length,
            tool=self.tool,
        )
        self._bins.append(material_bin)
        self.position_finder.invalidate()
        if material_bin.index > 0:
            logger.info("Opening bin %d for tool %s", material_bin.index + 1, self.tool.name)
        return material_bin


@dataclass(frozen=True)
class ToolPlan:
    """Result of one tool's independent optimization pass."""

    tool: CuttingTool
    bins: tuple[MaterialBin, ...]
    analysis: AllocationAnalysis


class MultiToolOptimizer:
    """Runs an isolated optimization pass per cutting tool.

    Every pass starts from the full product catalog; demand, bins and memo
    tables are never shared between tools, and results are kept per tool.

    Attributes:
        products: Product catalog shared (read-only) by every pass.
        grid: Hole grid shared by every pass.
        tools: Tools to plan for, in the requested order.
    """

    def __init__(
        self,
        products: Sequence[Product],
        grid: HoleGrid,
        tool_kerfs: Mapping[str, float],
        tools: Sequence[str] | None = None,
    ) -> None:
        """Initialize with the catalog and the tool kerf table.

        Args:
            products: Product catalog.
            grid: Hole grid.
            tool_kerfs: Kerf width per tool name.
            tools: Tool names to plan for; defaults to every tool in
                ``tool_kerfs``.

        Raises:
            ConfigurationError: If no tool is selected or a selected tool has
                no kerf width.
        """
        names = list(dict.fromkeys(tools if tools is not None else tool_kerfs))
        if not names:
            raise ConfigurationError("At least one cutting tool is required")
        missing = [name for name in names if name not in tool_kerfs]
        if missing:
            raise ConfigurationError(
                f"No kerf width configured for tool(s): {', '.join(missing)}"
            )

        self.products = tuple(products)
        self.grid = grid
        self.tools = tuple(CuttingTool(name, tool_kerfs[name]) for name in names)
        self._plans: dict[str, ToolPlan] | None = None

    @property
    def plans(self) -> dict[str, ToolPlan]:
        if self._plans is None:
            raise OptimizerStateError("Optimizer must run before plans are available")
        return dict(self._plans)

    def run(self) -> dict[str, ToolPlan]:
        """Plan every tool and return the results keyed by tool name."""
        if self._plans is not None:
            raise OptimizerStateError("Optimizer has already run")

        plans: dict[str, ToolPlan] = {}
        for tool in self.tools:
            optimizer = CuttingStockOptimizer(self.products, self.grid, tool)
            bins = optimizer.run()
            plans[tool.name] = ToolPlan(tool=tool, bins=bins, analysis=optimizer.analyze())
        self._plans = plans
        return dict(plans)

    def analyze(self) -> dict[str, AllocationAnalysis]:
        """Statistics per tool name."""
        return {name: plan.analysis for name, plan in self.plans.items()}
