"""Candidate cut position enumeration over the hole grid."""

from __future__ import annotations

import logging

from ..entities import MaterialBin
from ..value_objects import CandidatePosition, HoleGrid, Product

logger = logging.getLogger(__name__)


class PositionFinder:
    """Enumerates where a product can be cut on a stock piece.

    A product needing ``h`` holes is slid across every run of ``h``
    consecutive grid holes. Window ``i`` spans from ``grid[i] - left_margin``
    to ``grid[i + h - 1] + right_margin`` and is kept when the bin accepts it.

    Results are memoized per product id. The memo is only valid for the bin
    it was computed against; callers must call :meth:`invalidate` whenever
    they switch to another bin.

    Attributes:
        grid: The hole grid shared by every bin of the run.
    """

    def __init__(self, grid: HoleGrid) -> None:
        self.grid = grid
        self._memo: dict[str, tuple[CandidatePosition, ...]] = {}

    def enumerate(self, product: Product) -> list[CandidatePosition]:
        """Every window position for the product, ignoring bin occupancy."""
        left = product.left_margin
        right = product.right_margin
        return [
            CandidatePosition(start=window[0] - left, end=window[-1] + right, holes=window)
            for window in self.grid.windows(product.holes_count)
        ]

    def find(self, product: Product, material_bin: MaterialBin) -> tuple[CandidatePosition, ...]:
        """Feasible positions for the product on the bin, ascending by start."""
        cached = self._memo.get(product.id)
        if cached is not None:
            return cached

        positions = tuple(
            candidate
            for candidate in self.enumerate(product)
            if material_bin.can_cut(candidate.start, candidate.end)
        )
        self._memo[product.id] = positions

        logger.debug(
            "Product %s: %d feasible positions on bin %d",
            product.id,
            len(positions),
            material_bin.index,
        )
        return positions

    def invalidate(self) -> None:
        """Drop all memoized positions."""
        self._memo.clear()

    def __len__(self) -> int:
        return len(self._memo)
