"""Utilization statistics for a finished cut plan."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..entities import MaterialBin
from ..value_objects import Product


@dataclass(frozen=True)
class AllocationAnalysis:
    """Statistics for one tool's bin sequence.

    Attributes:
        theoretical_min_bins: Lower bound on bins from total product length.
        actual_bins: Number of bins the plan uses.
        utilization_rate: Cut length over total stock length, in percent.
        total_used_length: Sum of all committed interval lengths.
        total_stock_length: actual_bins times the stock length.
        bin_utilizations: Per-bin utilization in percent, in bin order.
    """

    theoretical_min_bins: int
    actual_bins: int
    utilization_rate: float
    total_used_length: float
    total_stock_length: float
    bin_utilizations: tuple[float, ...] = ()

    @property
    def total_waste_length(self) -> float:
        """Stock length not covered by any cut (kerf losses included)."""
        return self.total_stock_length - self.total_used_length

    @property
    def extra_bins(self) -> int:
        """Bins used beyond the theoretical minimum."""
        return self.actual_bins - self.theoretical_min_bins


def theoretical_min_bins(products: Sequence[Product], stock_length: float) -> int:
    """ceil(total ordered length / stock length)."""
    total = sum(product.total_length for product in products)
    return math.ceil(total / stock_length)


def analyze_bins(
    products: Sequence[Product],
    bins: Sequence[MaterialBin],
    stock_length: float,
) -> AllocationAnalysis:
    """Aggregate committed intervals into bin count and utilization figures.

    Args:
        products: The full product catalog with its original quantities.
        bins: The bin sequence produced for one tool.
        stock_length: Length of every stock piece.

    Returns:
        AllocationAnalysis for the bin sequence.
    """
    actual = len(bins)
    used = sum(material_bin.used_length() for material_bin in bins)
    stock_total = actual * stock_length
    rate = (used / stock_total) * 100 if stock_total > 0 else 0.0

    return AllocationAnalysis(
        theoretical_min_bins=theoretical_min_bins(products, stock_length),
        actual_bins=actual,
        utilization_rate=rate,
        total_used_length=used,
        total_stock_length=stock_total,
        bin_utilizations=tuple(b.utilization_rate() * 100 for b in bins),
    )
