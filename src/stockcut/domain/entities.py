"""Domain entities for stock cutting."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidCutError
from .value_objects import EPSILON, CutInterval, CuttingTool


@dataclass
class MaterialBin:
    """A single stock piece and the cuts committed to it.

    Intervals are kept sorted by start. Any two intervals, each widened by the
    tool kerf, are disjoint, and every interval lies within [0, stock_length].

    Attributes:
        index: Zero-based position of the bin in its tool's bin sequence.
        stock_length: Length of the stock piece.
        tool: Cutting tool used on this piece for its whole lifetime.
        intervals: Committed cuts, sorted by start.
    """

    index: int
    stock_length: float
    tool: CuttingTool = field(default_factory=lambda: CuttingTool("default"))
    intervals: list[CutInterval] = field(default_factory=list)

    @property
    def kerf(self) -> float:
        return self.tool.kerf

    @property
    def is_empty(self) -> bool:
        return not self.intervals

    @property
    def piece_count(self) -> int:
        return len(self.intervals)

    def can_cut(self, start: float, end: float) -> bool:
        """Check whether [start, end] fits without touching existing cuts.

        Each existing interval is treated as widened by the kerf on both
        sides; the candidate must lie entirely to one side of it.
        """
        if start < -EPSILON or end > self.stock_length + EPSILON:
            return False

        kerf = self.tool.kerf
        for used in self.intervals:
            if not (
                end <= used.start - kerf + EPSILON
                or start >= used.end + kerf - EPSILON
            ):
                return False
        return True

    def cut(self, start: float, end: float, product_id: str) -> CutInterval:
        """Commit a cut and return the stored interval.

        Raises:
            InvalidCutError: If the interval fails :meth:`can_cut`.
        """
        if not self.can_cut(start, end):
            raise InvalidCutError(start, end, self.index)

        interval = CutInterval(start=start, end=end, product_id=product_id)
        self.intervals.append(interval)
        self.intervals.sort(key=lambda i: i.start)
        return interval

    def used_length(self) -> float:
        """Sum of the committed interval lengths."""
        return sum(interval.length for interval in self.intervals)

    def utilization_rate(self) -> float:
        """Fraction of the stock length covered by cuts (0-1)."""
        return self.used_length() / self.stock_length

    def gaps(self) -> list[tuple[float, float]]:
        """Uncut stretches of the stock, including both ends, left to right."""
        gaps: list[tuple[float, float]] = []
        previous_end = 0.0
        for interval in self.intervals:
            if interval.start > previous_end:
                gaps.append((previous_end, interval.start))
            previous_end = max(previous_end, interval.end)
        if self.stock_length > previous_end:
            gaps.append((previous_end, self.stock_length))
        return gaps

    def max_continuous_space(self) -> float:
        """Length of the largest uncut stretch."""
        largest = 0.0
        previous_end = 0.0
        for interval in self.intervals:
            largest = max(largest, interval.start - previous_end)
            previous_end = interval.end
        return max(largest, self.stock_length - previous_end)

    def count_for(self, product_id: str) -> int:
        """Number of units of a product cut from this bin."""
        return sum(1 for interval in self.intervals if interval.product_id == product_id)
