"""Scoring heuristics for the greedy allocation loop.

Two scores drive the allocator:

- The product selection score orders outstanding products. Long products,
  products with dense hole patterns and small margins, and products with a
  lot of remaining demand are tried first.
- The position score rates one feasible cut on the active bin. It rewards
  filling the bin, butting up against existing cuts, touching the stock ends
  and covering many holes per unit of length.

The weights are fixed; changing them changes the produced plans.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from ..entities import MaterialBin
from ..value_objects import PROXIMITY, CandidatePosition, Product

# Product selection weights
LENGTH_WEIGHT = 2.5
HOLE_DENSITY_WEIGHT = 15.0
MARGIN_WEIGHT = 8.0
QUANTITY_WEIGHT = 4.0
STOCK_FIT_WEIGHT = 10.0

# Position weights
UTILIZATION_WEIGHT = 20.0
CONTINUITY_BONUS = 8.0
EDGE_BONUS = 5.0
POSITION_DENSITY_WEIGHT = 10.0


@dataclass(frozen=True)
class RankedProduct:
    """A product with its selection score for the current step."""

    product: Product
    score: float


def product_selection_score(product: Product, remaining: int, stock_length: float) -> float:
    """Priority of a product for the next allocation step."""
    length = product.length
    hole_density = product.holes_count / length
    margin_ratio = (product.left_margin + product.right_margin) / length

    return (
        length * LENGTH_WEIGHT
        + hole_density * HOLE_DENSITY_WEIGHT
        + (1 - margin_ratio) * MARGIN_WEIGHT
        + remaining * QUANTITY_WEIGHT
        + (length / stock_length) * STOCK_FIT_WEIGHT
    )


def rank_products(
    products: Sequence[Product],
    remaining: Mapping[str, int],
    stock_length: float,
) -> list[RankedProduct]:
    """Outstanding products ordered by descending selection score.

    Products with equal scores keep their catalog order.
    """
    ranked = [
        RankedProduct(
            product=product,
            score=product_selection_score(product, remaining[product.id], stock_length),
        )
        for product in products
        if remaining.get(product.id, 0) > 0
    ]
    # sorted() is stable, so ties stay in catalog order
    return sorted(ranked, key=lambda r: r.score, reverse=True)


def position_score(candidate: CandidatePosition, material_bin: MaterialBin) -> float:
    """Quality of cutting the candidate on the bin in its current state."""
    start = candidate.start
    end = candidate.end
    stock_length = material_bin.stock_length

    utilization = (material_bin.used_length() + (end - start)) / stock_length
    score = utilization * UTILIZATION_WEIGHT

    for used in material_bin.intervals:
        if abs(start - used.end) < PROXIMITY:
            score += CONTINUITY_BONUS
        if abs(end - used.start) < PROXIMITY:
            score += CONTINUITY_BONUS

    if abs(start) < PROXIMITY:
        score += EDGE_BONUS
    if abs(end - stock_length) < PROXIMITY:
        score += EDGE_BONUS

    score += (len(candidate.holes) / (end - start)) * POSITION_DENSITY_WEIGHT
    return score


class ScoringEngine:
    """Binds the scoring functions to one stock length."""

    def __init__(self, stock_length: float) -> None:
        self.stock_length = stock_length

    def rank(
        self, products: Sequence[Product], remaining: Mapping[str, int]
    ) -> list[RankedProduct]:
        return rank_products(products, remaining, self.stock_length)

    def score_position(self, candidate: CandidatePosition, material_bin: MaterialBin) -> float:
        return position_score(candidate, material_bin)
