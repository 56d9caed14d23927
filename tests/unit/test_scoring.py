"""Tests for product selection and position scoring."""

from __future__ import annotations

import pytest

from stockcut.domain import CandidatePosition, MaterialBin, ScoringEngine
from stockcut.domain.services.scoring import (
    position_score,
    product_selection_score,
    rank_products,
)


class TestProductSelectionScore:
    def test_single_hole_product(self, make_product) -> None:
        product = make_product(holes_count=1, left_margin=2, right_margin=2, quantity=1)
        # 10 (length) + 3.75 (density) + 0 (margins) + 4 (demand) + 0.4167 (stock fit)
        assert product_selection_score(product, 1, 96.0) == pytest.approx(18.16667, rel=1e-4)

    def test_more_demand_scores_higher(self, make_product) -> None:
        product = make_product()
        assert product_selection_score(product, 5, 96.0) > product_selection_score(
            product, 1, 96.0
        )

    def test_longer_product_scores_higher(self, make_product) -> None:
        short = make_product(holes_count=1)
        long = make_product(holes_count=4)
        assert product_selection_score(long, 1, 96.0) > product_selection_score(
            short, 1, 96.0
        )


class TestRankProducts:
    def test_orders_by_descending_score(self, make_product) -> None:
        short = make_product(id="short", holes_count=1)
        long = make_product(id="long", holes_count=4)
        ranked = rank_products([short, long], {"short": 1, "long": 1}, 96.0)
        assert [r.product.id for r in ranked] == ["long", "short"]

    def test_skips_products_without_demand(self, make_product) -> None:
        a = make_product(id="A")
        b = make_product(id="B")
        ranked = rank_products([a, b], {"A": 0, "B": 3}, 96.0)
        assert [r.product.id for r in ranked] == ["B"]

    def test_ties_keep_catalog_order(self, make_product) -> None:
        products = [make_product(id=pid) for pid in ("C", "A", "B")]
        ranked = rank_products(products, {"A": 2, "B": 2, "C": 2}, 96.0)
        assert [r.product.id for r in ranked] == ["C", "A", "B"]

    def test_engine_delegates(self, make_product) -> None:
        products = [make_product(id="A"), make_product(id="B", holes_count=2)]
        engine = ScoringEngine(96.0)
        ranked = engine.rank(products, {"A": 1, "B": 1})
        assert ranked == rank_products(products, {"A": 1, "B": 1}, 96.0)


class TestPositionScore:
    def test_empty_bin_at_stock_edge(self) -> None:
        material_bin = MaterialBin(index=0, stock_length=96.0)
        candidate = CandidatePosition(start=0.0, end=8.0, holes=(4.0,))
        # 1.6667 (utilization) + 5 (edge) + 1.25 (density)
        assert position_score(candidate, material_bin) == pytest.approx(7.91667, rel=1e-4)

    def test_continuity_bonus(self) -> None:
        material_bin = MaterialBin(index=0, stock_length=96.0)
        material_bin.cut(2.0, 6.0, "A")
        candidate = CandidatePosition(start=6.0, end=10.0, holes=(8.0,))
        # 1.6667 (utilization) + 8 (continuity) + 2.5 (density)
        assert position_score(candidate, material_bin) == pytest.approx(12.16667, rel=1e-4)

    def test_bonus_on_both_sides(self) -> None:
        material_bin = MaterialBin(index=0, stock_length=96.0)
        material_bin.cut(2.0, 6.0, "A")
        material_bin.cut(10.0, 14.0, "A")
        between = CandidatePosition(start=6.0, end=10.0, holes=(8.0,))
        apart = CandidatePosition(start=18.0, end=22.0, holes=(20.0,))

        difference = position_score(between, material_bin) - position_score(apart, material_bin)
        assert difference == pytest.approx(16.0)

    def test_right_edge_bonus(self) -> None:
        material_bin = MaterialBin(index=0, stock_length=96.0)
        at_end = CandidatePosition(start=88.0, end=96.0, holes=(92.0,))
        inside = CandidatePosition(start=80.0, end=88.0, holes=(84.0,))
        difference = position_score(at_end, material_bin) - position_score(inside, material_bin)
        assert difference == pytest.approx(5.0)

    def test_proximity_tolerance(self) -> None:
        material_bin = MaterialBin(index=0, stock_length=96.0)
        near = CandidatePosition(start=0.05, end=8.0, holes=(4.0,))
        far = CandidatePosition(start=0.2, end=8.0, holes=(4.0,))
        assert position_score(near, material_bin) - position_score(
            far, material_bin
        ) == pytest.approx(5.0, abs=0.1)

    def test_denser_position_scores_higher(self) -> None:
        material_bin = MaterialBin(index=0, stock_length=96.0)
        dense = CandidatePosition(start=20.0, end=30.0, holes=(22.0, 28.0))
        sparse = CandidatePosition(start=40.0, end=50.0, holes=(45.0,))
        assert position_score(dense, material_bin) > position_score(sparse, material_bin)
