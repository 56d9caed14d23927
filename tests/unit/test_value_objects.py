"""Tests for cut planning value objects."""

from __future__ import annotations

import pytest

from stockcut.domain import (
    ConfigurationError,
    CutInterval,
    CuttingTool,
    HoleGrid,
    ProductSpec,
    build_products,
)


class TestHoleGrid:
    """Tests for HoleGrid construction and validation."""

    def test_from_spacing_small_stock(self) -> None:
        grid = HoleGrid.from_spacing(96.0, 8.0)
        assert grid.holes == (4, 12, 20, 28, 36, 44, 52, 60, 68, 76, 84, 92)
        assert len(grid) == 12

    def test_from_spacing_default_stock(self) -> None:
        grid = HoleGrid.from_spacing(4000.0, 80.0)
        assert len(grid) == 50
        assert grid.holes[0] == 40
        assert grid.holes[-1] == 3960

    def test_from_holes(self) -> None:
        grid = HoleGrid.from_holes(100.0, 10.0, [5, 15, 25])
        assert grid.holes == (5.0, 15.0, 25.0)
        assert grid.spacing == 10.0

    def test_empty_grid_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one hole"):
            HoleGrid(stock_length=96.0, spacing=8.0, holes=())

    def test_unordered_grid_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="strictly increasing"):
            HoleGrid.from_holes(96.0, 8.0, [4, 20, 12])

    def test_duplicate_holes_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="strictly increasing"):
            HoleGrid.from_holes(96.0, 8.0, [4, 4])

    def test_hole_outside_stock_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="within"):
            HoleGrid.from_holes(96.0, 8.0, [4, 100])

    def test_invalid_dimensions_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="Stock length"):
            HoleGrid.from_spacing(0.0, 8.0)
        with pytest.raises(ConfigurationError, match="spacing"):
            HoleGrid.from_spacing(96.0, -1.0)

    def test_windows(self) -> None:
        grid = HoleGrid.from_holes(50.0, 10.0, [5, 15, 25, 35])
        assert grid.windows(2) == [(5, 15), (15, 25), (25, 35)]
        assert grid.windows(4) == [(5, 15, 25, 35)]
        assert grid.windows(5) == []


class TestProduct:
    """Tests for Product derived values and validation."""

    def test_single_hole_length(self, make_product) -> None:
        product = make_product(holes_count=1, left_margin=2, right_margin=2)
        assert product.length == 4

    def test_multi_hole_length(self, make_product) -> None:
        product = make_product(holes_count=3, left_margin=4, right_margin=6, hole_spacing=80)
        assert product.length == 4 + 6 + 2 * 80

    def test_total_length(self, make_product) -> None:
        product = make_product(holes_count=2, left_margin=3, right_margin=3, quantity=5)
        assert product.total_length == 14 * 5

    def test_dimension_summary(self, make_product) -> None:
        product = make_product(holes_count=2, left_margin=3, right_margin=4.5)
        summary = product.dimension_summary()
        assert "2 holes" in summary
        assert "3.0/4.5" in summary
        assert "15.5" in summary

    def test_dimension_summary_single_hole(self, make_product) -> None:
        assert "1 hole," in make_product().dimension_summary()

    def test_invalid_holes_count(self, make_product) -> None:
        with pytest.raises(ConfigurationError, match="holes count"):
            make_product(holes_count=0)

    def test_negative_margin(self, make_product) -> None:
        with pytest.raises(ConfigurationError, match="margins"):
            make_product(left_margin=-1)

    def test_negative_quantity(self, make_product) -> None:
        with pytest.raises(ConfigurationError, match="quantity"):
            make_product(quantity=-2)

    def test_zero_length(self, make_product) -> None:
        with pytest.raises(ConfigurationError, match="length"):
            make_product(holes_count=1, left_margin=0, right_margin=0)

    def test_is_immutable(self, make_product) -> None:
        product = make_product()
        with pytest.raises(AttributeError):
            product.quantity = 5  # type: ignore[misc]


class TestBuildProducts:
    """Tests for binding product specs to a grid."""

    def test_ids_default_to_input_order(self, small_grid: HoleGrid) -> None:
        products = build_products(
            [ProductSpec(1, 2, 2, 3), ProductSpec(2, 3, 3, 1)], small_grid
        )
        assert [p.id for p in products] == ["P1", "P2"]
        assert all(p.hole_spacing == 8.0 for p in products)

    def test_explicit_ids_kept(self, small_grid: HoleGrid) -> None:
        products = build_products([ProductSpec(1, 2, 2, 3, id="bracket")], small_grid)
        assert products[0].id == "bracket"

    def test_duplicate_ids_raise(self, small_grid: HoleGrid) -> None:
        specs = [ProductSpec(1, 2, 2, 3, id="P2"), ProductSpec(1, 2, 2, 3)]
        with pytest.raises(ConfigurationError, match="Duplicate product id: P2"):
            build_products(specs, small_grid)


class TestSmallRecords:
    """Tests for CuttingTool and CutInterval."""

    def test_tool_defaults_to_zero_kerf(self) -> None:
        assert CuttingTool("saw").kerf == 0.0

    def test_negative_kerf_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="kerf"):
            CuttingTool("saw", -0.1)

    def test_interval_length(self) -> None:
        assert CutInterval(2.0, 6.5, "A").length == 4.5
