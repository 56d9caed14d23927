"""Conversion of validated configuration models into domain objects."""

from __future__ import annotations

from stockcut.application.config.schema import CutPlanConfiguration, StockConfig
from stockcut.domain import HoleGrid, Product, ProductSpec, build_products


def config_to_grid(stock: StockConfig) -> HoleGrid:
    """Build the hole grid from explicit holes or from the spacing.

    Raises:
        ConfigurationError: If the resulting grid is invalid.
    """
    if stock.holes is not None:
        return HoleGrid.from_holes(stock.length, stock.hole_spacing, stock.holes)
    return HoleGrid.from_spacing(stock.length, stock.hole_spacing)


def config_to_product_specs(config: CutPlanConfiguration) -> list[ProductSpec]:
    return [
        ProductSpec(
            holes_count=product.holes,
            left_margin=product.left_margin,
            right_margin=product.right_margin,
            quantity=product.quantity,
            id=product.id,
        )
        for product in config.products
    ]


def config_to_products(
    config: CutPlanConfiguration, grid: HoleGrid | None = None
) -> tuple[Product, ...]:
    """Build the product catalog in configuration order.

    Raises:
        ConfigurationError: If a product is invalid or ids collide.
    """
    if grid is None:
        grid = config_to_grid(config.stock)
    return build_products(config_to_product_specs(config), grid)


def config_to_tool_kerfs(config: CutPlanConfiguration) -> dict[str, float]:
    return dict(config.tools)


def config_to_tool_names(config: CutPlanConfiguration) -> list[str] | None:
    """Tools requested for planning, or None for every configured tool."""
    if config.active_tools is None:
        return None
    return list(config.active_tools)
