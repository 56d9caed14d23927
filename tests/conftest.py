"""Pytest configuration and shared fixtures for cut planning tests."""

from __future__ import annotations

import pytest

from stockcut.domain import HoleGrid, Product, ProductSpec, build_products


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================

# The order used to exercise the planner end to end:
# (holes, left margin, right margin, quantity)
REFERENCE_ORDER: tuple[tuple[int, float, float, int], ...] = (
    (1, 2, 2, 15),
    (2, 3, 3, 25),
    (3, 4, 4, 10),
    (4, 5, 5, 8),
    (2, 6, 4, 12),
    (3, 3, 6, 18),
    (1, 4, 4, 30),
    (4, 3, 3, 5),
    (2, 5, 5, 20),
    (3, 2, 2, 15),
)


@pytest.fixture
def small_grid() -> HoleGrid:
    """96 long stock with holes every 8 starting at 4 (12 holes)."""
    return HoleGrid.from_spacing(96.0, 8.0)


@pytest.fixture
def default_grid() -> HoleGrid:
    """4000 long stock with holes every 80 starting at 40 (50 holes)."""
    return HoleGrid.from_spacing(4000.0, 80.0)


@pytest.fixture
def make_product():
    """Factory for products bound to a hole spacing."""

    def _make(
        id: str = "A",
        holes_count: int = 1,
        left_margin: float = 2.0,
        right_margin: float = 2.0,
        quantity: int = 1,
        hole_spacing: float = 8.0,
    ) -> Product:
        return Product(
            id=id,
            holes_count=holes_count,
            left_margin=left_margin,
            right_margin=right_margin,
            quantity=quantity,
            hole_spacing=hole_spacing,
        )

    return _make


@pytest.fixture
def reference_products(default_grid: HoleGrid) -> tuple[Product, ...]:
    """The ten product reference order on the default grid."""
    specs = [
        ProductSpec(holes_count=h, left_margin=l, right_margin=r, quantity=q)
        for h, l, r, q in REFERENCE_ORDER
    ]
    return build_products(specs, default_grid)
