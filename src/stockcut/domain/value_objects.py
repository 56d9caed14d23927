"""Value objects for the stock cutting domain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .exceptions import ConfigurationError

# Tolerance for geometric comparisons (bounds and kerf clearance).
EPSILON = 1e-4

# Tolerance used by the scoring heuristics when checking adjacency.
PROXIMITY = 0.1


@dataclass(frozen=True)
class HoleGrid:
    """The fixed lattice of admissible hole coordinates on a stock piece.

    Every stock piece of a run shares the same grid. Products are placed by
    choosing a window of consecutive holes, so the grid fully determines the
    set of candidate cut positions.

    Attributes:
        stock_length: Length of one stock piece.
        spacing: Nominal distance between neighbouring holes.
        holes: Strictly increasing hole coordinates within [0, stock_length].
    """

    stock_length: float
    spacing: float
    holes: tuple[float, ...]

    def __post_init__(self) -> None:
        if self.stock_length <= 0:
            raise ConfigurationError("Stock length must be positive")
        if self.spacing <= 0:
            raise ConfigurationError("Hole spacing must be positive")
        if not self.holes:
            raise ConfigurationError("Hole grid must contain at least one hole")
        for previous, current in zip(self.holes, self.holes[1:]):
            if current <= previous:
                raise ConfigurationError(
                    f"Hole grid must be strictly increasing "
                    f"(got {current} after {previous})"
                )
        if self.holes[0] < -EPSILON or self.holes[-1] > self.stock_length + EPSILON:
            raise ConfigurationError(
                f"Hole coordinates must lie within [0, {self.stock_length}]"
            )

    @classmethod
    def from_spacing(cls, stock_length: float, spacing: float) -> HoleGrid:
        """Create a grid with holes at spacing/2, 3*spacing/2, ... up to the stock end.

        A 96 long stock with spacing 8 yields the 12 holes 4, 12, ..., 92.
        """
        if stock_length <= 0:
            raise ConfigurationError("Stock length must be positive")
        if spacing <= 0:
            raise ConfigurationError("Hole spacing must be positive")

        first = spacing / 2
        holes: list[float] = []
        k = 0
        # Multiply instead of accumulating so long grids do not drift.
        while first + k * spacing <= stock_length + EPSILON:
            holes.append(first + k * spacing)
            k += 1
        return cls(stock_length=stock_length, spacing=spacing, holes=tuple(holes))

    @classmethod
    def from_holes(
        cls, stock_length: float, spacing: float, holes: Sequence[float]
    ) -> HoleGrid:
        """Create a grid from an explicit list of hole coordinates."""
        return cls(
            stock_length=stock_length,
            spacing=spacing,
            holes=tuple(float(h) for h in holes),
        )

    def __len__(self) -> int:
        return len(self.holes)

    def windows(self, size: int) -> list[tuple[float, ...]]:
        """All runs of ``size`` consecutive holes, left to right."""
        if size < 1:
            return []
        return [
            self.holes[i : i + size] for i in range(len(self.holes) - size + 1)
        ]


@dataclass(frozen=True)
class ProductSpec:
    """Input record for one line of the order, before it is bound to a grid.

    Attributes:
        holes_count: Number of holes the product needs (at least 1).
        left_margin: Distance from the leftmost hole to the left cut edge.
        right_margin: Distance from the rightmost hole to the right cut edge.
        quantity: Number of units required.
        id: Optional stable identifier; assigned from the input order if omitted.
    """

    holes_count: int
    left_margin: float
    right_margin: float
    quantity: int
    id: str | None = None


@dataclass(frozen=True)
class Product:
    """An ordered product with its hole pattern and required quantity.

    Attributes:
        id: Stable unique identifier.
        holes_count: Number of consecutive grid holes the product spans.
        left_margin: Distance from the first hole to the left cut edge.
        right_margin: Distance from the last hole to the right cut edge.
        quantity: Number of units required.
        hole_spacing: Distance between the product's holes.
    """

    id: str
    holes_count: int
    left_margin: float
    right_margin: float
    quantity: int
    hole_spacing: float

    def __post_init__(self) -> None:
        if self.holes_count < 1:
            raise ConfigurationError(
                f"Product {self.id}: holes count must be at least 1"
            )
        if self.left_margin < 0 or self.right_margin < 0:
            raise ConfigurationError(f"Product {self.id}: margins must be non-negative")
        if self.quantity < 0:
            raise ConfigurationError(f"Product {self.id}: quantity must be non-negative")
        if self.length <= 0:
            raise ConfigurationError(f"Product {self.id}: length must be positive")

    @property
    def length(self) -> float:
        """Length of stock the product occupies once cut."""
        return (
            self.left_margin
            + self.right_margin
            + (self.holes_count - 1) * self.hole_spacing
        )

    @property
    def total_length(self) -> float:
        """Length needed for the full ordered quantity."""
        return self.length * self.quantity

    def dimension_summary(self) -> str:
        """Human readable description used by reports."""
        holes = "hole" if self.holes_count == 1 else "holes"
        return (
            f"{self.holes_count} {holes}, margins {self.left_margin:.1f}/"
            f"{self.right_margin:.1f}, length {self.length:.1f}"
        )

    @classmethod
    def from_spec(cls, spec: ProductSpec, grid: HoleGrid, index: int) -> Product:
        """Bind a ProductSpec to a grid; ids default to P1, P2, ..."""
        return cls(
            id=spec.id if spec.id is not None else f"P{index + 1}",
            holes_count=spec.holes_count,
            left_margin=spec.left_margin,
            right_margin=spec.right_margin,
            quantity=spec.quantity,
            hole_spacing=grid.spacing,
        )


def build_products(specs: Sequence[ProductSpec], grid: HoleGrid) -> tuple[Product, ...]:
    """Convert input specs into products, keeping the input order.

    Raises:
        ConfigurationError: If a spec is invalid or two products share an id.
    """
    products = tuple(Product.from_spec(spec, grid, i) for i, spec in enumerate(specs))
    seen: set[str] = set()
    for product in products:
        if product.id in seen:
            raise ConfigurationError(f"Duplicate product id: {product.id}")
        seen.add(product.id)
    return products


@dataclass(frozen=True)
class CuttingTool:
    """A cutting tool and the material it removes per cut.

    Attributes:
        name: Tool identity, e.g. "normal_blade" or "wire".
        kerf: Clearance required between neighbouring cuts.
    """

    name: str
    kerf: float = 0.0

    def __post_init__(self) -> None:
        if self.kerf < 0:
            raise ConfigurationError(f"Tool {self.name}: kerf must be non-negative")


@dataclass(frozen=True)
class CutInterval:
    """A committed cut on a stock piece.

    Attributes:
        start: Left cut edge.
        end: Right cut edge.
        product_id: Product the interval was cut for.
    """

    start: float
    end: float
    product_id: str

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class CandidatePosition:
    """A possible placement of a product on the grid.

    Attributes:
        start: Left cut edge (first hole minus left margin).
        end: Right cut edge (last hole plus right margin).
        holes: The grid holes the product would use.
    """

    start: float
    end: float
    holes: tuple[float, ...]

    @property
    def length(self) -> float:
        return self.end - self.start
