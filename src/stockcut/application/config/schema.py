"""Pydantic models for cut plan configuration files."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Supported schema versions for configuration files
# Version 1.0: Stock, hole grid, tools, products and output options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Defaults used when a configuration omits the stock or tools sections (mm).
DEFAULT_STOCK_LENGTH = 4000.0
DEFAULT_HOLE_SPACING = 80.0
DEFAULT_TOOL_KERFS: dict[str, float] = {
    "normal_blade": 3.0,
    "wire": 0.3,
}


class OutputFormat(str, Enum):
    """Report formats supported by the optimize command."""

    TEXT = "text"
    JSON = "json"
    ASCII = "ascii"


class StockConfig(BaseModel):
    """Stock material and hole grid configuration.

    Attributes:
        length: Length of one stock piece.
        hole_spacing: Distance between neighbouring holes.
        holes: Explicit hole coordinates. When omitted, holes are generated
            at half a spacing from the start and then every spacing.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(
        default=DEFAULT_STOCK_LENGTH, gt=0, description="Stock piece length"
    )
    hole_spacing: float = Field(
        default=DEFAULT_HOLE_SPACING, gt=0, description="Distance between holes"
    )
    holes: list[float] | None = Field(
        default=None, min_length=1, description="Explicit hole coordinates"
    )

    @model_validator(mode="after")
    def validate_holes(self) -> "StockConfig":
        """Explicit holes must be strictly increasing and lie on the stock."""
        if self.holes is None:
            return self
        for previous, current in zip(self.holes, self.holes[1:]):
            if current <= previous:
                raise ValueError(
                    f"holes must be strictly increasing ({current} follows {previous})"
                )
        if self.holes[0] < 0 or self.holes[-1] > self.length:
            raise ValueError(f"holes must lie within [0, {self.length}]")
        return self


class ProductConfig(BaseModel):
    """One ordered product.

    Attributes:
        id: Optional identifier; products without one are numbered P1, P2, ...
        holes: Number of holes the product needs.
        left_margin: Distance from the first hole to the left cut edge.
        right_margin: Distance from the last hole to the right cut edge.
        quantity: Number of units required.
    """

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    holes: int = Field(..., ge=1, description="Number of holes")
    left_margin: float = Field(..., ge=0, description="Left margin")
    right_margin: float = Field(..., ge=0, description="Right margin")
    quantity: int = Field(..., ge=0, description="Units required")


class OutputConfig(BaseModel):
    """Output options.

    Attributes:
        format: Report format written to stdout.
        svg_dir: Directory for SVG cut diagrams (one file per tool).
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.TEXT
    svg_dir: str | None = None


class CutPlanConfiguration(BaseModel):
    """Root configuration model for a cut plan.

    Example:
        >>> config = CutPlanConfiguration(
        ...     products=[ProductConfig(holes=2, left_margin=3, right_margin=3, quantity=5)]
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    stock: StockConfig = Field(default_factory=StockConfig)
    tools: dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_TOOL_KERFS),
        description="Kerf width per cutting tool",
    )
    active_tools: list[str] | None = Field(
        default=None, description="Tools to plan for (default: all tools)"
    )
    products: list[ProductConfig] = Field(..., min_length=1)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minor versions of the same major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("tools")
    @classmethod
    def validate_tools(cls, v: dict[str, float]) -> dict[str, float]:
        """At least one tool, every kerf non-negative."""
        if not v:
            raise ValueError("at least one cutting tool is required")
        for name, kerf in v.items():
            if kerf < 0:
                raise ValueError(f"kerf for tool '{name}' must be non-negative")
        return v

    @model_validator(mode="after")
    def validate_product_ids(self) -> "CutPlanConfiguration":
        """Explicit product ids must be unique."""
        seen: set[str] = set()
        for product in self.products:
            if product.id is None:
                continue
            if product.id in seen:
                raise ValueError(f"duplicate product id '{product.id}'")
            seen.add(product.id)
        return self
