"""Validation structures and placement checks for cut plan configurations.

Schema validation happens when the configuration is loaded. The checks here
go further and bind the configuration to the domain: the hole grid is built,
every product is checked against an empty stock piece, and the requested
tools are resolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stockcut.application.config.adapter import (
    config_to_grid,
    config_to_products,
    config_to_tool_kerfs,
    config_to_tool_names,
)
from stockcut.application.config.schema import CutPlanConfiguration
from stockcut.domain import ConfigurationError, CuttingStockOptimizer, MultiToolOptimizer
from stockcut.domain.value_objects import EPSILON


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "products[2].holes")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def validate_config(config: CutPlanConfiguration) -> ValidationResult:
    """Check that a loaded configuration can actually be planned.

    Errors:
        - The hole grid cannot be built
        - Products collide on id or are otherwise invalid
        - A requested tool has no kerf width
        - A product cannot be placed on an empty stock piece

    Warnings:
        - Products with zero quantity
        - Explicit holes that are not evenly spaced by ``hole_spacing``
    """
    result = ValidationResult()

    try:
        grid = config_to_grid(config.stock)
    except ConfigurationError as e:
        return result.add_error("stock", str(e))

    try:
        products = config_to_products(config, grid)
    except ConfigurationError as e:
        return result.add_error("products", str(e))

    try:
        MultiToolOptimizer(
            products,
            grid,
            config_to_tool_kerfs(config),
            config_to_tool_names(config),
        )
    except ConfigurationError as e:
        result.add_error("active_tools", str(e), config.active_tools)

    # Kerf does not matter on an empty stock piece
    checker = CuttingStockOptimizer(products, grid)
    for i, product in enumerate(products):
        path = f"products[{i}]"
        if product.quantity == 0:
            result.add_warning(
                f"{path}.quantity",
                f"Product {product.id} has no demand and will not be cut",
            )
            continue
        problem = checker.placement_problem(product)
        if problem is not None:
            result.add_error(path, problem)

    if config.stock.holes is not None:
        _check_even_spacing(grid.holes, grid.spacing, result)

    return result


def _check_even_spacing(
    holes: tuple[float, ...], spacing: float, result: ValidationResult
) -> None:
    for i, (previous, current) in enumerate(zip(holes, holes[1:])):
        if abs((current - previous) - spacing) > EPSILON:
            result.add_warning(
                f"stock.holes[{i + 1}]",
                f"Hole gap {current - previous:.2f} differs from hole_spacing "
                f"{spacing:.2f}; cut lengths will differ from product lengths",
                suggestion="Use evenly spaced holes or adjust hole_spacing",
            )
            return
