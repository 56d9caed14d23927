"""Configuration schema and loading for cut plans.

Public API:
    - CutPlanConfiguration: Root configuration model
    - StockConfig, ProductConfig, OutputConfig, OutputFormat: Section models
    - load_config / load_config_from_dict: Load and validate configurations
    - ConfigError: Exception for configuration loading errors
    - validate_config, ValidationResult: Placement checks beyond the schema
    - config_to_grid, config_to_products, config_to_tool_kerfs,
      config_to_tool_names: Conversion to domain objects

Example:
    >>> from pathlib import Path
    >>> from stockcut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("order.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from stockcut.application.config.adapter import (
    config_to_grid,
    config_to_product_specs,
    config_to_products,
    config_to_tool_kerfs,
    config_to_tool_names,
)
from stockcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from stockcut.application.config.schema import (
    DEFAULT_HOLE_SPACING,
    DEFAULT_STOCK_LENGTH,
    DEFAULT_TOOL_KERFS,
    SUPPORTED_VERSIONS,
    CutPlanConfiguration,
    OutputConfig,
    OutputFormat,
    ProductConfig,
    StockConfig,
)
from stockcut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "ConfigError",
    "CutPlanConfiguration",
    "DEFAULT_HOLE_SPACING",
    "DEFAULT_STOCK_LENGTH",
    "DEFAULT_TOOL_KERFS",
    "OutputConfig",
    "OutputFormat",
    "ProductConfig",
    "SUPPORTED_VERSIONS",
    "StockConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_grid",
    "config_to_product_specs",
    "config_to_products",
    "config_to_tool_kerfs",
    "config_to_tool_names",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
