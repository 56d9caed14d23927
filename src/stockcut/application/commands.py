"""Application commands (use cases) for cut planning."""

from __future__ import annotations

import logging
from typing import Sequence

from stockcut.application.config import (
    CutPlanConfiguration,
    config_to_grid,
    config_to_products,
    config_to_tool_kerfs,
    config_to_tool_names,
)
from stockcut.domain import ConfigurationError, MultiToolOptimizer

from .dtos import CutPlanOutput

logger = logging.getLogger(__name__)


class OptimizeCutPlanCommand:
    """Command to compute a cut plan per tool from a configuration."""

    def execute(
        self,
        config: CutPlanConfiguration,
        tools: Sequence[str] | None = None,
    ) -> CutPlanOutput:
        """Execute the planning command.

        Domain configuration problems are returned in ``errors`` instead of
        being raised.

        Args:
            config: Validated configuration.
            tools: Tool names overriding ``config.active_tools``.

        Returns:
            CutPlanOutput with one plan per tool, or errors.
        """
        output = CutPlanOutput()
        requested = list(tools) if tools else config_to_tool_names(config)

        try:
            output.grid = config_to_grid(config.stock)
            output.products = config_to_products(config, output.grid)
            optimizer = MultiToolOptimizer(
                output.products,
                output.grid,
                config_to_tool_kerfs(config),
                requested,
            )
            output.plans = optimizer.run()
        except ConfigurationError as e:
            logger.warning("Cut plan not computed: %s", e)
            output.errors.append(str(e))
            return output

        for name, analysis in output.analyses.items():
            logger.info(
                "Tool %s: %d bins (minimum %d), %.1f%% utilization",
                name,
                analysis.actual_bins,
                analysis.theoretical_min_bins,
                analysis.utilization_rate,
            )
        return output
