"""Output formatters for cut plans."""

from __future__ import annotations

import json
from typing import Any, Sequence

from stockcut.application.dtos import CutPlanOutput
from stockcut.domain import AllocationAnalysis, MaterialBin, Product, ToolPlan


class DemandFormatter:
    """Formats the product catalog as a table."""

    def format(self, products: Sequence[Product]) -> str:
        if not products:
            return "No products ordered."

        lines = [
            "PRODUCTS",
            "=" * 70,
            f"{'Product':<12} {'Holes':<6} {'Left':<8} {'Right':<8} {'Length':<10} {'Qty':<6}",
            "-" * 70,
        ]
        total_length = 0.0
        for product in products:
            lines.append(
                f"{product.id:<12} {product.holes_count:<6} {product.left_margin:<8.1f} "
                f"{product.right_margin:<8.1f} {product.length:<10.1f} {product.quantity:<6}"
            )
            total_length += product.total_length

        lines.append("-" * 70)
        lines.append(f"{'TOTAL':<12} {'':<6} {'':<8} {'':<8} {total_length:<10.1f}")
        return "\n".join(lines)


class CutPlanFormatter:
    """Formats tool plans as per-stock cut tables with a summary."""

    def __init__(self, show_gaps: bool = False) -> None:
        """Initialize formatter.

        Args:
            show_gaps: Whether to list the uncut stretches of each stock piece.
        """
        self._show_gaps = show_gaps

    def format(self, output: CutPlanOutput) -> str:
        """Format every tool plan of an output."""
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)
        return "\n\n".join(self.format_plan(plan) for plan in output.plans.values())

    def format_plan(self, plan: ToolPlan) -> str:
        lines = [
            f"CUT PLAN - {plan.tool.name} (kerf {plan.tool.kerf:g})",
            "=" * 60,
        ]
        for material_bin in plan.bins:
            lines.extend(self._format_bin(material_bin))
        lines.append("")
        lines.append(self.format_summary(plan.analysis))
        return "\n".join(lines)

    def _format_bin(self, material_bin: MaterialBin) -> list[str]:
        pieces = material_bin.piece_count
        lines = [
            f"Stock {material_bin.index + 1}: {pieces} piece{'s' if pieces != 1 else ''}, "
            f"{material_bin.utilization_rate() * 100:.1f}% used, "
            f"largest free {material_bin.max_continuous_space():.1f}",
        ]
        for interval in material_bin.intervals:
            lines.append(
                f"  {interval.product_id:<12} {interval.start:>10.1f} - {interval.end:<10.1f} "
                f"({interval.length:.1f})"
            )
        if self._show_gaps:
            for start, end in material_bin.gaps():
                lines.append(f"  {'(free)':<12} {start:>10.1f} - {end:<10.1f} ({end - start:.1f})")
        return lines

    def format_summary(self, analysis: AllocationAnalysis) -> str:
        return "\n".join(
            [
                f"Utilization: {analysis.utilization_rate:.1f}%",
                f"Stock used: {analysis.actual_bins}",
                f"Theoretical minimum: {analysis.theoretical_min_bins}",
                f"Waste length: {analysis.total_waste_length:.1f}",
            ]
        )


class JsonExporter:
    """Exports cut plans as JSON."""

    def export(self, output: CutPlanOutput) -> str:
        """Export a planning output as a JSON string."""
        if not output.is_valid:
            return json.dumps({"errors": output.errors}, indent=2)

        data: dict[str, Any] = {
            "stock": {
                "length": output.grid.stock_length if output.grid else None,
                "hole_spacing": output.grid.spacing if output.grid else None,
                "holes": list(output.grid.holes) if output.grid else [],
            },
            "products": [self._format_product(p) for p in output.products],
            "plans": {name: self._format_plan(plan) for name, plan in output.plans.items()},
        }
        return json.dumps(data, indent=2)

    def _format_product(self, product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "holes": product.holes_count,
            "left_margin": product.left_margin,
            "right_margin": product.right_margin,
            "quantity": product.quantity,
            "length": product.length,
        }

    def _format_plan(self, plan: ToolPlan) -> dict[str, Any]:
        analysis = plan.analysis
        return {
            "kerf": plan.tool.kerf,
            "bins": [
                {
                    "index": material_bin.index,
                    "utilization": material_bin.utilization_rate() * 100,
                    "cuts": [
                        {
                            "start": interval.start,
                            "end": interval.end,
                            "product_id": interval.product_id,
                        }
                        for interval in material_bin.intervals
                    ],
                }
                for material_bin in plan.bins
            ],
            "analysis": {
                "theoretical_min_bins": analysis.theoretical_min_bins,
                "actual_bins": analysis.actual_bins,
                "utilization_rate": analysis.utilization_rate,
                "total_used_length": analysis.total_used_length,
                "total_waste_length": analysis.total_waste_length,
            },
        }
