"""Cut diagram rendering for stock cut plans.

This module provides SVG and ASCII rendering of tool plans. Each stock piece
is drawn as a horizontal bar with its cut intervals, the grid holes each
product uses, margin markers and a utilization footer.
"""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from stockcut.domain import CutInterval, HoleGrid, MaterialBin, Product, ToolPlan

# Fill colors cycled by product position in the catalog
PRODUCT_COLORS: tuple[str, ...] = (
    "#FF9999",  # Red
    "#99FF99",  # Green
    "#9999FF",  # Blue
    "#FFFF99",  # Yellow
    "#FF99FF",  # Purple
    "#99FFFF",  # Cyan
)

ASCII_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class CutDiagramRenderer:
    """Renders cut plans in SVG and ASCII formats.

    Attributes:
        bar_width: Drawn width of one stock piece in pixels.
        bar_height: Drawn height of one stock piece in pixels.
        row_spacing: Vertical distance between stock pieces in pixels.
        margin: Outer margin around the diagram in pixels.
        stock_fill: Fill color for uncut stock.
        stroke: Color for outlines, holes and text.
        show_holes: Whether to mark the grid holes used by each product.
        show_margins: Whether to draw product margin markers.
    """

    def __init__(
        self,
        bar_width: float = 2200.0,
        bar_height: float = 100.0,
        row_spacing: float = 180.0,
        margin: float = 100.0,
        stock_fill: str = "#E6E6E6",  # Light gray
        stroke: str = "#000000",  # Black
        show_holes: bool = True,
        show_margins: bool = True,
    ) -> None:
        self.bar_width = bar_width
        self.bar_height = bar_height
        self.row_spacing = row_spacing
        self.margin = margin
        self.stock_fill = stock_fill
        self.stroke = stroke
        self.show_holes = show_holes
        self.show_margins = show_margins

    def render_svg(
        self,
        plan: ToolPlan,
        products: Sequence[Product],
        grid: HoleGrid,
    ) -> str:
        """Generate an SVG diagram of every stock piece of one tool plan.

        Args:
            plan: The tool plan to draw.
            products: Product catalog, used for margins and colors.
            grid: Hole grid the plan was computed on.

        Returns:
            SVG document as a string.
        """
        catalog = {p.id: (i, p) for i, p in enumerate(products)}
        scale = self.bar_width / grid.stock_length
        svg_width = self.bar_width + 2 * self.margin
        svg_height = len(plan.bins) * self.row_spacing + 2.5 * self.margin

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" fill="white"/>',
            self._render_title(plan, svg_width),
        ]

        for material_bin in plan.bins:
            y = self.margin + material_bin.index * self.row_spacing
            parts.append(self._render_bin(material_bin, y, scale, catalog, grid))

        parts.append(self._render_footer(plan, svg_height))
        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(
        self,
        plans: dict[str, ToolPlan],
        products: Sequence[Product],
        grid: HoleGrid,
    ) -> dict[str, str]:
        """SVG diagrams keyed by tool name."""
        return {
            name: self.render_svg(plan, products, grid) for name, plan in plans.items()
        }

    def _render_title(self, plan: ToolPlan, svg_width: float) -> str:
        title = escape(f"Cut plan - {plan.tool.name} (kerf {plan.tool.kerf:g})")
        return (
            f'  <text x="{svg_width / 2}" y="50" text-anchor="middle" '
            f'font-family="Arial, sans-serif" font-size="28" '
            f'fill="{self.stroke}">{title}</text>'
        )

    def _render_bin(
        self,
        material_bin: MaterialBin,
        y: float,
        scale: float,
        catalog: dict[str, tuple[int, Product]],
        grid: HoleGrid,
    ) -> str:
        parts = [
            f"  <!-- Stock {material_bin.index + 1} -->",
            f'  <text x="20" y="{y + 40}" font-family="Arial, sans-serif" '
            f'font-size="16" fill="{self.stroke}">Stock {material_bin.index + 1}</text>',
            f'  <rect x="{self.margin}" y="{y}" width="{self.bar_width}" '
            f'height="{self.bar_height}" fill="{self.stock_fill}" stroke="{self.stroke}"/>',
        ]
        for interval in material_bin.intervals:
            index, product = catalog[interval.product_id]
            parts.append(self._render_interval(interval, index, product, y, scale, grid))
        return "\n".join(parts)

    def _render_interval(
        self,
        interval: CutInterval,
        index: int,
        product: Product,
        y: float,
        scale: float,
        grid: HoleGrid,
    ) -> str:
        """Render one cut interval with its holes, margins and labels."""
        x_start = self.margin + interval.start * scale
        x_end = self.margin + interval.end * scale
        width = x_end - x_start
        fill = PRODUCT_COLORS[index % len(PRODUCT_COLORS)]
        text_x = x_start + width / 2

        parts = [
            "  <g>",
            f'    <rect x="{x_start}" y="{y}" width="{width}" height="{self.bar_height}" '
            f'fill="{fill}" fill-opacity="0.8" stroke="{self.stroke}" stroke-width="2"/>',
        ]

        if self.show_holes:
            hole_y = y + self.bar_height / 2
            for hole in grid.holes:
                if interval.start <= hole <= interval.end:
                    parts.append(
                        f'    <circle cx="{self.margin + hole * scale}" cy="{hole_y}" '
                        f'r="5" fill="{self.stroke}"/>'
                    )

        if self.show_margins:
            left_x = x_start + product.left_margin * scale
            right_x = x_end - product.right_margin * scale
            for x in (left_x, right_x):
                parts.append(
                    f'    <line x1="{x}" y1="{y + 10}" x2="{x}" y2="{y + self.bar_height - 10}" '
                    f'stroke="{self.stroke}" stroke-dasharray="4,2"/>'
                )

        parts.append(
            f'    <text x="{text_x}" y="{y + self.bar_height * 0.3}" text-anchor="middle" '
            f'font-family="Arial, sans-serif" font-size="16" '
            f'fill="{self.stroke}">{escape(product.id)}</text>'
        )
        parts.append(
            f'    <text x="{text_x}" y="{y + self.bar_height * 0.85}" text-anchor="middle" '
            f'font-family="Arial, sans-serif" font-size="12" fill="{self.stroke}">'
            f"{interval.length:.1f} / {product.holes_count}h</text>"
        )
        parts.append("  </g>")
        return "\n".join(parts)

    def _render_footer(self, plan: ToolPlan, svg_height: float) -> str:
        analysis = plan.analysis
        info = (
            f"Utilization: {analysis.utilization_rate:.1f}% | "
            f"Stock used: {analysis.actual_bins} | "
            f"Theoretical minimum: {analysis.theoretical_min_bins}"
        )
        return (
            f'  <text x="{self.margin}" y="{svg_height - 30}" '
            f'font-family="Arial, sans-serif" font-size="14" '
            f'fill="{self.stroke}">{info}</text>'
        )

    def render_ascii(
        self,
        plan: ToolPlan,
        products: Sequence[Product],
        width: int = 80,
    ) -> str:
        """Generate a text diagram of one tool plan.

        Each stock piece becomes one bar; cut intervals are filled with the
        product's symbol and uncut stock with dots.

        Args:
            plan: The tool plan to draw.
            products: Product catalog; symbols follow catalog order.
            width: Terminal width in characters (default 80).

        Returns:
            ASCII string representation of the plan.
        """
        symbols = {
            p.id: ASCII_SYMBOLS[i % len(ASCII_SYMBOLS)] for i, p in enumerate(products)
        }
        label_width = len(f"Stock {len(plan.bins)} ")
        # Reserve room for the label, two borders and the utilization column
        bar_width = max(width - label_width - 10, 10)

        lines = [f"Tool {plan.tool.name} (kerf {plan.tool.kerf:g})"]
        for material_bin in plan.bins:
            bar = self._ascii_bar(material_bin, symbols, bar_width)
            label = f"Stock {material_bin.index + 1}".ljust(label_width)
            lines.append(
                f"{label}|{bar}| {material_bin.utilization_rate() * 100:5.1f}%"
            )

        legend = ", ".join(
            f"{symbols[p.id]}={p.id}" for p in products if p.quantity > 0
        )
        if legend:
            lines.append(f"Legend: {legend}")
        return "\n".join(lines)

    def _ascii_bar(
        self,
        material_bin: MaterialBin,
        symbols: dict[str, str],
        bar_width: int,
    ) -> str:
        scale = bar_width / material_bin.stock_length
        cells = ["."] * bar_width
        for interval in material_bin.intervals:
            first = max(0, min(int(interval.start * scale), bar_width - 1))
            last = max(first, min(int(interval.end * scale) - 1, bar_width - 1))
            for x in range(first, last + 1):
                cells[x] = symbols[interval.product_id]
        return "".join(cells)
