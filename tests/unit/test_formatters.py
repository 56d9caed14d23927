"""Tests for text and JSON cut plan output."""

from __future__ import annotations

import json

import pytest

from stockcut.application.dtos import CutPlanOutput
from stockcut.domain import HoleGrid, MultiToolOptimizer
from stockcut.infrastructure import CutPlanFormatter, DemandFormatter, JsonExporter


@pytest.fixture
def planned_output(small_grid: HoleGrid, make_product) -> CutPlanOutput:
    products = (
        make_product(id="A", quantity=13),
        make_product(id="B", holes_count=2, left_margin=3, right_margin=3, quantity=2),
    )
    plans = MultiToolOptimizer(products, small_grid, {"saw": 0.0}).run()
    return CutPlanOutput(products=products, grid=small_grid, plans=plans)


class TestDemandFormatter:
    def test_table(self, make_product) -> None:
        products = [make_product(id="A", quantity=3), make_product(id="B", holes_count=2)]
        text = DemandFormatter().format(products)

        assert text.startswith("PRODUCTS")
        assert "A" in text
        assert "TOTAL" in text
        # 3 * 4 + 1 * 12
        assert "24.0" in text

    def test_empty(self) -> None:
        assert DemandFormatter().format([]) == "No products ordered."


class TestCutPlanFormatter:
    def test_plan_sections(self, planned_output: CutPlanOutput) -> None:
        text = CutPlanFormatter().format(planned_output)

        assert "CUT PLAN - saw (kerf 0)" in text
        assert "Stock 1:" in text
        assert "Stock 2:" in text
        assert "Utilization:" in text
        assert "Theoretical minimum:" in text
        assert "(free)" not in text

    def test_single_piece_wording(self, planned_output: CutPlanOutput) -> None:
        plan = planned_output.plans["saw"]
        last = plan.bins[-1]
        text = CutPlanFormatter().format_plan(plan)
        pieces = last.piece_count
        expected = f"Stock {last.index + 1}: {pieces} piece{'s' if pieces != 1 else ''},"
        assert expected in text

    def test_show_gaps(self, planned_output: CutPlanOutput) -> None:
        text = CutPlanFormatter(show_gaps=True).format(planned_output)
        assert "(free)" in text

    def test_errors(self) -> None:
        output = CutPlanOutput(errors=["No kerf width configured for tool(s): laser"])
        assert CutPlanFormatter().format(output) == (
            "Error: No kerf width configured for tool(s): laser"
        )


class TestJsonExporter:
    def test_structure(self, planned_output: CutPlanOutput) -> None:
        data = json.loads(JsonExporter().export(planned_output))

        assert data["stock"]["length"] == 96.0
        assert len(data["stock"]["holes"]) == 12
        assert [p["id"] for p in data["products"]] == ["A", "B"]

        plan = data["plans"]["saw"]
        assert plan["kerf"] == 0.0
        cuts = [cut for b in plan["bins"] for cut in b["cuts"]]
        assert sum(1 for cut in cuts if cut["product_id"] == "A") == 13
        assert sum(1 for cut in cuts if cut["product_id"] == "B") == 2
        assert plan["analysis"]["actual_bins"] == len(plan["bins"])

    def test_errors(self) -> None:
        data = json.loads(JsonExporter().export(CutPlanOutput(errors=["bad"])))
        assert data == {"errors": ["bad"]}
