# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for recommendation and risk register rules.
"""

import pytest

from portfolio_reporting.aggregation import AggregationEngine
from portfolio_reporting.core.primitives import Collection, ReportSettings, RiskSettings
from portfolio_reporting.insights import InsightGenerator
from portfolio_reporting.metrics import MetricsComputer
from portfolio_reporting.risk import ProjectRiskClassifier
from tests.conftest import AS_OF, snapshot_from_rows

MONITOR = "Continue monitoring project budgets and timeline adherence"
FINANCING = "Maintain strong relationships with financing partners"
MARKETING = "Intensify marketing efforts to accelerate sales velocity"
PRICING = "Significant inventory available - consider pricing strategies"


def _generator(rows, thresholds=None):
    snapshot = snapshot_from_rows(rows)
    facts = AggregationEngine(snapshot).aggregate()
    settings = ReportSettings(risk=thresholds or RiskSettings())
    groups = MetricsComputer(snapshot, facts, AS_OF, settings).compute_all()
    projects = ProjectRiskClassifier(snapshot, facts, settings.risk).classify()
    return InsightGenerator(projects, groups, settings.risk)


@pytest.fixture
def slow_rows(rows):
    """Harbor's only sold apartment is back on the market."""
    rows[Collection.SALES] = [s for s in rows[Collection.SALES] if s["id"] != "sale3"]
    for unit in rows[Collection.UNITS]:
        if unit["id"] == "b1":
            unit["status"] = "Available"
    return rows


class TestRecommendations:
    def test_reference_portfolio(self, rows):
        recommendations = _generator(rows).recommendations()
        assert recommendations[0].startswith("Follow up on 1 overdue invoice")
        assert recommendations[1:] == [MONITOR, FINANCING]

    def test_slow_sales_and_excess_inventory(self, slow_rows):
        recommendations = _generator(slow_rows).recommendations()
        assert recommendations[:2] == [MARKETING, PRICING]
        assert recommendations[-2:] == [MONITOR, FINANCING]

    def test_projects_without_apartments_still_get_marketing_advice(self):
        """No apartments means a 0% sales rate, which is below target."""
        rows = {Collection.PROJECTS: [{"id": "p1", "name": "Plot"}]}
        recommendations = _generator(rows).recommendations()
        assert recommendations == [MARKETING, MONITOR, FINANCING]

    def test_empty_portfolio_has_no_recommendations(self):
        assert _generator({}).recommendations() == []


class TestRiskRegister:
    def test_reference_portfolio_only_flags_overdue_invoices(self, rows):
        risks = _generator(rows).risks()
        assert [(r.type, r.count) for r in risks] == [("OVERDUE INVOICES", 1)]
        assert "5,000.00" in risks[0].description

    def test_slow_sales(self, slow_rows):
        risks = {r.type: r for r in _generator(slow_rows).risks()}
        assert risks["SLOW SALES"].count == 1
        assert "40%" in risks["SLOW SALES"].description

    def test_negative_margin(self, rows):
        rows[Collection.INVOICES].append(
            {
                "id": "i9",
                "invoice_type": "INCOMING_SUPPLIER",
                "status": "PAID",
                "project_id": "p1",
                "total_amount": 500_000,
            }
        )
        risks = {r.type: r for r in _generator(rows).risks()}
        assert risks["NEGATIVE MARGIN"].count == 1

    def test_high_leverage_uses_threshold(self, rows):
        assert "HIGH LEVERAGE" not in {r.type for r in _generator(rows).risks()}
        strict = RiskSettings(max_debt_equity_ratio=1.0)
        risks = {r.type: r for r in _generator(rows, strict).risks()}
        assert risks["HIGH LEVERAGE"].count == 1

    def test_empty_portfolio_has_no_risks(self):
        assert _generator({}).risks() == []


class TestTopProjects:
    def test_ranked_by_revenue(self, rows):
        insights = _generator(rows).insights()
        assert [t.name for t in insights.top_projects] == ["Sunrise", "Harbor"]
        assert insights.top_projects[0].revenue == pytest.approx(265_000)

    def test_limited_to_top_n(self, rows):
        for i in range(5):
            rows[Collection.PROJECTS].append({"id": f"x{i}", "name": f"Extra {i}"})
        insights = _generator(rows).insights()
        assert len(insights.top_projects) == 3
