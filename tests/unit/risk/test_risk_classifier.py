# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for per-project summaries, risk tiers and rankings.
"""

import pytest

from portfolio_reporting.aggregation import AggregationEngine
from portfolio_reporting.core.primitives import Collection, RiskLevelEnum, RiskSettings
from portfolio_reporting.risk import (
    ProjectFinancialSummary,
    ProjectRiskClassifier,
    classify_risk,
    summarize_project,
    top_by_margin,
    top_by_revenue,
)
from tests.conftest import snapshot_from_rows


def _summary(id_, revenue=0.0, margin=0.0):
    return ProjectFinancialSummary(id=id_, name=id_, revenue=revenue, profit_margin=margin)


class TestClassifyRisk:
    """Tiers are evaluated High, then Medium, then Low; first match wins."""

    @pytest.mark.parametrize(
        "sales_rate, margin, expected",
        [
            (15, 25, RiskLevelEnum.HIGH),
            (60, -1, RiskLevelEnum.HIGH),
            (60, 10, RiskLevelEnum.MEDIUM),
            (45, 30, RiskLevelEnum.MEDIUM),
            (80, 20, RiskLevelEnum.LOW),
            (50, 15, RiskLevelEnum.LOW),
            (20, 0, RiskLevelEnum.MEDIUM),
        ],
    )
    def test_tiers(self, sales_rate, margin, expected):
        assert classify_risk(sales_rate, margin) is expected

    def test_custom_thresholds(self):
        strict = RiskSettings(high_sales_rate=30, medium_sales_rate=90)
        assert classify_risk(25, 50, strict) is RiskLevelEnum.HIGH
        assert classify_risk(80, 50, strict) is RiskLevelEnum.MEDIUM


class TestRankings:
    def test_top_by_revenue_is_stable(self):
        projects = [_summary("a", 10), _summary("b", 30), _summary("c", 30), _summary("d", 5)]
        assert [p.id for p in top_by_revenue(projects, 3)] == ["b", "c", "a"]

    def test_top_by_margin(self):
        projects = [_summary("a", margin=5), _summary("b", margin=-5), _summary("c", margin=50)]
        assert [p.id for p in top_by_margin(projects, 2)] == ["c", "a"]

    def test_fewer_projects_than_requested(self):
        assert [p.id for p in top_by_revenue([_summary("a", 1)], 3)] == ["a"]


class TestProjectRiskClassifier:
    @pytest.fixture
    def classifier(self, snapshot):
        return ProjectRiskClassifier(snapshot, AggregationEngine(snapshot).aggregate())

    def test_summaries_for_all_projects(self, classifier):
        summaries = classifier.classify()
        assert [s.id for s in summaries] == ["p1", "p2"]

        sunrise = summaries[0]
        assert sunrise.revenue == pytest.approx(265_000)
        assert sunrise.expenses == pytest.approx(125_000)
        assert sunrise.profit == pytest.approx(140_000)
        assert sunrise.profit_margin == pytest.approx(140_000 / 265_000 * 100)
        assert sunrise.units_sold == 2
        assert sunrise.total_units == 4
        assert sunrise.sales_rate == pytest.approx(50.0)
        assert sunrise.phases_done == 1
        assert sunrise.total_phases == 2
        assert sunrise.contracts == 1
        assert sunrise.equity == 200_000
        assert sunrise.debt == 300_000
        assert sunrise.debt_equity_ratio == pytest.approx(1.5)
        assert sunrise.risk_level is RiskLevelEnum.LOW

    def test_summarize_project_matches_classifier(self, snapshot, classifier):
        facts = AggregationEngine(snapshot).aggregate()
        harbor = snapshot.projects[1]
        assert summarize_project(harbor, snapshot, facts) == classifier.summarize(harbor)

    def test_single_project_filter(self, classifier):
        assert [s.id for s in classifier.classify("p2")] == ["p2"]

    def test_unknown_project_filter_yields_no_rows(self, classifier):
        assert classifier.classify("nope") == []

    def test_project_without_units_or_revenue(self, rows):
        rows[Collection.PROJECTS].append({"id": "p3", "name": "Empty Lot"})
        snapshot = snapshot_from_rows(rows)
        classifier = ProjectRiskClassifier(snapshot, AggregationEngine(snapshot).aggregate())
        empty = classifier.classify("p3")[0]
        assert empty.sales_rate == 0
        assert empty.profit_margin == 0
        assert empty.debt_equity_ratio == 0
        assert empty.risk_level is RiskLevelEnum.HIGH
