# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Rule-based recommendations and risk register.

Each rule looks at portfolio-level figures and contributes at most one
entry. Rules run in declaration order, which is the order entries appear on
the report. The last two recommendation rules always fire when the
portfolio has at least one project, so the list is never empty for a
non-empty portfolio.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.primitives import Model, RiskSettings
from ..metrics.computer import MetricGroups
from ..risk.classifier import ProjectFinancialSummary, top_by_revenue

logger = logging.getLogger(__name__)


class RiskEntry(Model):
    type: str
    count: int
    description: str


class TopProject(Model):
    name: str
    revenue: float
    sales_rate: float


class Insights(Model):
    top_projects: Tuple[TopProject, ...] = ()
    recommendations: Tuple[str, ...] = ()


@dataclass(frozen=True)
class InsightContext:
    """Inputs shared by every rule."""

    projects: Sequence[ProjectFinancialSummary]
    groups: MetricGroups
    thresholds: RiskSettings
    total_projects: int


RecommendationRule = Callable[[InsightContext], Optional[str]]
RiskRule = Callable[[InsightContext], Optional[RiskEntry]]


# ==========================================================================
# RECOMMENDATION RULES
# ==========================================================================


def _slow_portfolio_sales(ctx: InsightContext) -> Optional[str]:
    # A portfolio with projects but no apartments has a 0% sales rate.
    sales_rate = ctx.groups.kpis.sales_rate
    if ctx.total_projects and sales_rate < ctx.thresholds.portfolio_sales_rate_target:
        return "Intensify marketing efforts to accelerate sales velocity"
    return None


def _excess_inventory(ctx: InsightContext) -> Optional[str]:
    sales = ctx.groups.sales_performance
    if sales.available_units > sales.units_sold:
        return "Significant inventory available - consider pricing strategies"
    return None


def _overdue_receivables(ctx: InsightContext) -> Optional[str]:
    overdue = ctx.groups.accounting_overview.overdue_invoices
    if overdue > 0:
        return f"Follow up on {overdue} overdue invoice(s) to protect cash flow"
    return None


def _monitor_budgets(ctx: InsightContext) -> Optional[str]:
    if ctx.total_projects:
        return "Continue monitoring project budgets and timeline adherence"
    return None


def _financing_partners(ctx: InsightContext) -> Optional[str]:
    if ctx.total_projects:
        return "Maintain strong relationships with financing partners"
    return None


RECOMMENDATION_RULES: Tuple[RecommendationRule, ...] = (
    _slow_portfolio_sales,
    _excess_inventory,
    _overdue_receivables,
    _monitor_budgets,
    _financing_partners,
)


# ==========================================================================
# RISK RULES
# ==========================================================================


def _slow_sales(ctx: InsightContext) -> Optional[RiskEntry]:
    threshold = ctx.thresholds.slow_sales_rate
    slow = [p for p in ctx.projects if p.total_units > 0 and p.sales_rate < threshold]
    if not slow:
        return None
    return RiskEntry(
        type="SLOW SALES",
        count=len(slow),
        description=f"{len(slow)} project(s) with sales rate below {threshold:g}%",
    )


def _negative_margin(ctx: InsightContext) -> Optional[RiskEntry]:
    losing = [p for p in ctx.projects if p.profit_margin < 0]
    if not losing:
        return None
    return RiskEntry(
        type="NEGATIVE MARGIN",
        count=len(losing),
        description=f"{len(losing)} project(s) with expenses exceeding revenue",
    )


def _overdue_invoices(ctx: InsightContext) -> Optional[RiskEntry]:
    accounting = ctx.groups.accounting_overview
    if accounting.overdue_invoices == 0:
        return None
    return RiskEntry(
        type="OVERDUE INVOICES",
        count=accounting.overdue_invoices,
        description=(
            f"{accounting.overdue_invoices} invoice(s) past due, "
            f"{accounting.overdue_value:,.2f} outstanding"
        ),
    )


def _high_leverage(ctx: InsightContext) -> Optional[RiskEntry]:
    limit = ctx.thresholds.max_debt_equity_ratio
    leveraged = [p for p in ctx.projects if p.debt_equity_ratio > limit]
    if not leveraged:
        return None
    return RiskEntry(
        type="HIGH LEVERAGE",
        count=len(leveraged),
        description=f"{len(leveraged)} project(s) with debt/equity above {limit:g}",
    )


RISK_RULES: Tuple[RiskRule, ...] = (
    _slow_sales,
    _negative_margin,
    _overdue_invoices,
    _high_leverage,
)


class InsightGenerator:
    """
    Applies the recommendation and risk rules to classified projects.

    Args:
        projects: Project summaries (already filtered for the request).
        groups: Portfolio metric groups.
        thresholds: Risk settings (rule thresholds and top-N size).
    """

    def __init__(
        self,
        projects: Sequence[ProjectFinancialSummary],
        groups: MetricGroups,
        thresholds: Optional[RiskSettings] = None,
    ):
        self._ctx = InsightContext(
            projects=tuple(projects),
            groups=groups,
            thresholds=thresholds or RiskSettings(),
            total_projects=len(projects),
        )

    def recommendations(self) -> List[str]:
        return [r for r in (rule(self._ctx) for rule in RECOMMENDATION_RULES) if r is not None]

    def risks(self) -> List[RiskEntry]:
        return [r for r in (rule(self._ctx) for rule in RISK_RULES) if r is not None]

    def top_projects(self) -> List[TopProject]:
        ranked = top_by_revenue(self._ctx.projects, self._ctx.thresholds.top_n)
        return [TopProject(name=p.name, revenue=p.revenue, sales_rate=p.sales_rate) for p in ranked]

    def insights(self) -> Insights:
        insights = Insights(
            top_projects=tuple(self.top_projects()),
            recommendations=tuple(self.recommendations()),
        )
        logger.debug(f"Generated {len(insights.recommendations)} recommendations")
        return insights
