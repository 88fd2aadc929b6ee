# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Per-project financial summaries and risk tiers.

Project revenue and expense come from the same resolved facts as the
portfolio totals, so summing every project reproduces the executive summary.

Risk tiers are evaluated top to bottom, first match wins:

1. High   - sales rate < 20 or profit margin < 0
2. Medium - sales rate < 50 or profit margin < 15
3. Low    - otherwise

The order matters because the conditions overlap: a project selling at 15%
with a 25% margin is High, not Medium.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from ..aggregation.engine import AggregatedFacts
from ..core.primitives import (
    Model,
    RiskLevelEnum,
    RiskSettings,
    UnitKindEnum,
)
from ..entities import Project
from ..gateway.snapshot import PortfolioSnapshot
from ..utils.ratios import safe_percent, safe_ratio
from ..utils.status import has_status

logger = logging.getLogger(__name__)

ALL_PROJECTS = "all"


class ProjectFinancialSummary(Model):
    id: str
    name: str
    location: str = ""
    status: str = ""
    budget: float = 0.0
    revenue: float = 0.0
    expenses: float = 0.0
    profit: float = 0.0
    profit_margin: float = 0.0
    units_sold: int = 0
    total_units: int = 0
    contracts: int = 0
    phases_done: int = 0
    total_phases: int = 0
    equity: float = 0.0
    debt: float = 0.0
    debt_equity_ratio: float = 0.0
    sales_rate: float = 0.0
    risk_level: RiskLevelEnum = RiskLevelEnum.LOW


def classify_risk(
    sales_rate: float, profit_margin: float, thresholds: Optional[RiskSettings] = None
) -> RiskLevelEnum:
    """
    Risk tier for a project.

    Args:
        sales_rate: Percentage of the project's units sold (0-100).
        profit_margin: Profit as a percentage of revenue.
        thresholds: Tier thresholds; defaults to 20/0 (High) and 50/15 (Medium).

    Example:
        >>> classify_risk(15, 25)
        <RiskLevelEnum.HIGH: 'High'>
        >>> classify_risk(60, 10)
        <RiskLevelEnum.MEDIUM: 'Medium'>
        >>> classify_risk(80, 20)
        <RiskLevelEnum.LOW: 'Low'>
    """
    t = thresholds or RiskSettings()
    if sales_rate < t.high_sales_rate or profit_margin < t.high_margin:
        return RiskLevelEnum.HIGH
    if sales_rate < t.medium_sales_rate or profit_margin < t.medium_margin:
        return RiskLevelEnum.MEDIUM
    return RiskLevelEnum.LOW


def top_by_revenue(
    projects: Sequence[ProjectFinancialSummary], n: int
) -> List[ProjectFinancialSummary]:
    """First n projects by revenue, descending; ties keep collection order."""
    return sorted(projects, key=lambda p: p.revenue, reverse=True)[:n]


def top_by_margin(
    projects: Sequence[ProjectFinancialSummary], n: int
) -> List[ProjectFinancialSummary]:
    """First n projects by profit margin, descending; ties keep collection order."""
    return sorted(projects, key=lambda p: p.profit_margin, reverse=True)[:n]


def filter_projects(projects: Iterable[Project], project_filter: str) -> List[Project]:
    """Projects selected by a filter: `"all"` or a single project id."""
    if project_filter == ALL_PROJECTS:
        return list(projects)
    selected = [p for p in projects if p.id == project_filter]
    if not selected:
        logger.warning(f"Project filter '{project_filter}' matches no project")
    return selected


class ProjectRiskClassifier:
    """
    Builds `ProjectFinancialSummary` rows and ranks them.

    Per-project lookups (units, contracts, phases, investments, credits) are
    grouped once at construction.
    """

    def __init__(
        self,
        snapshot: PortfolioSnapshot,
        facts: AggregatedFacts,
        thresholds: Optional[RiskSettings] = None,
    ):
        self._snapshot = snapshot
        self._facts = facts
        self._thresholds = thresholds or RiskSettings()

        self._apartments: Dict[str, list] = defaultdict(list)
        for unit in snapshot.units:
            if unit.kind == UnitKindEnum.APARTMENT:
                self._apartments[unit.project_id].append(unit)
        self._contract_counts = _count_by(c.project_id for c in snapshot.contracts)
        self._phases: Dict[str, list] = defaultdict(list)
        for phase in snapshot.project_phases:
            self._phases[phase.project_id].append(phase)
        self._equity = _sum_by((i.project_id, i.amount) for i in snapshot.project_investments)
        self._debt = _sum_by(
            (bc.project_id, bc.amount) for bc in snapshot.bank_credits if bc.project_id
        )

    def summarize(self, project: Project) -> ProjectFinancialSummary:
        apartments = self._apartments.get(project.id, [])
        sold = sum(1 for u in apartments if u.is_sold)
        phases = self._phases.get(project.id, [])
        revenue = self._facts.revenue_for(project.id)
        expenses = self._facts.expense_for(project.id)
        profit = revenue - expenses
        profit_margin = safe_percent(profit, revenue)
        sales_rate = safe_percent(sold, len(apartments))
        equity = self._equity.get(project.id, 0.0)
        debt = self._debt.get(project.id, 0.0)
        return ProjectFinancialSummary(
            id=project.id,
            name=project.name,
            location=project.location,
            status=project.status,
            budget=project.budget,
            revenue=revenue,
            expenses=expenses,
            profit=profit,
            profit_margin=profit_margin,
            units_sold=sold,
            total_units=len(apartments),
            contracts=self._contract_counts.get(project.id, 0),
            phases_done=sum(1 for p in phases if has_status(p.status, "completed")),
            total_phases=len(phases),
            equity=equity,
            debt=debt,
            debt_equity_ratio=safe_ratio(debt, equity),
            sales_rate=sales_rate,
            risk_level=classify_risk(sales_rate, profit_margin, self._thresholds),
        )

    def classify(self, project_filter: str = ALL_PROJECTS) -> List[ProjectFinancialSummary]:
        """Summaries for the filtered projects, in collection order."""
        summaries = [
            self.summarize(p) for p in filter_projects(self._snapshot.projects, project_filter)
        ]
        tiers = _count_by(s.risk_level.value for s in summaries)
        logger.debug(f"Classified {len(summaries)} projects: {tiers}")
        return summaries


def summarize_project(
    project: Project,
    snapshot: PortfolioSnapshot,
    facts: AggregatedFacts,
    thresholds: Optional[RiskSettings] = None,
) -> ProjectFinancialSummary:
    """Summary of a single project; builds the per-project lookups for this one call."""
    return ProjectRiskClassifier(snapshot, facts, thresholds).summarize(project)


def _count_by(keys: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for key in keys:
        counts[key] = counts.get(key, 0) + 1
    return counts


def _sum_by(pairs: Iterable) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for key, amount in pairs:
        totals[key] = totals.get(key, 0.0) + amount
    return totals
