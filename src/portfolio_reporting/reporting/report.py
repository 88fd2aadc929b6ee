# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Report and report request models.

A `Report` is built once per run and never mutated. Refreshing the dashboard
produces a new Report that replaces the previous one wholesale.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from pydantic import Field

from ..cash_flow.bucketer import CashFlowBucket
from ..core.errors import SkippedRecord
from ..core.primitives import Collection, DateRange, Model, ReportSettings
from ..insights.generator import Insights, RiskEntry
from ..metrics.groups import (
    AccountingOverview,
    BankAccounts,
    BuildingsUnits,
    CompanyCredits,
    CompanyLoans,
    ConstructionStatus,
    ContractTypeCount,
    ExecutiveSummary,
    FundingStructure,
    Kpis,
    OfficeExpenses,
    RetailPortfolio,
    SalesPerformance,
    TicCostManagement,
)
from ..risk.classifier import ALL_PROJECTS, ProjectFinancialSummary


class ReportRequest(Model):
    """
    Parameters of one report run.

    Attributes:
        project_filter: `"all"` or the id of a single project. Only the
            project breakdown honours the filter; portfolio sections always
            cover every project.
        date_range: Window of the cash-flow analysis.
        as_of: Reference date for overdue invoices and recent work logs.
    """

    project_filter: str = Field(default=ALL_PROJECTS)
    date_range: DateRange
    as_of: date

    @classmethod
    def default(
        cls, today: date, settings: Optional[ReportSettings] = None
    ) -> "ReportRequest":
        """All projects, cash flow over the trailing lookback window ending today."""
        months = (settings or ReportSettings()).default_lookback_months
        return cls(
            project_filter=ALL_PROJECTS,
            date_range=DateRange.trailing(today, months=months),
            as_of=today,
        )


class Report(Model):
    """Everything a dashboard or document needs, as plain numbers."""

    executive_summary: ExecutiveSummary
    kpis: Kpis
    sales_performance: SalesPerformance
    funding_structure: FundingStructure
    construction_status: ConstructionStatus
    accounting_overview: AccountingOverview
    tic_cost_management: TicCostManagement
    office_expenses: OfficeExpenses
    company_credits: CompanyCredits
    company_loans: CompanyLoans
    bank_accounts: BankAccounts
    buildings_units: BuildingsUnits
    retail_portfolio: RetailPortfolio
    contract_types: Tuple[ContractTypeCount, ...] = ()
    cash_flow: Tuple[CashFlowBucket, ...] = ()
    projects: Tuple[ProjectFinancialSummary, ...] = ()
    risks: Tuple[RiskEntry, ...] = ()
    insights: Insights = Field(default_factory=Insights)

    project_filter: str = ALL_PROJECTS
    date_range: DateRange
    as_of: date
    skipped_records: Tuple[SkippedRecord, ...] = ()
    unavailable_collections: Tuple[Collection, ...] = ()

    @property
    def is_complete(self) -> bool:
        """True when no record was skipped and every collection was read."""
        return not self.skipped_records and not self.unavailable_collections

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict (dates as ISO strings, enums as values)."""
        return self.model_dump(mode="json")
