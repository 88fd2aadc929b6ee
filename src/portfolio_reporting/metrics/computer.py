# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio metric groups.

Each group is computed by its own method from the snapshot and the resolved
facts. Groups never share mutable state, so they can be computed in any
order; `compute_all()` simply calls each one. All ratios go through
`safe_ratio` / `safe_percent` and are 0 when the denominator is 0.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple

from ..aggregation.engine import AggregatedFacts
from ..core.primitives import (
    OFFICE_INVOICE_CATEGORY,
    UNCATEGORIZED_CONTRACT_TYPE,
    InvoiceStatusEnum,
    Model,
    ProjectStatusEnum,
    ReportSettings,
    UnitKindEnum,
    UnitStatusEnum,
)
from ..gateway.snapshot import PortfolioSnapshot
from ..utils.ratios import safe_percent, safe_ratio
from ..utils.status import has_status
from .groups import (
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

logger = logging.getLogger(__name__)


class MetricGroups(Model):
    """Every portfolio-level metric group of a report."""

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
    contract_types: Tuple[ContractTypeCount, ...]


class MetricsComputer:
    """
    Computes the portfolio metric groups for one snapshot.

    Args:
        snapshot: Parsed collections for the run.
        facts: Resolved revenue/expense facts for the same snapshot.
        as_of: Reference date for overdue invoices and recent work logs.
        settings: Report settings (work log window).
    """

    def __init__(
        self,
        snapshot: PortfolioSnapshot,
        facts: AggregatedFacts,
        as_of: date,
        settings: Optional[ReportSettings] = None,
    ):
        self._snapshot = snapshot
        self._facts = facts
        self._as_of = as_of
        self._settings = settings or ReportSettings()

    # ==========================================================================
    # SHARED FIGURES
    # ==========================================================================

    @property
    def total_revenue(self) -> float:
        return self._facts.total_revenue

    @property
    def total_expenses(self) -> float:
        return self._facts.total_expenses

    @property
    def total_profit(self) -> float:
        return self.total_revenue - self.total_expenses

    @property
    def total_equity(self) -> float:
        return sum(inv.amount for inv in self._snapshot.project_investments)

    @property
    def total_debt(self) -> float:
        return sum(bc.amount for bc in self._snapshot.bank_credits)

    @property
    def portfolio_value(self) -> float:
        return sum(p.budget for p in self._snapshot.projects)

    @property
    def roi(self) -> float:
        return safe_percent(self.total_profit, self.total_equity)

    @property
    def debt_equity_ratio(self) -> float:
        return safe_ratio(self.total_debt, self.total_equity)

    def _apartments(self):
        return [u for u in self._snapshot.units if u.kind == UnitKindEnum.APARTMENT]

    def _count_projects(self, status: ProjectStatusEnum) -> int:
        return sum(1 for p in self._snapshot.projects if has_status(p.status, status.value))

    # ==========================================================================
    # GROUPS
    # ==========================================================================

    def executive_summary(self) -> ExecutiveSummary:
        return ExecutiveSummary(
            total_projects=len(self._snapshot.projects),
            active_projects=self._count_projects(ProjectStatusEnum.IN_PROGRESS),
            completed_projects=self._count_projects(ProjectStatusEnum.COMPLETED),
            total_revenue=self.total_revenue,
            total_expenses=self.total_expenses,
            total_profit=self.total_profit,
            profit_margin=safe_percent(self.total_profit, self.total_revenue),
            portfolio_value=self.portfolio_value,
            roi=self.roi,
        )

    def kpis(self) -> Kpis:
        sales = self.sales_performance()
        return Kpis(
            portfolio_value=self.portfolio_value,
            total_revenue=self.total_revenue,
            net_profit=self.total_profit,
            roi=self.roi,
            sales_rate=safe_percent(sales.units_sold, sales.total_units),
            debt_equity_ratio=self.debt_equity_ratio,
            active_projects=self._count_projects(ProjectStatusEnum.IN_PROGRESS),
            total_customers=len(self._snapshot.customers),
        )

    def sales_performance(self) -> SalesPerformance:
        apartments = self._apartments()
        sold = sum(1 for u in apartments if u.status == UnitStatusEnum.SOLD)
        customers = self._snapshot.customers
        buyers = sum(1 for c in customers if has_status(c.status, "buyer"))
        leads = sum(1 for c in customers if has_status(c.status, "lead", "interested"))
        return SalesPerformance(
            total_units=len(apartments),
            units_sold=sold,
            available_units=sum(1 for u in apartments if u.status == UnitStatusEnum.AVAILABLE),
            reserved_units=sum(1 for u in apartments if u.status == UnitStatusEnum.RESERVED),
            total_revenue=self.total_revenue,
            avg_sale_price=safe_ratio(self.total_revenue, sold),
            total_sales=len(self._snapshot.sales),
            buyers=buyers,
            active_leads=leads,
            conversion_rate=safe_percent(buyers, len(customers)),
        )

    def funding_structure(self) -> FundingStructure:
        credits = self._snapshot.bank_credits
        return FundingStructure(
            total_equity=self.total_equity,
            total_debt=self.total_debt,
            debt_equity_ratio=self.debt_equity_ratio,
            total_credit_lines=sum(bc.amount for bc in credits),
            available_credit=sum(bc.available_amount for bc in credits),
            active_investors=len(self._snapshot.investors),
            active_banks=len(self._snapshot.banks),
            bank_credits=len(credits),
            avg_interest_rate=safe_ratio(sum(bc.interest_rate for bc in credits), len(credits)),
            monthly_debt_service=sum(bc.monthly_payment for bc in credits),
        )

    def construction_status(self) -> ConstructionStatus:
        contracts = self._snapshot.contracts
        phases = self._snapshot.project_phases
        milestones = self._snapshot.subcontractor_milestones
        contract_value = sum(c.contract_amount for c in contracts)
        budget_realized = sum(c.budget_realized for c in contracts)
        window_start = self._as_of - timedelta(days=self._settings.recent_work_log_days)
        return ConstructionStatus(
            total_contracts=len(contracts),
            active_contracts=sum(1 for c in contracts if has_status(c.status, "active")),
            completed_contracts=sum(1 for c in contracts if has_status(c.status, "completed")),
            contract_value=contract_value,
            budget_realized=budget_realized,
            budget_utilization=safe_percent(budget_realized, contract_value),
            total_subcontractors=len(self._snapshot.subcontractors),
            total_phases=len(phases),
            completed_phases=sum(1 for p in phases if has_status(p.status, "completed")),
            work_logs_7days=sum(
                1 for w in self._snapshot.work_logs if window_start <= w.work_date <= self._as_of
            ),
            total_milestones=len(milestones),
            completed_milestones=sum(1 for m in milestones if has_status(m.status, "completed")),
        )

    def accounting_overview(self) -> AccountingOverview:
        invoices = self._snapshot.invoices
        paid = [inv for inv in invoices if inv.status == InvoiceStatusEnum.PAID]
        pending = [inv for inv in invoices if inv.is_pending]
        overdue = [inv for inv in pending if inv.is_overdue(self._as_of)]
        return AccountingOverview(
            total_invoices=len(invoices),
            total_invoice_value=sum(inv.total_amount for inv in invoices),
            paid_invoices=len(paid),
            paid_value=sum(inv.total_amount for inv in paid),
            pending_invoices=len(pending),
            pending_value=sum(inv.remaining_amount for inv in pending),
            overdue_invoices=len(overdue),
            overdue_value=sum(inv.remaining_amount for inv in overdue),
            payment_completion_rate=safe_percent(len(paid), len(invoices)),
        )

    def tic_cost_management(self) -> TicCostManagement:
        tics = self._snapshot.tic_cost_structures
        budget = sum(t.budgeted_amount for t in tics)
        spent = sum(t.actual_spent for t in tics)
        return TicCostManagement(
            total_companies=len(self._snapshot.companies),
            total_tic_budget=budget,
            total_tic_spent=spent,
            tic_utilization=safe_percent(spent, budget),
            companies_over_budget=sum(1 for t in tics if t.is_over_budget),
        )

    def office_expenses(self) -> OfficeExpenses:
        office_invoices = [
            inv
            for inv in self._snapshot.invoices
            if has_status(inv.invoice_category, OFFICE_INVOICE_CATEGORY)
        ]
        spent = sum(inv.total_amount for inv in office_invoices)
        return OfficeExpenses(
            total_office_suppliers=len(self._snapshot.office_suppliers),
            total_office_invoices=len(office_invoices),
            total_office_spent=spent,
            avg_office_invoice=safe_ratio(spent, len(office_invoices)),
        )

    def company_credits(self) -> CompanyCredits:
        credits = self._snapshot.bank_credits
        cesija = self._facts.cesija_payments
        lines = self._snapshot.credit_lines
        allocations = self._snapshot.credit_allocations
        return CompanyCredits(
            total_credits=len(credits),
            total_credit_value=sum(bc.amount for bc in credits),
            credits_available=sum(bc.available_amount for bc in credits),
            credits_used=sum(bc.used_amount for bc in credits),
            cesija_payments=len(cesija),
            cesija_value=sum(p.amount for p in cesija),
            credit_lines=len(lines),
            credit_line_available=sum(cl.available_amount for cl in lines),
            total_allocations=len(allocations),
            allocated_amount=sum(a.allocated_amount for a in allocations),
        )

    def company_loans(self) -> CompanyLoans:
        loans = self._snapshot.company_loans
        return CompanyLoans(
            total_loans=len(loans),
            total_loan_amount=sum(loan.amount for loan in loans),
            total_outstanding=sum(loan.current_balance for loan in loans),
            active_loans=sum(1 for loan in loans if loan.current_balance > 0),
        )

    def bank_accounts(self) -> BankAccounts:
        accounts = self._snapshot.bank_accounts
        return BankAccounts(
            total_accounts=len(accounts),
            total_balance=sum(a.current_balance for a in accounts),
            positive_balance_accounts=sum(1 for a in accounts if a.current_balance > 0),
            negative_balance_accounts=sum(1 for a in accounts if a.current_balance < 0),
        )

    def buildings_units(self) -> BuildingsUnits:
        units = self._snapshot.units
        return BuildingsUnits(
            total_buildings=len(self._snapshot.buildings),
            total_units=len(units),
            sold_units=sum(1 for u in units if u.status == UnitStatusEnum.SOLD),
            reserved_units=sum(1 for u in units if u.status == UnitStatusEnum.RESERVED),
            available_units=sum(1 for u in units if u.status == UnitStatusEnum.AVAILABLE),
            total_garages=sum(1 for u in units if u.kind == UnitKindEnum.GARAGE),
            total_repositories=sum(1 for u in units if u.kind == UnitKindEnum.STORAGE),
        )

    def retail_portfolio(self) -> RetailPortfolio:
        snapshot = self._snapshot
        contracts = snapshot.retail_contracts
        return RetailPortfolio(
            total_retail_projects=len(snapshot.retail_projects),
            active_retail_projects=sum(
                1 for rp in snapshot.retail_projects if has_status(rp.status, "active")
            ),
            total_land_plots=len(snapshot.retail_land_plots),
            total_retail_contracts=len(contracts),
            retail_contract_value=sum(rc.contract_amount for rc in contracts),
            retail_budget_realized=sum(rc.budget_realized for rc in contracts),
            retail_phases=len(snapshot.retail_phases),
            completed_retail_phases=sum(
                1 for ph in snapshot.retail_phases if has_status(ph.status, "completed")
            ),
            total_retail_customers=len(snapshot.retail_customers),
            retail_suppliers=len(snapshot.retail_suppliers),
        )

    def contract_types(self) -> List[ContractTypeCount]:
        """Contract count per type name, in order of first appearance."""
        names: Dict[str, str] = {t.id: t.name for t in self._snapshot.contract_types}
        counts: Dict[str, int] = {}
        for contract in self._snapshot.contracts:
            name = names.get(contract.contract_type_id or "", UNCATEGORIZED_CONTRACT_TYPE)
            counts[name] = counts.get(name, 0) + 1
        return [ContractTypeCount(name=name, count=count) for name, count in counts.items()]

    def compute_all(self) -> MetricGroups:
        groups = MetricGroups(
            executive_summary=self.executive_summary(),
            kpis=self.kpis(),
            sales_performance=self.sales_performance(),
            funding_structure=self.funding_structure(),
            construction_status=self.construction_status(),
            accounting_overview=self.accounting_overview(),
            tic_cost_management=self.tic_cost_management(),
            office_expenses=self.office_expenses(),
            company_credits=self.company_credits(),
            company_loans=self.company_loans(),
            bank_accounts=self.bank_accounts(),
            buildings_units=self.buildings_units(),
            retail_portfolio=self.retail_portfolio(),
            contract_types=self.contract_types(),
        )
        logger.debug(
            f"Computed metric groups: revenue {self.total_revenue:,.2f}, "
            f"expenses {self.total_expenses:,.2f}"
        )
        return groups
