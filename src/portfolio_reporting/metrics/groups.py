# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Metric group models.

One frozen model per report section. Percentages are on a 0-100 scale;
ratios (debt/equity) are plain ratios. Every field is a plain number so the
renderers decide currency and percentage formatting.
"""

from __future__ import annotations

from ..core.primitives import Model


class ExecutiveSummary(Model):
    total_projects: int = 0
    active_projects: int = 0
    completed_projects: int = 0
    total_revenue: float = 0.0
    total_expenses: float = 0.0
    total_profit: float = 0.0
    profit_margin: float = 0.0
    portfolio_value: float = 0.0
    roi: float = 0.0


class Kpis(Model):
    portfolio_value: float = 0.0
    total_revenue: float = 0.0
    net_profit: float = 0.0
    roi: float = 0.0
    sales_rate: float = 0.0
    debt_equity_ratio: float = 0.0
    active_projects: int = 0
    total_customers: int = 0


class SalesPerformance(Model):
    total_units: int = 0
    units_sold: int = 0
    available_units: int = 0
    reserved_units: int = 0
    total_revenue: float = 0.0
    avg_sale_price: float = 0.0
    total_sales: int = 0
    buyers: int = 0
    active_leads: int = 0
    conversion_rate: float = 0.0


class FundingStructure(Model):
    total_equity: float = 0.0
    total_debt: float = 0.0
    debt_equity_ratio: float = 0.0
    total_credit_lines: float = 0.0
    available_credit: float = 0.0
    active_investors: int = 0
    active_banks: int = 0
    bank_credits: int = 0
    avg_interest_rate: float = 0.0
    monthly_debt_service: float = 0.0


class ConstructionStatus(Model):
    total_contracts: int = 0
    active_contracts: int = 0
    completed_contracts: int = 0
    contract_value: float = 0.0
    budget_realized: float = 0.0
    budget_utilization: float = 0.0
    total_subcontractors: int = 0
    total_phases: int = 0
    completed_phases: int = 0
    work_logs_7days: int = 0
    total_milestones: int = 0
    completed_milestones: int = 0


class AccountingOverview(Model):
    total_invoices: int = 0
    total_invoice_value: float = 0.0
    paid_invoices: int = 0
    paid_value: float = 0.0
    pending_invoices: int = 0
    pending_value: float = 0.0
    overdue_invoices: int = 0
    overdue_value: float = 0.0
    payment_completion_rate: float = 0.0


class TicCostManagement(Model):
    total_companies: int = 0
    total_tic_budget: float = 0.0
    total_tic_spent: float = 0.0
    tic_utilization: float = 0.0
    companies_over_budget: int = 0


class OfficeExpenses(Model):
    total_office_suppliers: int = 0
    total_office_invoices: int = 0
    total_office_spent: float = 0.0
    avg_office_invoice: float = 0.0


class CompanyCredits(Model):
    total_credits: int = 0
    total_credit_value: float = 0.0
    credits_available: float = 0.0
    credits_used: float = 0.0
    cesija_payments: int = 0
    cesija_value: float = 0.0
    credit_lines: int = 0
    credit_line_available: float = 0.0
    total_allocations: int = 0
    allocated_amount: float = 0.0


class CompanyLoans(Model):
    total_loans: int = 0
    total_loan_amount: float = 0.0
    total_outstanding: float = 0.0
    active_loans: int = 0


class BankAccounts(Model):
    total_accounts: int = 0
    total_balance: float = 0.0
    positive_balance_accounts: int = 0
    negative_balance_accounts: int = 0


class BuildingsUnits(Model):
    total_buildings: int = 0
    total_units: int = 0
    sold_units: int = 0
    reserved_units: int = 0
    available_units: int = 0
    total_garages: int = 0
    total_repositories: int = 0


class RetailPortfolio(Model):
    total_retail_projects: int = 0
    active_retail_projects: int = 0
    total_land_plots: int = 0
    total_retail_contracts: int = 0
    retail_contract_value: float = 0.0
    retail_budget_realized: float = 0.0
    retail_phases: int = 0
    completed_retail_phases: int = 0
    total_retail_customers: int = 0
    retail_suppliers: int = 0


class ContractTypeCount(Model):
    name: str
    count: int
