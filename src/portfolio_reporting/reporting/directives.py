# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Layout directives for paginated documents.

`build_document` walks a Report and emits a flat list of directives in
section order. Renderers (PDF, HTML, ...) turn directives into output and
own every presentation decision: fonts, page breaks, currency formatting.
Directives carry raw numbers only.

Section order:

1. Executive summary
2. Key performance indicators
3. Sales performance
4. Funding & financial structure
5. Construction & supervision status
6. Accounting overview
7. TIC cost management
8. Office expenses
9. Company credits
10. Bank accounts
11. Cash flow analysis
12. Project-by-project breakdown
13. Risk assessment
14. Executive insights & recommendations
"""

from __future__ import annotations

from typing import List, Literal, Tuple, Union

from ..core.primitives import Model, Percentage
from .report import Report

Cell = Union[str, int, float]
ValueUnit = Literal["currency", "percent", "ratio", "count"]


class SectionTitle(Model):
    directive: Literal["section_title"] = "section_title"
    title: str


class KpiTile(Model):
    directive: Literal["kpi_tile"] = "kpi_tile"
    label: str
    value: float
    unit: ValueUnit = "count"


class TableBlock(Model):
    directive: Literal["table"] = "table"
    title: str = ""
    columns: Tuple[str, ...]
    rows: Tuple[Tuple[Cell, ...], ...] = ()


class ChartSeries(Model):
    directive: Literal["chart"] = "chart"
    title: str
    kind: Literal["pie", "bar", "line"]
    labels: Tuple[str, ...]
    values: Tuple[float, ...]
    series_name: str = ""


class ProgressBar(Model):
    directive: Literal["progress_bar"] = "progress_bar"
    label: str
    percentage: Percentage


Directive = Union[SectionTitle, KpiTile, TableBlock, ChartSeries, ProgressBar]

METRIC_COLUMNS = ("Metric", "Value", "Metric", "Value")


def _clamp_percent(value: float) -> float:
    return min(max(value, 0.0), 100.0)


def _metric_table(title: str, pairs: List[Tuple[str, Cell]]) -> TableBlock:
    """Two metric/value pairs per row, as on the printed report."""
    rows = []
    for i in range(0, len(pairs), 2):
        left = pairs[i]
        right = pairs[i + 1] if i + 1 < len(pairs) else ("", "")
        rows.append((left[0], left[1], right[0], right[1]))
    return TableBlock(title=title, columns=METRIC_COLUMNS, rows=tuple(rows))


def _executive_summary(report: Report) -> List[Directive]:
    s = report.executive_summary
    return [
        SectionTitle(title="EXECUTIVE SUMMARY"),
        _metric_table(
            "",
            [
                ("Total Projects", s.total_projects),
                ("Active Projects", s.active_projects),
                ("Completed Projects", s.completed_projects),
                ("Total Revenue", s.total_revenue),
                ("Total Expenses", s.total_expenses),
                ("Total Profit", s.total_profit),
                ("Profit Margin", s.profit_margin),
                ("ROI", s.roi),
            ],
        ),
    ]


def _kpis(report: Report) -> List[Directive]:
    k = report.kpis
    return [
        SectionTitle(title="KEY PERFORMANCE INDICATORS"),
        KpiTile(label="Portfolio Value", value=k.portfolio_value, unit="currency"),
        KpiTile(label="Total Revenue", value=k.total_revenue, unit="currency"),
        KpiTile(label="Net Profit", value=k.net_profit, unit="currency"),
        KpiTile(label="ROI", value=k.roi, unit="percent"),
        KpiTile(label="Sales Rate", value=k.sales_rate, unit="percent"),
        KpiTile(label="Debt/Equity", value=k.debt_equity_ratio, unit="ratio"),
        KpiTile(label="Active Projects", value=k.active_projects),
        KpiTile(label="Total Customers", value=k.total_customers),
    ]


def _sales(report: Report) -> List[Directive]:
    s = report.sales_performance
    return [
        SectionTitle(title="SALES PERFORMANCE"),
        _metric_table(
            "",
            [
                ("Total Units", s.total_units),
                ("Units Sold", s.units_sold),
                ("Available", s.available_units),
                ("Reserved", s.reserved_units),
                ("Sales Revenue", s.total_revenue),
                ("Avg Sale Price", s.avg_sale_price),
                ("Buyers", s.buyers),
                ("Conversion Rate", s.conversion_rate),
            ],
        ),
        ChartSeries(
            title="Unit Status",
            kind="pie",
            labels=("Sold", "Reserved", "Available"),
            values=(s.units_sold, s.reserved_units, s.available_units),
        ),
        ProgressBar(
            label="Sales Rate", percentage=_clamp_percent(report.kpis.sales_rate)
        ),
    ]


def _funding(report: Report) -> List[Directive]:
    f = report.funding_structure
    return [
        SectionTitle(title="FUNDING & FINANCIAL STRUCTURE"),
        _metric_table(
            "",
            [
                ("Total Equity", f.total_equity),
                ("Total Debt", f.total_debt),
                ("Debt/Equity", f.debt_equity_ratio),
                ("Credit Lines", f.total_credit_lines),
                ("Available Credit", f.available_credit),
                ("Active Investors", f.active_investors),
                ("Active Banks", f.active_banks),
                ("Bank Credits", f.bank_credits),
                ("Avg Interest Rate", f.avg_interest_rate),
                ("Monthly Debt Service", f.monthly_debt_service),
            ],
        ),
        ChartSeries(
            title="Capital Structure",
            kind="pie",
            labels=("Equity", "Debt"),
            values=(f.total_equity, f.total_debt),
        ),
    ]


def _construction(report: Report) -> List[Directive]:
    c = report.construction_status
    directives: List[Directive] = [
        SectionTitle(title="CONSTRUCTION & SUPERVISION STATUS"),
        _metric_table(
            "",
            [
                ("Total Contracts", c.total_contracts),
                ("Active Contracts", c.active_contracts),
                ("Completed Contracts", c.completed_contracts),
                ("Contract Value", c.contract_value),
                ("Budget Realized", c.budget_realized),
                ("Subcontractors", c.total_subcontractors),
                ("Phases", f"{c.completed_phases}/{c.total_phases}"),
                ("Milestones", f"{c.completed_milestones}/{c.total_milestones}"),
                ("Work Logs (7 days)", c.work_logs_7days),
            ],
        ),
        ProgressBar(
            label="Budget Utilization", percentage=_clamp_percent(c.budget_utilization)
        ),
    ]
    if report.contract_types:
        directives.append(
            ChartSeries(
                title="Contracts by Type",
                kind="bar",
                labels=tuple(t.name for t in report.contract_types),
                values=tuple(float(t.count) for t in report.contract_types),
            )
        )
    return directives


def _accounting(report: Report) -> List[Directive]:
    a = report.accounting_overview
    return [
        SectionTitle(title="ACCOUNTING OVERVIEW"),
        _metric_table(
            "",
            [
                ("Total Invoices", a.total_invoices),
                ("Invoice Value", a.total_invoice_value),
                ("Paid Invoices", a.paid_invoices),
                ("Paid Value", a.paid_value),
                ("Pending Invoices", a.pending_invoices),
                ("Pending Value", a.pending_value),
                ("Overdue Invoices", a.overdue_invoices),
                ("Overdue Value", a.overdue_value),
            ],
        ),
        ProgressBar(
            label="Payment Completion",
            percentage=_clamp_percent(a.payment_completion_rate),
        ),
    ]


def _tic(report: Report) -> List[Directive]:
    t = report.tic_cost_management
    return [
        SectionTitle(title="TIC COST MANAGEMENT"),
        _metric_table(
            "",
            [
                ("Companies", t.total_companies),
                ("TIC Budget", t.total_tic_budget),
                ("TIC Spent", t.total_tic_spent),
                ("Over Budget", t.companies_over_budget),
            ],
        ),
        ProgressBar(label="TIC Utilization", percentage=_clamp_percent(t.tic_utilization)),
    ]


def _office(report: Report) -> List[Directive]:
    o = report.office_expenses
    return [
        SectionTitle(title="OFFICE EXPENSES"),
        _metric_table(
            "",
            [
                ("Suppliers", o.total_office_suppliers),
                ("Invoices", o.total_office_invoices),
                ("Total Spent", o.total_office_spent),
                ("Avg Invoice", o.avg_office_invoice),
            ],
        ),
    ]


def _credits(report: Report) -> List[Directive]:
    c = report.company_credits
    loans = report.company_loans
    return [
        SectionTitle(title="COMPANY CREDITS"),
        _metric_table(
            "",
            [
                ("Credits", c.total_credits),
                ("Credit Value", c.total_credit_value),
                ("Used", c.credits_used),
                ("Available", c.credits_available),
                ("Cesija Payments", c.cesija_payments),
                ("Cesija Value", c.cesija_value),
                ("Company Credit Lines", c.credit_lines),
                ("Credit Line Available", c.credit_line_available),
                ("Allocations", c.total_allocations),
                ("Allocated", c.allocated_amount),
                ("Loans", loans.total_loans),
                ("Loan Outstanding", loans.total_outstanding),
            ],
        ),
    ]


def _bank_accounts(report: Report) -> List[Directive]:
    b = report.bank_accounts
    return [
        SectionTitle(title="BANK ACCOUNTS"),
        _metric_table(
            "",
            [
                ("Accounts", b.total_accounts),
                ("Total Balance", b.total_balance),
                ("Positive", b.positive_balance_accounts),
                ("Negative", b.negative_balance_accounts),
            ],
        ),
    ]


def _cash_flow(report: Report) -> List[Directive]:
    buckets = report.cash_flow
    total_inflow = sum(b.inflow for b in buckets)
    total_outflow = sum(b.outflow for b in buckets)
    rows = tuple((b.month, b.inflow, b.outflow, b.net) for b in buckets)
    return [
        SectionTitle(title="CASH FLOW ANALYSIS"),
        TableBlock(
            columns=("Month", "Inflow", "Outflow", "Net Cash Flow"),
            rows=rows + (("Total", total_inflow, total_outflow, total_inflow - total_outflow),),
        ),
        ChartSeries(
            title="Net Cash Flow",
            kind="line",
            labels=tuple(b.month for b in buckets),
            values=tuple(b.net for b in buckets),
            series_name="net",
        ),
    ]


def _projects(report: Report) -> List[Directive]:
    if not report.projects:
        return []
    directives: List[Directive] = [SectionTitle(title="PROJECT-BY-PROJECT BREAKDOWN")]
    for p in report.projects:
        directives.append(
            _metric_table(
                f"{p.name} ({p.location})" if p.location else p.name,
                [
                    ("Revenue", p.revenue),
                    ("Expenses", p.expenses),
                    ("Profit", p.profit),
                    ("Margin", p.profit_margin),
                    ("Units", f"{p.units_sold}/{p.total_units}"),
                    ("Phases", f"{p.phases_done}/{p.total_phases}"),
                    ("Contracts", p.contracts),
                    ("Risk", p.risk_level.value),
                ],
            )
        )
        directives.append(
            ProgressBar(label=f"{p.name} Sales", percentage=_clamp_percent(p.sales_rate))
        )
    return directives


def _risks(report: Report) -> List[Directive]:
    if not report.risks:
        return []
    return [
        SectionTitle(title="RISK ASSESSMENT"),
        TableBlock(
            columns=("Risk", "Count", "Description"),
            rows=tuple((r.type, r.count, r.description) for r in report.risks),
        ),
    ]


def _insights(report: Report) -> List[Directive]:
    insights = report.insights
    return [
        SectionTitle(title="EXECUTIVE INSIGHTS & RECOMMENDATIONS"),
        TableBlock(
            title="Top Performing Projects",
            columns=("Project", "Revenue", "Sales Rate"),
            rows=tuple((t.name, t.revenue, t.sales_rate) for t in insights.top_projects),
        ),
        TableBlock(
            title="Strategic Recommendations",
            columns=("Recommendation",),
            rows=tuple((r,) for r in insights.recommendations),
        ),
    ]


SECTION_BUILDERS = (
    _executive_summary,
    _kpis,
    _sales,
    _funding,
    _construction,
    _accounting,
    _tic,
    _office,
    _credits,
    _bank_accounts,
    _cash_flow,
    _projects,
    _risks,
    _insights,
)


def build_document(report: Report) -> List[Directive]:
    """Layout directives for the whole report, in section order."""
    directives: List[Directive] = []
    for builder in SECTION_BUILDERS:
        directives.extend(builder(report))
    return directives
