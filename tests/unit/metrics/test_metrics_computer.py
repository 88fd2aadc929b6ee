# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the portfolio metric groups.

Expected values are worked out by hand from the reference portfolio in
`tests/conftest.py`.
"""

import pytest

from portfolio_reporting.aggregation import AggregationEngine
from portfolio_reporting.core.primitives import Collection, ReportSettings
from portfolio_reporting.metrics import MetricsComputer
from tests.conftest import AS_OF, snapshot_from_rows


@pytest.fixture
def computer(snapshot):
    facts = AggregationEngine(snapshot).aggregate()
    return MetricsComputer(snapshot, facts, AS_OF)


@pytest.fixture
def empty_computer():
    snapshot = snapshot_from_rows({})
    return MetricsComputer(snapshot, AggregationEngine(snapshot).aggregate(), AS_OF)


class TestExecutiveSummaryAndKpis:
    def test_executive_summary(self, computer):
        summary = computer.executive_summary()
        assert summary.total_projects == 2
        assert summary.active_projects == 1
        assert summary.completed_projects == 1
        assert summary.total_revenue == pytest.approx(465_000)
        assert summary.total_expenses == pytest.approx(275_000)
        assert summary.total_profit == pytest.approx(190_000)
        assert summary.profit_margin == pytest.approx(190_000 / 465_000 * 100)
        assert summary.portfolio_value == pytest.approx(1_500_000)
        assert summary.roi == pytest.approx(190_000 / 300_000 * 100)

    def test_kpis(self, computer):
        kpis = computer.kpis()
        assert kpis.sales_rate == pytest.approx(50.0)
        assert kpis.debt_equity_ratio == pytest.approx(1.0)
        assert kpis.total_customers == 3
        assert kpis.net_profit == pytest.approx(190_000)


class TestSalesAndFunding:
    def test_sales_performance_counts_apartments_only(self, computer):
        sales = computer.sales_performance()
        assert sales.total_units == 6
        assert sales.units_sold == 3
        assert sales.available_units == 3
        assert sales.reserved_units == 0
        assert sales.total_sales == 3
        assert sales.avg_sale_price == pytest.approx(465_000 / 3)
        assert sales.buyers == 2
        assert sales.active_leads == 1
        assert sales.conversion_rate == pytest.approx(200 / 3)

    def test_funding_structure(self, computer):
        funding = computer.funding_structure()
        assert funding.total_equity == 300_000
        assert funding.total_debt == 300_000
        assert funding.available_credit == 200_000
        assert funding.avg_interest_rate == pytest.approx(4.5)
        assert funding.monthly_debt_service == 2_000
        assert funding.active_investors == 1


class TestConstructionAndAccounting:
    def test_construction_status(self, computer):
        construction = computer.construction_status()
        assert construction.total_contracts == 2
        assert construction.active_contracts == 1
        assert construction.completed_contracts == 1
        assert construction.contract_value == 250_000
        assert construction.budget_realized == 230_000
        assert construction.budget_utilization == pytest.approx(92.0)
        assert construction.completed_phases == 2
        assert construction.total_phases == 3
        assert construction.completed_milestones == 1

    def test_recent_work_logs_window(self, snapshot):
        facts = AggregationEngine(snapshot).aggregate()
        week = MetricsComputer(snapshot, facts, AS_OF).construction_status()
        assert week.work_logs_7days == 1
        month = MetricsComputer(
            snapshot, facts, AS_OF, ReportSettings(recent_work_log_days=30)
        ).construction_status()
        assert month.work_logs_7days == 2

    def test_accounting_overview(self, computer):
        accounting = computer.accounting_overview()
        assert accounting.total_invoices == 4
        assert accounting.paid_invoices == 2
        assert accounting.pending_invoices == 2
        assert accounting.pending_value == 20_000
        assert accounting.overdue_invoices == 1
        assert accounting.overdue_value == 5_000
        assert accounting.payment_completion_rate == pytest.approx(50.0)

    def test_contract_types_with_uncategorized_fallback(self, computer):
        types = computer.contract_types()
        assert [(t.name, t.count) for t in types] == [("Construction", 1), ("Uncategorized", 1)]


class TestCompanyGroups:
    def test_tic_and_office(self, computer):
        tic = computer.tic_cost_management()
        assert tic.total_tic_spent == 12_000
        assert tic.tic_utilization == pytest.approx(120.0)
        assert tic.companies_over_budget == 1

        office = computer.office_expenses()
        assert office.total_office_invoices == 1
        assert office.total_office_spent == 2_000
        assert office.avg_office_invoice == 2_000

    def test_bank_accounts_keep_negative_balances(self, computer):
        accounts = computer.bank_accounts()
        assert accounts.total_balance == 45_000
        assert accounts.positive_balance_accounts == 1
        assert accounts.negative_balance_accounts == 1

    def test_cesija_payments(self, rows):
        rows[Collection.PAYMENTS].append(
            {
                "id": "pay9",
                "invoice_id": "i3",
                "amount": 1_000,
                "payment_date": "2026-06-01",
                "cesija_credit_id": "cr1",
            }
        )
        snapshot = snapshot_from_rows(rows)
        computer = MetricsComputer(snapshot, AggregationEngine(snapshot).aggregate(), AS_OF)
        credits = computer.company_credits()
        assert credits.cesija_payments == 1
        assert credits.cesija_value == 1_000

    def test_cesija_payment_with_unknown_credit_line(self, rows):
        rows[Collection.PAYMENTS].append(
            {
                "id": "pay8",
                "invoice_id": "i3",
                "amount": 700,
                "payment_date": "2026-06-01",
                "cesija_credit_id": "cr-gone",
            }
        )
        snapshot = snapshot_from_rows(rows)
        facts = AggregationEngine(snapshot).aggregate()
        credits = MetricsComputer(snapshot, facts, AS_OF).company_credits()
        assert credits.cesija_payments == 0
        assert credits.cesija_value == 0
        assert [s.record_id for s in facts.skipped] == ["pay8"]

    def test_credit_lines(self, computer):
        credits = computer.company_credits()
        assert credits.credit_lines == 1
        assert credits.credit_line_available == 30_000

    def test_buildings_units_counts_every_kind(self, computer):
        units = computer.buildings_units()
        assert units.total_buildings == 2
        assert units.total_units == 8
        assert units.sold_units == 5
        assert units.total_garages == 1
        assert units.total_repositories == 1


class TestZeroDivision:
    """An empty portfolio yields zeros, never NaN or infinity."""

    def test_every_group_is_finite(self, empty_computer):
        groups = empty_computer.compute_all()
        for name, group in groups:
            if name == "contract_types":
                assert group == ()
                continue
            for field, value in group:
                assert value == 0, f"{name}.{field} = {value}"
