# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for portfolio reporting.

`portfolio_rows()` describes a small two-project portfolio as raw store rows.
Its headline figures, worked out by hand:

- Revenue: Sunrise 265,000 (100,000 apartment + 10,000 garage + 5,000
  storage, plus a 150,000 apartment), Harbor 200,000; total 465,000
- Expense: Sunrise 125,000 (contract declared 100,000 but invoiced 120,000,
  plus a 5,000 project invoice without contract), Harbor 150,000 (declared,
  nothing invoiced); total 275,000. The 2,000 office invoice is company
  overhead and belongs to no project.
- Equity 300,000, debt 300,000 (all on Sunrise)
- Apartments: 6, of which 3 sold
- One overdue invoice as of 2026-06-15
- One company credit line (cr1) with 30,000 still available
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pytest

from portfolio_reporting.core.primitives import Collection, DateRange
from portfolio_reporting.gateway import (
    InMemoryGateway,
    PortfolioSnapshot,
    build_snapshot,
    fetched_from_rows,
)
from portfolio_reporting.reporting import ReportRequest

AS_OF = date(2026, 6, 15)

Rows = Dict[Collection, List[Dict[str, Any]]]


def portfolio_rows() -> Rows:
    """Raw rows of the reference portfolio, keyed by collection."""
    return {
        Collection.PROJECTS: [
            {
                "id": "p1",
                "name": "Sunrise",
                "location": "Split",
                "status": "In Progress",
                "budget": 1_000_000,
            },
            {
                "id": "p2",
                "name": "Harbor",
                "location": "Zadar",
                "status": "Completed",
                "budget": 500_000,
            },
        ],
        Collection.BUILDINGS: [
            {"id": "bld1", "project_id": "p1", "name": "A"},
            {"id": "bld2", "project_id": "p2", "name": "B"},
        ],
        Collection.UNITS: [
            {
                "id": "a1",
                "project_id": "p1",
                "kind": "apartment",
                "price": 100_000,
                "status": "Sold",
                "garage_id": "g1",
                "repository_id": "s1",
            },
            {"id": "a2", "project_id": "p1", "kind": "apartment", "price": 120_000},
            {"id": "a3", "project_id": "p1", "kind": "apartment", "price": 80_000},
            {
                "id": "a4",
                "project_id": "p1",
                "kind": "apartment",
                "price": 150_000,
                "status": "Sold",
            },
            {"id": "g1", "project_id": "p1", "kind": "garage", "price": 10_000, "status": "Sold"},
            {"id": "s1", "project_id": "p1", "kind": "storage", "price": 5_000, "status": "Sold"},
            {
                "id": "b1",
                "project_id": "p2",
                "kind": "apartment",
                "price": 200_000,
                "status": "Sold",
            },
            {"id": "b2", "project_id": "p2", "kind": "apartment", "price": 100_000},
        ],
        Collection.SALES: [
            {"id": "sale1", "apartment_id": "a1", "customer_id": "cu1", "sale_date": "2026-02-01"},
            {"id": "sale2", "unit_id": "a4", "customer_id": "cu3", "sale_date": "2026-03-15"},
            {"id": "sale3", "unit_id": "b1", "customer_id": "cu3", "sale_date": "2025-11-20"},
        ],
        Collection.CUSTOMERS: [
            {"id": "cu1", "name": "Ana", "status": "buyer"},
            {"id": "cu2", "name": "Ivo", "status": "lead"},
            {"id": "cu3", "name": "Mia", "status": "Buyer"},
        ],
        Collection.CONTRACTS: [
            {
                "id": "c1",
                "project_id": "p1",
                "contract_type_id": "ct1",
                "subcontractor_id": "sub1",
                "contract_amount": 100_000,
                "budget_realized": 80_000,
                "status": "active",
            },
            {
                "id": "c2",
                "project_id": "p2",
                "subcontractor_id": "sub1",
                "contract_amount": 150_000,
                "budget_realized": 150_000,
                "status": "completed",
            },
        ],
        Collection.CONTRACT_TYPES: [{"id": "ct1", "name": "Construction"}],
        Collection.SUBCONTRACTORS: [{"id": "sub1", "name": "BuildCo"}],
        Collection.PROJECT_PHASES: [
            {"id": "ph1", "project_id": "p1", "name": "Foundation", "status": "completed"},
            {"id": "ph2", "project_id": "p1", "name": "Structure", "status": "in_progress"},
            {"id": "ph3", "project_id": "p2", "name": "All", "status": "completed"},
        ],
        Collection.WORK_LOGS: [
            {"id": "w1", "project_id": "p1", "date": "2026-06-10"},
            {"id": "w2", "project_id": "p1", "date": "2026-06-01"},
        ],
        Collection.SUBCONTRACTOR_MILESTONES: [
            {"id": "m1", "contract_id": "c1", "percentage": 50, "status": "completed"},
            {"id": "m2", "contract_id": "c1", "percentage": 50, "status": "pending"},
        ],
        Collection.INVESTORS: [{"id": "inv1", "name": "Fund"}],
        Collection.PROJECT_INVESTMENTS: [
            {"id": "pi1", "project_id": "p1", "investor_id": "inv1", "amount": 200_000},
            {"id": "pi2", "project_id": "p2", "investor_id": "inv1", "amount": 100_000},
        ],
        Collection.BANK_CREDITS: [
            {
                "id": "bc1",
                "project_id": "p1",
                "bank_id": "bank1",
                "amount": 300_000,
                "used_amount": 100_000,
                "outstanding_balance": 90_000,
                "interest_rate": 4.5,
                "monthly_payment": 2_000,
            }
        ],
        Collection.INVOICES: [
            {
                "id": "i1",
                "invoice_type": "INCOMING_SUPPLIER",
                "status": "PAID",
                "contract_id": "c1",
                "project_id": "p1",
                "total_amount": 120_000,
                "remaining_amount": 0,
                "due_date": "2026-03-01",
            },
            {
                "id": "i3",
                "invoice_type": "INCOMING_SUPPLIER",
                "status": "UNPAID",
                "project_id": "p1",
                "total_amount": 5_000,
                "remaining_amount": 5_000,
                "due_date": "2026-05-01",
            },
            {
                "id": "i4",
                "invoice_type": "INCOMING_OFFICE",
                "invoice_category": "OFFICE",
                "status": "PAID",
                "total_amount": 2_000,
                "remaining_amount": 0,
            },
            {
                "id": "i5",
                "invoice_type": "OUTGOING_SALES",
                "status": "PARTIALLY_PAID",
                "project_id": "p1",
                "total_amount": 115_000,
                "remaining_amount": 15_000,
                "due_date": "2026-07-31",
            },
        ],
        Collection.PAYMENTS: [
            {"id": "pay1", "invoice_id": "i1", "amount": 120_000, "payment_date": "2026-03-10"},
            {"id": "pay2", "invoice_id": "i4", "amount": 2_000, "payment_date": "2026-04-02"},
            {"id": "pay3", "invoice_id": "i5", "amount": 100_000, "payment_date": "2026-05-20"},
        ],
        Collection.COMPANIES: [{"id": "co1", "name": "Landmark"}],
        Collection.BANKS: [{"id": "bank1", "name": "First Bank"}],
        Collection.BANK_ACCOUNTS: [
            {"id": "ba1", "company_id": "co1", "bank_id": "bank1", "current_balance": 50_000},
            {"id": "ba2", "company_id": "co1", "bank_id": "bank1", "current_balance": -5_000},
        ],
        Collection.CREDIT_LINES: [
            {
                "id": "cr1",
                "company_id": "co1",
                "bank_id": "bank1",
                "amount": 50_000,
                "used_amount": 20_000,
            },
        ],
        Collection.TIC_COST_STRUCTURES: [
            {"id": "tic1", "company_id": "co1", "budgeted_amount": 10_000, "spent_amount": 12_000},
        ],
        Collection.OFFICE_SUPPLIERS: [{"id": "os1", "name": "Paper Ltd"}],
    }


def fractional_portfolio_rows(n_projects: int = 3, n_units: int = 30) -> Rows:
    """
    Projects whose sold units carry cent-precision prices.

    Units are dealt round-robin across projects and sold in that order, so
    the sales collection interleaves projects. Contract amounts are
    fractional too.
    """
    projects = [{"id": f"fp{i}", "name": f"Fraction {i}"} for i in range(n_projects)]
    units = [
        {
            "id": f"fu{i}",
            "project_id": f"fp{i % n_projects}",
            "kind": "apartment",
            "price": round(50_000 + i * 7_919.37 + (i % 7) * 0.01, 2),
            "status": "Sold",
        }
        for i in range(n_units)
    ]
    sales = [{"id": f"fs{i}", "unit_id": f"fu{i}"} for i in range(n_units)]
    contracts = [
        {
            "id": f"fc{i}",
            "project_id": f"fp{i % n_projects}",
            "contract_amount": round(10_000.1 + i * 3_333.33, 2),
        }
        for i in range(n_units)
    ]
    invoices = [
        {
            "id": f"fi{i}",
            "invoice_type": "INCOMING_SUPPLIER",
            "project_id": f"fp{i % n_projects}",
            "total_amount": round(0.1 * (i + 1) + 0.07, 2),
            "remaining_amount": 0,
        }
        for i in range(n_units)
    ]
    return {
        Collection.PROJECTS: projects,
        Collection.UNITS: units,
        Collection.SALES: sales,
        Collection.CONTRACTS: contracts,
        Collection.INVOICES: invoices,
    }


def snapshot_from_rows(
    rows: Mapping[Collection, Sequence[Mapping[str, Any]]],
    fail_on_unavailable: bool = True,
) -> PortfolioSnapshot:
    """Parse rows into a snapshot without going through a gateway."""
    fetched = {collection: fetched_from_rows(list(r)) for collection, r in rows.items()}
    return build_snapshot(fetched, fail_on_unavailable=fail_on_unavailable)


def make_request(
    project_filter: str = "all",
    start: date = date(2026, 1, 1),
    end: date = AS_OF,
    as_of: Optional[date] = None,
) -> ReportRequest:
    return ReportRequest(
        project_filter=project_filter,
        date_range=DateRange(start=start, end=end),
        as_of=as_of or end,
    )


@pytest.fixture
def rows() -> Rows:
    return portfolio_rows()


@pytest.fixture
def snapshot(rows) -> PortfolioSnapshot:
    return snapshot_from_rows(rows)


@pytest.fixture
def gateway(rows) -> InMemoryGateway:
    return InMemoryGateway(rows)


@pytest.fixture
def report_request() -> ReportRequest:
    return make_request()
