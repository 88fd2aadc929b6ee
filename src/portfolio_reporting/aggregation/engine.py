# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cross-collection joins producing resolved revenue and expense facts.

JOINS
=====
- sale -> unit -> (garage, storage) prices: resolved sale revenue
- contract -> expense-class invoices: resolved contract expense
- invoice (no contract) -> project: unattributed project expense
- cesija payment -> credit line: resolved cesija payment

EXPENSE RECOGNITION
===================
A contract's expense is the larger of its declared amount and what has been
invoiced against it, so invoiced overruns count as real expense. The same
resolver runs for the portfolio and for each project; portfolio totals are
sums of per-project facts, which is what keeps them reconciled.

Records whose foreign keys cannot be resolved (a sale for an unknown unit, a
contract for an unknown project) are excluded from both levels and reported
as skipped records rather than silently counted at one level only. A cesija
payment naming an unknown credit line stays in payment totals but is left
out of the cesija figures and reported the same way.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.errors import ComputationError, SkippedRecord
from ..core.primitives import Collection, Model
from ..entities import Contract, Invoice, Payment, Sale, Unit
from ..gateway.snapshot import PortfolioSnapshot
from .price_index import PriceResolutionIndex

logger = logging.getLogger(__name__)


class ResolvedSaleRevenue(Model):
    """Revenue of one sale including any linked garage and storage unit."""

    sale_id: str
    unit_id: str
    project_id: str
    unit_price: float
    garage_price: float = 0.0
    storage_price: float = 0.0
    amount: float


class ResolvedContractExpense(Model):
    """Recognized expense of one contract."""

    contract_id: str
    project_id: str
    declared_amount: float
    invoiced_amount: float
    amount: float

    @property
    def overrun(self) -> float:
        """Invoiced amount beyond the declared contract value."""
        return max(self.invoiced_amount - self.declared_amount, 0.0)


def resolve_sale_revenue(sale: Sale, unit: Unit, index: PriceResolutionIndex) -> float:
    """Unit price plus the price of the unit's linked garage and storage, if any."""
    return unit.price + index.garage_price(unit.garage_id) + index.storage_price(unit.storage_id)


def invoiced_contract_amount(contract: Contract, invoices: Iterable[Invoice]) -> float:
    """Total of expense-class invoices linked to the contract."""
    return sum(
        inv.total_amount
        for inv in invoices
        if inv.contract_id == contract.id and inv.is_expense
    )


def resolve_contract_expense(contract: Contract, invoices: Iterable[Invoice]) -> float:
    """
    Recognized expense of a contract.

    Args:
        contract: Contract with its declared amount.
        invoices: Invoices to search; only expense-class invoices whose
            contract_id matches are counted, so the full collection or a
            pre-grouped subset are equally valid inputs.

    Returns:
        max(declared amount, invoiced total)

    Example:
        A contract declared at 100,000 with 120,000 invoiced resolves to
        120,000: the overrun is real expense.
    """
    return max(contract.contract_amount, invoiced_contract_amount(contract, invoices))


def unattributed_expense(
    invoices: Iterable[Invoice], project_id: Optional[str] = None
) -> float:
    """
    Expense-class invoices bound to a project but not to any contract.

    Without `project_id`, sums every such invoice that names some project;
    invoices naming neither a contract nor a project are company overhead
    and belong to no project, so they are excluded at both levels.
    """
    return sum(
        inv.total_amount
        for inv in invoices
        if inv.is_expense
        and inv.contract_id is None
        and inv.project_id is not None
        and (project_id is None or inv.project_id == project_id)
    )


class AggregatedFacts(Model):
    """
    Resolved revenue and expense facts for one snapshot.

    Per-project totals and portfolio totals are both derived from the same
    tuples below. Portfolio totals add the per-project totals in `project_ids`
    order, the order projects appear on the report, so adding up the report's
    project rows reproduces them exactly.
    """

    project_ids: Tuple[str, ...] = ()
    sale_revenues: Tuple[ResolvedSaleRevenue, ...] = ()
    contract_expenses: Tuple[ResolvedContractExpense, ...] = ()
    unattributed_by_project: Dict[str, float] = {}
    cesija_payments: Tuple[Payment, ...] = ()
    skipped: Tuple[SkippedRecord, ...] = ()

    def revenue_for(self, project_id: str) -> float:
        return sum(r.amount for r in self.sale_revenues if r.project_id == project_id)

    def contract_expense_for(self, project_id: str) -> float:
        return sum(e.amount for e in self.contract_expenses if e.project_id == project_id)

    def expense_for(self, project_id: str) -> float:
        return self.contract_expense_for(project_id) + self.unattributed_by_project.get(
            project_id, 0.0
        )

    @property
    def revenue_by_project(self) -> Dict[str, float]:
        totals: Dict[str, float] = {}
        for r in self.sale_revenues:
            totals[r.project_id] = totals.get(r.project_id, 0.0) + r.amount
        return totals

    @property
    def expense_by_project(self) -> Dict[str, float]:
        totals: Dict[str, float] = dict(self.unattributed_by_project)
        for e in self.contract_expenses:
            totals[e.project_id] = totals.get(e.project_id, 0.0) + e.amount
        return totals

    @property
    def total_revenue(self) -> float:
        return sum(self.revenue_for(pid) for pid in self.project_ids)

    @property
    def total_expenses(self) -> float:
        return sum(self.expense_for(pid) for pid in self.project_ids)


class AggregationEngine:
    """
    Joins the snapshot collections once and produces `AggregatedFacts`.

    Lookup maps (units by id, invoices by contract) are built at construction
    so each join step is a dictionary access.

    Example:
        ```python
        facts = AggregationEngine(snapshot).aggregate()
        facts.total_revenue == sum(facts.revenue_for(p.id) for p in snapshot.projects)
        ```
    """

    def __init__(self, snapshot: PortfolioSnapshot):
        self._snapshot = snapshot
        self.price_index = PriceResolutionIndex.from_units(snapshot.units)
        self._units_by_id: Dict[str, Unit] = {u.id: u for u in snapshot.units}
        self._project_ids = frozenset(p.id for p in snapshot.projects)
        self._contract_ids = frozenset(c.id for c in snapshot.contracts)
        self._credit_line_ids = frozenset(cl.id for cl in snapshot.credit_lines)
        invoices_by_contract: Dict[str, List[Invoice]] = defaultdict(list)
        for inv in snapshot.invoices:
            if inv.contract_id is not None:
                invoices_by_contract[inv.contract_id].append(inv)
        self._invoices_by_contract = dict(invoices_by_contract)

    def aggregate(self) -> AggregatedFacts:
        skipped: List[SkippedRecord] = []
        sale_revenues = self._resolve_sales(skipped)
        contract_expenses = self._resolve_contracts(skipped)
        unattributed = self._resolve_unattributed(skipped)
        cesija = self._resolve_cesija(skipped)
        logger.debug(
            f"Aggregated {len(sale_revenues)} sales, {len(contract_expenses)} contracts, "
            f"{len(unattributed)} projects with unattributed expense, {len(cesija)} cesija "
            f"payments; {len(skipped)} skipped"
        )
        return AggregatedFacts(
            project_ids=tuple(p.id for p in self._snapshot.projects),
            sale_revenues=tuple(sale_revenues),
            contract_expenses=tuple(contract_expenses),
            unattributed_by_project=unattributed,
            cesija_payments=tuple(cesija),
            skipped=tuple(skipped),
        )

    def _skip(self, skipped: List[SkippedRecord], error: ComputationError) -> None:
        logger.warning(f"Skipping record: {error}")
        skipped.append(SkippedRecord.from_error(error))

    def _resolve_sales(self, skipped: List[SkippedRecord]) -> List[ResolvedSaleRevenue]:
        resolved: List[ResolvedSaleRevenue] = []
        index = self.price_index
        for sale in self._snapshot.sales:
            unit = self._units_by_id.get(sale.unit_id)
            if unit is None:
                self._skip(
                    skipped,
                    ComputationError(Collection.SALES, sale.id, f"unit '{sale.unit_id}' not found"),
                )
                continue
            if unit.project_id not in self._project_ids:
                self._skip(
                    skipped,
                    ComputationError(
                        Collection.SALES, sale.id, f"project '{unit.project_id}' not found"
                    ),
                )
                continue
            resolved.append(
                ResolvedSaleRevenue(
                    sale_id=sale.id,
                    unit_id=unit.id,
                    project_id=unit.project_id,
                    unit_price=unit.price,
                    garage_price=index.garage_price(unit.garage_id),
                    storage_price=index.storage_price(unit.storage_id),
                    amount=resolve_sale_revenue(sale, unit, index),
                )
            )
        return resolved

    def _resolve_contracts(
        self, skipped: List[SkippedRecord]
    ) -> List[ResolvedContractExpense]:
        resolved: List[ResolvedContractExpense] = []
        for contract in self._snapshot.contracts:
            if contract.project_id not in self._project_ids:
                self._skip(
                    skipped,
                    ComputationError(
                        Collection.CONTRACTS,
                        contract.id,
                        f"project '{contract.project_id}' not found",
                    ),
                )
                continue
            linked = self._invoices_by_contract.get(contract.id, [])
            resolved.append(
                ResolvedContractExpense(
                    contract_id=contract.id,
                    project_id=contract.project_id,
                    declared_amount=contract.contract_amount,
                    invoiced_amount=invoiced_contract_amount(contract, linked),
                    amount=resolve_contract_expense(contract, linked),
                )
            )
        return resolved

    def _resolve_unattributed(self, skipped: List[SkippedRecord]) -> Dict[str, float]:
        by_project: Dict[str, float] = {}
        for inv in self._snapshot.invoices:
            if not inv.is_expense:
                continue
            if inv.contract_id is not None:
                if inv.contract_id not in self._contract_ids:
                    self._skip(
                        skipped,
                        ComputationError(
                            Collection.INVOICES,
                            inv.id,
                            f"excluded from expense: contract '{inv.contract_id}' not found",
                        ),
                    )
                continue
            if inv.project_id is None:
                continue
            if inv.project_id not in self._project_ids:
                self._skip(
                    skipped,
                    ComputationError(
                        Collection.INVOICES,
                        inv.id,
                        f"excluded from expense: project '{inv.project_id}' not found",
                    ),
                )
                continue
            by_project[inv.project_id] = by_project.get(inv.project_id, 0.0) + inv.total_amount
        return by_project

    def _resolve_cesija(self, skipped: List[SkippedRecord]) -> List[Payment]:
        resolved: List[Payment] = []
        for payment in self._snapshot.payments:
            if not payment.is_cesija:
                continue
            if payment.cesija_credit_id not in self._credit_line_ids:
                self._skip(
                    skipped,
                    ComputationError(
                        Collection.PAYMENTS,
                        payment.id,
                        f"excluded from cesija totals: credit line "
                        f"'{payment.cesija_credit_id}' not found",
                    ),
                )
                continue
            resolved.append(payment)
        return resolved
