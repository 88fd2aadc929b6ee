# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Monthly cash-flow bucketing.

Payments are classified as inflow or outflow by the type of the invoice they
settle (a fixed lookup table, see `CASH_FLOW_DIRECTION`), then summed per
calendar month. Every month touched by the requested range gets exactly one
bucket, in chronological order, even when it has no payments.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

import pandas as pd

from ..core.primitives import (
    CASH_FLOW_DIRECTION,
    CashFlowDirectionEnum,
    DateRange,
    Model,
)
from ..entities import Invoice, Payment

logger = logging.getLogger(__name__)

MONTH_LABEL_FORMAT = "%b %Y"


class CashFlowBucket(Model):
    """Cash movement of one calendar month."""

    month: str
    month_start: date
    inflow: float = 0.0
    outflow: float = 0.0
    net: float = 0.0


def classify_payments(
    payments: Iterable[Payment], invoices: Iterable[Invoice]
) -> Tuple[Tuple[Payment, ...], Tuple[Payment, ...]]:
    """
    Split payments into inflows and outflows by their invoice's type.

    Payments whose invoice is unknown, or whose invoice type has no cash
    direction (bank invoices), land in neither list.
    """
    invoice_types = {inv.id: inv.invoice_type for inv in invoices}
    inflows: List[Payment] = []
    outflows: List[Payment] = []
    for payment in payments:
        invoice_type = invoice_types.get(payment.invoice_id)
        direction = CASH_FLOW_DIRECTION.get(invoice_type) if invoice_type else None
        if direction == CashFlowDirectionEnum.INFLOW:
            inflows.append(payment)
        elif direction == CashFlowDirectionEnum.OUTFLOW:
            outflows.append(payment)
        elif invoice_type is None:
            logger.debug(f"Payment {payment.id} references unknown invoice {payment.invoice_id}")
    return tuple(inflows), tuple(outflows)


def monthly_totals(payments: Sequence[Payment]) -> pd.Series:
    """Payment amounts summed per monthly period."""
    if not payments:
        return pd.Series(dtype=float)
    index = pd.PeriodIndex([pd.Period(p.payment_date, freq="M") for p in payments], freq="M")
    amounts = pd.Series([p.amount for p in payments], index=index, dtype=float)
    return amounts.groupby(level=0).sum()


def bucket_cash_flow(
    inflows: Sequence[Payment],
    outflows: Sequence[Payment],
    date_range: DateRange,
) -> Iterator[CashFlowBucket]:
    """
    Yield one bucket per calendar month of `date_range`, oldest first.

    Each month covers its first through last day, inclusive. The generator is
    a pure function of its arguments, so calling it again restarts it.

    Example:
        ```python
        window = DateRange(start=date(2026, 1, 10), end=date(2026, 3, 5))
        buckets = list(bucket_cash_flow(inflows, outflows, window))
        [b.month for b in buckets]  # ['Jan 2026', 'Feb 2026', 'Mar 2026']
        ```
    """
    inflow_totals: Dict[pd.Period, float] = monthly_totals(inflows).to_dict()
    outflow_totals: Dict[pd.Period, float] = monthly_totals(outflows).to_dict()
    for period in date_range.period_index:
        inflow = float(inflow_totals.get(period, 0.0))
        outflow = float(outflow_totals.get(period, 0.0))
        yield CashFlowBucket(
            month=period.strftime(MONTH_LABEL_FORMAT),
            month_start=period.start_time.date(),
            inflow=inflow,
            outflow=outflow,
            net=inflow - outflow,
        )


def cash_flow_frame(buckets: Iterable[CashFlowBucket]) -> pd.DataFrame:
    """Buckets as a DataFrame indexed by monthly period (inflow, outflow, net columns)."""
    buckets = list(buckets)
    index = pd.PeriodIndex([pd.Period(b.month_start, freq="M") for b in buckets], freq="M")
    return pd.DataFrame(
        {
            "inflow": [b.inflow for b in buckets],
            "outflow": [b.outflow for b in buckets],
            "net": [b.net for b in buckets],
        },
        index=index,
    )
