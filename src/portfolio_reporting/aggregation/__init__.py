# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Aggregation

Price resolution and the cross-collection joins that turn raw records into
resolved revenue and expense facts.
"""

from .engine import (
    AggregatedFacts,
    AggregationEngine,
    ResolvedContractExpense,
    ResolvedSaleRevenue,
    invoiced_contract_amount,
    resolve_contract_expense,
    resolve_sale_revenue,
    unattributed_expense,
)
from .price_index import PriceResolutionIndex

__all__ = [
    "AggregatedFacts",
    "AggregationEngine",
    "PriceResolutionIndex",
    "ResolvedContractExpense",
    "ResolvedSaleRevenue",
    "invoiced_contract_amount",
    "resolve_contract_expense",
    "resolve_sale_revenue",
    "unattributed_expense",
]
