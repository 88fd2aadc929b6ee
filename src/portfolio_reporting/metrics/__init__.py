# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Metrics

Named metric groups computed from a snapshot and its resolved facts.
"""

from .computer import MetricGroups, MetricsComputer
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

__all__ = [
    "MetricGroups",
    "MetricsComputer",
    "AccountingOverview",
    "BankAccounts",
    "BuildingsUnits",
    "CompanyCredits",
    "CompanyLoans",
    "ConstructionStatus",
    "ContractTypeCount",
    "ExecutiveSummary",
    "FundingStructure",
    "Kpis",
    "OfficeExpenses",
    "RetailPortfolio",
    "SalesPerformance",
    "TicCostManagement",
]
