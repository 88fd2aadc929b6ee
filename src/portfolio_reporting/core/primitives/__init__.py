# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Core primitives shared by every stage of the reporting pipeline:
the immutable model base, enumerations and lookup tables, settings,
and the calendar date range used for cash-flow bucketing.
"""

from .date_range import DateRange, months_between
from .enums import (
    CASH_FLOW_DIRECTION,
    EXPENSE_INVOICE_TYPES,
    OFFICE_INVOICE_CATEGORY,
    PENDING_INVOICE_STATUSES,
    UNCATEGORIZED_CONTRACT_TYPE,
    CashFlowDirectionEnum,
    Collection,
    InvoiceStatusEnum,
    InvoiceTypeEnum,
    ProjectStatusEnum,
    RiskLevelEnum,
    UnitKindEnum,
    UnitStatusEnum,
)
from .model import Model, Record
from .settings import ReportSettings, RiskSettings
from .types import Percentage, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    "Record",
    "DateRange",
    "months_between",
    # Settings
    "ReportSettings",
    "RiskSettings",
    # Enums and lookup tables
    "CASH_FLOW_DIRECTION",
    "EXPENSE_INVOICE_TYPES",
    "OFFICE_INVOICE_CATEGORY",
    "PENDING_INVOICE_STATUSES",
    "UNCATEGORIZED_CONTRACT_TYPE",
    "CashFlowDirectionEnum",
    "Collection",
    "InvoiceStatusEnum",
    "InvoiceTypeEnum",
    "ProjectStatusEnum",
    "RiskLevelEnum",
    "UnitKindEnum",
    "UnitStatusEnum",
    # Types
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
]
