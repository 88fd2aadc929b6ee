# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class Collection(str, Enum):
    """
    Entity collections exposed by the data access gateway.

    Values are the store table names, so a gateway backed by a relational
    store can use them directly.
    """

    # Sales / units
    PROJECTS = "projects"
    BUILDINGS = "buildings"
    UNITS = "units"
    SALES = "sales"
    CUSTOMERS = "customers"

    # Construction / finance
    CONTRACTS = "contracts"
    CONTRACT_TYPES = "contract_types"
    SUBCONTRACTORS = "subcontractors"
    PROJECT_PHASES = "project_phases"
    WORK_LOGS = "work_logs"
    SUBCONTRACTOR_MILESTONES = "subcontractor_milestones"
    INVESTORS = "investors"
    PROJECT_INVESTMENTS = "project_investments"
    BANK_CREDITS = "bank_credits"

    # Accounting
    INVOICES = "accounting_invoices"
    PAYMENTS = "accounting_payments"
    COMPANIES = "accounting_companies"
    BANKS = "banks"
    BANK_ACCOUNTS = "company_bank_accounts"
    CREDIT_LINES = "company_credits"
    COMPANY_LOANS = "company_loans"
    CREDIT_ALLOCATIONS = "credit_allocations"
    TIC_COST_STRUCTURES = "tic_cost_structures"
    OFFICE_SUPPLIERS = "office_suppliers"

    # Retail
    RETAIL_PROJECTS = "retail_projects"
    RETAIL_PHASES = "retail_phases"
    RETAIL_CONTRACTS = "retail_contracts"
    RETAIL_LAND_PLOTS = "retail_land_plots"
    RETAIL_CUSTOMERS = "retail_customers"
    RETAIL_SUPPLIERS = "retail_suppliers"


class ProjectStatusEnum(str, Enum):
    PLANNING = "Planning"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class UnitKindEnum(str, Enum):
    """Kinds of sellable unit. Garages and storage units can be linked to an apartment."""

    APARTMENT = "apartment"
    GARAGE = "garage"
    STORAGE = "storage"


class UnitStatusEnum(str, Enum):
    AVAILABLE = "Available"
    RESERVED = "Reserved"
    SOLD = "Sold"


class InvoiceTypeEnum(str, Enum):
    """
    Accounting invoice types.

    The direction prefix is from the company's point of view: INCOMING
    invoices are received (the company pays), OUTGOING invoices are issued
    (the company gets paid). INCOMING_INVESTMENT is the exception, it
    records capital received from an investor.
    """

    INCOMING_SUPPLIER = "INCOMING_SUPPLIER"
    INCOMING_INVESTMENT = "INCOMING_INVESTMENT"
    OUTGOING_SUPPLIER = "OUTGOING_SUPPLIER"
    OUTGOING_SALES = "OUTGOING_SALES"
    INCOMING_OFFICE = "INCOMING_OFFICE"
    OUTGOING_OFFICE = "OUTGOING_OFFICE"
    INCOMING_BANK = "INCOMING_BANK"
    OUTGOING_BANK = "OUTGOING_BANK"


class InvoiceStatusEnum(str, Enum):
    UNPAID = "UNPAID"
    PARTIALLY_PAID = "PARTIALLY_PAID"
    PAID = "PAID"


class RiskLevelEnum(str, Enum):
    """Per-project risk tier derived from sales velocity and profitability."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class CashFlowDirectionEnum(str, Enum):
    INFLOW = "Inflow"
    OUTFLOW = "Outflow"


# Invoice types whose totals are recognized as project expense
EXPENSE_INVOICE_TYPES: FrozenSet[InvoiceTypeEnum] = frozenset(
    {InvoiceTypeEnum.INCOMING_SUPPLIER, InvoiceTypeEnum.INCOMING_OFFICE}
)

# Fixed mapping from invoice type to the cash direction of its payments.
# Bank invoices are intentionally absent: they move neither bucket.
CASH_FLOW_DIRECTION: Dict[InvoiceTypeEnum, CashFlowDirectionEnum] = {
    InvoiceTypeEnum.OUTGOING_SALES: CashFlowDirectionEnum.INFLOW,
    InvoiceTypeEnum.OUTGOING_OFFICE: CashFlowDirectionEnum.INFLOW,
    InvoiceTypeEnum.OUTGOING_SUPPLIER: CashFlowDirectionEnum.INFLOW,
    InvoiceTypeEnum.INCOMING_INVESTMENT: CashFlowDirectionEnum.INFLOW,
    InvoiceTypeEnum.INCOMING_SUPPLIER: CashFlowDirectionEnum.OUTFLOW,
    InvoiceTypeEnum.INCOMING_OFFICE: CashFlowDirectionEnum.OUTFLOW,
}

PENDING_INVOICE_STATUSES: FrozenSet[InvoiceStatusEnum] = frozenset(
    {InvoiceStatusEnum.UNPAID, InvoiceStatusEnum.PARTIALLY_PAID}
)

OFFICE_INVOICE_CATEGORY = "OFFICE"
UNCATEGORIZED_CONTRACT_TYPE = "Uncategorized"
