# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Accounting records: invoices, payments, companies, banks, credits and loans."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AliasChoices, Field, model_validator

from ..core.primitives import (
    EXPENSE_INVOICE_TYPES,
    PENDING_INVOICE_STATUSES,
    InvoiceStatusEnum,
    InvoiceTypeEnum,
    PositiveFloat,
    Record,
)


class Invoice(Record):
    """
    Accounting invoice.

    An invoice may be bound to a contract, to a project, to both, or to
    neither (company overhead). Paid invoices carry no remaining amount.
    """

    invoice_number: str = ""
    invoice_type: InvoiceTypeEnum
    invoice_category: Optional[str] = None
    status: InvoiceStatusEnum = InvoiceStatusEnum.UNPAID
    contract_id: Optional[str] = None
    project_id: Optional[str] = None
    total_amount: PositiveFloat = 0.0
    remaining_amount: PositiveFloat = 0.0
    issue_date: Optional[date] = None
    due_date: Optional[date] = None

    @model_validator(mode="after")
    def check_paid_remaining(self) -> "Invoice":
        if self.status == InvoiceStatusEnum.PAID and self.remaining_amount:
            raise ValueError("a PAID invoice must have remaining_amount == 0")
        return self

    @property
    def is_expense(self) -> bool:
        return self.invoice_type in EXPENSE_INVOICE_TYPES

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_INVOICE_STATUSES

    def is_overdue(self, as_of: date) -> bool:
        return self.is_pending and self.due_date is not None and self.due_date < as_of


class Payment(Record):
    """
    Payment against an invoice.

    A payment that references a company credit line (cesija) settles the
    invoice by assigning credit rather than moving cash; it still counts in
    general payment totals.
    """

    invoice_id: str
    amount: PositiveFloat = 0.0
    payment_date: date
    cesija_credit_id: Optional[str] = None

    @property
    def is_cesija(self) -> bool:
        return self.cesija_credit_id is not None


class Company(Record):
    name: str = ""


class Bank(Record):
    name: str = ""


class BankAccount(Record):
    company_id: Optional[str] = None
    bank_id: Optional[str] = None
    # Overdrawn accounts carry a negative balance
    current_balance: float = 0.0


class CreditLine(Record):
    """Company credit line; cesija payments draw on these."""

    company_id: Optional[str] = None
    bank_id: Optional[str] = None
    amount: PositiveFloat = 0.0
    used_amount: PositiveFloat = 0.0

    @property
    def available_amount(self) -> float:
        return max(self.amount - self.used_amount, 0.0)


class CompanyLoan(Record):
    amount: PositiveFloat = 0.0
    current_balance: PositiveFloat = 0.0


class CreditAllocation(Record):
    credit_id: Optional[str] = None
    project_id: Optional[str] = None
    allocated_amount: PositiveFloat = 0.0


class TicCostStructure(Record):
    company_id: Optional[str] = None
    budgeted_amount: PositiveFloat = 0.0
    actual_spent: PositiveFloat = Field(
        default=0.0, validation_alias=AliasChoices("actual_spent", "spent_amount")
    )

    @property
    def is_over_budget(self) -> bool:
        return self.actual_spent > self.budgeted_amount


class OfficeSupplier(Record):
    name: str = ""
