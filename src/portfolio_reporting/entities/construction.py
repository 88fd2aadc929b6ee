# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Construction and finance records: contracts, phases, investments, bank credits."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AliasChoices, Field

from ..core.primitives import Percentage, PositiveFloat, Record


class Contract(Record):
    project_id: str
    contract_type_id: Optional[str] = None
    subcontractor_id: Optional[str] = None
    contract_number: Optional[str] = None
    contract_amount: PositiveFloat = Field(
        default=0.0, description="Declared (budgeted) contract value."
    )
    budget_realized: PositiveFloat = 0.0
    status: str = ""


class ContractType(Record):
    name: str


class Subcontractor(Record):
    name: str = ""


class ProjectPhase(Record):
    project_id: str
    name: str = ""
    budget_allocated: PositiveFloat = 0.0
    status: str = ""


class WorkLog(Record):
    project_id: Optional[str] = None
    work_date: date = Field(validation_alias=AliasChoices("work_date", "date"))


class SubcontractorMilestone(Record):
    contract_id: Optional[str] = None
    percentage: Percentage = 0.0
    due_date: Optional[date] = None
    status: str = ""


class Investor(Record):
    name: str = ""


class ProjectInvestment(Record):
    project_id: str
    investor_id: Optional[str] = None
    amount: PositiveFloat = 0.0


class BankCredit(Record):
    project_id: Optional[str] = None
    bank_id: Optional[str] = None
    amount: PositiveFloat = 0.0
    used_amount: PositiveFloat = 0.0
    outstanding_balance: PositiveFloat = 0.0
    interest_rate: PositiveFloat = 0.0
    monthly_payment: PositiveFloat = 0.0

    @property
    def available_amount(self) -> float:
        return max(self.amount - self.used_amount, 0.0)
