# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Retail portfolio records: land plots, retail projects, phases and contracts."""

from __future__ import annotations

from pydantic import AliasChoices, Field

from ..core.primitives import PositiveFloat, Record


class RetailProject(Record):
    name: str = ""
    status: str = ""


class RetailPhase(Record):
    retail_project_id: str = Field(
        validation_alias=AliasChoices("retail_project_id", "project_id")
    )
    name: str = ""
    status: str = ""


class RetailContract(Record):
    retail_phase_id: str = Field(
        validation_alias=AliasChoices("retail_phase_id", "phase_id")
    )
    contract_amount: PositiveFloat = 0.0
    budget_realized: PositiveFloat = 0.0
    status: str = ""


class RetailLandPlot(Record):
    name: str = ""
    area: PositiveFloat = 0.0


class RetailCustomer(Record):
    name: str = ""


class RetailSupplier(Record):
    name: str = ""
