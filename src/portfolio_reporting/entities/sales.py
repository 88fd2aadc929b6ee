# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Sales and unit records: projects, buildings, units, sales and customers."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import AliasChoices, Field

from ..core.primitives import (
    PositiveFloat,
    Record,
    UnitKindEnum,
    UnitStatusEnum,
)


class Project(Record):
    name: str
    location: str = ""
    status: str = ""
    budget: PositiveFloat = 0.0
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class Building(Record):
    project_id: str
    name: str = ""


class Unit(Record):
    """
    A sellable unit of a project.

    Apartments may link to one garage and one storage unit (stored as
    repository_id by the store); the linked unit's price is added to the
    apartment's sale revenue.
    """

    project_id: str
    building_id: Optional[str] = None
    kind: UnitKindEnum = UnitKindEnum.APARTMENT
    number: str = ""
    price: PositiveFloat = 0.0
    area: Optional[PositiveFloat] = None
    status: UnitStatusEnum = UnitStatusEnum.AVAILABLE
    garage_id: Optional[str] = None
    storage_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("storage_id", "repository_id")
    )

    @property
    def is_sold(self) -> bool:
        return self.status == UnitStatusEnum.SOLD


class Sale(Record):
    unit_id: str = Field(validation_alias=AliasChoices("unit_id", "apartment_id"))
    customer_id: Optional[str] = None
    sale_date: Optional[date] = None
    contract_number: Optional[str] = None


class Customer(Record):
    name: str = ""
    status: str = ""
