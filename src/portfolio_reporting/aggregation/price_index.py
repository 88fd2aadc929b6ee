# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..core.primitives import Model, UnitKindEnum
from ..entities import Unit


class PriceResolutionIndex(Model):
    """
    Price lookup for linkable sub-assets (garages and storage units).

    Built once per run so revenue resolution is a dictionary lookup per
    sale rather than a scan of the unit collection. Unknown ids resolve to 0.
    """

    garage_prices: Dict[str, float] = {}
    storage_prices: Dict[str, float] = {}

    @classmethod
    def from_units(cls, units: Iterable[Unit]) -> "PriceResolutionIndex":
        garages: Dict[str, float] = {}
        storages: Dict[str, float] = {}
        for unit in units:
            if unit.kind == UnitKindEnum.GARAGE:
                garages[unit.id] = unit.price
            elif unit.kind == UnitKindEnum.STORAGE:
                storages[unit.id] = unit.price
        return cls(garage_prices=garages, storage_prices=storages)

    def garage_price(self, garage_id: Optional[str]) -> float:
        if garage_id is None:
            return 0.0
        return self.garage_prices.get(garage_id, 0.0)

    def storage_price(self, storage_id: Optional[str]) -> float:
        if storage_id is None:
            return 0.0
        return self.storage_prices.get(storage_id, 0.0)
