# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Refreshable report holder.

Every refresh is tagged with a generation id when it starts. Only the most
recently started refresh may publish its Report; a refresh overtaken by a
newer one is discarded when it finishes, whatever order they complete in.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.primitives import ReportSettings
from ..gateway import DataAccessGateway
from ..reporting import Report, ReportRequest
from .api import generate_report

logger = logging.getLogger(__name__)


class ReportSlot:
    """Single assignable Report, guarded by generation ids."""

    def __init__(self):
        self._generation = 0
        self._current: Optional[Report] = None

    @property
    def generation(self) -> int:
        """Id of the most recently issued generation (0 before the first)."""
        return self._generation

    @property
    def current(self) -> Optional[Report]:
        return self._current

    def issue(self) -> int:
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def publish(self, generation: int, report: Report) -> bool:
        """
        Replace the held Report if `generation` is still the latest.

        Returns:
            True if the report was published, False if it was stale.
        """
        if not self.is_current(generation):
            return False
        self._current = report
        return True


class ReportService:
    """
    Produces Reports on demand and keeps the latest one.

    Args:
        gateway: Source of the entity collections.
        settings: Thresholds, timeouts and windows.

    Example:
        ```python
        service = ReportService(gateway)
        report = await service.refresh(ReportRequest.default(date.today()))
        ```
    """

    def __init__(self, gateway: DataAccessGateway, settings: Optional[ReportSettings] = None):
        self.gateway = gateway
        self.settings = settings or ReportSettings()
        self.slot = ReportSlot()

    @property
    def current(self) -> Optional[Report]:
        return self.slot.current

    def default_request(self, today: date) -> ReportRequest:
        return ReportRequest.default(today, self.settings)

    async def refresh(self, request: ReportRequest) -> Optional[Report]:
        """
        Generate a Report and publish it unless a newer refresh started meanwhile.

        Returns:
            The published Report, or None when the result was superseded.

        Raises:
            FetchError: If the latest refresh cannot read a required collection.
        """
        generation = self.slot.issue()
        logger.debug(f"Refresh generation {generation} started")
        try:
            report = await generate_report(self.gateway, request, self.settings)
        except Exception:
            if not self.slot.is_current(generation):
                logger.debug(f"Refresh generation {generation} failed after being superseded")
                return None
            raise
        if not self.slot.publish(generation, report):
            logger.debug(
                f"Discarding stale report generation {generation} "
                f"(latest is {self.slot.generation})"
            )
            return None
        logger.info(f"Published report generation {generation}")
        return report
