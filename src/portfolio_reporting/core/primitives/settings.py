# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, model_validator

from .model import Model
from .types import PositiveFloat, PositiveInt


class RiskSettings(Model):
    """
    Thresholds used by the project risk classifier and the insight rules.

    Sales rates and margins are percentages (0-100), not fractions.
    """

    high_sales_rate: float = Field(
        default=20.0, description="Projects selling below this rate are High risk."
    )
    high_margin: float = Field(
        default=0.0, description="Projects with a profit margin below this are High risk."
    )
    medium_sales_rate: float = Field(
        default=50.0, description="Projects selling below this rate are at least Medium risk."
    )
    medium_margin: float = Field(
        default=15.0, description="Projects with a margin below this are at least Medium risk."
    )
    slow_sales_rate: float = Field(
        default=40.0,
        description="Sales rate under which a project is listed in the SLOW SALES risk entry.",
    )
    portfolio_sales_rate_target: float = Field(
        default=50.0,
        description="Portfolio sales rate under which a marketing recommendation is issued.",
    )
    max_debt_equity_ratio: PositiveFloat = Field(
        default=2.0,
        description="Project debt/equity above this ratio is listed as HIGH LEVERAGE.",
    )
    top_n: PositiveInt = Field(
        default=3, description="Number of projects listed in top-performer rankings."
    )

    @model_validator(mode="after")
    def check_threshold_ordering(self) -> "RiskSettings":
        """High-risk thresholds must not exceed the medium ones, or Medium becomes unreachable."""
        if self.high_sales_rate > self.medium_sales_rate:
            raise ValueError("high_sales_rate must be <= medium_sales_rate")
        if self.high_margin > self.medium_margin:
            raise ValueError("high_margin must be <= medium_margin")
        return self


class ReportSettings(Model):
    """
    Configuration for one report pipeline.

    Usage Examples:
        # Defaults: strict fetching, 30s per-collection timeout
        settings = ReportSettings()

        # Tolerate a flaky store; unavailable collections are listed on the report
        settings = ReportSettings(fail_on_unavailable=False)
    """

    risk: RiskSettings = Field(default_factory=RiskSettings)
    fetch_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Timeout applied to each collection read."
    )
    fail_on_unavailable: bool = Field(
        default=True,
        description=(
            "If True, a collection that cannot be fetched fails the whole run. "
            "If False, it is treated as empty and named in Report.unavailable_collections."
        ),
    )
    recent_work_log_days: PositiveInt = Field(
        default=7, description="Window (days before as_of) for counting recent work logs."
    )
    default_lookback_months: PositiveInt = Field(
        default=6, description="Length of the default cash-flow window ending today."
    )
