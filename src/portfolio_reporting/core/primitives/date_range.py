# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date

import pandas as pd
from dateutil.relativedelta import relativedelta
from pydantic import model_validator

from .model import Model


def months_between(start: date, end: date) -> int:
    """Number of calendar-month boundaries crossed going from start to end."""
    return (end.year - start.year) * 12 + (end.month - start.month)


class DateRange(Model):
    """
    Inclusive calendar date range used to window the cash-flow analysis.

    Attributes:
        start: First day included in the range.
        end: Last day included in the range.

    Examples:
        >>> from datetime import date
        >>> window = DateRange(start=date(2026, 1, 15), end=date(2026, 3, 2))
        >>> window.month_count
        3
        >>> [str(p) for p in window.period_index]
        ['2026-01', '2026-02', '2026-03']
    """

    start: date
    end: date

    @model_validator(mode="after")
    def check_ordering(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError(
                f"DateRange start ({self.start}) must be on or before end ({self.end})"
            )
        return self

    @classmethod
    def trailing(cls, today: date, months: int = 6) -> "DateRange":
        """Window covering the `months` months before `today`, through today."""
        return cls(start=today - relativedelta(months=months), end=today)

    @property
    def month_count(self) -> int:
        """Number of calendar months touched by the range (both ends inclusive)."""
        return months_between(self.start, self.end) + 1

    @property
    def period_index(self) -> pd.PeriodIndex:
        """Monthly PeriodIndex covering every month touched by the range."""
        return pd.period_range(
            start=pd.Period(self.start, freq="M"),
            end=pd.Period(self.end, freq="M"),
            freq="M",
        )

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end
