# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for core primitives: date ranges, settings, errors and safe ratios.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from portfolio_reporting.core import ComputationError, FetchError, SkippedRecord
from portfolio_reporting.core.primitives import (
    Collection,
    DateRange,
    ReportSettings,
    RiskSettings,
    months_between,
)
from portfolio_reporting.utils import has_status, safe_percent, safe_ratio


class TestDateRange:
    """Calendar-month coverage of a date range."""

    def test_month_count_includes_both_ends(self):
        window = DateRange(start=date(2026, 1, 31), end=date(2026, 3, 1))
        assert window.month_count == 3
        assert months_between(window.start, window.end) + 1 == window.month_count

    def test_single_day_range_touches_one_month(self):
        window = DateRange(start=date(2026, 5, 5), end=date(2026, 5, 5))
        assert window.month_count == 1
        assert [str(p) for p in window.period_index] == ["2026-05"]

    def test_range_across_year_boundary(self):
        window = DateRange(start=date(2025, 11, 15), end=date(2026, 2, 10))
        assert [str(p) for p in window.period_index] == [
            "2025-11",
            "2025-12",
            "2026-01",
            "2026-02",
        ]

    def test_start_after_end_is_rejected(self):
        with pytest.raises(ValidationError, match="must be on or before"):
            DateRange(start=date(2026, 3, 1), end=date(2026, 2, 1))

    def test_trailing_window(self):
        window = DateRange.trailing(date(2026, 8, 31), months=6)
        assert window.start == date(2026, 2, 28)
        assert window.end == date(2026, 8, 31)
        assert window.month_count == 7

    def test_contains(self):
        window = DateRange(start=date(2026, 1, 1), end=date(2026, 1, 31))
        assert window.contains(date(2026, 1, 31))
        assert not window.contains(date(2026, 2, 1))

    def test_frozen(self):
        window = DateRange(start=date(2026, 1, 1), end=date(2026, 1, 31))
        with pytest.raises(ValidationError):
            window.start = date(2025, 1, 1)


class TestSettings:
    """Defaults and validation of report settings."""

    def test_defaults(self):
        settings = ReportSettings()
        assert settings.fail_on_unavailable is True
        assert settings.default_lookback_months == 6
        assert settings.recent_work_log_days == 7
        assert settings.risk.high_sales_rate == 20
        assert settings.risk.medium_margin == 15
        assert settings.risk.top_n == 3

    def test_high_threshold_above_medium_is_rejected(self):
        with pytest.raises(ValidationError):
            RiskSettings(high_sales_rate=60, medium_sales_rate=50)

    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_fetch_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            ReportSettings(fetch_timeout_seconds=timeout)

    def test_unknown_setting_is_rejected(self):
        with pytest.raises(ValidationError):
            ReportSettings(fetch_timeout=5)


class TestErrors:
    """Exception taxonomy and skipped record reporting."""

    def test_fetch_error_names_collection(self):
        error = FetchError(Collection.INVOICES, ConnectionError("down"))
        assert error.collection is Collection.INVOICES
        assert "accounting_invoices" in str(error)
        assert isinstance(error.cause, ConnectionError)

    def test_skipped_record_from_computation_error(self):
        error = ComputationError(Collection.SALES, "s9", "unit 'x' not found")
        skipped = SkippedRecord.from_error(error)
        assert skipped.collection is Collection.SALES
        assert skipped.record_id == "s9"
        assert skipped.reason == "unit 'x' not found"


class TestSafeRatios:
    """Division guards."""

    @pytest.mark.parametrize(
        "numerator, denominator, expected",
        [(1, 0, 0.0), (0, 0, 0.0), (5, 2, 2.5), (-3, 4, -0.75), (float("inf"), 1, 0.0)],
    )
    def test_safe_ratio(self, numerator, denominator, expected):
        assert safe_ratio(numerator, denominator) == expected

    def test_safe_percent(self):
        assert safe_percent(1, 4) == 25.0
        assert safe_percent(10, 0) == 0.0


class TestHasStatus:
    def test_case_insensitive(self):
        assert has_status("Completed", "completed")
        assert has_status("ACTIVE", "inactive", "active")

    def test_missing_status(self):
        assert not has_status(None, "active")
        assert not has_status("", "active")
