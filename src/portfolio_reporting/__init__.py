# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Reporting - financial aggregation for real estate development portfolios

Reads the collections of a development company's operational store (projects,
units, sales, contracts, invoices, payments, financing, retail) and derives a
single immutable Report: portfolio metric groups, monthly cash flow, per-project
financials with risk tiers, a risk register and recommendations.

Key Entry Points:
- portfolio_reporting.pipeline.generate_report() - Concurrent read + Report
- portfolio_reporting.pipeline.compute_report() - Report from a loaded snapshot
- portfolio_reporting.pipeline.ReportService - Refreshable latest Report
- portfolio_reporting.reporting.export_report() - Document export boundary

Example Usage:
    ```python
    from datetime import date
    from portfolio_reporting.gateway import InMemoryGateway
    from portfolio_reporting.pipeline import generate_report
    from portfolio_reporting.reporting import ReportRequest

    gateway = InMemoryGateway(rows)
    report = await generate_report(gateway, ReportRequest.default(date.today()))
    print(f"Portfolio ROI: {report.kpis.roi:.1f}%")
    ```
"""

import importlib
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "aggregation",
    "cash_flow",
    "core",
    "entities",
    "gateway",
    "insights",
    "metrics",
    "pipeline",
    "reporting",
    "risk",
]


_LAZY_MODULES = {name: f"portfolio_reporting.{name}" for name in __all__}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'portfolio_reporting' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
