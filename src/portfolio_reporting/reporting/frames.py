# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular panels.

DataFrame views of a Report for on-screen tables. Frames are derived on
demand and never stored on the Report.
"""

from __future__ import annotations

import pandas as pd

from ..cash_flow.bucketer import cash_flow_frame as _bucket_frame
from .report import Report

PROJECT_COLUMNS = [
    "name",
    "location",
    "status",
    "revenue",
    "expenses",
    "profit",
    "profit_margin",
    "units_sold",
    "total_units",
    "sales_rate",
    "debt_equity_ratio",
    "risk_level",
]


def projects_frame(report: Report) -> pd.DataFrame:
    """One row per project in the breakdown, indexed by project id."""
    if not report.projects:
        return pd.DataFrame(columns=PROJECT_COLUMNS, index=pd.Index([], name="id"))
    records = [p.model_dump(mode="json") for p in report.projects]
    return pd.DataFrame.from_records(records, index="id")[PROJECT_COLUMNS]


def cash_flow_frame(report: Report) -> pd.DataFrame:
    """Monthly inflow, outflow and net, indexed by period."""
    return _bucket_frame(report.cash_flow)


def contract_types_frame(report: Report) -> pd.DataFrame:
    """Contract counts per type with each type's share of all contracts."""
    frame = pd.DataFrame(
        {
            "name": [t.name for t in report.contract_types],
            "count": [t.count for t in report.contract_types],
        }
    )
    total = frame["count"].sum()
    frame["share"] = frame["count"] / total * 100 if total else 0.0
    return frame
