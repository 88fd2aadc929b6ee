# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Report assembly and presentation.

- `report`: the frozen Report and the ReportRequest run parameters
- `assembler`: composition of stage outputs into a Report
- `directives`: layout directives for paginated documents
- `export`: the DocumentRenderer boundary
- `frames`: pandas views for tabular panels
"""

from .assembler import assemble_report
from .directives import (
    ChartSeries,
    Directive,
    KpiTile,
    ProgressBar,
    SectionTitle,
    TableBlock,
    build_document,
)
from .export import (
    EXPORT_FAILED_MESSAGE,
    DocumentRenderer,
    ExportResult,
    TextRenderer,
    export_report,
)
from .frames import cash_flow_frame, contract_types_frame, projects_frame
from .report import Report, ReportRequest

__all__ = [
    # Models
    "Report",
    "ReportRequest",
    "assemble_report",
    # Document layout
    "ChartSeries",
    "Directive",
    "KpiTile",
    "ProgressBar",
    "SectionTitle",
    "TableBlock",
    "build_document",
    # Export
    "EXPORT_FAILED_MESSAGE",
    "DocumentRenderer",
    "ExportResult",
    "TextRenderer",
    "export_report",
    # Panels
    "cash_flow_frame",
    "contract_types_frame",
    "projects_frame",
]
