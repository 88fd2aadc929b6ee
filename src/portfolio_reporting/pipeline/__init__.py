# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .api import compute_report, generate_report
from .service import ReportService, ReportSlot

__all__ = [
    "compute_report",
    "generate_report",
    "ReportService",
    "ReportSlot",
]
