# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Portfolio Reporting Core

Primitives, settings and the error taxonomy shared by every pipeline stage.
"""

from . import primitives
from .errors import (
    ComputationError,
    FetchError,
    RenderError,
    ReportingError,
    SkippedRecord,
)

__all__ = [
    "primitives",
    "ComputationError",
    "FetchError",
    "RenderError",
    "ReportingError",
    "SkippedRecord",
]
