# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .classifier import (
    ALL_PROJECTS,
    ProjectFinancialSummary,
    ProjectRiskClassifier,
    classify_risk,
    filter_projects,
    summarize_project,
    top_by_margin,
    top_by_revenue,
)

__all__ = [
    "ALL_PROJECTS",
    "ProjectFinancialSummary",
    "ProjectRiskClassifier",
    "classify_risk",
    "filter_projects",
    "summarize_project",
    "top_by_margin",
    "top_by_revenue",
]
