# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .generator import (
    RECOMMENDATION_RULES,
    RISK_RULES,
    InsightContext,
    InsightGenerator,
    Insights,
    RiskEntry,
    TopProject,
)

__all__ = [
    "RECOMMENDATION_RULES",
    "RISK_RULES",
    "InsightContext",
    "InsightGenerator",
    "Insights",
    "RiskEntry",
    "TopProject",
]
