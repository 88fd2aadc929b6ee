# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .bucketer import (
    CashFlowBucket,
    bucket_cash_flow,
    cash_flow_frame,
    classify_payments,
    monthly_totals,
)

__all__ = [
    "CashFlowBucket",
    "bucket_cash_flow",
    "cash_flow_frame",
    "classify_payments",
    "monthly_totals",
]
