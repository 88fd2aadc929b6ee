# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import math


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 when the denominator is zero or the result is not finite."""
    if not denominator:
        return 0.0
    result = numerator / denominator
    if not math.isfinite(result):
        return 0.0
    return result


def safe_percent(numerator: float, denominator: float) -> float:
    """Ratio expressed as a percentage (0-100 scale), 0.0 on a zero denominator."""
    return safe_ratio(numerator, denominator) * 100
