# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .ratios import safe_percent, safe_ratio
from .status import has_status

__all__ = ["has_status", "safe_percent", "safe_ratio"]
