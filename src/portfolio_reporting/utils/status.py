# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Optional


def has_status(value: Optional[str], *expected: str) -> bool:
    """Case-insensitive status comparison; store statuses are free text."""
    if value is None:
        return False
    normalized = value.strip().lower()
    return any(normalized == e.lower() for e in expected)
