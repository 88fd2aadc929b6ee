# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Data Access Gateway

Read-only boundary to the store plus the scatter/gather snapshot loader.
"""

from .base import DataAccessGateway, InMemoryGateway, ThreadedGateway
from .fetched import Empty, Fetched, Some, Unavailable, fetched_from_rows
from .snapshot import (
    PortfolioSnapshot,
    build_snapshot,
    fetch_collection,
    gather_collections,
    load_snapshot,
    parse_records,
    snapshot_field,
)

__all__ = [
    "DataAccessGateway",
    "InMemoryGateway",
    "ThreadedGateway",
    "Empty",
    "Fetched",
    "Some",
    "Unavailable",
    "fetched_from_rows",
    "PortfolioSnapshot",
    "build_snapshot",
    "fetch_collection",
    "gather_collections",
    "load_snapshot",
    "parse_records",
    "snapshot_field",
]
