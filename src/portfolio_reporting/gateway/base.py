# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Data access gateway boundary.

The engine only reads. A gateway exposes one read per collection and returns
flat rows (mappings); parsing into typed records happens in the snapshot
loader so every gateway gets the same validation.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..core.primitives import Collection

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


class DataAccessGateway(ABC):
    """Read-only access to the entity collections."""

    @abstractmethod
    async def fetch(self, collection: Collection) -> Sequence[Row]:
        """
        Read every row of a collection.

        Raises:
            Any exception on failure; the snapshot loader converts it into an
            `Unavailable` result for that collection.
        """
        pass


class InMemoryGateway(DataAccessGateway):
    """
    Gateway over rows held in memory.

    Useful for tests, fixtures and replaying exported store dumps.

    Args:
        rows: Rows per collection, keyed by `Collection` or its table name.
            Missing collections read as empty.
        unavailable: Collections whose reads fail with ConnectionError.
        delay_seconds: Artificial latency applied to every read.
    """

    def __init__(
        self,
        rows: Optional[Mapping[Union[Collection, str], Sequence[Row]]] = None,
        unavailable: Iterable[Collection] = (),
        delay_seconds: float = 0.0,
    ):
        self._rows: Dict[Collection, List[Row]] = {}
        for key, value in (rows or {}).items():
            self._rows[Collection(key)] = [dict(row) for row in value]
        self._unavailable = frozenset(unavailable)
        self._delay_seconds = delay_seconds

    async def fetch(self, collection: Collection) -> Sequence[Row]:
        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)
        if collection in self._unavailable:
            raise ConnectionError(f"store unavailable for '{collection.value}'")
        # Copies so callers never share row objects with the gateway
        return [dict(row) for row in self._rows.get(collection, [])]


class ThreadedGateway(DataAccessGateway):
    """
    Adapts a blocking fetch function (e.g. a synchronous database client).

    Each read runs in a worker thread so the scatter/gather loader can keep
    all reads in flight at once.

    Args:
        fetch_rows: Callable taking the collection's table name and returning
            its rows.
    """

    def __init__(self, fetch_rows: Callable[[str], Sequence[Row]]):
        self._fetch_rows = fetch_rows

    async def fetch(self, collection: Collection) -> Sequence[Row]:
        logger.debug(f"Reading '{collection.value}' in worker thread")
        return await asyncio.to_thread(self._fetch_rows, collection.value)
