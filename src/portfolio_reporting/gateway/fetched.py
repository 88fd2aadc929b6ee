# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tagged result of one collection read.

A read either produced rows (`Some`), legitimately produced none
(`Empty`), or failed (`Unavailable`). Keeping the three apart is what
lets the pipeline refuse to report zero revenue because the store was down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

Row = Mapping[str, Any]


@dataclass(frozen=True)
class Some:
    rows: Tuple[Row, ...]


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Unavailable:
    error: BaseException


Fetched = Union[Some, Empty, Unavailable]


def fetched_from_rows(rows: Optional[Iterable[Row]]) -> Fetched:
    """
    Wrap the rows a gateway returned.

    Any iterable is materialized, so generators and cursors work too. None
    and non-iterable results count as a failed read, not as empty.
    """
    if rows is None:
        return Unavailable(ValueError("gateway returned None instead of a row list"))
    try:
        materialized = tuple(rows)
    except TypeError as e:
        return Unavailable(e)
    if not materialized:
        return Empty()
    return Some(materialized)
