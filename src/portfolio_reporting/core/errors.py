# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exception taxonomy for the reporting pipeline.

- FetchError: a collection could not be read; fails the run.
- ComputationError: a single record violates a precondition; the record is
  skipped and reported on the Report, the run continues.
- RenderError: a document renderer failed; the computed Report stays valid.
"""

from __future__ import annotations

from typing import Optional

from .primitives.enums import Collection
from .primitives.model import Model


class ReportingError(Exception):
    """Base class for all reporting pipeline errors."""


class FetchError(ReportingError):
    """A data access gateway read failed or timed out."""

    def __init__(self, collection: Collection, cause: Optional[BaseException] = None):
        self.collection = collection
        self.cause = cause
        detail = f": {cause!r}" if cause is not None else ""
        super().__init__(f"Collection '{collection.value}' is unavailable{detail}")


class ComputationError(ReportingError):
    """A record cannot take part in the computation."""

    def __init__(self, collection: Collection, record_id: Optional[str], reason: str):
        self.collection = collection
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"{collection.value}[{record_id}]: {reason}")


class RenderError(ReportingError):
    """A document renderer failed to produce output."""


class SkippedRecord(Model):
    """A record left out of the computation, reported alongside the Report."""

    collection: Collection
    record_id: Optional[str] = None
    reason: str

    @classmethod
    def from_error(cls, error: ComputationError) -> "SkippedRecord":
        return cls(
            collection=error.collection, record_id=error.record_id, reason=error.reason
        )
