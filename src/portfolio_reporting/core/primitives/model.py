# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models; every pipeline stage returns new instances instead of
    mutating its inputs.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; runtime mutable state lives in external objects
        extra="forbid",  # Catches typos and missing field definitions immediately
    )


class Record(Model):
    """
    Base class for rows read from the store.

    Store rows routinely carry columns the engine never reads (audit
    timestamps, notes, joined relations), so unknown keys are dropped
    rather than rejected.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
