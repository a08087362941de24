# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Ledger entities and output rows are immutable; the engines never mutate
    the snapshot they read from.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # pandas Period bucket keys on output rows
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
