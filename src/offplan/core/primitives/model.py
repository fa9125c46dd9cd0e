# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: every input record and derived result is computed fresh
    per call and never mutated afterwards, so instances can be shared freely
    across threads.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
