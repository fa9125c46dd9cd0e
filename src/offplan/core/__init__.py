# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan Core Framework

Foundational building blocks shared by the payment, valuation and analysis
layers.
"""

from . import primitives

__all__ = [
    "primitives",
]
