# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Offplan components.

Isolated tests that verify individual component functionality.
"""
