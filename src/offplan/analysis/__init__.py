# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Offplan Analysis

Investor-facing analytics built on the payment and valuation layers: rental
hold economics, the yearly projection, and the `analyze()` entry point.
"""

from .api import analyze
from .hold import HoldAnalysis, HoldAnalyzer
from .projection import YearlyProjection, build_yearly_projections, projections_to_dataframe
from .results import InvestmentAnalysisResult

__all__ = [
    # Main API
    "analyze",
    "InvestmentAnalysisResult",
    # Hold
    "HoldAnalysis",
    "HoldAnalyzer",
    # Projection
    "YearlyProjection",
    "build_yearly_projections",
    "projections_to_dataframe",
]
