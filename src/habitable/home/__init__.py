# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Self-build home configurator for individual homeowners.
"""

from .configurator import (
    FEATURE_CATALOG,
    HomeBuilderConfig,
    HomeBuilderResult,
    HomeFeatures,
    HomeSpecification,
    HomeVisualization,
    IncludedFeature,
    RoomArea,
    build_home,
    calculate_home_specification,
)

__all__ = [
    "FEATURE_CATALOG",
    "HomeBuilderConfig",
    "HomeBuilderResult",
    "HomeFeatures",
    "HomeSpecification",
    "HomeVisualization",
    "IncludedFeature",
    "RoomArea",
    "build_home",
    "calculate_home_specification",
]
