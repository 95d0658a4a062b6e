# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Measurement core for Dataink.

This module provides deterministic pixel classification, layered
data-ink analysis and magic-wand region growing. All operations are
pure functions of their inputs.
"""

from dataink.measure.config import AnalysisConfig
from dataink.measure.ink import (
    DEFAULT_INK_THRESHOLD,
    OPACITY_FLOOR,
    color_distance,
    ink_mask,
    is_ink,
)
from dataink.measure.layers import analyze
from dataink.measure.raster import RasterBuffer
from dataink.measure.wand import grow_region

__all__ = [
    "analyze",
    "grow_region",
    "is_ink",
    "ink_mask",
    "color_distance",
    "RasterBuffer",
    "AnalysisConfig",
    "OPACITY_FLOOR",
    "DEFAULT_INK_THRESHOLD",
]
