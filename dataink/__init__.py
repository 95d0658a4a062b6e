# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Dataink -- Data-ink ratio measurement for chart images.

Attributes every pixel of a chart to caller-defined, classified regions
and reports how much of the image's ink actually encodes data.

Quick start::

    import numpy as np
    from dataink import RasterBuffer, SelectionRegion, analyze

    raster = RasterBuffer.from_array(rgba_pixels)
    result = analyze(raster, [
        SelectionRegion("bars", 40, 20, 200, 160, label="Bars", is_data=True),
        SelectionRegion("grid", 0, 0, 320, 240, label="Gridlines", is_data=False),
    ])
    result.efficiency_ratio   # data ink / total ink
    result.to_csv()           # Per-layer CSV
    result.to_json()          # Plain JSON record
"""

from __future__ import annotations

__version__ = "1.0.0"

from dataink.compare import ComparisonError, compare, compare_to_reference
from dataink.measure import AnalysisConfig, RasterBuffer, analyze, grow_region, is_ink
from dataink.schema import (
    AnalysisResult,
    Color,
    ComparisonResult,
    Grade,
    LayerResult,
    Rect,
    ReferenceMetadata,
    ReferenceResult,
    ReferenceType,
    SelectionRegion,
)

__all__ = [
    # Core API
    "analyze",
    "grow_region",
    "is_ink",
    "compare",
    "compare_to_reference",
    "ComparisonError",
    # Inputs
    "RasterBuffer",
    "SelectionRegion",
    "Color",
    "Rect",
    "AnalysisConfig",
    # Results
    "AnalysisResult",
    "LayerResult",
    "ComparisonResult",
    "Grade",
    "ReferenceType",
    "ReferenceMetadata",
    "ReferenceResult",
    # Version
    "__version__",
]
