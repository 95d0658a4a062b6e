# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Schema definitions for data-ink analysis and comparison.

All types in this module are immutable (frozen dataclasses).
Inputs (regions) are caller-owned and never mutated; results are
freshly computed facts.
"""

from dataink.schema.ink_analysis import (
    BLACK,
    SCHEMA_VERSION,
    WHITE,
    AnalysisResult,
    Color,
    LayerResult,
    Rect,
    SelectionRegion,
)
from dataink.schema.comparison import (
    ComparisonBreakdown,
    ComparisonMetrics,
    ComparisonResult,
    Grade,
    Interpretation,
    ReferenceMetadata,
    ReferenceResult,
    ReferenceType,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Inputs
    "Color",
    "WHITE",
    "BLACK",
    "Rect",
    "SelectionRegion",
    # Analysis results
    "LayerResult",
    "AnalysisResult",
    # References (static content, consumed by comparison)
    "ReferenceType",
    "ReferenceMetadata",
    "ReferenceResult",
    # Comparison results
    "Grade",
    "ComparisonMetrics",
    "ComparisonBreakdown",
    "Interpretation",
    "ComparisonResult",
]
