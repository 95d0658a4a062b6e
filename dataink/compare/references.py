# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Reference visualization library.

Static ideal, common, and best-practice references for each supported
chart type. Each reference carries a synthetic two-layer AnalysisResult
(one data layer, one non-data layer) measured on a 640x480 canvas.
"""

from __future__ import annotations

import time
from typing import Optional

from dataink.schema import (
    AnalysisResult,
    LayerResult,
    ReferenceMetadata,
    ReferenceResult,
    ReferenceType,
)

# Canvas size the reference figures were measured on
REFERENCE_WIDTH = 640
REFERENCE_HEIGHT = 480


def _reference_analysis(data_pixels: int, ink_pixels: int) -> AnalysisResult:
    """Two-layer analysis where all ink is split into data and non-data."""
    non_data_pixels = ink_pixels - data_pixels
    image_pixels = REFERENCE_WIDTH * REFERENCE_HEIGHT
    return AnalysisResult(
        layers=(
            LayerResult(
                id="ref-data",
                label="Data Layer",
                color="#3b82f6",
                is_data=True,
                total_pixels=data_pixels,
                ink_pixels=data_pixels,
            ),
            LayerResult(
                id="ref-nondata",
                label="Non-Data Layer",
                color="#64748b",
                is_data=False,
                total_pixels=non_data_pixels,
                ink_pixels=non_data_pixels,
            ),
        ),
        total_image_pixels=image_pixels,
        total_ink_pixels=ink_pixels,
        total_data_pixels=data_pixels,
        total_non_data_pixels=non_data_pixels,
        density_ratio=data_pixels / image_pixels,
        efficiency_ratio=data_pixels / ink_pixels,
    )


def _reference(
    chart_type: str,
    ref_type: ReferenceType,
    name: str,
    description: str,
    efficiency: float,
    data_pixels: int,
    ink_pixels: int,
    redundancy_pixels: int,
    chartjunk_pixels: int,
) -> ReferenceResult:
    prefix = chart_type.split("-")[0]
    return ReferenceResult(
        metadata=ReferenceMetadata(
            id=f"{prefix}-{ref_type.value}",
            name=name,
            description=description,
            chart_type=chart_type,
            type=ref_type,
            efficiency_ratio=efficiency,
            data_ink_pixels=data_pixels,
            total_ink_pixels=ink_pixels,
            redundancy_pixels=redundancy_pixels,
            chartjunk_pixels=chartjunk_pixels,
        ),
        analysis=_reference_analysis(data_pixels, ink_pixels),
    )


_IDEAL = ReferenceType.IDEAL
_COMMON = ReferenceType.COMMON
_BEST = ReferenceType.BEST_PRACTICE

REFERENCE_LIBRARY: dict[str, tuple[ReferenceResult, ...]] = {
    "bar-chart": (
        _reference("bar-chart", _IDEAL, "Ideal Bar Chart",
                   "Theoretical minimum: only bars with minimal axis labels",
                   0.85, 68_000, 80_000, 0, 0),
        _reference("bar-chart", _COMMON, "Common Bar Chart",
                   "Typical Excel/Tableau style with gridlines and legends",
                   0.45, 54_000, 120_000, 35_000, 31_000),
        _reference("bar-chart", _BEST, "Best Practice Bar Chart",
                   "Tufte-style: clean, minimal, data-focused design",
                   0.72, 64_800, 90_000, 12_000, 13_200),
    ),
    "line-chart": (
        _reference("line-chart", _IDEAL, "Ideal Line Chart",
                   "Theoretical minimum: clean lines with essential markers",
                   0.80, 56_000, 70_000, 0, 0),
        _reference("line-chart", _COMMON, "Common Line Chart",
                   "Standard line chart with full gridlines and decorations",
                   0.38, 42_000, 110_000, 40_000, 28_000),
        _reference("line-chart", _BEST, "Best Practice Line Chart",
                   "Minimalist design emphasizing trend clarity",
                   0.68, 54_400, 80_000, 14_000, 11_600),
    ),
    "scatter-plot": (
        _reference("scatter-plot", _IDEAL, "Ideal Scatter Plot",
                   "Pure data points with minimal axis infrastructure",
                   0.78, 46_800, 60_000, 0, 0),
        _reference("scatter-plot", _COMMON, "Common Scatter Plot",
                   "Standard scatter with gridlines and regression line",
                   0.35, 38_500, 110_000, 42_000, 29_500),
        _reference("scatter-plot", _BEST, "Best Practice Scatter Plot",
                   "Clean, focused scatter emphasizing data patterns",
                   0.65, 48_750, 75_000, 15_000, 11_250),
    ),
    "pie-chart": (
        _reference("pie-chart", _IDEAL, "Ideal Pie Chart",
                   "Simple slices with minimal labeling",
                   0.82, 65_600, 80_000, 0, 0),
        _reference("pie-chart", _COMMON, "Common Pie Chart",
                   "Typical pie with 3D effects and external legends",
                   0.40, 52_000, 130_000, 38_000, 40_000),
        _reference("pie-chart", _BEST, "Best Practice Pie Chart",
                   "Clean, 2D slices with integrated labels",
                   0.70, 63_000, 90_000, 13_500, 13_500),
    ),
}


def get_available_chart_types() -> list[str]:
    """All chart types with references."""
    return list(REFERENCE_LIBRARY)


def get_references_for_chart_type(chart_type: str) -> list[ReferenceResult]:
    """All references for a chart type (empty if unknown)."""
    return list(REFERENCE_LIBRARY.get(chart_type, ()))


def get_reference_by_id(reference_id: str) -> Optional[ReferenceResult]:
    """Look up a reference by ID across all chart types."""
    for references in REFERENCE_LIBRARY.values():
        for reference in references:
            if reference.id == reference_id:
                return reference
    return None


def get_reference_by_type(
    chart_type: str,
    ref_type: ReferenceType,
) -> Optional[ReferenceResult]:
    """Look up the reference of a given type for a chart type."""
    for reference in REFERENCE_LIBRARY.get(chart_type, ()):
        if reference.type == ref_type:
            return reference
    return None


def create_custom_reference(
    name: str,
    description: str,
    chart_type: str,
    analysis: AnalysisResult,
    reference_id: Optional[str] = None,
) -> ReferenceResult:
    """
    Turn a user's own analysis into a custom reference.

    Chartjunk is estimated as non-data ink beyond 30% of the data ink.

    Args:
        name: Display name
        description: One-line description
        chart_type: Chart type key
        analysis: The analysis to use as the reference
        reference_id: Explicit ID (default: "custom-<epoch ms>")
    """
    if reference_id is None:
        reference_id = f"custom-{int(time.time() * 1000)}"

    return ReferenceResult(
        metadata=ReferenceMetadata(
            id=reference_id,
            name=name,
            description=description,
            chart_type=chart_type,
            type=ReferenceType.CUSTOM,
            efficiency_ratio=analysis.efficiency_ratio,
            data_ink_pixels=analysis.total_data_pixels,
            total_ink_pixels=analysis.total_ink_pixels,
            redundancy_pixels=analysis.total_non_data_pixels,
            chartjunk_pixels=max(
                0, analysis.total_non_data_pixels - analysis.total_data_pixels * 0.3
            ),
        ),
        analysis=analysis,
    )
