# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Natural-language report serializer.

Renders an AnalysisResult or ComparisonResult as a short Markdown report
for display alongside the chart.
"""

from __future__ import annotations

import math
from typing import Union

from dataink.schema import AnalysisResult, ComparisonResult


def to_report(
    result: Union[AnalysisResult, ComparisonResult],
    *,
    preamble: bool = True,
) -> str:
    """Serialize a result as a Markdown report.

    Args:
        result: AnalysisResult or ComparisonResult.
        preamble: Include the report heading.

    Returns:
        Multi-line report string.

    Example (AnalysisResult)::

        ## Data-Ink Analysis

        **Efficiency Ratio:** 50.0% (data ink / total ink)
        **Density Ratio:** 25.0% (data ink / image)

        **Layers:**
        1. Bars (Data) -- 2,500 ink of 2,500 pixels
        2. Gridlines (Non-Data) -- 1,200 ink of 4,000 pixels
    """
    if isinstance(result, ComparisonResult):
        return _comparison_report(result, preamble)
    if isinstance(result, AnalysisResult):
        return _analysis_report(result, preamble)
    raise TypeError(f"Expected AnalysisResult or ComparisonResult, got {type(result)}")


def _analysis_report(result: AnalysisResult, preamble: bool) -> str:
    lines: list[str] = []

    if preamble:
        lines.extend(["## Data-Ink Analysis", ""])

    lines.append(
        f"**Efficiency Ratio:** {_pct(result.efficiency_ratio)} (data ink / total ink)"
    )
    lines.append(f"**Density Ratio:** {_pct(result.density_ratio)} (data ink / image)")
    lines.append("")

    lines.append(
        f"**Ink:** {result.total_ink_pixels:,} of {result.total_image_pixels:,} pixels "
        f"({result.total_data_pixels:,} data, {result.total_non_data_pixels:,} non-data)"
    )
    lines.append("")

    if result.layers:
        lines.append("**Layers:**")
        for i, layer in enumerate(result.layers, 1):
            kind = "Data" if layer.is_data else "Non-Data"
            full = ", full area" if layer.count_full_area else ""
            label = layer.label or layer.id
            lines.append(
                f"{i}. {label} ({kind}{full}) -- "
                f"{layer.ink_pixels:,} ink of {layer.total_pixels:,} pixels"
            )
        lines.append("")

    return "\n".join(lines)


def _comparison_report(result: ComparisonResult, preamble: bool) -> str:
    lines: list[str] = []
    metrics = result.metrics
    interpretation = result.interpretation

    if preamble:
        lines.extend([f"## Comparison: {result.reference.name}", ""])

    lines.append(f"**Grade:** {interpretation.grade.value.capitalize()}")
    lines.append(interpretation.summary)
    lines.append("")

    lines.append(
        f"**Efficiency:** {_pct(metrics.user_efficiency)} vs "
        f"{_pct(metrics.reference_efficiency)} "
        f"({_signed_pct(metrics.relative_difference)} relative)"
    )
    lines.append(
        f"**Non-data ink surplus:** {result.breakdown.excess_non_data_ink:,} pixels"
    )
    lines.append("")

    lines.append("**Insights:**")
    lines.extend(f"- {insight}" for insight in interpretation.insights)
    lines.append("")

    lines.append("**Recommendations:**")
    lines.extend(f"- {rec}" for rec in interpretation.recommendations)
    lines.append("")

    return "\n".join(lines)


def _pct(ratio: float) -> str:
    return f"{ratio * 100:.1f}%"


def _signed_pct(value: float) -> str:
    if math.isinf(value):
        return "+∞%" if value > 0 else "-∞%"
    return f"{value:+.1f}%"
