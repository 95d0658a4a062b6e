# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Chart profiles, benchmark verdicts, and improvement suggestions.

Profiles list the typical components of a chart type and the density and
efficiency ratios considered good or excellent for it. Suggestions are
rule-based advice derived from an AnalysisResult and a profile.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dataink.schema import AnalysisResult, Grade, LayerResult


@dataclass(frozen=True, slots=True)
class Benchmarks:
    """Ratio thresholds for one metric."""
    good: float
    excellent: float


@dataclass(frozen=True, slots=True)
class ComponentDefinition:
    """A typical chart component and its default classification."""
    name: str
    is_data: bool
    color: str


@dataclass(frozen=True, slots=True)
class ChartProfile:
    """
    Typical components and benchmarks for a chart type.

    Attributes:
        id: Profile key (e.g. "bar-chart")
        name: Display name
        components: Typical components, data first
        density: Benchmarks for the density ratio
        efficiency: Benchmarks for the efficiency ratio
    """
    id: str
    name: str
    components: tuple[ComponentDefinition, ...]
    density: Benchmarks
    efficiency: Benchmarks


def _components(*entries: tuple[str, bool, str]) -> tuple[ComponentDefinition, ...]:
    return tuple(ComponentDefinition(name, is_data, color) for name, is_data, color in entries)


_X_AXIS = ("X-Axis", False, "#64748b")
_Y_AXIS = ("Y-Axis", False, "#64748b")
_GRIDLINES = ("Gridlines", False, "#94a3b8")
_LEGEND = ("Legend", False, "#475569")
_TITLE = ("Title", False, "#1e293b")
_BACKGROUND = ("Background", False, "#f1f5f9")

CHART_PROFILES: tuple[ChartProfile, ...] = (
    ChartProfile(
        id="bar-chart",
        name="Bar Chart",
        components=_components(
            ("Bars", True, "#3b82f6"), _X_AXIS, _Y_AXIS, _GRIDLINES, _LEGEND, _TITLE, _BACKGROUND,
        ),
        density=Benchmarks(good=0.3, excellent=0.5),
        efficiency=Benchmarks(good=0.6, excellent=0.8),
    ),
    ChartProfile(
        id="line-chart",
        name="Line Chart",
        components=_components(
            ("Lines", True, "#3b82f6"), ("Data Points", True, "#2563eb"),
            _X_AXIS, _Y_AXIS, _GRIDLINES, _LEGEND, _TITLE, _BACKGROUND,
        ),
        density=Benchmarks(good=0.2, excellent=0.4),
        efficiency=Benchmarks(good=0.5, excellent=0.75),
    ),
    ChartProfile(
        id="scatter-plot",
        name="Scatter Plot",
        components=_components(
            ("Data Points", True, "#3b82f6"), _X_AXIS, _Y_AXIS, _GRIDLINES, _LEGEND, _TITLE, _BACKGROUND,
        ),
        density=Benchmarks(good=0.15, excellent=0.35),
        efficiency=Benchmarks(good=0.5, excellent=0.75),
    ),
    ChartProfile(
        id="pie-chart",
        name="Pie Chart",
        components=_components(
            ("Slices", True, "#3b82f6"), ("Labels", False, "#475569"),
            ("Legend", False, "#64748b"), _TITLE, _BACKGROUND,
        ),
        density=Benchmarks(good=0.4, excellent=0.6),
        efficiency=Benchmarks(good=0.7, excellent=0.85),
    ),
    ChartProfile(
        id="data-table",
        name="Data Table",
        components=_components(
            ("Cell Text", True, "#1e293b"), ("Headers", False, "#475569"),
            ("Borders", False, "#94a3b8"), _BACKGROUND,
        ),
        density=Benchmarks(good=0.5, excellent=0.7),
        efficiency=Benchmarks(good=0.75, excellent=0.9),
    ),
    ChartProfile(
        id="heatmap",
        name="Heatmap",
        components=_components(
            ("Cells", True, "#3b82f6"), ("X-Axis Labels", False, "#64748b"),
            ("Y-Axis Labels", False, "#64748b"), ("Color Scale", False, "#475569"),
            _TITLE, _BACKGROUND,
        ),
        density=Benchmarks(good=0.5, excellent=0.7),
        efficiency=Benchmarks(good=0.75, excellent=0.9),
    ),
    ChartProfile(
        id="custom",
        name="Custom Chart",
        components=_components(
            ("Data Element", True, "#3b82f6"), ("Axis", False, "#64748b"),
            ("Label", False, "#475569"), ("Decoration", False, "#94a3b8"),
        ),
        density=Benchmarks(good=0.3, excellent=0.5),
        efficiency=Benchmarks(good=0.6, excellent=0.8),
    ),
)


def get_profile(profile_id: str) -> ChartProfile:
    """Get a chart profile by ID."""
    for profile in CHART_PROFILES:
        if profile.id == profile_id:
            return profile
    raise KeyError(f"No chart profile with ID '{profile_id}'")


# =============================================================================
# Verdicts
# =============================================================================


@dataclass(frozen=True, slots=True)
class Verdict:
    grade: Grade
    text: str


def verdict(ratio: float, benchmarks: Benchmarks, chart_name: str) -> Verdict:
    """
    Grade a ratio against a profile's benchmarks.

    Fair covers the band from 70% of "good" up to "good".
    """
    if ratio >= benchmarks.excellent:
        grade = Grade.EXCELLENT
    elif ratio >= benchmarks.good:
        grade = Grade.GOOD
    elif ratio >= benchmarks.good * 0.7:
        grade = Grade.FAIR
    else:
        grade = Grade.POOR
    return Verdict(grade, f"{grade.value.capitalize()} for a {chart_name}")


# =============================================================================
# Suggestions
# =============================================================================


class SuggestionKind(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    TIP = "tip"


@dataclass(frozen=True, slots=True)
class Suggestion:
    kind: SuggestionKind
    message: str

    def to_dict(self) -> dict:
        return {"type": self.kind.value, "message": self.message}


def _find_layer(layers: tuple[LayerResult, ...], *keywords: str) -> Optional[LayerResult]:
    """First layer whose lowercased label contains any keyword."""
    for layer in layers:
        label = layer.label.lower()
        if any(keyword in label for keyword in keywords):
            return layer
    return None


def _share(part: int, whole: int) -> float:
    return part / whole if whole > 0 else 0.0


def generate_suggestions(
    result: AnalysisResult,
    profile: Optional[ChartProfile],
) -> list[Suggestion]:
    """
    Rule-based advice for improving a chart's efficiency.

    Returns an empty list when no profile is selected.
    """
    suggestions: list[Suggestion] = []
    if profile is None:
        return suggestions

    efficiency = result.efficiency_ratio
    layers = result.layers
    non_data_total = result.total_non_data_pixels
    benchmarks = profile.efficiency

    # Largest non-data layer while below "good"
    non_data_layers = [layer for layer in layers if not layer.is_data]
    if efficiency < benchmarks.good and non_data_layers:
        largest = max(non_data_layers, key=lambda layer: layer.ink_pixels)
        remaining_ink = result.total_ink_pixels - largest.ink_pixels
        message = (
            f"Your '{largest.label}' layer ({largest.ink_pixels:,} pixels) is the "
            f"biggest contributor to non-data ink. Consider removing or minimizing it"
        )
        if remaining_ink > 0:
            potential = result.total_data_pixels / remaining_ink
            message += (
                f" to improve your efficiency ratio from {efficiency * 100:.1f}% "
                f"to potentially {potential * 100:.1f}%."
            )
        else:
            message += "."
        suggestions.append(Suggestion(SuggestionKind.CRITICAL, message))

    # Gridlines dominating non-data ink
    gridlines = _find_layer(layers, "gridline", "grid")
    if gridlines is not None and not gridlines.is_data:
        share = _share(gridlines.ink_pixels, non_data_total)
        if share > 0.2:
            suggestions.append(Suggestion(
                SuggestionKind.WARNING,
                f"Gridlines account for {share * 100:.1f}% of your non-data ink. "
                f"Consider using lighter colors, fewer lines, or removing them "
                f"entirely to improve clarity.",
            ))

    # Decorative effects
    effects = _find_layer(layers, "3d", "shadow", "effect")
    if effects is not None and not effects.is_data:
        suggestions.append(Suggestion(
            SuggestionKind.WARNING,
            f"The '{effects.label}' layer adds visual complexity without conveying "
            f"data. Removing decorative effects like shadows and 3D styling will "
            f"improve your data-ink ratio and chart readability.",
        ))

    # Heavy background
    background = _find_layer(layers, "background", "bg")
    if background is not None and not background.is_data:
        share = _share(background.ink_pixels, non_data_total)
        if share > 0.3:
            suggestions.append(Suggestion(
                SuggestionKind.TIP,
                f"Background elements consume {share * 100:.1f}% of non-data ink. "
                f"Consider using a transparent or white background to let the "
                f"data stand out.",
            ))

    # Close to excellent
    excellent_gap = benchmarks.excellent - efficiency
    if 0 < excellent_gap < 0.1:
        suggestions.append(Suggestion(
            SuggestionKind.TIP,
            f"You're only {excellent_gap * 100:.1f}% away from an excellent rating! "
            f"Small refinements to non-data elements could push you over the threshold.",
        ))

    if efficiency >= benchmarks.excellent:
        suggestions.append(Suggestion(
            SuggestionKind.TIP,
            f"Excellent work! Your chart achieves a {efficiency * 100:.1f}% efficiency "
            f"ratio, demonstrating strong adherence to data-ink ratio principles.",
        ))

    # Decoration outnumbering data layers
    non_data_count = len(non_data_layers)
    data_count = len(layers) - non_data_count
    if non_data_count > data_count * 2:
        suggestions.append(Suggestion(
            SuggestionKind.WARNING,
            f"You have {non_data_count} non-data layers compared to {data_count} "
            f"data layers. Consider consolidating or removing decorative elements "
            f"to maintain focus on the data.",
        ))

    return suggestions
