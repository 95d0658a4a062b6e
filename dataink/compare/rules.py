# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Interpretation rules for comparisons.

Every grade boundary and message threshold lives in the tables below as a
(condition, template) pair, so they can be audited and tested apart from
the metric arithmetic in the engine.

Templates are str.format() strings over a flat context dict built by
build_context(). Label rules are matched against the user's non-data
layer labels and formatted with that layer's fields.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from dataink.schema import (
    AnalysisResult,
    ComparisonBreakdown,
    ComparisonMetrics,
    Grade,
    Interpretation,
    LayerResult,
    ReferenceMetadata,
)


@dataclass(frozen=True)
class Rule:
    """A message emitted when condition(context) holds."""
    name: str
    condition: Callable[[dict], bool]
    template: str

    def applies(self, context: dict) -> bool:
        return bool(self.condition(context))

    def render(self, context: dict) -> str:
        return self.template.format(**context)


@dataclass(frozen=True)
class LabelRule:
    """A recommendation for a non-data layer whose label contains a keyword."""
    name: str
    keywords: tuple[str, ...]
    template: str

    def match(self, layers: Iterable[LayerResult]) -> Optional[LayerResult]:
        """First non-data layer with ink whose label contains a keyword."""
        for layer in layers:
            if layer.is_data or layer.ink_pixels <= 0:
                continue
            label = layer.label.lower()
            if any(keyword in label for keyword in self.keywords):
                return layer
        return None

    def render(self, layer: LayerResult) -> str:
        return self.template.format(label=layer.label, ink_pixels=layer.ink_pixels)


# =============================================================================
# Grade
# =============================================================================

# (lower bound on relative difference in percent, grade), checked in order
GRADE_BANDS: tuple[tuple[float, Grade], ...] = (
    (-10.0, Grade.EXCELLENT),
    (-25.0, Grade.GOOD),
    (-40.0, Grade.FAIR),
)


def grade_for(relative_difference: float) -> Grade:
    """Grade a relative difference; anything above -10% is excellent."""
    for lower_bound, grade in GRADE_BANDS:
        if relative_difference >= lower_bound:
            return grade
    return Grade.POOR


# =============================================================================
# Summary (first match wins)
# =============================================================================

SUMMARY_RULES: tuple[Rule, ...] = (
    Rule(
        "exceeds_empty_reference",
        lambda c: math.isinf(c["relative_difference"]) and c["relative_difference"] > 0,
        "Your visualization has data ink where the {reference_type} reference has none.",
    ),
    Rule(
        "exceeds",
        lambda c: c["relative_difference"] > 0,
        "Your visualization exceeds the {reference_type} reference by "
        "{abs_relative_difference:.1f}%. Excellent work!",
    ),
    Rule(
        "close",
        lambda c: c["abs_relative_difference"] < 10,
        "Your visualization is very close to the {reference_type} reference "
        "(within {abs_relative_difference:.1f}%).",
    ),
    Rule(
        "behind",
        lambda c: True,
        "Your visualization is {abs_relative_difference:.1f}% less efficient "
        "than the {reference_type} reference.",
    ),
)


# =============================================================================
# Insights (all matches)
# =============================================================================

# Pixel bands for surplus non-data ink
MODERATE_SURPLUS = 3_000
SUBSTANTIAL_SURPLUS = 10_000
CHARTJUNK_SURPLUS = 15_000

# Data ink difference that is worth mentioning
DATA_INK_BAND = 5_000

INSIGHT_RULES: tuple[Rule, ...] = (
    Rule(
        "data_ink_deficit",
        lambda c: c["data_ink_diff"] < -DATA_INK_BAND,
        "You're showing {abs_data_ink_diff:,} fewer data pixels than the reference. "
        "Consider if all data is visible.",
    ),
    Rule(
        "data_ink_surplus",
        lambda c: c["data_ink_diff"] > DATA_INK_BAND,
        "You have {data_ink_diff:,} more data pixels than typical. "
        "This may indicate redundant data representation.",
    ),
    Rule(
        "moderate_non_data_surplus",
        lambda c: MODERATE_SURPLUS < c["excess_non_data_ink"] <= SUBSTANTIAL_SURPLUS,
        "Your chart has {excess_non_data_ink:,} more non-data pixels than the "
        "reference. Some decorative elements could be lightened.",
    ),
    Rule(
        "substantial_non_data_surplus",
        lambda c: SUBSTANTIAL_SURPLUS < c["excess_non_data_ink"] <= CHARTJUNK_SURPLUS,
        "Your chart has {excess_non_data_ink:,} more non-data pixels, "
        "suggesting potential for simplification.",
    ),
    Rule(
        "chartjunk",
        lambda c: c["excess_non_data_ink"] > CHARTJUNK_SURPLUS,
        "Significant chartjunk detected: {excess_non_data_ink:,} excess decorative pixels.",
    ),
    Rule(
        "below_standard",
        lambda c: c["user_efficiency"] < c["reference_efficiency"] * 0.7,
        "Efficiency is notably below reference standards. "
        "Major redesign may be beneficial.",
    ),
)

DEFAULT_INSIGHT = "Your visualization is well-balanced for this comparison."


# =============================================================================
# Recommendations (all matches)
# =============================================================================


def _trailing(reference_type: str, below: float, above: float = -math.inf) -> Callable[[dict], bool]:
    """Reference type matches and above <= relative difference < below."""
    return lambda c: (
        c["reference_type"] == reference_type
        and above <= c["relative_difference"] < below
    )


_IDEAL_FAR = _trailing("ideal", -20)
_IDEAL_NEAR = _trailing("ideal", -10, -20)
_COMMON_FAR = _trailing("common", -15)
_BEST_FAR = _trailing("best-practice", -20)
_BEST_NEAR = _trailing("best-practice", -10, -20)
_BEST_CLOSE = lambda c: (  # noqa: E731
    c["reference_type"] == "best-practice" and c["relative_difference"] >= -10
)

RECOMMENDATION_RULES: tuple[Rule, ...] = (
    Rule("ideal_gridlines", _IDEAL_FAR,
         "Remove non-essential gridlines and reduce axis decorations"),
    Rule("ideal_legend", _IDEAL_FAR,
         "Simplify or remove the legend if categories are self-explanatory"),
    Rule("ideal_fills", _IDEAL_FAR,
         "Eliminate background fills and reduce border weights"),
    Rule("ideal_light_gridlines", _IDEAL_NEAR,
         "Consider lighter gridlines or removing them entirely"),
    Rule("ideal_axis_labels", _IDEAL_NEAR,
         "Reduce non-data ink in axis labels and titles"),
    Rule("common_below_standard", _COMMON_FAR,
         "Your design is below typical industry standards"),
    Rule("common_review", _COMMON_FAR,
         "Review for excessive decorative elements or redundant labels"),
    Rule("common_conventions", _COMMON_FAR,
         "Consider adopting common conventions for clarity"),
    Rule("best_tufte", _BEST_FAR,
         "Apply Tufte principles: maximize data-ink ratio"),
    Rule("best_borders", _BEST_FAR,
         "Remove chart borders, background fills, and heavy gridlines"),
    Rule("best_direct_labels", _BEST_FAR,
         "Use direct labeling instead of legends where possible"),
    Rule("best_axis_lines", _BEST_FAR,
         "Lighten axis lines and reduce tick marks"),
    Rule("best_axis_weight", _BEST_NEAR,
         "Fine-tune by reducing axis decoration weight"),
    Rule("best_gridlines", _BEST_NEAR,
         "Consider removing or lightening gridlines further"),
    Rule("best_approaching", _BEST_CLOSE,
         "Your design is approaching best practices!"),
    Rule("best_refine", _BEST_CLOSE,
         "Minor refinements can push you closer to the ideal"),
)

# Applied only while the user trails the reference
LABEL_RULES: tuple[LabelRule, ...] = (
    LabelRule(
        "grid",
        ("grid",),
        "Your '{label}' layer holds {ink_pixels:,} ink pixels; lighten or thin the gridlines",
    ),
    LabelRule(
        "background",
        ("background", "bg"),
        "Your '{label}' layer holds {ink_pixels:,} ink pixels; "
        "a plain background lets the data stand out",
    ),
    LabelRule(
        "border",
        ("border", "frame"),
        "Your '{label}' layer holds {ink_pixels:,} ink pixels; "
        "drop or lighten borders around the plot",
    ),
    LabelRule(
        "legend",
        ("legend",),
        "Your '{label}' layer holds {ink_pixels:,} ink pixels; "
        "label series directly instead of using a legend",
    ),
    LabelRule(
        "effects",
        ("3d", "shadow", "effect"),
        "Your '{label}' layer holds {ink_pixels:,} ink pixels; "
        "remove shadows and 3D effects",
    ),
)

DEFAULT_RECOMMENDATIONS = (
    "Your visualization is well-optimized for this comparison.",
    "Maintain focus on data clarity and avoid adding decorative elements.",
)


# =============================================================================
# Evaluation
# =============================================================================


def build_context(
    metrics: ComparisonMetrics,
    breakdown: ComparisonBreakdown,
    reference: ReferenceMetadata,
) -> dict:
    """Flatten the inputs of every rule into one dict."""
    return {
        "user_efficiency": metrics.user_efficiency,
        "reference_efficiency": metrics.reference_efficiency,
        "absolute_difference": metrics.absolute_difference,
        "relative_difference": metrics.relative_difference,
        "abs_relative_difference": abs(metrics.relative_difference),
        "efficiency_gap": metrics.efficiency_gap,
        "data_ink_diff": breakdown.data_ink_diff,
        "abs_data_ink_diff": abs(breakdown.data_ink_diff),
        "non_data_ink_diff": breakdown.non_data_ink_diff,
        "excess_non_data_ink": breakdown.excess_non_data_ink,
        "reference_type": reference.type.value,
        "reference_name": reference.name,
    }


def first_match(rules: Iterable[Rule], context: dict) -> Optional[str]:
    """Render the first applicable rule."""
    for rule in rules:
        if rule.applies(context):
            return rule.render(context)
    return None


def all_matches(rules: Iterable[Rule], context: dict) -> list[str]:
    """Render every applicable rule, in table order."""
    return [rule.render(context) for rule in rules if rule.applies(context)]


def label_matches(
    rules: Iterable[LabelRule],
    layers: Iterable[LayerResult],
) -> list[str]:
    """Render every label rule that matches one of the layers."""
    layers = tuple(layers)
    messages = []
    for rule in rules:
        layer = rule.match(layers)
        if layer is not None:
            messages.append(rule.render(layer))
    return messages


def interpret(
    metrics: ComparisonMetrics,
    breakdown: ComparisonBreakdown,
    reference: ReferenceMetadata,
    user_result: AnalysisResult,
) -> Interpretation:
    """Apply the rule tables to produce an Interpretation."""
    context = build_context(metrics, breakdown, reference)

    summary = first_match(SUMMARY_RULES, context) or ""

    insights = all_matches(INSIGHT_RULES, context)
    if not insights:
        insights = [DEFAULT_INSIGHT]

    recommendations = all_matches(RECOMMENDATION_RULES, context)
    if metrics.relative_difference < 0:
        recommendations += label_matches(LABEL_RULES, user_result.layers)
    if not recommendations:
        recommendations = list(DEFAULT_RECOMMENDATIONS)

    return Interpretation(
        grade=grade_for(metrics.relative_difference),
        summary=summary,
        insights=tuple(insights),
        recommendations=tuple(recommendations),
    )
