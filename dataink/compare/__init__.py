# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Comparison of analysis results against references.

The engine computes metrics and a breakdown; the rule tables turn them
into a grade, summary, insights and recommendations. The assistant grades
a single result against a chart profile's benchmarks.
"""

from dataink.compare.assistant import (
    CHART_PROFILES,
    ChartProfile,
    Suggestion,
    SuggestionKind,
    generate_suggestions,
    get_profile,
    verdict,
)
from dataink.compare.engine import (
    ComparisonError,
    calculate_breakdown,
    calculate_metrics,
    compare,
    compare_to_reference,
)
from dataink.compare.references import (
    create_custom_reference,
    get_available_chart_types,
    get_reference_by_id,
    get_reference_by_type,
    get_references_for_chart_type,
)
from dataink.compare.rules import grade_for

__all__ = [
    "compare",
    "compare_to_reference",
    "calculate_metrics",
    "calculate_breakdown",
    "grade_for",
    "ComparisonError",
    # Reference library
    "get_available_chart_types",
    "get_references_for_chart_type",
    "get_reference_by_id",
    "get_reference_by_type",
    "create_custom_reference",
    # Assistant
    "CHART_PROFILES",
    "ChartProfile",
    "get_profile",
    "verdict",
    "Suggestion",
    "SuggestionKind",
    "generate_suggestions",
]
