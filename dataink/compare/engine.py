# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Comparison engine.

Compares a user's AnalysisResult against a reference AnalysisResult and
produces metrics, a pixel breakdown, and a graded interpretation.

Unlike the measurement core, invalid operands are a hard error here:
a comparison without two valid results means nothing.
"""

from __future__ import annotations

import logging
import math

from dataink.compare.rules import interpret
from dataink.schema import (
    AnalysisResult,
    ComparisonBreakdown,
    ComparisonMetrics,
    ComparisonResult,
    ReferenceMetadata,
    ReferenceResult,
)

logger = logging.getLogger(__name__)


class ComparisonError(ValueError):
    """Raised when a comparison operand is missing or malformed."""


def _validate_result(result: object, name: str) -> AnalysisResult:
    if result is None:
        raise ComparisonError(f"{name} is missing")
    if not isinstance(result, AnalysisResult):
        raise ComparisonError(f"{name}: expected AnalysisResult, got {type(result)}")
    for field_name in ("efficiency_ratio", "density_ratio"):
        value = getattr(result, field_name)
        if not math.isfinite(value) or value < 0:
            raise ComparisonError(f"{name}.{field_name} is invalid: {value}")
    return result


def calculate_metrics(
    user_result: AnalysisResult,
    reference_result: AnalysisResult,
) -> ComparisonMetrics:
    """
    Efficiency metrics, user relative to reference.

    relative_difference is a percentage of the reference efficiency. With a
    reference efficiency of 0 it is +inf when the user has any data ink
    and 0 otherwise.
    """
    user_efficiency = user_result.efficiency_ratio
    reference_efficiency = reference_result.efficiency_ratio

    absolute_difference = user_efficiency - reference_efficiency
    if reference_efficiency == 0:
        relative_difference = math.inf if user_efficiency > 0 else 0.0
    else:
        relative_difference = (absolute_difference / reference_efficiency) * 100

    return ComparisonMetrics(
        user_efficiency=user_efficiency,
        reference_efficiency=reference_efficiency,
        absolute_difference=absolute_difference,
        relative_difference=relative_difference,
        efficiency_gap=abs(absolute_difference),
    )


def calculate_breakdown(
    user_result: AnalysisResult,
    reference_result: AnalysisResult,
) -> ComparisonBreakdown:
    """Pixel-count differences, user minus reference."""
    data_ink_diff = user_result.total_data_pixels - reference_result.total_data_pixels
    non_data_ink_diff = (
        user_result.total_non_data_pixels - reference_result.total_non_data_pixels
    )
    return ComparisonBreakdown(
        data_ink_diff=data_ink_diff,
        non_data_ink_diff=non_data_ink_diff,
        excess_non_data_ink=max(0, non_data_ink_diff),
    )


def compare(
    user_result: AnalysisResult,
    reference_result: AnalysisResult,
    reference_metadata: ReferenceMetadata,
) -> ComparisonResult:
    """
    Compare a user result against a reference.

    Args:
        user_result: The user's analysis
        reference_result: The reference's analysis
        reference_metadata: Describes the reference (type drives the
            recommendations)

    Returns:
        ComparisonResult

    Raises:
        ComparisonError: If any operand is missing or malformed
    """
    user_result = _validate_result(user_result, "user_result")
    reference_result = _validate_result(reference_result, "reference_result")
    if reference_metadata is None:
        raise ComparisonError("reference_metadata is missing")
    if not isinstance(reference_metadata, ReferenceMetadata):
        raise ComparisonError(
            f"reference_metadata: expected ReferenceMetadata, got {type(reference_metadata)}"
        )

    metrics = calculate_metrics(user_result, reference_result)
    breakdown = calculate_breakdown(user_result, reference_result)
    interpretation = interpret(metrics, breakdown, reference_metadata, user_result)

    logger.debug(
        "Compared against %s: relative=%.2f%% grade=%s",
        reference_metadata.id,
        metrics.relative_difference,
        interpretation.grade.value,
    )

    return ComparisonResult(
        user_result=user_result,
        reference_result=reference_result,
        reference=reference_metadata,
        metrics=metrics,
        breakdown=breakdown,
        interpretation=interpretation,
    )


def compare_to_reference(
    user_result: AnalysisResult,
    reference: ReferenceResult,
) -> ComparisonResult:
    """Compare against a ReferenceResult from the reference library."""
    if reference is None:
        raise ComparisonError("reference is missing")
    if not isinstance(reference, ReferenceResult):
        raise ComparisonError(f"reference: expected ReferenceResult, got {type(reference)}")
    return compare(user_result, reference.analysis, reference.metadata)
