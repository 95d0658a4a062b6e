# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Comparison schema: reference records and graded comparison results.

Reference records are static content supplied to the comparison engine.
Comparison results are pure outputs; relative_difference may be +inf
when the reference has no data ink at all.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dataink.schema.ink_analysis import (
    SCHEMA_VERSION,
    AnalysisResult,
    _pick,
    decode_float,
    encode_float,
)


# =============================================================================
# Reference Types
# =============================================================================


class ReferenceType(Enum):
    """Kind of reference a user result is compared against."""
    IDEAL = "ideal"                  # theoretical minimum decoration
    COMMON = "common"                # typical spreadsheet/BI tool output
    BEST_PRACTICE = "best-practice"  # Tufte-style clean design
    CUSTOM = "custom"                # built from a user's own analysis


@dataclass(frozen=True, slots=True)
class ReferenceMetadata:
    """
    Descriptive metadata for a reference visualization.

    Attributes:
        id: Stable identifier (e.g. "bar-ideal")
        name: Display name
        description: One-line description
        chart_type: Chart type key (e.g. "bar-chart")
        type: ReferenceType
        efficiency_ratio: Headline efficiency of the reference
        data_ink_pixels: Data ink in the reference
        total_ink_pixels: Total ink in the reference
        redundancy_pixels: Redundant (duplicated) ink estimate
        chartjunk_pixels: Purely decorative ink estimate
    """
    id: str
    name: str
    chart_type: str
    type: ReferenceType
    efficiency_ratio: float
    description: str = ""
    data_ink_pixels: int = 0
    total_ink_pixels: int = 0
    redundancy_pixels: int = 0
    chartjunk_pixels: float = 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "chart_type": self.chart_type,
            "type": self.type.value,
            "efficiency_ratio": self.efficiency_ratio,
            "metadata": {
                "data_ink_pixels": self.data_ink_pixels,
                "total_ink_pixels": self.total_ink_pixels,
                "redundancy_pixels": self.redundancy_pixels,
                "chartjunk_pixels": self.chartjunk_pixels,
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> ReferenceMetadata:
        """Deserialize from dictionary."""
        meta = data.get("metadata", {})
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            chart_type=_pick(data, "chart_type", "chartType"),
            type=ReferenceType(data["type"]),
            efficiency_ratio=_pick(data, "efficiency_ratio", "efficiencyRatio"),
            data_ink_pixels=_pick(meta, "data_ink_pixels", "dataInkPixels", default=0),
            total_ink_pixels=_pick(meta, "total_ink_pixels", "totalInkPixels", default=0),
            redundancy_pixels=_pick(meta, "redundancy_pixels", "redundancyPixels", default=0),
            chartjunk_pixels=_pick(meta, "chartjunk_pixels", "chartjunkPixels", default=0),
        )


@dataclass(frozen=True, slots=True)
class ReferenceResult:
    """A reference visualization: metadata plus its analysis."""
    metadata: ReferenceMetadata
    analysis: AnalysisResult

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def type(self) -> ReferenceType:
        return self.metadata.type

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "metadata": self.metadata.to_dict(),
            "analysis": self.analysis.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ReferenceResult:
        """Deserialize from dictionary."""
        return cls(
            metadata=ReferenceMetadata.from_dict(data["metadata"]),
            analysis=AnalysisResult.from_dict(data["analysis"]),
        )


# =============================================================================
# Comparison Types
# =============================================================================


class Grade(Enum):
    """Categorical grade on relative efficiency difference."""
    EXCELLENT = "excellent"  # >= -10%
    GOOD = "good"            # >= -25%
    FAIR = "fair"            # >= -40%
    POOR = "poor"


@dataclass(frozen=True, slots=True)
class ComparisonMetrics:
    """
    Efficiency metrics of a user result against a reference.

    Attributes:
        user_efficiency: User efficiency ratio
        reference_efficiency: Reference efficiency ratio
        absolute_difference: user - reference
        relative_difference: Percent of reference; +inf when the reference
            is 0 and the user is positive
        efficiency_gap: |absolute_difference|
    """
    user_efficiency: float
    reference_efficiency: float
    absolute_difference: float
    relative_difference: float
    efficiency_gap: float

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "user_efficiency": self.user_efficiency,
            "reference_efficiency": self.reference_efficiency,
            "absolute_difference": self.absolute_difference,
            "relative_difference": encode_float(self.relative_difference),
            "efficiency_gap": self.efficiency_gap,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ComparisonMetrics:
        """Deserialize from dictionary."""
        return cls(
            user_efficiency=data["user_efficiency"],
            reference_efficiency=data["reference_efficiency"],
            absolute_difference=data["absolute_difference"],
            relative_difference=decode_float(data["relative_difference"]),
            efficiency_gap=data["efficiency_gap"],
        )


@dataclass(frozen=True, slots=True)
class ComparisonBreakdown:
    """
    Pixel-count differences, user minus reference.

    Attributes:
        data_ink_diff: Data ink difference
        non_data_ink_diff: Non-data ink difference
        excess_non_data_ink: max(0, non_data_ink_diff)
    """
    data_ink_diff: int
    non_data_ink_diff: int
    excess_non_data_ink: int

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "data_ink_diff": self.data_ink_diff,
            "non_data_ink_diff": self.non_data_ink_diff,
            "excess_non_data_ink": self.excess_non_data_ink,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ComparisonBreakdown:
        """Deserialize from dictionary."""
        return cls(
            data_ink_diff=data["data_ink_diff"],
            non_data_ink_diff=data["non_data_ink_diff"],
            excess_non_data_ink=data["excess_non_data_ink"],
        )


@dataclass(frozen=True, slots=True)
class Interpretation:
    """Graded, rule-based reading of a comparison."""
    grade: Grade
    summary: str
    insights: tuple[str, ...]
    recommendations: tuple[str, ...]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "grade": self.grade.value,
            "summary": self.summary,
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Interpretation:
        """Deserialize from dictionary."""
        return cls(
            grade=Grade(data["grade"]),
            summary=data["summary"],
            insights=tuple(data.get("insights", ())),
            recommendations=tuple(data.get("recommendations", ())),
        )


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """
    Complete comparison of a user result against one reference.

    Attributes:
        user_result: The user's AnalysisResult
        reference_result: The reference's AnalysisResult
        reference: Metadata of the reference compared against
        metrics: Efficiency metrics
        breakdown: Pixel-count breakdown
        interpretation: Grade, summary, insights and recommendations
    """
    user_result: AnalysisResult
    reference_result: AnalysisResult
    reference: ReferenceMetadata
    metrics: ComparisonMetrics
    breakdown: ComparisonBreakdown
    interpretation: Interpretation
    version: str = SCHEMA_VERSION

    @property
    def grade(self) -> Grade:
        return self.interpretation.grade

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": self.version,
            "user_result": self.user_result.to_dict(),
            "reference_result": self.reference_result.to_dict(),
            "reference": self.reference.to_dict(),
            "metrics": self.metrics.to_dict(),
            "breakdown": self.breakdown.to_dict(),
            "interpretation": self.interpretation.to_dict(),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_report(self) -> str:
        """Serialize to a human-readable report."""
        # Import here to avoid circular imports
        from dataink.runtime.serializers.report import to_report
        return to_report(self)

    @classmethod
    def from_dict(cls, data: dict) -> ComparisonResult:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            user_result=AnalysisResult.from_dict(data["user_result"]),
            reference_result=AnalysisResult.from_dict(data["reference_result"]),
            reference=ReferenceMetadata.from_dict(data["reference"]),
            metrics=ComparisonMetrics.from_dict(data["metrics"]),
            breakdown=ComparisonBreakdown.from_dict(data["breakdown"]),
            interpretation=Interpretation.from_dict(data["interpretation"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ComparisonResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
