# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Export dispatcher.

Formats an AnalysisResult or ComparisonResult for a caller's download or
display path. The CSV projection is only defined for AnalysisResult.
"""

from __future__ import annotations

import json
from typing import Union

from dataink.runtime.serializers.base import SerializerFormat
from dataink.runtime.serializers.report import to_report
from dataink.runtime.serializers.tabular import to_csv
from dataink.schema import AnalysisResult, ComparisonResult


def export(
    result: Union[AnalysisResult, ComparisonResult],
    *,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
) -> str:
    """Serialize a result in the requested format.

    Args:
        result: The result to serialize.
        format: JSON (compact), JSON_PRETTY, CSV or REPORT.

    Returns:
        Serialized string.

    Raises:
        TypeError: If result is not a supported type, or CSV is requested
            for a ComparisonResult.
    """
    if not isinstance(result, (AnalysisResult, ComparisonResult)):
        raise TypeError(
            f"Expected AnalysisResult or ComparisonResult, got {type(result)}"
        )

    if format == SerializerFormat.CSV:
        if not isinstance(result, AnalysisResult):
            raise TypeError("CSV export is only available for AnalysisResult")
        return to_csv(result)
    elif format == SerializerFormat.REPORT:
        return to_report(result)
    elif format == SerializerFormat.JSON:
        return json.dumps(result.to_dict(), separators=(",", ":"))
    else:
        return json.dumps(result.to_dict(), indent=2)
