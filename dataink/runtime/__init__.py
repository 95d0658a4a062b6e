# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Result delivery runtime for Dataink.

Projections of AnalysisResult and ComparisonResult for callers:

1. JSON -- Plain records, strict JSON (non-finite floats as strings)
2. CSV -- One row per layer plus a summary block
3. Report -- Human-readable Markdown

The delivery layer never modifies result content.
"""

from dataink.runtime.serializers import (
    SerializerFormat,
    export,
    to_csv,
    to_report,
)

__all__ = [
    "export",
    "to_csv",
    "to_report",
    "SerializerFormat",
]
