# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
CSV projection of an AnalysisResult.

One row per layer, in input order, followed by a blank separator row and
a summary block. Fields containing a comma, quote or newline are quoted
with internal quotes doubled.
"""

from __future__ import annotations

import csv
import io

from dataink.schema import AnalysisResult

LAYER_HEADERS = (
    "Layer ID",
    "Label",
    "Classification",
    "Total Pixels (Exclusive)",
    "Ink Pixels (Exclusive)",
    "Count Full Area",
)


def to_csv(result: AnalysisResult) -> str:
    """Serialize an AnalysisResult as CSV text (newline-separated rows)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")

    writer.writerow(LAYER_HEADERS)
    for layer in result.layers:
        writer.writerow([
            layer.id,
            layer.label,
            "Data" if layer.is_data else "Non-Data",
            layer.total_pixels,
            layer.ink_pixels,
            "Yes" if layer.count_full_area else "No",
        ])

    writer.writerow([])
    writer.writerow(["Summary"])
    writer.writerow(["Total Image Pixels", result.total_image_pixels])
    writer.writerow(["Total Ink Pixels (Entire Image)", result.total_ink_pixels])
    writer.writerow(["Total Data Pixels (Sum of Layers)", result.total_data_pixels])
    writer.writerow(["Total Non-Data Pixels (Sum of Layers)", result.total_non_data_pixels])
    writer.writerow(["Density Ratio (Data/Image)", f"{result.density_ratio:.4f}"])
    writer.writerow(["Efficiency Ratio (Data/Total Ink)", f"{result.efficiency_ratio:.4f}"])

    return buffer.getvalue().rstrip("\n")
