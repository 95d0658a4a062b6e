# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Layered data-ink analysis.

Each SelectionRegion is a layer. Layers are processed from the top (last
in the input) down, and every pixel is attributed to the topmost layer
containing it. Within its exclusive pixels a layer counts ink with the
ink classifier, or counts every pixel when count_full_area is set.

Total ink for the efficiency ratio is measured once over the whole image,
independent of the layers.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from dataink.measure.ink import DEFAULT_INK_THRESHOLD, ink_mask
from dataink.measure.raster import RasterBuffer
from dataink.schema import (
    WHITE,
    AnalysisResult,
    Color,
    LayerResult,
    SelectionRegion,
)

logger = logging.getLogger(__name__)


def analyze(
    raster: RasterBuffer,
    regions: Sequence[SelectionRegion],
    background: Optional[Color] = None,
    threshold: Optional[float] = None,
) -> AnalysisResult:
    """
    Compute per-layer and aggregate data-ink statistics.

    Args:
        raster: Source pixels
        regions: Ordered regions; later entries are on top
        background: Background color (default: white)
        threshold: Ink threshold (default: 30)

    Returns:
        AnalysisResult with one LayerResult per region, in input order

    Example:
        >>> result = analyze(raster, [SelectionRegion("bars", 0, 0, 10, 10)])
        >>> result.efficiency_ratio
        1.0
    """
    if background is None:
        background = WHITE
    if threshold is None:
        threshold = DEFAULT_INK_THRESHOLD

    for region in regions:
        if not isinstance(region, SelectionRegion):
            raise TypeError(f"Expected SelectionRegion, got {type(region)}")

    height, width = raster.height, raster.width
    total_image_pixels = width * height

    # Whole-image ink, reused for each layer's exclusive scan
    ink = ink_mask(raster.pixels, background, threshold)
    total_ink_pixels = int(np.count_nonzero(ink))

    claimed = np.zeros((height, width), dtype=bool)
    layers: list[LayerResult] = []

    # Topmost (last drawn) first
    for region in reversed(regions):
        x1, y1, x2, y2 = region.rect.pixel_bounds(width, height)

        free = ~claimed[y1:y2, x1:x2]
        layer_pixels = int(np.count_nonzero(free))

        if region.count_full_area:
            layer_ink = layer_pixels
        else:
            layer_ink = int(np.count_nonzero(free & ink[y1:y2, x1:x2]))

        claimed[y1:y2, x1:x2] = True

        layers.append(LayerResult(
            id=region.id,
            label=region.label,
            color=region.color,
            is_data=region.is_data,
            total_pixels=layer_pixels,
            ink_pixels=layer_ink,
            count_full_area=region.count_full_area,
        ))

    # Back to input order
    layers.reverse()

    total_data_pixels = sum(layer.ink_pixels for layer in layers if layer.is_data)
    total_non_data_pixels = sum(layer.ink_pixels for layer in layers if not layer.is_data)

    density_ratio = (
        total_data_pixels / total_image_pixels if total_image_pixels > 0 else 0.0
    )
    efficiency_ratio = (
        total_data_pixels / total_ink_pixels if total_ink_pixels > 0 else 0.0
    )

    logger.debug(
        "Analyzed %dx%d raster, %d layers: ink=%d data=%d non-data=%d",
        width, height, len(layers), total_ink_pixels,
        total_data_pixels, total_non_data_pixels,
    )

    return AnalysisResult(
        layers=tuple(layers),
        total_image_pixels=total_image_pixels,
        total_ink_pixels=total_ink_pixels,
        total_data_pixels=total_data_pixels,
        total_non_data_pixels=total_non_data_pixels,
        density_ratio=density_ratio,
        efficiency_ratio=efficiency_ratio,
    )
