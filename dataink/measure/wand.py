# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Magic-wand region growing.

Grows a 4-connected region of similar color from a seed pixel and returns
its padded bounding rectangle, ready to become one more SelectionRegion.

Similarity is measured against the seed's own color, not the analysis
background. Clicks on transparent pixels, outside the raster, or on specks
smaller than min_pixels yield None rather than an error.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from dataink.measure.ink import OPACITY_FLOOR, distance_map
from dataink.measure.raster import RasterBuffer
from dataink.schema import Rect

logger = logging.getLogger(__name__)

DEFAULT_WAND_TOLERANCE = 30.0
DEFAULT_MIN_REGION_PIXELS = 10
DEFAULT_REGION_PADDING = 2


def grow_region(
    raster: RasterBuffer,
    seed_x: int,
    seed_y: int,
    tolerance: float = DEFAULT_WAND_TOLERANCE,
    *,
    min_pixels: int = DEFAULT_MIN_REGION_PIXELS,
    padding: int = DEFAULT_REGION_PADDING,
) -> Optional[Rect]:
    """
    Flood-fill from a seed and return the bounding rectangle of the region.

    Args:
        raster: Source pixels
        seed_x: Seed column (fractional values are floored)
        seed_y: Seed row (fractional values are floored)
        tolerance: Max RGB distance from the seed color (inclusive)
        min_pixels: Regions with fewer pixels are rejected
        padding: Pixels added on every side of the bounding box, clamped
            to the raster

    Returns:
        Rect of the padded bounding box, or None if the seed is out of
        bounds, transparent, or the region is smaller than min_pixels
    """
    # -0.5 is column -1, not 0
    seed_x, seed_y = math.floor(seed_x), math.floor(seed_y)
    height, width = raster.height, raster.width

    if not raster.contains(seed_x, seed_y):
        logger.debug("Seed (%d, %d) outside %dx%d raster", seed_x, seed_y, width, height)
        return None

    if raster.alpha_at(seed_x, seed_y) < OPACITY_FLOOR:
        logger.debug("Seed (%d, %d) is transparent", seed_x, seed_y)
        return None

    seed_color = raster.color_at(seed_x, seed_y)

    # Candidate pixels: opaque and within tolerance of the seed color
    similar = (raster.alpha >= OPACITY_FLOOR) & (
        distance_map(raster.rgb, seed_color) <= tolerance
    )
    if not similar[seed_y, seed_x]:
        return None

    visited = np.zeros((height, width), dtype=bool)
    visited[seed_y, seed_x] = True
    stack = [(seed_x, seed_y)]

    count = 0
    min_x = max_x = seed_x
    min_y = max_y = seed_y

    while stack:
        x, y = stack.pop()
        count += 1

        if x < min_x:
            min_x = x
        elif x > max_x:
            max_x = x
        if y < min_y:
            min_y = y
        elif y > max_y:
            max_y = y

        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if 0 <= nx < width and 0 <= ny < height:
                if not visited[ny, nx] and similar[ny, nx]:
                    visited[ny, nx] = True
                    stack.append((nx, ny))

    if count < min_pixels:
        logger.debug(
            "Region at (%d, %d) has %d pixels, below minimum %d",
            seed_x, seed_y, count, min_pixels,
        )
        return None

    rect = Rect.from_bounds(
        max(0, min_x - padding),
        max(0, min_y - padding),
        min(width - 1, max_x + padding),
        min(height - 1, max_y + padding),
    )
    logger.debug("Grew %d-pixel region from (%d, %d): %s", count, seed_x, seed_y, rect)
    return rect
