# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Ink classification.

A pixel is "ink" when it is visibly opaque and its color differs from the
background by more than a threshold (Euclidean distance in 8-bit RGB).

    transparent (alpha < OPACITY_FLOOR)  → never ink
    distance(rgb, background) > threshold → ink

The scalar form (is_ink) and the vectorized form (ink_mask) share the same
semantics and are interchangeable.
"""

from __future__ import annotations

import math
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from dataink.schema import WHITE, Color


# Alpha below 13/255 (~5% opacity) is treated as transparent
OPACITY_FLOOR = 13

# Fallback sensitivity when the caller supplies none
DEFAULT_INK_THRESHOLD = 30.0

RGBLike = Union[Color, tuple[int, int, int]]


def _rgb(color: RGBLike) -> tuple[int, int, int]:
    if isinstance(color, Color):
        return color.rgb
    r, g, b = color
    return int(r), int(g), int(b)


def color_distance(a: RGBLike, b: RGBLike) -> float:
    """Euclidean distance between two RGB colors (0 to ~441.7)."""
    r1, g1, b1 = _rgb(a)
    r2, g2, b2 = _rgb(b)
    return math.sqrt((r1 - r2) ** 2 + (g1 - g2) ** 2 + (b1 - b2) ** 2)


def is_opaque(alpha: int) -> bool:
    """True if alpha is at or above the opacity floor."""
    return alpha >= OPACITY_FLOOR


def is_ink(
    sample: RGBLike,
    alpha: int,
    background: Optional[Color] = None,
    threshold: Optional[float] = None,
) -> bool:
    """
    Decide whether a single pixel is ink.

    Args:
        sample: Pixel color (Color or (r, g, b))
        alpha: Pixel alpha (0-255)
        background: Background color (default: white)
        threshold: Minimum distance from background to count as ink
            (default: 30). The comparison is strict.

    Returns:
        True if the pixel is ink
    """
    if background is None:
        background = WHITE
    if threshold is None:
        threshold = DEFAULT_INK_THRESHOLD

    if not is_opaque(alpha):
        return False

    return color_distance(sample, background) > threshold


def distance_map(
    rgb: NDArray[np.uint8],
    reference: RGBLike,
) -> NDArray[np.float64]:
    """
    Per-pixel Euclidean distance to a reference color.

    Args:
        rgb: Array of shape (..., 3) uint8
        reference: Color to measure against

    Returns:
        Array of shape (...) with distances
    """
    ref = np.asarray(_rgb(reference), dtype=np.float64)
    delta = rgb.astype(np.float64) - ref
    return np.sqrt(np.sum(delta ** 2, axis=-1))


def ink_mask(
    pixels: NDArray[np.uint8],
    background: Optional[Color] = None,
    threshold: Optional[float] = None,
) -> NDArray[np.bool_]:
    """
    Vectorized is_ink over an RGBA array.

    Args:
        pixels: Array of shape (..., 4) uint8 RGBA
        background: Background color (default: white)
        threshold: Ink threshold (default: 30)

    Returns:
        Bool array of shape (...) marking ink pixels
    """
    if background is None:
        background = WHITE
    if threshold is None:
        threshold = DEFAULT_INK_THRESHOLD

    opaque = pixels[..., 3] >= OPACITY_FLOOR
    return opaque & (distance_map(pixels[..., :3], background) > threshold)
