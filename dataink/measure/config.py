# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Analysis settings.

Bundles the caller-tunable parameters of ink classification and region
growing. Passing explicit arguments to analyze()/grow_region() works just
as well; this is a convenience for callers that persist settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from dataink.measure.ink import DEFAULT_INK_THRESHOLD
from dataink.measure.layers import analyze
from dataink.measure.raster import RasterBuffer
from dataink.measure.wand import (
    DEFAULT_MIN_REGION_PIXELS,
    DEFAULT_REGION_PADDING,
    DEFAULT_WAND_TOLERANCE,
    grow_region,
)
from dataink.schema import WHITE, AnalysisResult, Color, Rect, SelectionRegion


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for ink analysis and the magic wand."""

    # Background that "no ink" looks like
    background: Color = field(default=WHITE)

    # RGB distance from background above which a pixel is ink
    # 0   = any visible difference
    # 30  = ignores JPEG noise and faint anti-aliasing
    # 100 = only strong marks
    ink_threshold: float = DEFAULT_INK_THRESHOLD

    # Max RGB distance from the seed color for the magic wand
    wand_tolerance: float = DEFAULT_WAND_TOLERANCE

    # Wand results smaller than this are discarded as specks
    min_region_pixels: int = DEFAULT_MIN_REGION_PIXELS

    # Pixels added around a wand result's bounding box
    region_padding: int = DEFAULT_REGION_PADDING

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.ink_threshold < 0:
            raise ValueError(f"ink_threshold must be >= 0, got {self.ink_threshold}")
        if self.wand_tolerance < 0:
            raise ValueError(f"wand_tolerance must be >= 0, got {self.wand_tolerance}")
        if self.min_region_pixels < 1:
            raise ValueError(
                f"min_region_pixels must be >= 1, got {self.min_region_pixels}"
            )
        if self.region_padding < 0:
            raise ValueError(f"region_padding must be >= 0, got {self.region_padding}")

    def analyze(
        self,
        raster: RasterBuffer,
        regions: Sequence[SelectionRegion],
    ) -> AnalysisResult:
        """Run analyze() with these settings."""
        return analyze(raster, regions, self.background, self.ink_threshold)

    def grow(self, raster: RasterBuffer, seed_x: int, seed_y: int) -> Optional[Rect]:
        """Run grow_region() with these settings."""
        return grow_region(
            raster,
            seed_x,
            seed_y,
            self.wand_tolerance,
            min_pixels=self.min_region_pixels,
            padding=self.region_padding,
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "background": self.background.to_dict(),
            "ink_threshold": self.ink_threshold,
            "wand_tolerance": self.wand_tolerance,
            "min_region_pixels": self.min_region_pixels,
            "region_padding": self.region_padding,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisConfig:
        """
        Deserialize from dictionary.

        Also accepts the keys of a saved session (backgroundColor,
        inkThreshold, magicWandTolerance). Missing keys take defaults.
        """
        background = data.get("background", data.get("backgroundColor"))
        return cls(
            background=Color.from_dict(background) if background else WHITE,
            ink_threshold=data.get(
                "ink_threshold", data.get("inkThreshold", DEFAULT_INK_THRESHOLD)
            ),
            wand_tolerance=data.get(
                "wand_tolerance", data.get("magicWandTolerance", DEFAULT_WAND_TOLERANCE)
            ),
            min_region_pixels=data.get("min_region_pixels", DEFAULT_MIN_REGION_PIXELS),
            region_padding=data.get("region_padding", DEFAULT_REGION_PADDING),
        )
