# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""Tests for magic-wand region growing."""

import numpy as np

from dataink import RasterBuffer, Rect, SelectionRegion, analyze, grow_region


def _canvas(height=20, width=20):
    return np.full((height, width, 4), 255, dtype=np.uint8)


def _with_block(pixels, x, y, w, h, rgb=(0, 0, 0)):
    pixels[y:y + h, x:x + w, :3] = rgb
    return pixels


class TestGrowRegion:

    def test_block_bounding_box_with_padding(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 5, 5, 6, 5))
        rect = grow_region(raster, 7, 7)
        # Block spans x 5..10, y 5..9; padded by 2
        assert rect == Rect(3, 3, 10, 9)

    def test_no_padding(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 5, 5, 6, 5))
        rect = grow_region(raster, 5, 5, padding=0)
        assert rect == Rect(5, 5, 6, 5)

    def test_padding_clamped_to_raster(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 0, 0, 4, 4))
        rect = grow_region(raster, 0, 0)
        assert rect == Rect(0, 0, 6, 6)

    def test_padding_clamped_at_far_edge(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 16, 16, 4, 4))
        rect = grow_region(raster, 19, 19)
        assert rect == Rect(14, 14, 6, 6)

    def test_speck_below_minimum(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 2, 2, 3, 3))
        assert grow_region(raster, 3, 3) is None
        assert grow_region(raster, 3, 3, min_pixels=9) == Rect(0, 0, 7, 7)

    def test_seed_out_of_bounds(self):
        raster = RasterBuffer.from_array(_canvas())
        assert grow_region(raster, 20, 5) is None
        assert grow_region(raster, -1, 5) is None
        assert grow_region(raster, 5, 100) is None

    def test_fractional_seed_just_outside(self):
        raster = RasterBuffer.from_array(_canvas())
        assert grow_region(raster, -0.5, 3) is None
        assert grow_region(raster, 3, -0.25) is None
        assert grow_region(raster, 19.9, 3) == Rect(0, 0, 20, 20)

    def test_transparent_seed(self):
        pixels = _with_block(_canvas(), 0, 0, 10, 10)
        pixels[:, :, 3] = 0
        raster = RasterBuffer.from_array(pixels)
        assert grow_region(raster, 5, 5) is None

    def test_transparent_pixels_stop_growth(self):
        pixels = _with_block(_canvas(), 0, 0, 10, 4)
        pixels[:, 5, 3] = 0
        raster = RasterBuffer.from_array(pixels)
        rect = grow_region(raster, 0, 0, padding=0)
        assert rect == Rect(0, 0, 5, 4)

    def test_four_connected_only(self):
        pixels = _with_block(_canvas(12, 12), 0, 0, 4, 4)
        _with_block(pixels, 4, 4, 4, 4)
        raster = RasterBuffer.from_array(pixels)
        rect = grow_region(raster, 1, 1, padding=0)
        assert rect == Rect(0, 0, 4, 4)

    def test_tolerance_relative_to_seed(self):
        pixels = _with_block(_canvas(), 0, 0, 5, 5, rgb=(0, 0, 0))
        _with_block(pixels, 5, 0, 5, 5, rgb=(20, 0, 0))
        raster = RasterBuffer.from_array(pixels)

        assert grow_region(raster, 0, 0, 30, padding=0) == Rect(0, 0, 10, 5)
        assert grow_region(raster, 0, 0, 10, padding=0) == Rect(0, 0, 5, 5)

    def test_tolerance_is_inclusive(self):
        pixels = _with_block(_canvas(), 0, 0, 5, 5, rgb=(0, 0, 0))
        _with_block(pixels, 5, 0, 5, 5, rgb=(20, 0, 0))
        raster = RasterBuffer.from_array(pixels)
        assert grow_region(raster, 0, 0, 20, padding=0) == Rect(0, 0, 10, 5)

    def test_seed_on_background_grows_background(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 5, 5, 6, 5))
        rect = grow_region(raster, 0, 0)
        assert rect == Rect(0, 0, 20, 20)

    def test_raster_unchanged(self):
        pixels = _with_block(_canvas(), 5, 5, 6, 5)
        raster = RasterBuffer.from_array(pixels)
        before = raster.pixels.copy()
        grow_region(raster, 7, 7)
        assert np.array_equal(raster.pixels, before)

    def test_idempotent(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 5, 5, 6, 5))
        assert grow_region(raster, 7, 7) == grow_region(raster, 7, 7)

    def test_result_usable_as_region(self):
        raster = RasterBuffer.from_array(_with_block(_canvas(), 5, 5, 6, 5))
        rect = grow_region(raster, 7, 7)
        region = SelectionRegion.from_rect("wand-1", rect, label="Bars")
        result = analyze(raster, [region])
        assert result.layers[0].ink_pixels == 30
        assert result.efficiency_ratio == 1.0
