# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""Tests for layered analysis: exclusive attribution, ratios, edge cases."""

import numpy as np
import pytest

from dataink import AnalysisResult, RasterBuffer, SelectionRegion, analyze
from dataink.schema import BLACK


def _solid_raster(r, g, b, height=10, width=10, alpha=255):
    """Create a solid-color RGBA raster."""
    pixels = np.full((height, width, 4), [r, g, b, alpha], dtype=np.uint8)
    return RasterBuffer.from_array(pixels)


def _white_with_block(x, y, w, h, rgb=(0, 0, 0), height=20, width=20):
    """White raster with one solid block."""
    pixels = np.full((height, width, 4), 255, dtype=np.uint8)
    pixels[y:y + h, x:x + w, :3] = rgb
    return RasterBuffer.from_array(pixels)


class TestAnalyzeBasic:

    def test_single_data_region_covering_ink(self):
        # Every pixel is 50 away from white
        raster = _solid_raster(255, 255, 205)
        result = analyze(raster, [SelectionRegion("a", 0, 0, 10, 10)], threshold=30)

        assert isinstance(result, AnalysisResult)
        layer = result.layers[0]
        assert layer.total_pixels == 100
        assert layer.ink_pixels == 100
        assert result.total_image_pixels == 100
        assert result.total_ink_pixels == 100
        assert result.total_data_pixels == 100
        assert result.total_non_data_pixels == 0
        assert result.efficiency_ratio == pytest.approx(1.0)
        assert result.density_ratio == pytest.approx(1.0)

    def test_threshold_above_distance_finds_no_ink(self):
        raster = _solid_raster(255, 255, 205)
        result = analyze(raster, [SelectionRegion("a", 0, 0, 10, 10)], threshold=60)
        assert result.total_ink_pixels == 0
        assert result.efficiency_ratio == 0.0

    def test_non_data_region(self):
        raster = _white_with_block(0, 0, 5, 4)
        result = analyze(raster, [SelectionRegion("grid", 0, 0, 20, 20, is_data=False)])
        assert result.total_non_data_pixels == 20
        assert result.total_data_pixels == 0
        assert result.efficiency_ratio == 0.0

    def test_custom_background(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [SelectionRegion("a", 0, 0, 10, 10)], background=BLACK)
        assert result.total_ink_pixels == 0

    def test_transparent_pixels_are_not_ink(self):
        raster = _solid_raster(0, 0, 0, alpha=0)
        result = analyze(raster, [SelectionRegion("a", 0, 0, 10, 10)])
        assert result.total_ink_pixels == 0
        assert result.layers[0].ink_pixels == 0
        assert result.layers[0].total_pixels == 100

    def test_rejects_non_region(self):
        raster = _solid_raster(0, 0, 0)
        with pytest.raises(TypeError, match="SelectionRegion"):
            analyze(raster, [{"id": "a", "x": 0, "y": 0, "width": 1, "height": 1}])


class TestExclusiveAttribution:

    def test_stacked_halves(self):
        # Every pixel is 50 away from white
        raster = _solid_raster(255, 255, 205)
        result = analyze(raster, [
            SelectionRegion("data", 0, 0, 10, 5, is_data=True),
            SelectionRegion("grid", 0, 5, 10, 5, is_data=False),
        ], threshold=30)

        assert result.get_layer("data").ink_pixels == 50
        assert result.get_layer("grid").ink_pixels == 50
        assert result.total_data_pixels == 50
        assert result.total_non_data_pixels == 50
        assert result.efficiency_ratio == pytest.approx(0.5)
        assert result.density_ratio == pytest.approx(0.5)

    def test_topmost_region_claims_overlap(self):
        raster = _solid_raster(0, 0, 0)
        bottom = SelectionRegion("data", 0, 0, 10, 10, is_data=True)
        top = SelectionRegion("grid", 0, 0, 5, 10, is_data=False)
        result = analyze(raster, [bottom, top])

        assert result.get_layer("grid").total_pixels == 50
        assert result.get_layer("grid").ink_pixels == 50
        assert result.get_layer("data").total_pixels == 50
        assert result.get_layer("data").ink_pixels == 50
        assert result.efficiency_ratio == pytest.approx(0.5)

    def test_reordering_changes_attribution(self):
        raster = _solid_raster(0, 0, 0)
        big = SelectionRegion("big", 0, 0, 10, 10)
        small = SelectionRegion("small", 0, 0, 5, 10)

        small_on_top = analyze(raster, [big, small])
        big_on_top = analyze(raster, [small, big])

        assert small_on_top.get_layer("small").total_pixels == 50
        assert big_on_top.get_layer("small").total_pixels == 0
        assert big_on_top.get_layer("big").total_pixels == 100

    def test_results_in_input_order(self):
        raster = _solid_raster(0, 0, 0)
        regions = [
            SelectionRegion("first", 0, 0, 3, 3),
            SelectionRegion("second", 5, 5, 3, 3),
            SelectionRegion("third", 2, 2, 4, 4),
        ]
        result = analyze(raster, regions)
        assert [layer.id for layer in result.layers] == ["first", "second", "third"]

    def test_disjoint_regions_sum_to_union(self):
        raster = _solid_raster(0, 0, 0)
        regions = [
            SelectionRegion("a", 0, 0, 5, 5),
            SelectionRegion("b", 5, 0, 5, 5),
            SelectionRegion("c", 0, 5, 10, 2),
        ]
        result = analyze(raster, regions)
        assert sum(layer.total_pixels for layer in result.layers) == 70

    def test_layer_pixels_never_exceed_image(self):
        raster = _solid_raster(0, 0, 0)
        regions = [SelectionRegion(str(i), 0, 0, 10, 10) for i in range(5)]
        result = analyze(raster, regions)
        assert sum(layer.total_pixels for layer in result.layers) == 100
        assert [layer.total_pixels for layer in result.layers] == [0, 0, 0, 0, 100]

    def test_regions_not_mutated(self):
        raster = _solid_raster(0, 0, 0)
        region = SelectionRegion("r", 8, 0, -4, 10)
        analyze(raster, [region])
        assert region.x == 8
        assert region.width == -4


class TestRegionGeometry:

    def test_negative_width_is_normalized(self):
        raster = _solid_raster(0, 0, 0)
        flipped = analyze(raster, [SelectionRegion("r", 10, 0, -5, 10)])
        plain = analyze(raster, [SelectionRegion("r", 5, 0, 5, 10)])
        assert flipped.layers[0].total_pixels == 50
        assert flipped.layers == plain.layers

    def test_negative_height_is_normalized(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [SelectionRegion("r", 0, 10, 10, -3)])
        assert result.layers[0].total_pixels == 30

    def test_entirely_outside(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [SelectionRegion("r", 20, 20, 5, 5)])
        assert result.layers[0].total_pixels == 0
        assert result.layers[0].ink_pixels == 0
        assert result.total_ink_pixels == 100

    def test_partially_outside_is_clamped(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [SelectionRegion("r", -5, -5, 10, 10)])
        assert result.layers[0].total_pixels == 25

    def test_fractional_coordinates_cover_touched_pixels(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [SelectionRegion("r", 0.5, 0, 1, 1)])
        # Columns 0 and 1 of row 0
        assert result.layers[0].total_pixels == 2

    def test_zero_size_region(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [SelectionRegion("r", 3, 3, 0, 0)])
        assert result.layers[0].total_pixels == 0


class TestAggregates:

    def test_zero_regions(self):
        raster = _solid_raster(0, 0, 0)
        result = analyze(raster, [])
        assert result.layers == ()
        assert result.total_ink_pixels == 100
        assert result.total_data_pixels == 0
        assert result.efficiency_ratio == 0.0
        assert result.density_ratio == 0.0

    def test_empty_raster(self):
        raster = RasterBuffer.from_array(np.zeros((0, 0, 4), dtype=np.uint8))
        result = analyze(raster, [SelectionRegion("r", 0, 0, 10, 10)])
        assert result.total_image_pixels == 0
        assert result.density_ratio == 0.0
        assert result.efficiency_ratio == 0.0

    def test_total_ink_independent_of_regions(self):
        raster = _white_with_block(3, 3, 6, 6)
        a = analyze(raster, [])
        b = analyze(raster, [SelectionRegion("r", 0, 0, 4, 4)])
        c = analyze(raster, [SelectionRegion("r", 0, 0, 20, 20, is_data=False)])
        assert a.total_ink_pixels == b.total_ink_pixels == c.total_ink_pixels == 36

    def test_ink_outside_regions_lowers_efficiency(self):
        raster = _white_with_block(0, 0, 10, 10)
        result = analyze(raster, [SelectionRegion("r", 0, 0, 5, 10)])
        assert result.total_data_pixels == 50
        assert result.total_ink_pixels == 100
        assert result.efficiency_ratio == pytest.approx(0.5)

    def test_density_ratio(self):
        raster = _white_with_block(0, 0, 10, 10)
        result = analyze(raster, [SelectionRegion("r", 0, 0, 20, 20)])
        assert result.density_ratio == pytest.approx(100 / 400)

    def test_deterministic(self):
        raster = _white_with_block(2, 2, 7, 5, rgb=(30, 120, 200))
        regions = [SelectionRegion("a", 0, 0, 8, 8), SelectionRegion("b", 4, 4, 10, 10)]
        assert analyze(raster, regions) == analyze(raster, regions)


class TestCountFullArea:

    def test_every_pixel_counts(self):
        raster = _solid_raster(255, 255, 255)
        result = analyze(raster, [
            SelectionRegion("bg", 0, 0, 10, 10, is_data=False, count_full_area=True),
        ])
        layer = result.layers[0]
        assert layer.ink_pixels == layer.total_pixels == 100
        assert layer.count_full_area
        assert result.total_non_data_pixels == 100
        # The whole-image ink count still sees no ink
        assert result.total_ink_pixels == 0

    def test_efficiency_can_exceed_one(self):
        raster = _white_with_block(0, 0, 2, 2, width=10, height=10)
        result = analyze(raster, [
            SelectionRegion("bars", 0, 0, 10, 10, count_full_area=True),
        ])
        assert result.total_ink_pixels == 4
        assert result.total_data_pixels == 100
        assert result.efficiency_ratio == pytest.approx(25.0)

    def test_only_exclusive_pixels_count(self):
        raster = _solid_raster(255, 255, 255)
        result = analyze(raster, [
            SelectionRegion("bg", 0, 0, 10, 10, is_data=False, count_full_area=True),
            SelectionRegion("top", 0, 0, 10, 4),
        ])
        assert result.get_layer("bg").ink_pixels == 60
        assert result.get_layer("top").ink_pixels == 0
