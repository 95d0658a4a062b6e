# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""Tests for schema types: validation, geometry and serialization."""

import json
import math

import numpy as np
import pytest

from dataink import (
    AnalysisResult,
    Color,
    LayerResult,
    RasterBuffer,
    Rect,
    SelectionRegion,
    analyze,
)
from dataink.schema.ink_analysis import decode_float, encode_float


def _layer(id="bars", is_data=True, total=100, ink=40, **kwargs):
    return LayerResult(
        id=id,
        label=kwargs.get("label", id.capitalize()),
        color=kwargs.get("color", "#3b82f6"),
        is_data=is_data,
        total_pixels=total,
        ink_pixels=ink,
        count_full_area=kwargs.get("count_full_area", False),
    )


class TestColor:

    def test_hex_round_trip(self):
        c = Color.from_hex("#3B82F6")
        assert c == Color(0x3B, 0x82, 0xF6)
        assert c.hex == "#3B82F6"

    def test_hex_without_hash(self):
        assert Color.from_hex("ffffff") == Color(255, 255, 255)

    def test_invalid_hex(self):
        with pytest.raises(ValueError, match="6 hex digits"):
            Color.from_hex("#fff")

    def test_channel_out_of_range(self):
        with pytest.raises(ValueError, match="0-255"):
            Color(256, 0, 0)
        with pytest.raises(ValueError, match="0-255"):
            Color(0, -1, 0)

    def test_frozen(self):
        c = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 5


class TestRect:

    def test_normalized_negative_extents(self):
        assert Rect(10, 8, -4, -3).normalized() == Rect(6, 5, 4, 3)

    def test_normalized_positive_unchanged(self):
        r = Rect(1, 2, 3, 4)
        assert r.normalized() == r

    def test_pixel_bounds_clamped(self):
        assert Rect(-2, -2, 5, 5).pixel_bounds(10, 10) == (0, 0, 3, 3)
        assert Rect(8, 8, 5, 5).pixel_bounds(10, 10) == (8, 8, 10, 10)

    def test_pixel_bounds_outside_is_empty(self):
        x1, y1, x2, y2 = Rect(20, 20, 5, 5).pixel_bounds(10, 10)
        assert x2 <= x1 or y2 <= y1
        x1, y1, x2, y2 = Rect(-20, -20, 5, 5).pixel_bounds(10, 10)
        assert x2 <= x1 or y2 <= y1

    def test_pixel_bounds_fractional(self):
        assert Rect(0.5, 1.2, 2, 2).pixel_bounds(10, 10) == (0, 1, 3, 4)

    def test_from_bounds_inclusive(self):
        assert Rect.from_bounds(2, 3, 4, 3) == Rect(2, 3, 3, 1)

    def test_area(self):
        assert Rect(0, 0, -4, 5).area == 20


class TestSelectionRegion:

    def test_defaults(self):
        r = SelectionRegion("a", 0, 0, 1, 1)
        assert r.is_data
        assert not r.count_full_area
        assert r.color == "#3b82f6"

    def test_from_rect(self):
        r = SelectionRegion.from_rect("w", Rect(1, 2, 3, 4), label="Wand", is_data=False)
        assert (r.x, r.y, r.width, r.height) == (1, 2, 3, 4)
        assert r.label == "Wand"
        assert not r.is_data

    def test_dict_round_trip(self):
        r = SelectionRegion("a", 1, 2, -3, 4, label="Grid", is_data=False, count_full_area=True)
        assert SelectionRegion.from_dict(r.to_dict()) == r

    def test_from_session_keys(self):
        r = SelectionRegion.from_dict({
            "id": "layer-1", "x": 5, "y": 6, "width": 7, "height": 8,
            "label": "Background", "color": "#f1f5f9",
            "isData": False, "countFullArea": True,
        })
        assert not r.is_data
        assert r.count_full_area
        assert r.rect == Rect(5, 6, 7, 8)


class TestLayerResult:

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError, match=">= 0"):
            _layer(total=-1)
        with pytest.raises(ValueError, match=">= 0"):
            _layer(ink=-5)


class TestAnalysisResult:

    @pytest.fixture
    def result(self):
        pixels = np.full((10, 10, 4), 255, dtype=np.uint8)
        pixels[:5, :, :3] = 0
        raster = RasterBuffer.from_array(pixels)
        return analyze(raster, [
            SelectionRegion("bars", 0, 0, 10, 3, label="Bars"),
            SelectionRegion("grid", 0, 3, 10, 7, label="Gridlines", is_data=False),
        ])

    def test_layer_access(self, result):
        assert [layer.id for layer in result.data_layers] == ["bars"]
        assert [layer.id for layer in result.non_data_layers] == ["grid"]
        assert result.get_layer("grid").ink_pixels == 20

    def test_missing_layer(self, result):
        with pytest.raises(KeyError, match="nope"):
            result.get_layer("nope")

    def test_json_round_trip(self, result):
        restored = AnalysisResult.from_json(result.to_json())
        assert restored == result

    def test_to_dict_is_plain(self, result):
        d = result.to_dict()
        assert d["version"] == "1.0"
        assert d["total_ink_pixels"] == 50
        assert d["layers"][0]["is_data"] is True
        json.dumps(d)

    def test_from_session_keys(self):
        data = {
            "layers": [{
                "id": "l1", "label": "Bars", "color": "#000", "isData": True,
                "totalPixels": 10, "inkPixels": 7,
            }],
            "totalImagePixels": 100,
            "totalInkPixels": 14,
            "totalDataPixels": 7,
            "totalNonDataPixels": 0,
            "densityRatio": 0.07,
            "efficiencyRatio": 0.5,
        }
        r = AnalysisResult.from_dict(data)
        assert r.layers[0].ink_pixels == 7
        assert r.efficiency_ratio == 0.5

    def test_negative_totals_rejected(self):
        with pytest.raises(ValueError, match="total_ink_pixels"):
            AnalysisResult(
                layers=(),
                total_image_pixels=10,
                total_ink_pixels=-1,
                total_data_pixels=0,
                total_non_data_pixels=0,
                density_ratio=0.0,
                efficiency_ratio=0.0,
            )


class TestFloatEncoding:

    def test_finite_unchanged(self):
        assert encode_float(0.25) == 0.25

    def test_non_finite_as_strings(self):
        assert encode_float(math.inf) == "inf"
        assert encode_float(-math.inf) == "-inf"
        assert encode_float(math.nan) == "nan"

    def test_decode(self):
        assert decode_float("inf") == math.inf
        assert decode_float(0.5) == 0.5
