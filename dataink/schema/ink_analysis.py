# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
AnalysisResult v1.0: canonical schema for data-ink analysis.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same raster + regions → same result
- Caller-owned inputs: Regions are read, never mutated
- Serializable: JSON-ready plain records

Layering:
    Regions are supplied as an ordered sequence. Order encodes z-order:
    the last region is drawn on top and claims contested pixels first.
    Results are always reported back in input order, not z-order.

Ratios:
- density_ratio    = data ink pixels / total image pixels
- efficiency_ratio = data ink pixels / total ink pixels (whole image)
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Parsing Helpers
# =============================================================================


def _pick(data: dict, *keys: str, default=None):
    """Return the first key present in data (snake_case or camelCase)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def encode_float(value: float) -> float | str:
    """Encode a float for strict JSON; non-finite values become strings."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return value


def decode_float(value: float | str) -> float:
    """Inverse of encode_float."""
    return float(value)


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An opaque 8-bit RGB color.

    Used as the background reference for ink classification and as the
    seed color for region growing. Alpha is carried separately by the
    raster, never by Color.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are 8-bit."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        """Hex string like "#3B82F6"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Parse "#3B82F6" or "3B82F6"."""
        hex_color = hex_color.lstrip("#")
        if len(hex_color) != 6:
            raise ValueError(f"Expected 6 hex digits, got '{hex_color}'")
        return cls(
            r=int(hex_color[0:2], 16),
            g=int(hex_color[2:4], 16),
            b=int(hex_color[4:6], 16),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(r=int(data["r"]), g=int(data["g"]), b=int(data["b"]))


# Fallback background when the caller supplies none
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


# =============================================================================
# Geometry
# =============================================================================


@dataclass(frozen=True, slots=True)
class Rect:
    """
    Axis-aligned rectangle in pixel units.

    Width and height may be negative (the direction of a drag). Use
    normalized() before any geometry.
    """
    x: float
    y: float
    width: float
    height: float

    def normalized(self) -> Rect:
        """Resolve negative extents to top-left origin + positive extents."""
        x, y, w, h = self.x, self.y, self.width, self.height
        if w < 0:
            x, w = x + w, -w
        if h < 0:
            y, h = y + h, -h
        return Rect(x, y, w, h)

    def pixel_bounds(self, width: int, height: int) -> tuple[int, int, int, int]:
        """
        Clamp to a width x height buffer as half-open pixel bounds.

        Start is floored, end is ceiled. A rect entirely outside the
        buffer yields an empty span (x2 <= x1 or y2 <= y1).

        Returns:
            (x1, y1, x2, y2)
        """
        r = self.normalized()
        x1 = max(0, math.floor(r.x))
        y1 = max(0, math.floor(r.y))
        x2 = min(width, math.ceil(r.x + r.width))
        y2 = min(height, math.ceil(r.y + r.height))
        return x1, y1, max(x1, x2), max(y1, y2)

    @property
    def area(self) -> float:
        return abs(self.width * self.height)

    @classmethod
    def from_bounds(cls, min_x: int, min_y: int, max_x: int, max_y: int) -> Rect:
        """Build from inclusive pixel bounds."""
        return cls(min_x, min_y, max_x - min_x + 1, max_y - min_y + 1)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Rect:
        """Deserialize from dictionary."""
        return cls(x=data["x"], y=data["y"], width=data["width"], height=data["height"])


# =============================================================================
# Regions
# =============================================================================


@dataclass(frozen=True, slots=True)
class SelectionRegion:
    """
    A caller-defined, classified rectangle.

    Attributes:
        id: Stable, caller-assigned identifier
        x, y, width, height: Rectangle (width/height may be negative)
        label: Human label (e.g. "Bars", "Gridlines")
        color: Display color string, passed through untouched
        is_data: True if the region's ink represents data
        count_full_area: If True, every pixel in the region counts as ink
    """
    id: str
    x: float
    y: float
    width: float
    height: float
    label: str = ""
    color: str = "#3b82f6"
    is_data: bool = True
    count_full_area: bool = False

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @classmethod
    def from_rect(cls, id: str, rect: Rect, **kwargs) -> SelectionRegion:
        """Build a region from a Rect (e.g. a magic-wand result)."""
        return cls(id=id, x=rect.x, y=rect.y, width=rect.width, height=rect.height, **kwargs)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "label": self.label,
            "color": self.color,
            "is_data": self.is_data,
            "count_full_area": self.count_full_area,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SelectionRegion:
        """Deserialize from dictionary (accepts camelCase session keys)."""
        return cls(
            id=str(data["id"]),
            x=data["x"],
            y=data["y"],
            width=data["width"],
            height=data["height"],
            label=data.get("label", ""),
            color=data.get("color", "#3b82f6"),
            is_data=bool(_pick(data, "is_data", "isData", default=True)),
            count_full_area=bool(
                _pick(data, "count_full_area", "countFullArea", default=False)
            ),
        )


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True, slots=True)
class LayerResult:
    """
    Exclusive pixel statistics for one region.

    Attributes:
        id, label, color, is_data, count_full_area: Copied from the region
        total_pixels: Pixels exclusively attributed to this region
        ink_pixels: Ink pixels among total_pixels
    """
    id: str
    label: str
    color: str
    is_data: bool
    total_pixels: int
    ink_pixels: int
    count_full_area: bool = False

    def __post_init__(self) -> None:
        if self.total_pixels < 0 or self.ink_pixels < 0:
            raise ValueError(
                f"Pixel counts must be >= 0, got total={self.total_pixels}, "
                f"ink={self.ink_pixels}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "label": self.label,
            "color": self.color,
            "is_data": self.is_data,
            "total_pixels": self.total_pixels,
            "ink_pixels": self.ink_pixels,
            "count_full_area": self.count_full_area,
        }

    @classmethod
    def from_dict(cls, data: dict) -> LayerResult:
        """Deserialize from dictionary."""
        return cls(
            id=str(data["id"]),
            label=data.get("label", ""),
            color=data.get("color", ""),
            is_data=bool(_pick(data, "is_data", "isData")),
            total_pixels=int(_pick(data, "total_pixels", "totalPixels")),
            ink_pixels=int(_pick(data, "ink_pixels", "inkPixels")),
            count_full_area=bool(
                _pick(data, "count_full_area", "countFullArea", default=False)
            ),
        )


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """
    Complete data-ink analysis of one raster.

    total_ink_pixels is measured over the whole image, independent of the
    regions. Ink outside every region is therefore counted in the
    efficiency denominator but never in its numerator, and
    total_data_pixels + total_non_data_pixels need not equal
    total_ink_pixels.

    Attributes:
        layers: One LayerResult per input region, in input order
        total_image_pixels: width * height
        total_ink_pixels: Ink pixels in the entire image
        total_data_pixels: Sum of ink pixels over is_data layers
        total_non_data_pixels: Sum of ink pixels over the other layers
        density_ratio: total_data_pixels / total_image_pixels (0 if empty)
        efficiency_ratio: total_data_pixels / total_ink_pixels (0 if no ink)
    """
    layers: tuple[LayerResult, ...]
    total_image_pixels: int
    total_ink_pixels: int
    total_data_pixels: int
    total_non_data_pixels: int
    density_ratio: float
    efficiency_ratio: float
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate counts."""
        for name in (
            "total_image_pixels",
            "total_ink_pixels",
            "total_data_pixels",
            "total_non_data_pixels",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @property
    def data_layers(self) -> tuple[LayerResult, ...]:
        return tuple(layer for layer in self.layers if layer.is_data)

    @property
    def non_data_layers(self) -> tuple[LayerResult, ...]:
        return tuple(layer for layer in self.layers if not layer.is_data)

    def get_layer(self, layer_id: str) -> LayerResult:
        """Get a specific layer by ID."""
        for layer in self.layers:
            if layer.id == layer_id:
                return layer
        raise KeyError(f"No layer with ID '{layer_id}'")

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "version": self.version,
            "layers": [layer.to_dict() for layer in self.layers],
            "total_image_pixels": self.total_image_pixels,
            "total_ink_pixels": self.total_ink_pixels,
            "total_data_pixels": self.total_data_pixels,
            "total_non_data_pixels": self.total_non_data_pixels,
            "density_ratio": encode_float(self.density_ratio),
            "efficiency_ratio": encode_float(self.efficiency_ratio),
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_csv(self) -> str:
        """Serialize to the per-layer CSV projection."""
        # Import here to avoid circular imports
        from dataink.runtime.serializers.tabular import to_csv
        return to_csv(self)

    def to_report(self) -> str:
        """Serialize to a human-readable report."""
        from dataink.runtime.serializers.report import to_report
        return to_report(self)

    @classmethod
    def from_dict(cls, data: dict) -> AnalysisResult:
        """Deserialize from dictionary (accepts camelCase keys)."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            layers=tuple(LayerResult.from_dict(layer) for layer in data["layers"]),
            total_image_pixels=int(_pick(data, "total_image_pixels", "totalImagePixels")),
            total_ink_pixels=int(_pick(data, "total_ink_pixels", "totalInkPixels")),
            total_data_pixels=int(_pick(data, "total_data_pixels", "totalDataPixels")),
            total_non_data_pixels=int(
                _pick(data, "total_non_data_pixels", "totalNonDataPixels")
            ),
            density_ratio=decode_float(_pick(data, "density_ratio", "densityRatio")),
            efficiency_ratio=decode_float(
                _pick(data, "efficiency_ratio", "efficiencyRatio")
            ),
        )

    @classmethod
    def from_json(cls, json_str: str) -> AnalysisResult:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
