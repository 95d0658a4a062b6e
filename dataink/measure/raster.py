# Copyright (c) 2026 Dataink
# SPDX-License-Identifier: MIT

"""
Raster buffers.

A RasterBuffer wraps an (H, W, 4) uint8 RGBA array. Decoding image files
is the caller's job; this module only validates and freezes pixel data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

from dataink.schema import Color


@dataclass(frozen=True)
class RasterBuffer:
    """
    Immutable RGBA pixel buffer.

    Attributes:
        pixels: Read-only array of shape (H, W, 4), dtype uint8, row-major.
            A writable array passed in is copied and frozen.
    """
    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError(
                f"Expected (H, W, 4) array, got shape {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {self.pixels.dtype}")
        if self.pixels.flags.writeable:
            frozen = self.pixels.copy()
            frozen.setflags(write=False)
            object.__setattr__(self, "pixels", frozen)

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def size(self) -> int:
        """Total pixel count."""
        return self.width * self.height

    @property
    def rgb(self) -> NDArray[np.uint8]:
        """(H, W, 3) view of the color channels."""
        return self.pixels[:, :, :3]

    @property
    def alpha(self) -> NDArray[np.uint8]:
        """(H, W) view of the alpha channel."""
        return self.pixels[:, :, 3]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def color_at(self, x: int, y: int) -> Color:
        """
        Sample the color of one pixel (eyedropper).

        Typically used by callers to pick the background color.

        Raises:
            IndexError: If (x, y) is outside the buffer
        """
        if not self.contains(x, y):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer"
            )
        r, g, b = self.pixels[y, x, :3]
        return Color(int(r), int(g), int(b))

    def alpha_at(self, x: int, y: int) -> int:
        return int(self.pixels[y, x, 3])

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> RasterBuffer:
        """
        Wrap a NumPy array.

        Args:
            array: (H, W, 4) RGBA or (H, W, 3) RGB uint8 array. RGB input
                is treated as fully opaque.

        Returns:
            RasterBuffer over a read-only copy of the data
        """
        if not isinstance(array, np.ndarray):
            raise TypeError(f"Expected numpy array, got {type(array)}")

        if array.ndim != 3 or array.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {array.shape}"
            )

        if array.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {array.dtype}")

        if array.shape[2] == 3:
            alpha = np.full(array.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([array, alpha], axis=2)
        else:
            pixels = array.copy()

        pixels.setflags(write=False)
        return cls(pixels)

    @classmethod
    def from_bytes(
        cls,
        width: int,
        height: int,
        data: Union[bytes, bytearray, memoryview],
    ) -> RasterBuffer:
        """
        Wrap a flat row-major RGBA byte sequence (e.g. canvas ImageData).

        Raises:
            ValueError: If len(data) != width * height * 4
        """
        if width < 0 or height < 0:
            raise ValueError(f"Dimensions must be >= 0, got {width}x{height}")
        expected = width * height * 4
        if len(data) != expected:
            raise ValueError(
                f"Expected {expected} bytes for {width}x{height} RGBA, got {len(data)}"
            )
        pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4)
        return cls.from_array(pixels)
