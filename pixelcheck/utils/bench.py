from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pixelcheck.core.kinds import LUMA8, RGB8
from pixelcheck.core.types import PixelBuffer


def _base_intensity(width: int, height: int) -> NDArray[np.uint8]:
    if width < 0 or height < 0:
        raise ValueError("width and height must be >= 0")
    ys = np.arange(height, dtype=np.int32) % 6
    xs = np.arange(width, dtype=np.int32) % 7
    yy, xx = np.meshgrid(ys, xs, indexing="ij")
    # at most 6 + 5, fits u8
    return (xx + yy).astype(np.uint8, copy=False)


def gray_bench_image(width: int, height: int) -> PixelBuffer:
    """Gray image for benchmarks.

    Neither noise nor similar to natural images, just a cheap way to get an
    image that is not constant.
    """
    r = _base_intensity(width, height)
    return PixelBuffer(LUMA8, r[:, :, None].copy())


def rgb_bench_image(width: int, height: int) -> PixelBuffer:
    r = _base_intensity(width, height)
    g = (np.uint8(255) - r).astype(np.uint8, copy=False)
    b = np.minimum(r, g)
    return PixelBuffer(RGB8, np.stack([r, g, b], axis=2).astype(np.uint8, copy=False))
