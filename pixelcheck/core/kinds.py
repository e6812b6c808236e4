from __future__ import annotations

from typing import Final

import numpy as np

from pixelcheck.core.types import PixelKind


def luma(dtype: type[np.integer] = np.uint8) -> PixelKind:
    return PixelKind("Luma", 1, dtype)


def rgb(dtype: type[np.integer] = np.uint8) -> PixelKind:
    return PixelKind("Rgb", 3, dtype)


LUMA8: Final[PixelKind] = luma(np.uint8)
LUMA16: Final[PixelKind] = luma(np.uint16)
LUMA32: Final[PixelKind] = luma(np.uint32)
LUMA_I16: Final[PixelKind] = luma(np.int16)
LUMA_I32: Final[PixelKind] = luma(np.int32)

RGB8: Final[PixelKind] = rgb(np.uint8)
RGB16: Final[PixelKind] = rgb(np.uint16)
