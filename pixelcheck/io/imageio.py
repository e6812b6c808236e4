from __future__ import annotations

import numpy as np
from PIL import Image

from pixelcheck.core.kinds import LUMA8, LUMA16, RGB8
from pixelcheck.core.types import PixelBuffer


def from_pil(img: Image.Image) -> PixelBuffer:
    arr = np.asarray(img)
    if img.mode == "L":
        return PixelBuffer(LUMA8, arr.astype(np.uint8)[:, :, None].copy())
    if img.mode == "I;16":
        return PixelBuffer(LUMA16, arr.astype(np.uint16)[:, :, None].copy())
    if img.mode == "RGB":
        return PixelBuffer(RGB8, arr.astype(np.uint8).copy())
    raise ValueError(f"unsupported image mode: {img.mode}")


def to_pil(buf: PixelBuffer) -> Image.Image:
    if buf.kind == LUMA8:
        return Image.fromarray(np.ascontiguousarray(buf.data[:, :, 0]))
    if buf.kind == RGB8:
        return Image.fromarray(np.ascontiguousarray(buf.data))
    raise ValueError(f"unsupported pixel kind: {buf.kind!r}")
