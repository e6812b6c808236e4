from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from pixelcheck.core.kinds import luma, rgb
from pixelcheck.core.types import PixelBuffer, PixelKind, ShapeMismatch


def _as_pixel(v: object) -> tuple[int, ...]:
    if isinstance(v, (tuple, list)):
        return tuple(int(c) for c in v)
    return (int(v),)  # type: ignore[call-overload]


def image_from_rows(
    rows: Sequence[Sequence[object]],
    dtype: type[np.integer] = np.uint8,
    kind: PixelKind | None = None,
) -> PixelBuffer:
    """Build a buffer from nested rows.

    Each row holds scalars (single channel) or channel tuples. Rows must all
    have the same length and pixels the same channel count.
    """
    if len(rows) == 0:
        k = kind if kind is not None else luma(dtype)
        return PixelBuffer.new(k, 0, 0)

    grid = [[_as_pixel(v) for v in row] for row in rows]
    width = len(grid[0])
    for i, row in enumerate(grid):
        if len(row) != width:
            raise ShapeMismatch(f"row {i} has {len(row)} pixels, row 0 has {width}")

    channels = len(grid[0][0]) if width > 0 else (kind.channels if kind else 1)
    for y, row in enumerate(grid):
        for x, p in enumerate(row):
            if len(p) != channels:
                raise ShapeMismatch(
                    f"pixel ({x}, {y}) has {len(p)} channels, expected {channels}"
                )

    if kind is None:
        if channels == 1:
            kind = luma(dtype)
        elif channels == 3:
            kind = rgb(dtype)
        else:
            kind = PixelKind(f"Channels{channels}", channels, dtype)
    elif kind.channels != channels:
        raise ShapeMismatch(f"rows have {channels} channels, {kind!r} expects {kind.channels}")

    flat = [c for row in grid for p in row for c in p]
    return PixelBuffer.from_raw(kind, width, len(grid), flat)


def gray_image(*rows: Sequence[int], dtype: type[np.integer] = np.uint8) -> PixelBuffer:
    return image_from_rows(rows, kind=luma(dtype))


def rgb_image(
    *rows: Sequence[Sequence[int]], dtype: type[np.integer] = np.uint8
) -> PixelBuffer:
    return image_from_rows(rows, kind=rgb(dtype))
