from __future__ import annotations

from collections.abc import Iterator

from pixelcheck.core.types import PixelBuffer


def copy_sub(buf: PixelBuffer, x: int, y: int, width: int, height: int) -> PixelBuffer:
    if x < 0 or y < 0 or width < 0 or height < 0:
        raise ValueError("sub-rectangle must have non-negative origin and size")
    if x + width > buf.width or y + height > buf.height:
        raise ValueError(
            f"sub-rectangle {width}x{height}+{x}+{y} exceeds {buf.width}x{buf.height} buffer"
        )
    out = PixelBuffer.new(buf.kind, width, height)
    out.data[:, :, :] = buf.data[y : y + height, x : x + width]
    return out


def shrink(buf: PixelBuffer) -> Iterator[PixelBuffer]:
    """Smaller candidates for a failing buffer, one row or column shorter.

    Order: keep columns [0, w-1), keep columns [1, w), keep rows [0, h-1),
    keep rows [1, h). A 0x0 buffer has no candidates.
    """
    w = buf.width
    h = buf.height
    if w > 0:
        yield copy_sub(buf, 0, 0, w - 1, h)
        yield copy_sub(buf, 1, 0, w - 1, h)
    if h > 0:
        yield copy_sub(buf, 0, 0, w, h - 1)
        yield copy_sub(buf, 0, 1, w, h - 1)
