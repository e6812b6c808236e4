from __future__ import annotations

from pixelcheck.core.arbitrary import (
    TestBuffer,
    arbitrary_buffer,
    gray_images,
    pixel_buffers,
    rgb_images,
    small_image_dimensions,
)
from pixelcheck.core.build import gray_image, image_from_rows, rgb_image
from pixelcheck.core.diff import (
    DimensionMismatch,
    PixelMismatch,
    assert_dimensions_match,
    assert_pixels_eq,
    assert_pixels_eq_within,
    describe_pixel_diffs,
    dimensions_match,
    equal_within_tolerance,
    pixel_diff_summary,
    pixel_diffs,
)
from pixelcheck.core.kinds import LUMA8, RGB8
from pixelcheck.core.shrink import shrink
from pixelcheck.core.types import (
    ChannelCountMismatch,
    PixelBuffer,
    PixelKind,
    ShapeMismatch,
)
from pixelcheck.utils.bench import gray_bench_image, rgb_bench_image

__all__ = [
    "ChannelCountMismatch",
    "DimensionMismatch",
    "LUMA8",
    "PixelBuffer",
    "PixelKind",
    "PixelMismatch",
    "RGB8",
    "ShapeMismatch",
    "TestBuffer",
    "arbitrary_buffer",
    "assert_dimensions_match",
    "assert_pixels_eq",
    "assert_pixels_eq_within",
    "describe_pixel_diffs",
    "dimensions_match",
    "equal_within_tolerance",
    "gray_bench_image",
    "gray_image",
    "gray_images",
    "image_from_rows",
    "pixel_buffers",
    "pixel_diff_summary",
    "pixel_diffs",
    "rgb_bench_image",
    "rgb_image",
    "rgb_images",
    "shrink",
    "small_image_dimensions",
]
