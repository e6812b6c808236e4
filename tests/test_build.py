from __future__ import annotations

import numpy as np
import pytest

from pixelcheck.core.build import gray_image, image_from_rows, rgb_image
from pixelcheck.core.diff import assert_pixels_eq
from pixelcheck.core.kinds import LUMA8, LUMA16, LUMA32, LUMA_I16, LUMA_I32, RGB8
from pixelcheck.core.types import PixelBuffer, ShapeMismatch


def test_gray_image_empty() -> None:
    image = gray_image()
    assert image.dimensions == (0, 0)
    assert image.kind == LUMA8


def test_gray_image_single_element() -> None:
    image = gray_image([1])
    expected = PixelBuffer.from_raw(LUMA8, 1, 1, [1])
    assert_pixels_eq(image, expected)


def test_gray_image_single_row() -> None:
    image = gray_image([1, 2, 3])
    expected = PixelBuffer.from_raw(LUMA8, 3, 1, [1, 2, 3])
    assert_pixels_eq(image, expected)
    assert image == expected


def test_gray_image_multiple_rows_and_columns() -> None:
    image = gray_image([1, 2, 3], [4, 5, 6])
    expected = PixelBuffer.from_raw(LUMA8, 3, 2, [1, 2, 3, 4, 5, 6])
    assert_pixels_eq(image, expected)
    assert image.get_pixel(2, 1) == (6,)


@pytest.mark.parametrize(
    ("dtype", "kind"),
    [
        (np.uint16, LUMA16),
        (np.uint32, LUMA32),
        (np.int16, LUMA_I16),
        (np.int32, LUMA_I32),
    ],
)
def test_gray_image_other_subpixel_types(dtype, kind) -> None:
    image = gray_image([1, 2, 3], [4, 5, 6], dtype=dtype)
    assert image.kind == kind
    assert image.data.dtype == np.dtype(dtype)
    assert image == PixelBuffer.from_raw(kind, 3, 2, [1, 2, 3, 4, 5, 6])


def test_gray_image_signed_values() -> None:
    image = gray_image([-5, 7], dtype=np.int16)
    assert image.get_pixel(0, 0) == (-5,)


def test_rgb_image() -> None:
    image = rgb_image([(1, 2, 3), (4, 5, 6)])
    assert image.kind == RGB8
    assert image.dimensions == (2, 1)
    assert image.get_pixel(1, 0) == (4, 5, 6)


def test_image_from_rows_infers_rgb() -> None:
    image = image_from_rows([[(1, 2, 3)], [(4, 5, 6)]])
    assert image.kind == RGB8
    assert image.dimensions == (1, 2)


def test_ragged_rows_rejected() -> None:
    with pytest.raises(ShapeMismatch):
        gray_image([1, 2, 3], [4, 5])


def test_mixed_channel_counts_rejected() -> None:
    with pytest.raises(ShapeMismatch):
        image_from_rows([[(1, 2, 3), (4, 5)]])


def test_kind_channel_mismatch_rejected() -> None:
    with pytest.raises(ShapeMismatch):
        rgb_image([1, 2])


def test_out_of_range_value_rejected() -> None:
    with pytest.raises(ValueError):
        gray_image([256])
    with pytest.raises(ValueError):
        gray_image([-1])


def test_from_raw_length_mismatch() -> None:
    with pytest.raises(ShapeMismatch):
        PixelBuffer.from_raw(LUMA8, 2, 2, [1, 2, 3])


def test_buffer_validates_channels() -> None:
    with pytest.raises(ShapeMismatch):
        PixelBuffer(RGB8, np.zeros((2, 2, 1), dtype=np.uint8))
    with pytest.raises(ShapeMismatch):
        PixelBuffer(LUMA8, np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(ShapeMismatch):
        PixelBuffer(LUMA8, np.zeros((2, 2, 1), dtype=np.uint16))


def test_pixels_enumerates_row_major() -> None:
    image = gray_image([1, 2], [3, 4])
    assert list(image.pixels()) == [
        (0, 0, (1,)),
        (1, 0, (2,)),
        (0, 1, (3,)),
        (1, 1, (4,)),
    ]


def test_get_pixel_out_of_bounds() -> None:
    image = gray_image([1, 2])
    with pytest.raises(IndexError):
        image.get_pixel(2, 0)


def test_copy_does_not_alias() -> None:
    image = gray_image([1, 2])
    c = image.copy()
    c.put_pixel(0, 0, (9,))
    assert image.get_pixel(0, 0) == (1,)
