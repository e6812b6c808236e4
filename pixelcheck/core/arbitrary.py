"""Random pixel buffers for property-based tests.

Generation is written against a minimal random source (``integers`` with
numpy ``Generator`` semantics), so the same code runs under a seeded numpy
generator or inside a Hypothesis strategy, where every choice is recorded
and can be shrunk by Hypothesis itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
from hypothesis import strategies as st

from pixelcheck.core.kinds import LUMA8, RGB8
from pixelcheck.core.shrink import shrink
from pixelcheck.core.types import DIMS_MODULUS, PixelBuffer, PixelKind, RandomSource


def small_image_dimensions(rng: RandomSource, modulus: int = DIMS_MODULUS) -> tuple[int, int]:
    if modulus <= 0:
        raise ValueError("modulus must be > 0")
    dims = rng.integers(0, 256, size=2, dtype=np.int64)
    return int(dims[0]) % modulus, int(dims[1]) % modulus


def arbitrary_buffer(
    kind: PixelKind, rng: RandomSource, modulus: int = DIMS_MODULUS
) -> PixelBuffer:
    width, height = small_image_dimensions(rng, modulus)
    buf = PixelBuffer.new(kind, width, height)
    for y in range(height):
        for x in range(width):
            buf.put_pixel(x, y, kind.random_pixel(rng))
    return buf


@dataclass(frozen=True, slots=True)
class TestBuffer:
    """A pixel buffer with quickcheck-style ``arbitrary`` and ``shrink``."""

    __test__ = False

    image: PixelBuffer

    @classmethod
    def arbitrary(
        cls, kind: PixelKind, rng: RandomSource, modulus: int = DIMS_MODULUS
    ) -> TestBuffer:
        return cls(arbitrary_buffer(kind, rng, modulus))

    def shrink(self) -> Iterator[TestBuffer]:
        return (TestBuffer(b) for b in shrink(self.image))

    def __repr__(self) -> str:
        return (
            f"width: {self.image.width}, height: {self.image.height}, "
            f"data: {list(self.image.pixels())}"
        )


def gray_test_image(rng: RandomSource) -> TestBuffer:
    return TestBuffer.arbitrary(LUMA8, rng)


def rgb_test_image(rng: RandomSource) -> TestBuffer:
    return TestBuffer.arbitrary(RGB8, rng)


class DrawSource:
    """Random source backed by a Hypothesis ``draw`` function."""

    def __init__(self, draw: Callable[[st.SearchStrategy[Any]], Any]) -> None:
        self._draw = draw

    def integers(
        self, low: int, high: int, size: int | None = None, dtype: Any = np.int64
    ) -> Any:
        s = st.integers(min_value=int(low), max_value=int(high) - 1)
        if size is None:
            return self._draw(s)
        return [self._draw(s) for _ in range(int(size))]


@st.composite
def pixel_buffers(
    draw: Callable[[st.SearchStrategy[Any]], Any],
    kind: PixelKind = LUMA8,
    modulus: int = DIMS_MODULUS,
) -> PixelBuffer:
    """Hypothesis strategy for small buffers of ``kind``.

    Failing examples are minimised by Hypothesis over its recorded draws
    (smaller dimension bytes, smaller subpixels), not by ``shrink``. Only
    ``TestBuffer.shrink`` walks the fixed order: keep columns [0, w-1),
    keep columns [1, w), keep rows [0, h-1), keep rows [1, h). The two paths
    can settle on different minimal buffers for the same failure.
    """
    return arbitrary_buffer(kind, DrawSource(draw), modulus)


def gray_images() -> st.SearchStrategy[PixelBuffer]:
    return pixel_buffers(LUMA8)


def rgb_images() -> st.SearchStrategy[PixelBuffer]:
    return pixel_buffers(RGB8)
