from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Final, Protocol

import numpy as np
from numpy.typing import NDArray

DIMS_MODULUS: Final[int] = 10

Pixel = tuple[int, ...]
Located = tuple[int, int, Pixel]
PixelDiff = tuple[Located, Located]


class ShapeMismatch(ValueError):
    pass


class ChannelCountMismatch(TypeError):
    """Two pixels with different channel counts were compared.

    This is a caller error rather than a failed comparison, so it is not an
    ``AssertionError``.
    """


class RandomSource(Protocol):
    def integers(
        self, low: int, high: int, size: int | None = None, dtype: Any = ...
    ) -> Any: ...


SUBPIXEL_DTYPES: tuple[type[np.integer], ...] = (
    np.uint8,
    np.uint16,
    np.uint32,
    np.int16,
    np.int32,
)


@dataclass(frozen=True, slots=True)
class PixelKind:
    name: str
    channels: int
    dtype: type[np.integer]

    def __post_init__(self) -> None:
        if self.channels <= 0:
            raise ValueError("channels must be > 0")
        if np.dtype(self.dtype).type not in SUBPIXEL_DTYPES:
            raise ValueError(f"unsupported subpixel dtype: {np.dtype(self.dtype)}")

    def channel_count(self) -> int:
        return self.channels

    def bounds(self) -> tuple[int, int]:
        info = np.iinfo(self.dtype)
        return int(info.min), int(info.max)

    def random_pixel(self, rng: RandomSource) -> Pixel:
        lo, hi = self.bounds()
        vals = rng.integers(lo, hi + 1, size=self.channels, dtype=np.int64)
        return tuple(int(v) for v in vals)

    def pixels_equal(self, p: Sequence[int], q: Sequence[int]) -> bool:
        return tuple(p) == tuple(q)

    def __repr__(self) -> str:
        return f"{self.name}<{np.dtype(self.dtype).name}>"


@dataclass(frozen=True, slots=True, eq=False)
class PixelBuffer:
    """Rectangular grid of pixels of one kind, stored row-major.

    ``data`` has shape ``(height, width, channels)``. A buffer with zero width
    or zero height is empty and holds no pixels.
    """

    kind: PixelKind
    data: NDArray[np.integer]

    def __post_init__(self) -> None:
        d = self.data
        if d.ndim != 3:
            raise ShapeMismatch("pixel data must be HxWxC")
        if d.shape[2] != self.kind.channels:
            raise ShapeMismatch(
                f"pixel data has {d.shape[2]} channels, {self.kind!r} expects {self.kind.channels}"
            )
        if d.dtype != np.dtype(self.kind.dtype):
            raise ShapeMismatch(f"pixel data dtype {d.dtype} does not match {self.kind!r}")

    @classmethod
    def new(cls, kind: PixelKind, width: int, height: int) -> PixelBuffer:
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        return cls(kind, np.zeros((height, width, kind.channels), dtype=kind.dtype))

    @classmethod
    def from_raw(
        cls, kind: PixelKind, width: int, height: int, data: Sequence[int]
    ) -> PixelBuffer:
        if width < 0 or height < 0:
            raise ValueError("width and height must be >= 0")
        flat = np.asarray(data, dtype=np.int64).ravel()
        if flat.size != width * height * kind.channels:
            raise ShapeMismatch(
                f"expected {width * height * kind.channels} subpixels for "
                f"{width}x{height} {kind!r}, got {flat.size}"
            )
        lo, hi = kind.bounds()
        if flat.size and (flat.min() < lo or flat.max() > hi):
            raise ValueError(f"subpixel values out of range for {kind!r}")
        return cls(kind, flat.astype(kind.dtype).reshape(height, width, kind.channels))

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def get_pixel(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return tuple(int(v) for v in self.data[y, x])

    def put_pixel(self, x: int, y: int, pixel: Sequence[int]) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        if len(pixel) != self.kind.channels:
            raise ChannelCountMismatch(
                f"pixel has {len(pixel)} channels, {self.kind!r} expects {self.kind.channels}"
            )
        self.data[y, x] = pixel

    def pixels(self) -> Iterator[Located]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get_pixel(x, y)

    def copy(self) -> PixelBuffer:
        return PixelBuffer(self.kind, self.data.copy())

    def rows(self) -> list[list[Pixel]]:
        return [
            [self.get_pixel(x, y) for x in range(self.width)] for y in range(self.height)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.data.shape == other.data.shape
            and bool(np.array_equal(self.data, other.data))
        )

    def __repr__(self) -> str:
        return f"PixelBuffer({self.kind!r}, {self.width}x{self.height})"
