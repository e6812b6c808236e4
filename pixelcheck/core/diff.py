from __future__ import annotations

from collections.abc import Callable, Iterable
from itertools import islice
from typing import Final

from pixelcheck.core.types import (
    ChannelCountMismatch,
    Located,
    PixelBuffer,
    PixelDiff,
    PixelKind,
)
from pixelcheck.utils.logger import Logger

DEFAULT_DIFF_LIMIT: Final[int] = 5

IsDiff = Callable[[Located, Located], bool]


class DimensionMismatch(AssertionError):
    def __init__(self, actual: tuple[int, int], expected: tuple[int, int]) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"dimensions do not match. actual: {actual}, expected: {expected}"
        )

    def __reduce__(self) -> tuple[type[DimensionMismatch], tuple[tuple[int, int], tuple[int, int]]]:
        return type(self), (self.actual, self.expected)


class PixelMismatch(AssertionError):
    def __init__(self, diffs: list[PixelDiff], limit: int = DEFAULT_DIFF_LIMIT) -> None:
        self.diffs = diffs
        self.limit = limit
        super().__init__(describe_pixel_diffs(diffs, limit))

    def __reduce__(self) -> tuple[type[PixelMismatch], tuple[list[PixelDiff], int]]:
        return type(self), (self.diffs, self.limit)


def not_equal(kind: PixelKind) -> IsDiff:
    def is_diff(p: Located, q: Located) -> bool:
        return not kind.pixels_equal(p[2], q[2])

    return is_diff


def dimensions_match(a: PixelBuffer, b: PixelBuffer) -> bool:
    return a.dimensions == b.dimensions


def pixel_diffs(left: PixelBuffer, right: PixelBuffer, is_diff: IsDiff) -> list[PixelDiff]:
    """Lists pixels that differ between left and right, in row-major order.

    Empty buffers are equal to anything. Dimensions are not checked here.
    """
    if left.is_empty() or right.is_empty():
        return []
    return [(p, q) for p, q in zip(left.pixels(), right.pixels()) if is_diff(p, q)]


def describe_pixel_diffs(diffs: Iterable[PixelDiff], limit: int = DEFAULT_DIFF_LIMIT) -> str:
    err = "pixels do not match. "
    err += "".join(
        f"\nactual: {d[0]}, expected {d[1]} " for d in islice(diffs, max(limit, 0))
    )
    return err


def within_tolerance(tol: int) -> IsDiff:
    if tol < 0:
        raise ValueError("tolerance must be >= 0")

    def is_diff(p: Located, q: Located) -> bool:
        cp = p[2]
        cq = q[2]
        if len(cp) != len(cq):
            raise ChannelCountMismatch(
                f"pixels have different channel counts. actual: {len(cp)}, expected: {len(cq)}"
            )
        # python ints, so unsigned subpixels cannot wrap
        return any(abs(int(sp) - int(sq)) > tol for sp, sq in zip(cp, cq))

    return is_diff


def equal_within_tolerance(a: PixelBuffer, b: PixelBuffer, tol: int) -> list[PixelDiff]:
    return pixel_diffs(a, b, within_tolerance(tol))


def significant_pixel_diff_summary(
    actual: PixelBuffer,
    expected: PixelBuffer,
    is_significant_diff: IsDiff,
    limit: int = DEFAULT_DIFF_LIMIT,
) -> str | None:
    if not dimensions_match(actual, expected):
        return str(DimensionMismatch(actual.dimensions, expected.dimensions))
    diffs = pixel_diffs(actual, expected, is_significant_diff)
    if not diffs:
        return None
    return describe_pixel_diffs(diffs, limit)


def pixel_diff_summary(
    actual: PixelBuffer, expected: PixelBuffer, limit: int = DEFAULT_DIFF_LIMIT
) -> str | None:
    return significant_pixel_diff_summary(actual, expected, not_equal(actual.kind), limit)


def check_dimensions_match(
    actual: PixelBuffer, expected: PixelBuffer
) -> DimensionMismatch | None:
    if dimensions_match(actual, expected):
        return None
    return DimensionMismatch(actual.dimensions, expected.dimensions)


def check_pixels_eq(
    actual: PixelBuffer,
    expected: PixelBuffer,
    is_diff: IsDiff | None = None,
    limit: int = DEFAULT_DIFF_LIMIT,
) -> DimensionMismatch | PixelMismatch | None:
    dim = check_dimensions_match(actual, expected)
    if dim is not None:
        return dim
    if is_diff is None:
        is_diff = not_equal(actual.kind)
    diffs = pixel_diffs(actual, expected, is_diff)
    if diffs:
        return PixelMismatch(diffs, limit)
    return None


def check_pixels_eq_within(
    actual: PixelBuffer,
    expected: PixelBuffer,
    channel_tolerance: int,
    limit: int = DEFAULT_DIFF_LIMIT,
) -> DimensionMismatch | PixelMismatch | None:
    return check_pixels_eq(actual, expected, within_tolerance(channel_tolerance), limit)


def _raise(failure: AssertionError | None, log: Logger | None) -> None:
    if failure is None:
        return
    if log is not None:
        log.failure(str(failure))
    raise failure


def assert_dimensions_match(
    actual: PixelBuffer, expected: PixelBuffer, log: Logger | None = None
) -> None:
    _raise(check_dimensions_match(actual, expected), log)


def assert_pixels_eq(
    actual: PixelBuffer,
    expected: PixelBuffer,
    limit: int = DEFAULT_DIFF_LIMIT,
    log: Logger | None = None,
) -> None:
    _raise(check_pixels_eq(actual, expected, limit=limit), log)


def assert_pixels_eq_within(
    actual: PixelBuffer,
    expected: PixelBuffer,
    channel_tolerance: int,
    limit: int = DEFAULT_DIFF_LIMIT,
    log: Logger | None = None,
) -> None:
    _raise(check_pixels_eq_within(actual, expected, channel_tolerance, limit), log)
