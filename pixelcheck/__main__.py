from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from pixelcheck.core.arbitrary import TestBuffer
from pixelcheck.core.kinds import LUMA8, RGB8
from pixelcheck.core.types import PixelBuffer
from pixelcheck.io.config import load_settings
from pixelcheck.utils.bench import gray_bench_image, rgb_bench_image
from pixelcheck.utils.logger import Logger, stdout_logger


def _format_rows(buf: PixelBuffer) -> list[str]:
    out: list[str] = []
    for row in buf.rows():
        if buf.kind.channels == 1:
            out.append(" ".join(f"{p[0]:3d}" for p in row))
        else:
            out.append(" ".join(str(p) for p in row))
    return out


def _emit_buffer(log: Logger, title: str, buf: PixelBuffer) -> None:
    log.info(f"{title} {buf.width}x{buf.height}")
    for line in _format_rows(buf):
        log.info(line)


def main(argv: list[str] | None = None, log: Logger | None = None) -> None:
    p = argparse.ArgumentParser(prog="pixelcheck")
    sp = p.add_subparsers(dest="cmd", required=True)

    pb = sp.add_parser("bench")
    pb.add_argument("--width", type=int, required=True)
    pb.add_argument("--height", type=int, required=True)
    pb.add_argument("--rgb", action="store_true")

    ps = sp.add_parser("sample")
    ps.add_argument("--seed", type=int, default=None)
    ps.add_argument("--rgb", action="store_true")
    ps.add_argument("--shrink", action="store_true")
    ps.add_argument("--config", type=Path, default=None)

    a = p.parse_args(argv)
    if log is None:
        log = stdout_logger()

    if a.cmd == "bench":
        if a.rgb:
            buf = rgb_bench_image(a.width, a.height)
        else:
            buf = gray_bench_image(a.width, a.height)
        _emit_buffer(log, "bench", buf)
        return

    settings = load_settings(a.config)
    seed = settings.seed if a.seed is None else a.seed
    rng = np.random.default_rng(seed)
    kind = RGB8 if a.rgb else LUMA8
    tb = TestBuffer.arbitrary(kind, rng, settings.dims_modulus)
    _emit_buffer(log, f"sample seed={seed}", tb.image)
    if not (a.shrink or settings.verbose):
        return
    for i, cand in enumerate(tb.shrink()):
        _emit_buffer(log, f"shrink[{i}]", cand.image)


if __name__ == "__main__":
    main()
