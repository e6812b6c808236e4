from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import pytest

from pixelcheck.io.config import get_section, load_yaml, pick_int


@dataclass(frozen=True, slots=True)
class BenchSettings:
    size: int
    rounds: int
    warmup_rounds: int
    seed: int


def pytest_addoption(parser: pytest.Parser) -> None:
    g = parser.getgroup("bench")
    g.addoption(
        "--bench-config",
        action="store",
        default=None,
        help="YAML file with a 'bench' section overriding the options below.",
    )
    g.addoption("--bench-size", action="store", type=int, default=256)
    g.addoption("--bench-rounds", action="store", type=int, default=10)
    g.addoption("--bench-warmup-rounds", action="store", type=int, default=3)
    g.addoption("--bench-seed", action="store", type=int, default=0)
    g.addoption("--bench-out", action="store", type=str, default="benchmarks/out")
    g.addoption("--bench-no-save", action="store_true", default=False)


def pytest_configure(config: pytest.Config) -> None:
    if bool(getattr(config.option, "bench_no_save", False)):
        return

    if not hasattr(config.option, "benchmark_json"):
        return
    if getattr(config.option, "benchmark_json", None) is not None:
        return

    out_dir = Path(str(getattr(config.option, "bench_out", "benchmarks/out"))).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    config.option.benchmark_json = (out_dir / f"bench_{ts}.json").open("wb")


@pytest.fixture(scope="session")
def bench_settings(pytestconfig: pytest.Config) -> BenchSettings:
    opt = pytestconfig.option
    cfg: dict[str, object] = {}
    path = getattr(opt, "bench_config", None)
    if path:
        cfg = get_section(load_yaml(Path(path)), "bench")
    return BenchSettings(
        size=pick_int(cfg, "size", None, int(opt.bench_size)),
        rounds=pick_int(cfg, "rounds", None, int(opt.bench_rounds)),
        warmup_rounds=pick_int(cfg, "warmup_rounds", None, int(opt.bench_warmup_rounds)),
        seed=pick_int(cfg, "seed", None, int(opt.bench_seed)),
    )
