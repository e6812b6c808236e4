from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from pixelcheck.core.types import DIMS_MODULUS


def load_yaml(path: Path) -> dict[str, object]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config root must be a mapping: {path}")
    return data


def get_section(cfg: dict[str, object], name: str) -> dict[str, object]:
    v = cfg.get(name)
    if v is None:
        return {}
    if not isinstance(v, dict):
        raise ValueError("config section must be a mapping")
    return v


def _lookup(cfg: dict[str, object], key: str, alt: str | None) -> object:
    v = cfg.get(key)
    if v is None and alt is not None:
        v = cfg.get(alt)
    return v


def pick_int(cfg: dict[str, object], key: str, alt: str | None, default: int) -> int:
    v = _lookup(cfg, key, alt)
    if v is None:
        return default
    if isinstance(v, bool):
        raise ValueError(f"invalid int for {key!r}: {v!r}")
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    raise ValueError(f"invalid int for {key!r}: {v!r}")


def pick_bool(cfg: dict[str, object], key: str, alt: str | None, default: bool) -> bool:
    v = _lookup(cfg, key, alt)
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    if type(v) is int and v in (0, 1):
        return bool(v)
    raise ValueError(f"invalid bool for {key!r}: {v!r}")


@dataclass(frozen=True, slots=True)
class CheckSettings:
    dims_modulus: int = DIMS_MODULUS
    seed: int = 0
    verbose: bool = False


def settings_from_mapping(cfg: dict[str, object]) -> CheckSettings:
    sec = get_section(cfg, "pixelcheck")
    modulus = pick_int(sec, "dims_modulus", "dims_mod", DIMS_MODULUS)
    if modulus <= 0:
        raise ValueError("dims_modulus must be > 0")
    return CheckSettings(
        dims_modulus=modulus,
        seed=pick_int(sec, "seed", None, 0),
        verbose=pick_bool(sec, "verbose", None, False),
    )


def load_settings(path: Path | None) -> CheckSettings:
    if path is None:
        return CheckSettings()
    return settings_from_mapping(load_yaml(path))
