from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Logger:
    emit: Callable[[str], None]
    prefix: str = ""

    def info(self, msg: str) -> None:
        self.emit(f"{self.prefix}{msg}")

    def failure(self, msg: str) -> None:
        self.emit(f"{self.prefix}FAIL {msg}")


def stdout_logger(prefix: str = "") -> Logger:
    return Logger(print, prefix)
