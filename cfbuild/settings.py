"""Delegate and console settings; the manifest binding itself lives in :mod:`cfbuild.environment`."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .console import Console

DELEGATE_NAME = "build.sh"
DELEGATE_INTERPRETER = "bash"

LOG_ENV = "CFBUILD_LOG"


@dataclass(frozen=True, slots=True)
class WrapperSettings:
    delegate: str = DELEGATE_NAME
    interpreter: str | None = DELEGATE_INTERPRETER
    log_level: str = "none"


def load_settings(environ: Mapping[str, str]) -> WrapperSettings:
    """Read ``CFBUILD_LOG`` from ``environ``.

    The variable only changes what the wrapper prints on stderr. Unknown levels
    fall back to ``none`` rather than stopping the handoff.
    """
    level = environ.get(LOG_ENV, "").strip().lower()
    if level not in Console.LEVELS:
        level = "none"
    return WrapperSettings(log_level=level)


__all__ = [
    "DELEGATE_INTERPRETER",
    "DELEGATE_NAME",
    "LOG_ENV",
    "WrapperSettings",
    "load_settings",
]
