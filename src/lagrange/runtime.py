from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .cubic import DEFAULT_ITERATIONS, MODES
from .errors import InvalidArgumentError


@dataclass(frozen=True)
class SolverSettings:
    iterations: int = DEFAULT_ITERATIONS
    mode: str = "sequential"
    tol: Optional[float] = None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {value}")
    return value


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be a float, got {raw!r}") from exc


@lru_cache(maxsize=1)
def _settings_from_env() -> SolverSettings:
    """Read LAGRANGE_DK_* once per process; later edits need ``cache_clear()``."""
    mode = os.environ.get("LAGRANGE_DK_MODE", "sequential").strip() or "sequential"
    if mode not in MODES:
        raise InvalidArgumentError(f"LAGRANGE_DK_MODE must be one of {MODES}, got {mode!r}")
    return SolverSettings(
        iterations=_env_int("LAGRANGE_DK_ITERATIONS", DEFAULT_ITERATIONS),
        mode=mode,
        tol=_env_float("LAGRANGE_DK_TOL"),
    )


def resolve_settings(
    iterations: Optional[int] = None,
    mode: Optional[str] = None,
    tol: Optional[float] = None,
) -> SolverSettings:
    """Explicit arguments win over the environment, which wins over defaults."""
    base = _settings_from_env()
    return SolverSettings(
        iterations=base.iterations if iterations is None else int(iterations),
        mode=base.mode if mode is None else mode,
        tol=base.tol if tol is None else float(tol),
    )
