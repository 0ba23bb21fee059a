"""Environment-variable configuration.

Variables are read at call time so tests and callers can change them
without reimporting:

  - CACHEMATRIX_TOL  default tolerance for :func:`cachematrix.invert`
"""

from __future__ import annotations

import os

TOL_ENV = "CACHEMATRIX_TOL"


def _parse_float_env(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid {name}={raw!r}; expected a number.") from exc


def default_tol() -> float | None:
    return _parse_float_env(TOL_ENV)
