"""Matrix inversion primitive used by the cache."""

from __future__ import annotations

from typing import Any

import numpy as np

from ._env import TOL_ENV, default_tol

# Machine epsilon for doubles.
DEFAULT_TOL = float(np.finfo(np.float64).eps)


def to_numpy(x: Any) -> np.ndarray:
    """Convert a matrix-like value to a NumPy array, without copying ndarrays.

    Objects with a ``to_numpy()`` method (mlx arrays, pandas frames) go
    through it; everything else goes through ``np.asarray``.
    """
    if isinstance(x, np.ndarray):
        return x
    if hasattr(x, "to_numpy"):
        return np.asarray(x.to_numpy())
    return np.asarray(x)


def require(cond: bool, msg: str) -> None:
    if not cond:
        raise ValueError(msg)


def _rcond(a: np.ndarray, inverse: np.ndarray) -> float:
    """Reciprocal 1-norm condition number from an already computed inverse."""
    with np.errstate(all="ignore"):
        return float(1.0 / (np.linalg.norm(a, 1) * np.linalg.norm(inverse, 1)))


def invert(matrix: Any, *, tol: float | None = None) -> np.ndarray:
    """Return the inverse of a square matrix.

    Raises ``numpy.linalg.LinAlgError`` when the input is not a square 2-D
    matrix, is exactly singular, or is computationally singular: its
    reciprocal 1-norm condition number is below ``tol``.

    ``tol`` defaults to ``CACHEMATRIX_TOL`` from the environment, then to
    machine epsilon. ``tol=0`` disables the conditioning check.
    """
    a = to_numpy(matrix)
    if a.ndim != 2:
        raise np.linalg.LinAlgError(
            f"expected a 2-D matrix, got array with shape {a.shape}"
        )
    if a.shape[0] != a.shape[1]:
        raise np.linalg.LinAlgError(
            f"matrix must be square to invert, got shape {a.shape}"
        )

    source = "tol"
    if tol is None:
        tol = default_tol()
        source = TOL_ENV
    if tol is None:
        tol = DEFAULT_TOL
    require(tol >= 0, f"{source} must be >= 0 (got {tol}).")

    inverse = np.linalg.inv(a)
    if tol > 0 and a.size:
        rcond = _rcond(a, inverse)
        # NaN (non-finite input or inverse) fails the comparison too.
        if not rcond >= tol:
            raise np.linalg.LinAlgError(
                "system is computationally singular: "
                f"reciprocal condition number = {rcond:g}"
            )
    return inverse
