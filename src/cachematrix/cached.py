"""A matrix container that holds its lazily computed inverse."""

from __future__ import annotations

from typing import Any

import numpy as np


class CachedMatrix:
    """Holds one matrix and, once computed, its inverse.

    Replacing the matrix with :meth:`set` drops the cached inverse. The
    array returned by :meth:`get` must not be modified in place: the cache
    has no way to notice, and would keep serving the old inverse.
    """

    def __init__(self, value: Any = None) -> None:
        if value is None:
            value = np.empty((0, 0), dtype=np.float64)
        self._value = value
        self._inverse: np.ndarray | None = None

    def set(self, new_value: Any) -> None:
        self._value = new_value
        self._inverse = None

    def get(self) -> Any:
        return self._value

    def set_cached_inverse(self, inverse: np.ndarray) -> None:
        self._inverse = inverse

    def get_cached_inverse(self) -> np.ndarray | None:
        """Return the cached inverse, or None if none was computed since the last set()."""
        return self._inverse

    @property
    def has_cached_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        shape = getattr(self._value, "shape", None)
        return (
            f"{type(self).__name__}(shape={shape}, "
            f"cached={self.has_cached_inverse})"
        )
