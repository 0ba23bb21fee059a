"""Cache-aware matrix inversion."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from . import linalg
from .cached import CachedMatrix

logger = logging.getLogger("cachematrix.solve")


def solve_cached(x: CachedMatrix, **kwargs: Any) -> np.ndarray:
    """Return the inverse of the matrix held by ``x``.

    A cached inverse is returned as-is. Otherwise the inverse is computed
    with :func:`cachematrix.linalg.invert` (``kwargs`` are passed through,
    e.g. ``tol``), stored on ``x`` and returned. Inversion errors propagate
    and leave the cache empty.
    """
    inverse = x.get_cached_inverse()
    if inverse is not None:
        logger.info("getting cached data")
        return inverse

    data = x.get()
    logger.debug("inverting matrix with shape %s", getattr(data, "shape", None))
    inverse = linalg.invert(data, **kwargs)
    x.set_cached_inverse(inverse)
    return inverse
