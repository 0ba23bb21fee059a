"""cachematrix — a matrix that remembers its inverse.

Quick start::

    import numpy as np
    from cachematrix import CachedMatrix, solve_cached

    m = CachedMatrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
    inv = solve_cached(m)        # computed and cached
    inv = solve_cached(m)        # served from the cache

    m.set(np.eye(2) * 2.0)       # replacing the matrix drops the cached inverse
"""

from .cached import CachedMatrix
from .linalg import invert, to_numpy
from .solve import solve_cached

__all__ = [
    "CachedMatrix",
    "invert",
    "solve_cached",
    "to_numpy",
]
