# pumpsel/core/interpolation.py

from typing import Protocol, Sequence

import numpy as np


class Interpolator(Protocol):
    """A minimal interface for 1‑D interpolation, so we can inject mocks.
    Any object satisfying ``__call__(x, xp, fp) -> float`` qualifies.
    """

    def __call__(self, x: float, xp: Sequence[float], fp: Sequence[float]) -> float:
        ...


def default_interp(x: float, xp: Sequence[float], fp: Sequence[float]) -> float:
    """Thin wrapper around :func:`numpy.interp`.

    ``xp`` must be strictly increasing and as long as ``fp``.  Outside
    ``[xp[0], xp[-1]]`` the end values are returned (no extrapolation);
    values at the sample points are returned exactly.
    """
    if len(xp) != len(fp):
        raise ValueError("xp and fp must have equal length.")
    if len(xp) == 0:
        raise ValueError("Cannot interpolate over an empty curve.")
    return float(np.interp(x, xp, fp))
