"""PSO helper functions.

This module contains the array-level pieces of the swarm update:
- Bounds normalization into lower/upper vectors
- Uniform position sampling inside per-dimension bounds
- The two-tier velocity clamp with re-sampling
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np


__all__ = [
    "as_bounds",
    "sample_position",
    "clamp_velocity",
]


def as_bounds(bounds: Sequence[Sequence[float]]) -> tuple[np.ndarray, np.ndarray]:
    """Split a list of (lower, upper) pairs into two float vectors.

    Parameters
    ----------
    bounds : sequence of pairs
        One ``(lower, upper)`` pair per dimension.

    Returns
    -------
    tuple
        ``(lower, upper)`` arrays, each of shape (D,).
    """
    arr = np.asarray(bounds, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Bounds must be a sequence of (lower, upper) pairs, got shape {arr.shape}.")
    return arr[:, 0].copy(), arr[:, 1].copy()


def sample_position(bounds: Sequence[Sequence[float]], rng: Any) -> np.ndarray:
    """Draw one position uniformly inside ``bounds``, one draw per dimension."""
    lower, upper = as_bounds(bounds)
    return np.asarray(rng.uniform(lower, upper), dtype=float).reshape(lower.shape)


def clamp_velocity(
    velocity: np.ndarray,
    lower: np.ndarray,
    upper: np.ndarray,
    rng: Any,
) -> np.ndarray:
    """Apply the two-tier velocity clamp.

    For each dimension where the velocity leaves ``[lower, upper]`` the ratio
    ``(bound - v) / bound`` is computed against the violated bound. A ratio of
    at least 1.0 re-samples the velocity with ``rng.uniform(lower, upper)``,
    i.e. from the half-open ``[lower, upper)``;
    otherwise the velocity is set to the violated bound. The ratio keeps the
    sign of ``bound``, so with the usual ``lower < 0 < upper`` field every
    violation is clipped and re-sampling only happens for one-sided fields.
    A zero bound divides to +/-inf following IEEE rules.

    Parameters
    ----------
    velocity : np.ndarray
        Candidate velocity, shape (D,).
    lower : np.ndarray
        Lower velocity bounds, shape (D,).
    upper : np.ndarray
        Upper velocity bounds, shape (D,).
    rng : np.random.Generator
        Source for the re-sample draws (``uniform(low, high)``).

    Returns
    -------
    np.ndarray
        Clamped velocity; every entry lies within its bound pair.
    """
    v = np.array(velocity, dtype=float, copy=True)
    below = v < lower
    above = ~below & (v > upper)

    with np.errstate(divide="ignore", invalid="ignore"):
        far_below = below & ((lower - v) / lower >= 1.0)
        far_above = above & ((upper - v) / upper >= 1.0)

    v = np.where(below & ~far_below, lower, v)
    v = np.where(above & ~far_above, upper, v)

    resample = far_below | far_above
    if np.any(resample):
        v[resample] = rng.uniform(lower[resample], upper[resample])
    return v
