"""Swarm node: one particle plus its position, velocity and personal best."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

import numpy as np

from psokit.foundation.particle.types import ParticleFactory, ParticleProtocol
from .helpers import as_bounds, clamp_velocity


__all__ = ["SwarmNode", "SwarmNodeView"]


@runtime_checkable
class SwarmNodeView(Protocol):
    """Read-only view of a node, e.g. for node-dependent coefficient providers."""

    def get_position(self) -> np.ndarray: ...

    def get_performance(self) -> float: ...

    def get_best_position(self) -> np.ndarray: ...

    def get_best_performance(self) -> float: ...

    def get_speed(self) -> np.ndarray: ...


class SwarmNode:
    """Wraps a caller particle with the state the PSO update rule needs.

    Parameters
    ----------
    particle_factory : ParticleFactory
        Called once with the initial position to build the particle.
    position : array-like
        Initial position, shape (D,).

    Notes
    -----
    The velocity starts at zero and the personal best at the initial
    position with the particle's initial performance. Position, velocity and
    personal best always have the same length D.
    """

    def __init__(self, particle_factory: ParticleFactory, position: Sequence[float] | np.ndarray) -> None:
        pos = np.array(position, dtype=float)
        if pos.ndim != 1:
            raise ValueError(f"Node position must be one-dimensional, got shape {pos.shape}.")
        self.particle: ParticleProtocol = particle_factory(pos.copy())
        self._position = pos
        self._velocity = np.zeros_like(pos)
        self._best_position = pos.copy()
        self._best_performance = float(self.particle.get_performance())

    @property
    def dimension(self) -> int:
        return int(self._position.shape[0])

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def get_position(self) -> np.ndarray:
        return self._position

    def get_performance(self) -> float:
        return float(self.particle.get_performance())

    def get_best_position(self) -> np.ndarray:
        return self._best_position

    def get_best_performance(self) -> float:
        return self._best_performance

    def get_speed(self) -> np.ndarray:
        return self._velocity

    # -------------------------------------------------------------------------
    # Update step
    # -------------------------------------------------------------------------

    def update(
        self,
        rng: Any,
        velocity_field: Sequence[tuple[float, float]],
        inertia: float,
        learning_factor_1: float,
        learning_factor_2: float,
        global_best: np.ndarray,
    ) -> float:
        """Move the node one step and return its resulting performance.

        Parameters
        ----------
        rng : np.random.Generator
            Random source; ``random(D)`` is drawn twice (cognitive, then
            social) and ``uniform(low, high)`` once if any velocity is
            re-sampled.
        velocity_field : sequence of pairs
            ``(lower, upper)`` velocity bounds per dimension, length D.
        inertia : float
            Weight of the carried-over velocity.
        learning_factor_1 : float
            Attraction toward the personal best.
        learning_factor_2 : float
            Attraction toward ``global_best``.
        global_best : np.ndarray
            Current swarm best position, shape (D,).

        Returns
        -------
        float
            The particle's performance after the move.

        Notes
        -----
        The particle may repair the candidate position; the node then adopts
        the repaired position. The personal best, however, records the
        candidate as computed here, before any repair, paired with the
        performance the particle reports for the repaired state.
        """
        lower, upper = as_bounds(velocity_field)
        x = self._position
        d = x.shape[0]
        assert lower.shape[0] == d and np.shape(global_best) == (d,), "coefficient shapes must match the dimension"

        r1 = rng.random(d)
        r2 = rng.random(d)
        cognitive = learning_factor_1 * r1 * (self._best_position - x)
        social = learning_factor_2 * r2 * (np.asarray(global_best, dtype=float) - x)
        velocity = inertia * self._velocity + cognitive + social
        velocity = clamp_velocity(velocity, lower, upper, rng)

        candidate = x + velocity
        self._velocity = velocity

        repaired = self.particle.update_position(candidate.copy())
        if repaired is None:
            self._position = candidate
        else:
            self._position = np.array(repaired, dtype=float)

        performance = float(self.particle.get_performance())
        if performance > self._best_performance:
            self._best_performance = performance
            self._best_position = candidate.copy()
        return performance

    def __repr__(self) -> str:
        return (
            f"SwarmNode(position={self._position.tolist()}, "
            f"best_performance={self._best_performance})"
        )
