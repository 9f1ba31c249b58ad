"""Swarm handler: owns the node population and runs generations.

The handler updates nodes one after another and publishes every improvement
of the global best immediately, so node k of a generation is attracted to the
best position found by nodes 0..k-1 of that same generation.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import numpy as np

from psokit.engine.coefficients import Bounds, CoefficientProvider
from psokit.foundation.exceptions import DimensionMismatchError
from psokit.foundation.observer import RunContext, SwarmObserver
from psokit.foundation.particle.types import ParticleFactory
from .helpers import sample_position
from .node import SwarmNode


__all__ = ["SwarmHandler"]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class SwarmHandler:
    """Particle swarm maximizing the performance reported by its particles.

    Parameters
    ----------
    particle_factory : ParticleFactory
        Builds a particle from an initial position (the particle class itself
        usually works).
    population_size : int
        Number of nodes N, at least 1.
    dimension : int
        Length D of every position and velocity.
    velocity_field : CoefficientProvider
        Yields the per-dimension ``(lower, upper)`` velocity bounds.
    position_bounds : sequence of pairs
        ``(lower, upper)`` per dimension used to sample initial positions.
    inertia : CoefficientProvider
        Yields the inertia weight.
    learning_factor_1 : CoefficientProvider
        Yields the cognitive (personal best) factor.
    learning_factor_2 : CoefficientProvider
        Yields the social (global best) factor.
    initial_best : float
        Seed for the global best performance. It is not checked against the
        initial global best position, which is node 0's starting position.
    rng : np.random.Generator, optional
        Random source. Takes precedence over ``seed``.
    seed : int, optional
        Seed for ``np.random.default_rng`` when no ``rng`` is given.
    observers : iterable of SwarmObserver, optional
        Notified on start, after each generation and on end of ``start()``.

    Raises
    ------
    DimensionMismatchError
        If ``velocity_field.init_value()`` does not have ``dimension`` pairs.
    ValueError
        If ``population_size < 1`` or ``position_bounds`` does not have
        ``dimension`` pairs.

    Example:
        Given a particle class ``Sphere`` whose performance is
        ``-(x1**2 + x2**2)``:

        handler = SwarmHandler(
            Sphere, 15, 2,
            uniform_velocity_field(2.0, 2), [(-10, 10), (-10, 10)],
            Constant(0.5), Constant(2.0), Constant(2.0),
            initial_best=-100.0, seed=1,
        )
        handler.start(200)
        best = handler.get_global_best_performance()
    """

    def __init__(
        self,
        particle_factory: ParticleFactory,
        population_size: int,
        dimension: int,
        velocity_field: CoefficientProvider[Bounds],
        position_bounds: Bounds,
        inertia: CoefficientProvider[float],
        learning_factor_1: CoefficientProvider[float],
        learning_factor_2: CoefficientProvider[float],
        initial_best: float,
        *,
        rng: Any | None = None,
        seed: int | None = None,
        observers: Iterable[SwarmObserver] = (),
    ) -> None:
        field_len = len(velocity_field.init_value())
        if field_len != dimension:
            raise DimensionMismatchError(dimension, field_len, context="SwarmHandler.__init__")
        if population_size < 1:
            raise ValueError("population_size must be >= 1.")
        if len(position_bounds) != dimension:
            raise ValueError(
                f"position_bounds has {len(position_bounds)} pairs but dimension is {dimension}."
            )

        self.dimension = int(dimension)
        self.population_size = int(population_size)
        self.velocity_field = velocity_field
        self.inertia = inertia
        self.learning_factor_1 = learning_factor_1
        self.learning_factor_2 = learning_factor_2
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.observers: list[SwarmObserver] = list(observers)

        self.global_best_performance = float(initial_best)
        self.history: list[float] = []
        self.generations_run = 0

        self.nodes = self._init_nodes(particle_factory, position_bounds)
        self.global_best_position = self.nodes[0].get_position().copy()

    def _init_nodes(self, particle_factory: ParticleFactory, position_bounds: Bounds) -> list[SwarmNode]:
        nodes: list[SwarmNode] = []
        for _ in range(self.population_size):
            position = sample_position(position_bounds, self.rng)
            nodes.append(SwarmNode(particle_factory, position))
        _logger().debug(
            "Initialized swarm with %d nodes in %d dimensions", self.population_size, self.dimension
        )
        return nodes

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def start(self, generations: int) -> None:
        """Run exactly ``generations`` generations.

        Providers receive the generation index counted from 0 within this
        call. There is no convergence check or early stop.
        """
        if generations < 0:
            raise ValueError("generations must be >= 0.")
        if generations == 0:
            return

        ctx = RunContext(
            handler=self,
            generations=generations,
            population_size=self.population_size,
            dimension=self.dimension,
        )
        for obs in self.observers:
            obs.on_start(ctx)

        start_best = self.global_best_performance
        for generation in range(generations):
            self._step(generation)
            self.history.append(self.global_best_performance)
            self.generations_run += 1
            _logger().debug(
                "[generation %d] best performance=%.6g", generation, self.global_best_performance
            )
            for obs in self.observers:
                obs.on_generation(generation, self.global_best_performance, self.global_best_position)

        _logger().info(
            "Swarm ran %d generations: best performance %.6g -> %.6g",
            generations,
            start_best,
            self.global_best_performance,
        )
        for obs in self.observers:
            obs.on_end(self.global_best_performance, self.global_best_position)

    def _step(self, generation: int) -> None:
        for node in self.nodes:
            field = self.velocity_field.get_value(generation, node)
            inertia = self.inertia.get_value(generation, node)
            lf1 = self.learning_factor_1.get_value(generation, node)
            lf2 = self.learning_factor_2.get_value(generation, node)
            performance = node.update(self.rng, field, inertia, lf1, lf2, self.global_best_position)
            if performance > self.global_best_performance:
                self.global_best_performance = performance
                self.global_best_position = node.get_position().copy()

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_global_best_position(self) -> np.ndarray:
        return self.global_best_position.copy()

    def get_global_best_performance(self) -> float:
        return self.global_best_performance

    def result(self) -> dict[str, Any]:
        """Summary of the run so far."""
        return {
            "best_position": self.get_global_best_position(),
            "best_performance": self.global_best_performance,
            "generations": self.generations_run,
            "history": list(self.history),
        }

    def __repr__(self) -> str:
        return (
            f"SwarmHandler(population_size={self.population_size}, dimension={self.dimension}, "
            f"best_performance={self.global_best_performance})"
        )
