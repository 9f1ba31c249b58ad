"""
Minimal psokit quickstart example.

Maximizes the negated 2-D sphere -(x1^2 + x2^2) with a 15-node swarm and
prints the best position found.

Usage:
    python examples/quickstart.py
"""
from __future__ import annotations

import logging

import numpy as np

import psokit


class Sphere:
    """Negated sphere; coordinates outside [-10, 10] are reset to 0."""

    def __init__(self, position: np.ndarray) -> None:
        self.x = np.array(position, dtype=float)
        self.performance = -float(np.sum(self.x**2))

    def get_performance(self) -> float:
        return self.performance

    def update_position(self, position: np.ndarray) -> np.ndarray | None:
        x = np.array(position, dtype=float)
        outside = np.abs(x) > 10.0
        x[outside] = 0.0
        self.x = x
        self.performance = -float(np.sum(x**2))
        return x if outside.any() else None


def main():
    psokit.configure_psokit_logging(level=logging.INFO)

    # 1. Configure the swarm
    config = (
        psokit.SwarmConfig()
        .population_size(15)
        .dimension(2)
        .position_bounds([(-10.0, 10.0), (-10.0, 10.0)])
        .velocity_field([(-2.0, 2.0), (-2.0, 2.0)])
        .inertia(psokit.LinearSchedule(0.9, 0.4, generations=200))
        .learning_factors(2.0, 2.0)
        .initial_best(-100.0)
        .seed(42)
        .fixed()
    )

    # 2. Run
    handler = psokit.build_swarm(config, Sphere)
    handler.start(200)

    # 3. Inspect
    x1, x2 = handler.get_global_best_position()
    print(f"Best performance: {handler.get_global_best_performance():.6g}")
    print(f"x1: {x1:.6f}, x2: {x2:.6f}")


if __name__ == "__main__":
    main()
