from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np


@dataclass
class RunContext:
    """
    Static context of one start() call.
    Passed to on_start events.
    """

    handler: Any  # SwarmHandler instance
    generations: int
    population_size: int
    dimension: int


@runtime_checkable
class SwarmObserver(Protocol):
    """
    Observer interface for swarm runs.
    Reacts to lifecycle events of SwarmHandler.start().
    """

    def on_start(self, ctx: RunContext) -> None:
        """Called once at the beginning of start()."""
        ...

    def on_generation(
        self,
        generation: int,
        best_performance: float,
        best_position: np.ndarray,
    ) -> None:
        """Called after every node has been updated in a generation."""
        ...

    def on_end(self, best_performance: float, best_position: np.ndarray) -> None:
        """Called once at the end of start()."""
        ...


__all__ = ["RunContext", "SwarmObserver"]
