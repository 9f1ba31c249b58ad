from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ParticleProtocol(Protocol):
    """
    Caller-defined particle model: fitness evaluation and position repair.

    A particle is built from its initial position by a ParticleFactory and
    must cache its performance at that position. Higher performance is better.

    update_position() receives the candidate position computed by the swarm.
    Return None to accept it, or the repaired position when the candidate
    leaves the problem domain. Either way the cached performance must match
    the position that is now in effect. The swarm never clamps positions
    itself; domain handling belongs to the particle.
    """

    def get_performance(self) -> float: ...

    def update_position(self, position: np.ndarray) -> np.ndarray | None: ...


ParticleFactory = Callable[[np.ndarray], ParticleProtocol]


__all__ = ["ParticleProtocol", "ParticleFactory"]
