"""
Particle swarm module.

Sequential global-best PSO for maximization:
- `node.py`: SwarmNode (position, velocity, personal best, update step)
- `handler.py`: SwarmHandler (population, generation loop, global best)
- `helpers.py`: bounds handling and the two-tier velocity clamp
"""

from .handler import SwarmHandler
from .helpers import as_bounds, clamp_velocity, sample_position
from .node import SwarmNode, SwarmNodeView

__all__ = [
    "SwarmHandler",
    "SwarmNode",
    "SwarmNodeView",
    # Helpers
    "as_bounds",
    "clamp_velocity",
    "sample_position",
]
