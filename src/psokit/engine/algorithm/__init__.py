from .config import SwarmConfig, SwarmConfigData, build_swarm
from .pso import SwarmHandler, SwarmNode, SwarmNodeView

__all__ = [
    "SwarmHandler",
    "SwarmNode",
    "SwarmNodeView",
    "SwarmConfig",
    "SwarmConfigData",
    "build_swarm",
]
