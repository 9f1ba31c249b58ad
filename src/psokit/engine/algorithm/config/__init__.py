"""Swarm configuration objects."""

from .swarm import SwarmConfig, SwarmConfigData, build_swarm

__all__ = ["SwarmConfig", "SwarmConfigData", "build_swarm"]
