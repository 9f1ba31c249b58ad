"""psokit: a pluggable particle swarm optimization kernel (maximization)."""

from .engine.algorithm import (
    SwarmConfig,
    SwarmConfigData,
    SwarmHandler,
    SwarmNode,
    SwarmNodeView,
    build_swarm,
)
from .engine.coefficients import (
    CallableCoefficient,
    CoefficientProvider,
    Constant,
    LinearSchedule,
    uniform_velocity_field,
)
from .foundation.exceptions import ConfigurationError, DimensionMismatchError, PSOKitError
from .foundation.logging import configure_psokit_logging
from .foundation.observer import RunContext, SwarmObserver
from .foundation.particle.types import ParticleFactory, ParticleProtocol

__version__ = "0.1.0"

__all__ = [
    "SwarmHandler",
    "SwarmNode",
    "SwarmNodeView",
    "SwarmConfig",
    "SwarmConfigData",
    "build_swarm",
    "CoefficientProvider",
    "Constant",
    "LinearSchedule",
    "CallableCoefficient",
    "uniform_velocity_field",
    "ParticleProtocol",
    "ParticleFactory",
    "SwarmObserver",
    "RunContext",
    "PSOKitError",
    "ConfigurationError",
    "DimensionMismatchError",
    "configure_psokit_logging",
]
