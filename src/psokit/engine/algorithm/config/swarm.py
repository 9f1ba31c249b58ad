"""Swarm configuration."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Iterable, Optional, Tuple

from psokit.engine.coefficients import Constant, CoefficientProvider
from psokit.engine.algorithm.pso.handler import SwarmHandler
from psokit.foundation.observer import SwarmObserver
from psokit.foundation.particle.types import ParticleFactory

from .base import _SerializableConfig, _require_fields


def _as_provider(value: Any) -> CoefficientProvider[Any]:
    if isinstance(value, CoefficientProvider):
        return value
    if isinstance(value, Real):
        return Constant(float(value))
    return Constant([(float(lo), float(hi)) for lo, hi in value])


@dataclass(frozen=True)
class SwarmConfigData(_SerializableConfig):
    population_size: int
    dimension: int
    position_bounds: Tuple[Tuple[float, float], ...]
    velocity_field: Any
    inertia: Any = Constant(0.5)
    learning_factor_1: Any = Constant(2.0)
    learning_factor_2: Any = Constant(2.0)
    initial_best: float = float("-inf")
    seed: Optional[int] = None


class SwarmConfig:
    """Declarative configuration holder for swarm settings.

    Coefficient setters accept a provider, a plain number (inertia and
    learning factors) or a list of ``(lower, upper)`` pairs (velocity field);
    plain values are wrapped in ``Constant``.
    """

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def population_size(self, value: int) -> "SwarmConfig":
        self._cfg["population_size"] = value
        return self

    def dimension(self, value: int) -> "SwarmConfig":
        self._cfg["dimension"] = value
        return self

    def position_bounds(self, value: Iterable[Tuple[float, float]]) -> "SwarmConfig":
        self._cfg["position_bounds"] = tuple((float(lo), float(hi)) for lo, hi in value)
        return self

    def velocity_field(self, value: Any) -> "SwarmConfig":
        self._cfg["velocity_field"] = _as_provider(value)
        return self

    def inertia(self, value: Any) -> "SwarmConfig":
        self._cfg["inertia"] = _as_provider(value)
        return self

    def learning_factors(self, first: Any, second: Any) -> "SwarmConfig":
        self._cfg["learning_factor_1"] = _as_provider(first)
        self._cfg["learning_factor_2"] = _as_provider(second)
        return self

    def initial_best(self, value: float) -> "SwarmConfig":
        self._cfg["initial_best"] = value
        return self

    def seed(self, value: int | None) -> "SwarmConfig":
        self._cfg["seed"] = value
        return self

    def fixed(self) -> SwarmConfigData:
        _require_fields(
            self._cfg,
            ("population_size", "dimension", "position_bounds", "velocity_field"),
            "Swarm",
        )
        return SwarmConfigData(
            population_size=int(self._cfg["population_size"]),
            dimension=int(self._cfg["dimension"]),
            position_bounds=self._cfg["position_bounds"],
            velocity_field=self._cfg["velocity_field"],
            inertia=self._cfg.get("inertia", Constant(0.5)),
            learning_factor_1=self._cfg.get("learning_factor_1", Constant(2.0)),
            learning_factor_2=self._cfg.get("learning_factor_2", Constant(2.0)),
            initial_best=float(self._cfg.get("initial_best", float("-inf"))),
            seed=self._cfg.get("seed"),
        )


def build_swarm(
    config: SwarmConfigData,
    particle_factory: ParticleFactory,
    observers: Iterable[SwarmObserver] = (),
) -> SwarmHandler:
    """Construct a SwarmHandler from a fixed configuration."""
    return SwarmHandler(
        particle_factory,
        config.population_size,
        config.dimension,
        config.velocity_field,
        list(config.position_bounds),
        config.inertia,
        config.learning_factor_1,
        config.learning_factor_2,
        config.initial_best,
        seed=config.seed,
        observers=observers,
    )
