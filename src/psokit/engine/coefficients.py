"""Coefficient providers for the swarm update rule.

A provider supplies one coefficient per (generation, node) pair:
- the velocity field: one (lower, upper) pair per dimension
- the inertia weight: a float
- the two learning factors: floats

Providers may depend on the generation index, on the node being updated, or
on neither. init_value() is only used to size-check the velocity field when
the swarm is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from psokit.engine.algorithm.pso.node import SwarmNode


__all__ = [
    "Bounds",
    "CoefficientProvider",
    "Constant",
    "LinearSchedule",
    "CallableCoefficient",
    "uniform_velocity_field",
]


Bounds = Sequence[tuple[float, float]]

X = TypeVar("X")
X_co = TypeVar("X_co", covariant=True)


@runtime_checkable
class CoefficientProvider(Protocol[X_co]):
    def get_value(self, generation: int, node: "SwarmNode") -> X_co: ...

    def init_value(self) -> X_co: ...


class Constant(Generic[X]):
    """Same value for every generation and node."""

    def __init__(self, value: X) -> None:
        self.value = value

    def get_value(self, generation: int, node: "SwarmNode") -> X:
        return self.value

    def init_value(self) -> X:
        return self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class LinearSchedule:
    """Scalar that moves linearly from ``start`` to ``end``.

    Generation 0 yields ``start`` and generation ``generations - 1`` yields
    ``end``; later generations hold ``end``. The usual use is a decreasing
    inertia weight, e.g. ``LinearSchedule(0.9, 0.4, generations=200)``.

    Parameters
    ----------
    start : float
        Value at generation 0.
    end : float
        Value from generation ``generations - 1`` on.
    generations : int
        Length of the ramp, at least 1.
    """

    def __init__(self, start: float, end: float, generations: int) -> None:
        if generations < 1:
            raise ValueError("LinearSchedule requires generations >= 1.")
        self.start = float(start)
        self.end = float(end)
        self.generations = int(generations)

    def get_value(self, generation: int, node: "SwarmNode") -> float:
        if self.generations == 1:
            return self.end
        frac = min(generation, self.generations - 1) / (self.generations - 1)
        return self.start + (self.end - self.start) * frac

    def init_value(self) -> float:
        return self.start

    def __repr__(self) -> str:
        return f"LinearSchedule({self.start}, {self.end}, generations={self.generations})"


class CallableCoefficient(Generic[X]):
    """Adapts a plain ``fn(generation, node)`` into a provider."""

    def __init__(self, fn: Callable[[int, Any], X], init: X) -> None:
        self.fn = fn
        self.init = init

    def get_value(self, generation: int, node: "SwarmNode") -> X:
        return self.fn(generation, node)

    def init_value(self) -> X:
        return self.init


def uniform_velocity_field(vmax: float, dimension: int) -> Constant[list[tuple[float, float]]]:
    """Symmetric ``(-vmax, vmax)`` velocity bounds on every dimension."""
    if vmax <= 0:
        raise ValueError("vmax must be > 0.")
    vmax = float(vmax)
    return Constant([(-vmax, vmax) for _ in range(int(dimension))])
