from __future__ import annotations

import numpy as np
import pytest


class SphereParticle:
    """Negated sphere with coordinates reset to 0 outside [-limit, limit]."""

    limit = 10.0

    def __init__(self, position):
        self.x = np.array(position, dtype=float)
        self.performance = self._evaluate()

    def _evaluate(self) -> float:
        return float(-np.sum(self.x**2))

    def get_performance(self) -> float:
        return self.performance

    def update_position(self, position):
        x = np.array(position, dtype=float)
        outside = np.abs(x) > self.limit
        x[outside] = 0.0
        self.x = x
        self.performance = self._evaluate()
        if np.any(outside):
            return x.copy()
        return None


class ScriptedRng:
    """Replays fixed uniform draws; ``uniform`` rescales them into [low, high)."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.used = 0

    def _take(self, n: int) -> np.ndarray:
        if n > len(self.draws):
            raise AssertionError("scripted random source exhausted")
        out, self.draws = self.draws[:n], self.draws[n:]
        self.used += n
        return np.array(out, dtype=float)

    def random(self, size=None):
        if size is None:
            return float(self._take(1)[0])
        return self._take(int(size))

    def uniform(self, low, high):
        low = np.asarray(low, dtype=float)
        high = np.asarray(high, dtype=float)
        u = self._take(int(low.size)).reshape(low.shape)
        return low + u * (high - low)


@pytest.fixture
def sphere_particle():
    return SphereParticle


@pytest.fixture
def scripted_rng():
    return ScriptedRng
