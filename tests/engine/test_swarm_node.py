import numpy as np
import pytest

from psokit.engine.algorithm.pso.node import SwarmNode, SwarmNodeView


class UnitBoxParticle:
    """Negated sphere that snaps to the origin when any coordinate leaves [-1, 1]."""

    def __init__(self, position):
        self.x = np.array(position, dtype=float)

    def get_performance(self):
        return float(-np.sum(self.x**2))

    def update_position(self, position):
        if np.any(np.abs(position) > 1.0):
            self.x = np.zeros_like(position)
            return self.x.copy()
        self.x = np.array(position, dtype=float)
        return None


FIELD = [(-2.0, 2.0), (-2.0, 2.0)]


def test_node_initial_state(sphere_particle):
    node = SwarmNode(sphere_particle, [3.0, -4.0])
    np.testing.assert_allclose(node.get_position(), [3.0, -4.0])
    np.testing.assert_allclose(node.get_speed(), [0.0, 0.0])
    np.testing.assert_allclose(node.get_best_position(), [3.0, -4.0])
    assert node.get_best_performance() == pytest.approx(-25.0)
    assert node.get_performance() == pytest.approx(-25.0)
    assert node.dimension == 2
    assert isinstance(node, SwarmNodeView)


def test_node_best_position_is_a_copy(sphere_particle):
    node = SwarmNode(sphere_particle, [1.0, 1.0])
    assert node.get_best_position() is not node.get_position()


def test_node_rejects_non_vector_position(sphere_particle):
    with pytest.raises(ValueError, match="one-dimensional"):
        SwarmNode(sphere_particle, [[1.0, 2.0]])


def test_update_follows_velocity_rule(sphere_particle, scripted_rng):
    node = SwarmNode(sphere_particle, [0.0, 0.0])
    rng = scripted_rng([0.5, 0.5, 0.5, 0.5])
    perf = node.update(rng, FIELD, 0.5, 2.0, 2.0, np.array([1.0, -1.0]))
    # v = 0.5*0 + 2*0.5*(0-0) + 2*0.5*(gbest - 0)
    np.testing.assert_allclose(node.get_speed(), [1.0, -1.0])
    np.testing.assert_allclose(node.get_position(), [1.0, -1.0])
    assert perf == pytest.approx(-2.0)
    # No improvement over the initial 0.0 personal best.
    assert node.get_best_performance() == pytest.approx(0.0)
    np.testing.assert_allclose(node.get_best_position(), [0.0, 0.0])


def test_update_uses_carried_velocity_and_personal_best(sphere_particle, scripted_rng):
    node = SwarmNode(sphere_particle, [2.0, 2.0])
    node.update(scripted_rng([0.0] * 4), FIELD, 1.0, 2.0, 2.0, np.array([0.0, 0.0]))
    np.testing.assert_allclose(node.get_speed(), [0.0, 0.0])

    rng = scripted_rng([0.5, 0.5, 0.25, 0.25])
    node.update(rng, FIELD, 1.0, 2.0, 2.0, np.array([0.0, 0.0]))
    # v = 0 + 2*0.5*(2-2) + 2*0.25*(0-2) = -1
    np.testing.assert_allclose(node.get_speed(), [-1.0, -1.0])
    np.testing.assert_allclose(node.get_position(), [1.0, 1.0])
    assert node.get_best_performance() == pytest.approx(-2.0)
    np.testing.assert_allclose(node.get_best_position(), [1.0, 1.0])


def test_update_clamps_velocity(sphere_particle, scripted_rng):
    node = SwarmNode(sphere_particle, [0.0, 0.0])
    rng = scripted_rng([0.0, 0.0, 0.9, 0.9])
    node.update(rng, [(-0.5, 0.5), (-0.5, 0.5)], 0.5, 2.0, 2.0, np.array([8.0, -8.0]))
    np.testing.assert_allclose(node.get_speed(), [0.5, -0.5])
    np.testing.assert_allclose(node.get_position(), [0.5, -0.5])


def test_personal_best_keeps_pre_repair_candidate(scripted_rng):
    node = SwarmNode(UnitBoxParticle, [0.9, 0.9])
    rng = scripted_rng([0.0, 0.0, 0.5, 0.5])
    perf = node.update(rng, [(-10.0, 10.0)] * 2, 0.0, 2.0, 2.0, np.array([5.0, 5.0]))
    # candidate = 0.9 + 2*0.5*(5-0.9) = 5.0, repaired by the particle to the origin
    np.testing.assert_allclose(node.get_position(), [0.0, 0.0])
    assert perf == pytest.approx(0.0)
    assert node.get_best_performance() == pytest.approx(0.0)
    np.testing.assert_allclose(node.get_best_position(), [5.0, 5.0])
    np.testing.assert_allclose(node.get_speed(), [4.1, 4.1])


def test_improving_move_does_not_share_position_and_best(sphere_particle, scripted_rng):
    node = SwarmNode(sphere_particle, [2.0, 2.0])
    rng = scripted_rng([0.0, 0.0, 0.25, 0.25])
    node.update(rng, FIELD, 1.0, 2.0, 2.0, np.array([0.0, 0.0]))
    np.testing.assert_allclose(node.get_best_position(), [1.0, 1.0])
    assert node.get_position() is not node.get_best_position()

    node.get_position()[:] = 9.0
    np.testing.assert_allclose(node.get_best_position(), [1.0, 1.0])


def test_personal_best_is_monotonic(sphere_particle):
    rng = np.random.default_rng(7)
    node = SwarmNode(sphere_particle, [4.0, -3.0])
    previous = node.get_best_performance()
    for _ in range(100):
        gbest = rng.uniform(-10.0, 10.0, size=2)
        node.update(rng, FIELD, 0.7, 1.5, 1.5, gbest)
        assert node.get_best_performance() >= previous
        previous = node.get_best_performance()
        assert node.get_position().shape == node.get_speed().shape == node.get_best_position().shape == (2,)


def test_identical_draws_give_identical_trajectories(sphere_particle, scripted_rng):
    draws = list(np.random.default_rng(11).random(400))

    def trajectory():
        rng = scripted_rng(draws)
        node = SwarmNode(sphere_particle, [6.0, -7.0])
        out = []
        for _ in range(50):
            node.update(rng, FIELD, 0.5, 2.0, 2.0, np.array([1.0, 1.0]))
            out.append((node.get_position().copy(), node.get_speed().copy()))
        return out

    for (p1, v1), (p2, v2) in zip(trajectory(), trajectory()):
        np.testing.assert_array_equal(p1, p2)
        np.testing.assert_array_equal(v1, v2)
