"""Tests for the k-means engine."""

import pytest

from sokmeans.clustering import (
    KMeansEngine,
    average_vectors,
    euclidean_distance,
    find_closest,
    iterate,
    total_distance,
)
from sokmeans.config import KMeansConfig

VECTORS = [(0, 10), (0, 20), (50000, 5)]
MEANS = [(0, 10), (50000, 5)]


def engine(**overrides) -> KMeansEngine:
    settings = {"languages": ["Java", "Python"], "kernels": 2}
    settings.update(overrides)
    return KMeansEngine(KMeansConfig(**settings))


def test_find_closest_prefers_lowest_index_on_ties() -> None:
    assert find_closest((0, 0), [(0, 0), (0, 0)]) == 0
    assert find_closest((5, 0), [(0, 0), (10, 0)]) == 0


def test_find_closest_picks_nearest() -> None:
    assert find_closest((10, 0), [(0, 0), (9, 0)]) == 1


def test_euclidean_distance_is_squared() -> None:
    assert euclidean_distance((0, 0), (3, 4)) == 25.0


def test_total_distance() -> None:
    assert total_distance([(0, 0), (1, 1)], [(0, 3), (1, 1)]) == 9.0
    with pytest.raises(ValueError):
        total_distance([(0, 0)], [(0, 0), (1, 1)])


def test_average_vectors_truncates_toward_zero() -> None:
    assert average_vectors([(0, 1), (0, 2)]) == (0, 1)
    assert average_vectors([(0, -1), (0, -2)]) == (0, -1)
    with pytest.raises(ValueError):
        average_vectors([])


def test_empty_clusters_keep_their_center() -> None:
    assert iterate([(0, 0), (1000, 1000)], [(0, 1), (0, 3)]) == [(0, 2), (1000, 1000)]


def test_run_converges() -> None:
    result = engine().run(MEANS, VECTORS)
    assert result.converged
    assert result.iterations == 2
    assert result.centers == [(0, 15), (50000, 5)]
    assert result.distance == 0.0


def test_converged_centers_are_a_fixed_point() -> None:
    result = engine().run(MEANS, VECTORS)
    assert total_distance(result.centers, iterate(result.centers, VECTORS)) == 0.0


def test_run_stops_at_max_iterations(capsys) -> None:
    result = engine(max_iterations=1).run(MEANS, VECTORS)
    assert "Reached max iterations!" in capsys.readouterr().out
    assert not result.converged
    assert result.iterations == 1
    assert result.distance == 25.0
    assert result.centers == [(0, 15), (50000, 5)]


def test_eta_controls_convergence() -> None:
    result = engine(eta=30.0).run(MEANS, VECTORS)
    assert result.converged
    assert result.iterations == 1


def test_run_does_not_modify_initial_centers() -> None:
    means = list(MEANS)
    engine().run(means, VECTORS)
    assert means == MEANS


def test_debug_prints_iterations(capsys) -> None:
    engine().run(MEANS, VECTORS, debug=True)
    out = capsys.readouterr().out
    assert "Iteration: 1" in out
    assert "Iteration: 2" in out
    assert "desired distance: 20.0" in out
    assert "(0,10) ==>" in out
    assert "(0,15)" in out


def test_converged_run_has_no_max_iterations_notice(capsys) -> None:
    engine().run(MEANS, VECTORS)
    assert "Reached max iterations!" not in capsys.readouterr().out
