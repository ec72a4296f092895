"""Tests for cluster labeling and the report."""

import pytest

from sokmeans.clustering import cluster_results, format_results, median_score
from sokmeans.models import ClusterSummary

LANGUAGES = ["Java", "Python"]
SPREAD = 50000


def test_median_score() -> None:
    assert median_score([1, 2, 3, 4]) == 2
    assert median_score([1, 2, 3]) == 2
    assert median_score([4, 1, 3, 2]) == 2
    assert median_score([7]) == 7
    assert median_score([-1, -2]) == -1
    with pytest.raises(ValueError):
        median_score([])


def test_cluster_results_sorted_by_median() -> None:
    results = cluster_results(
        [(0, 15), (SPREAD, 5)], [(0, 10), (0, 20), (SPREAD, 5)], LANGUAGES, SPREAD
    )
    assert [
        (r.dominant_language, r.dominant_language_percent, r.size, r.median_score)
        for r in results
    ] == [("Python", 100.0, 1, 5), ("Java", 100.0, 2, 15)]
    assert results[1].center == (0, 15)


def test_dominant_language_tie_goes_to_lowest_index() -> None:
    results = cluster_results([(SPREAD // 2, 0)], [(SPREAD, 1), (0, 1)], LANGUAGES, SPREAD)
    assert len(results) == 1
    assert results[0].dominant_language == "Java"
    assert results[0].dominant_language_percent == 50.0


def test_dominant_language_share() -> None:
    vectors = [(0, 1), (SPREAD, 1), (SPREAD, 2), (SPREAD, 3)]
    (result,) = cluster_results([(SPREAD, 0)], vectors, LANGUAGES, SPREAD)
    assert result.dominant_language == "Python"
    assert result.dominant_language_percent == 75.0
    assert result.size == 4
    assert result.median_score == 1


def test_empty_clusters_are_not_reported() -> None:
    results = cluster_results([(0, 0), (999999, 999999)], [(0, 1)], LANGUAGES, SPREAD)
    assert len(results) == 1


def test_format_results() -> None:
    summaries = [
        ClusterSummary(
            dominant_language="Java",
            dominant_language_percent=100.0,
            size=2,
            median_score=15,
            center=(0, 15),
        ),
        ClusterSummary(
            dominant_language="C#",
            dominant_language_percent=50.0,
            size=1234,
            median_score=-3,
            center=(0, 0),
        ),
    ]
    lines = format_results(summaries)
    assert lines[0] == "Resulting clusters:"
    assert lines[1] == "  Score  Dominant language (%percent)  Questions"
    assert lines[3] == "     15  Java" + " " * 14 + "(100.0%)" + " " * 12 + "2"
    assert lines[4] == "     -3  C#" + " " * 16 + "(50.0 %)" + " " * 9 + "1234"
