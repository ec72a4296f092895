"""Label final clusters and render the report."""

from collections import Counter
from typing import List, Sequence, Tuple

from rich.console import Console

from ..models import ClusterSummary, Vector
from .kmeans import assign_clusters, truncated_div

console = Console()

REPORT_HEADER = [
    "Resulting clusters:",
    "  Score  Dominant language (%percent)  Questions",
    "================================================",
]


def median_score(scores: Sequence[int]) -> int:
    """Median of the scores; the mean of the middle pair is truncated."""
    if not scores:
        raise ValueError("Cannot take the median of no scores")
    ordered = sorted(scores)
    size = len(ordered)
    if size % 2 == 0:
        return truncated_div(ordered[size // 2 - 1] + ordered[size // 2], 2)
    return ordered[size // 2]


def dominant_language(points: Sequence[Vector], spread: int) -> Tuple[int, int]:
    """Most common language index and its count; ties go to the lowest index."""
    counts = Counter(x // spread for x, _ in points)
    index = min(counts, key=lambda lang: (-counts[lang], lang))
    return index, counts[index]


def cluster_results(
    means: Sequence[Vector],
    vectors: Sequence[Vector],
    languages: Sequence[str],
    spread: int,
) -> List[ClusterSummary]:
    """Summarize every non-empty cluster, sorted by median score."""
    clusters = assign_clusters(means, vectors)

    results = []
    for index in sorted(clusters):
        points = clusters[index]
        lang, lang_count = dominant_language(points, spread)
        size = len(points)
        results.append(
            ClusterSummary(
                dominant_language=languages[lang],
                dominant_language_percent=lang_count * 100.0 / size,
                size=size,
                median_score=median_score([y for _, y in points]),
                center=means[index],
            )
        )

    results.sort(key=lambda r: r.median_score)
    return results


def format_results(results: Sequence[ClusterSummary]) -> List[str]:
    """Render the report, header included."""
    lines = list(REPORT_HEADER)
    for r in results:
        lines.append(
            f"{r.median_score:7d}  {r.dominant_language:<17s} "
            f"({r.dominant_language_percent:<5.1f}%)      {r.size:7d}"
        )
    return lines


def print_results(results: Sequence[ClusterSummary]) -> None:
    """Print the cluster report."""
    for line in format_results(results):
        console.print(line, markup=False, highlight=False)
