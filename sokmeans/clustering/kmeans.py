"""K-means over (language, score) vectors."""

import math
from typing import Dict, Iterable, List, Sequence

from rich.console import Console

from ..config import KMeansConfig
from ..models import KMeansResult, Vector

console = Console()


def truncated_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def format_vector(v: Vector) -> str:
    """Render a vector as ``(x,y)``."""
    return f"({v[0]},{v[1]})"


def euclidean_distance(v1: Vector, v2: Vector) -> float:
    """Squared euclidean distance between two points."""
    dx = v1[0] - v2[0]
    dy = v1[1] - v2[1]
    return float(dx * dx + dy * dy)


def total_distance(a1: Sequence[Vector], a2: Sequence[Vector]) -> float:
    """Sum of pairwise squared distances between two center arrays."""
    if len(a1) != len(a2):
        raise ValueError(f"Center arrays differ in length: {len(a1)} != {len(a2)}")
    return sum(euclidean_distance(c1, c2) for c1, c2 in zip(a1, a2))


def find_closest(point: Vector, centers: Sequence[Vector]) -> int:
    """Index of the nearest center; the lowest index wins ties."""
    best_index = 0
    closest = math.inf
    for index, center in enumerate(centers):
        distance = euclidean_distance(point, center)
        if distance < closest:
            closest = distance
            best_index = index
    return best_index


def average_vectors(points: Iterable[Vector]) -> Vector:
    """Componentwise integer mean of a non-empty group of points."""
    count = 0
    comp1 = 0
    comp2 = 0
    for x, y in points:
        comp1 += x
        comp2 += y
        count += 1
    if count == 0:
        raise ValueError("Cannot average an empty group of vectors")
    return truncated_div(comp1, count), truncated_div(comp2, count)


def assign_clusters(centers: Sequence[Vector], vectors: Iterable[Vector]) -> Dict[int, List[Vector]]:
    """Group vectors by the index of their nearest center."""
    clusters: Dict[int, List[Vector]] = {}
    for vector in vectors:
        clusters.setdefault(find_closest(vector, centers), []).append(vector)
    return clusters


def iterate(centers: Sequence[Vector], vectors: Iterable[Vector]) -> List[Vector]:
    """One k-means step. Centers that attract no points keep their value."""
    clusters = assign_clusters(centers, vectors)
    return [
        average_vectors(clusters[index]) if index in clusters else center
        for index, center in enumerate(centers)
    ]


class KMeansEngine:
    """Iterate k-means until the centers settle or the iteration cap is hit."""

    def __init__(self, config: KMeansConfig) -> None:
        self.config = config

    def converged(self, distance: float) -> bool:
        """Decide whether the clustering converged."""
        return distance < self.config.eta

    def run(
        self,
        means: Sequence[Vector],
        vectors: Sequence[Vector],
        debug: bool = False,
    ) -> KMeansResult:
        """
        Run k-means from the given initial centers.

        Args:
            means: Initial centers
            vectors: All points
            debug: Print per-iteration center movement

        Returns:
            Final centers; ``converged`` is False when the iteration cap was
            reached first
        """
        centers = list(means)
        distance = 0.0

        for iteration in range(1, self.config.max_iterations + 1):
            new_centers = iterate(centers, vectors)
            distance = total_distance(centers, new_centers)

            if debug:
                self._print_iteration(iteration, centers, new_centers, distance)

            if self.converged(distance):
                return KMeansResult(
                    centers=new_centers,
                    iterations=iteration,
                    distance=distance,
                    converged=True,
                )
            centers = new_centers

        console.print("[yellow]Reached max iterations![/yellow]")
        return KMeansResult(
            centers=centers,
            iterations=self.config.max_iterations,
            distance=distance,
            converged=False,
        )

    def _print_iteration(
        self,
        iteration: int,
        centers: Sequence[Vector],
        new_centers: Sequence[Vector],
        distance: float,
    ) -> None:
        console.print(f"[bold]Iteration: {iteration}[/bold]")
        console.print(f"  * current distance: {distance}")
        console.print(f"  * desired distance: {self.config.eta}")
        console.print("  * means:")
        for old, new in zip(centers, new_centers):
            console.print(
                f"   {format_vector(old):>20} ==> {format_vector(new):>20}  "
                f"  distance: {euclidean_distance(old, new):8.0f}",
                markup=False,
                highlight=False,
            )
