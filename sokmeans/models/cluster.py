"""Cluster models produced by k-means."""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

# (language_index * spread, score)
Vector = Tuple[int, int]


class ClusterSummary(BaseModel):
    """Labeled summary of one final cluster."""

    model_config = ConfigDict(frozen=True)

    dominant_language: str = Field(..., description="Most common language in the cluster")
    dominant_language_percent: float = Field(
        ..., description="Share of the dominant language in percent", ge=0.0, le=100.0
    )
    size: int = Field(..., description="Number of questions in the cluster", ge=1)
    median_score: int = Field(..., description="Median highest-answer score")
    center: Vector = Field(..., description="Center the cluster was built around")


class KMeansResult(BaseModel):
    """Outcome of a k-means run."""

    centers: List[Vector] = Field(..., description="Final centers, in index order")
    iterations: int = Field(..., description="Iterations performed", ge=1)
    distance: float = Field(..., description="Center movement in the last iteration", ge=0.0)
    converged: bool = Field(..., description="Whether movement fell below eta")
