"""Vectorizing, sampling, k-means and cluster reporting."""

from .kmeans import (
    KMeansEngine,
    average_vectors,
    euclidean_distance,
    find_closest,
    iterate,
    total_distance,
)
from .reporter import cluster_results, format_results, median_score, print_results
from .sampler import SamplingShortfallError, reservoir_sampling, sample_vectors
from .vectorizer import language_index, vector_postings

__all__ = [
    "KMeansEngine",
    "SamplingShortfallError",
    "average_vectors",
    "cluster_results",
    "euclidean_distance",
    "find_closest",
    "format_results",
    "iterate",
    "language_index",
    "median_score",
    "print_results",
    "reservoir_sampling",
    "sample_vectors",
    "total_distance",
    "vector_postings",
]
