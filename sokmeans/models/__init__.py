"""Data models for sokmeans."""

from .cluster import ClusterSummary, KMeansResult, Vector
from .posting import Posting, PostingType

__all__ = ["ClusterSummary", "KMeansResult", "Posting", "PostingType", "Vector"]
