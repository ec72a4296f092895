"""End-to-end clustering pipeline."""

from .orchestrator import PipelineOrchestrator, PipelineStage, cluster_postings

__all__ = ["PipelineOrchestrator", "PipelineStage", "cluster_postings"]
