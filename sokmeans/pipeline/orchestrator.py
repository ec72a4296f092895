"""Pipeline orchestrator that runs the complete clustering pipeline."""

import json
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pendulum
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..clustering import (
    KMeansEngine,
    cluster_results,
    format_results,
    print_results,
    sample_vectors,
    vector_postings,
)
from ..config import Config, KMeansConfig
from ..ingestion import grouped_postings, read_postings, scored_postings
from ..models import ClusterSummary, KMeansResult, Posting

console = Console()

REPORT_FILENAME = "clusters.txt"
STATS_FILENAME = "pipeline_stats.json"


def cluster_postings(
    postings: Iterable[Posting],
    kmeans_config: KMeansConfig,
    debug: bool = False,
) -> Tuple[KMeansResult, List[ClusterSummary]]:
    """Run pairing, vectorizing, sampling, k-means and labeling in memory."""
    scored = scored_postings(grouped_postings(postings))
    vectors = vector_postings(scored, kmeans_config.languages, kmeans_config.spread)
    means = sample_vectors(vectors, kmeans_config)
    result = KMeansEngine(kmeans_config).run(means, vectors, debug=debug)
    summaries = cluster_results(
        result.centers, vectors, kmeans_config.languages, kmeans_config.spread
    )
    return result, summaries


class PipelineStage:
    """Represents a pipeline stage."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.success = False
        self.error: Optional[str] = None
        self.stats: Dict = {}

    def start(self):
        """Mark stage as started."""
        self.start_time = time.time()

    def complete(self, stats: Optional[Dict] = None):
        """Mark stage as completed successfully."""
        self.end_time = time.time()
        self.success = True
        if stats:
            self.stats.update(stats)

    def fail(self, error: str):
        """Mark stage as failed."""
        self.end_time = time.time()
        self.success = False
        self.error = error

    @property
    def duration(self) -> float:
        """Get stage duration in seconds."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


class PipelineOrchestrator:
    """Orchestrates parsing, vectorizing and clustering of postings."""

    def __init__(self, config: Config, kmeans_config: Optional[KMeansConfig] = None):
        """
        Initialize pipeline orchestrator.

        Args:
            config: Configuration manager
            kmeans_config: Overrides the k-means settings from ``config``
        """
        self.config = config
        self.kmeans_config = kmeans_config or config.config.kmeans
        self.stages = [
            PipelineStage("parse", "Parsing postings"),
            PipelineStage("pair", "Pairing questions with answers"),
            PipelineStage("vectorize", "Vectorizing questions"),
            PipelineStage("sample", "Sampling initial centers"),
            PipelineStage("kmeans", "Running k-means"),
            PipelineStage("report", "Summarizing clusters"),
        ]
        self.kmeans_result: Optional[KMeansResult] = None
        self.results: List[ClusterSummary] = []
        self.total_start_time: Optional[float] = None

    def _save_stage_stats(self, run_dir: Path):
        """Save pipeline stage statistics."""
        stats = {
            "pipeline": {
                "total_duration": time.time() - self.total_start_time if self.total_start_time else 0,
                "completed_at": pendulum.now().isoformat(),
                "kmeans": self.kmeans_config.model_dump(),
            },
            "stages": {}
        }

        for stage in self.stages:
            stats["stages"][stage.name] = {
                "duration": stage.duration,
                "success": stage.success,
                "error": stage.error,
                "stats": stage.stats,
            }

        stats_file = run_dir / STATS_FILENAME
        with open(stats_file, "w") as f:
            json.dump(stats, f, indent=2)

    def _print_summary(self, run_date: str, run_dir: Path):
        """Print pipeline execution summary."""
        successful_stages = sum(1 for s in self.stages if s.success)
        total_duration = time.time() - self.total_start_time if self.total_start_time else 0

        table = Table(title="Pipeline Summary")
        table.add_column("Stage", style="cyan")
        table.add_column("Status", style="bold")
        table.add_column("Duration", style="yellow")
        table.add_column("Details", style="dim")

        for stage in self.stages:
            status = "[green]✓[/green]" if stage.success else "[red]✗[/red]"
            duration = f"{stage.duration:.1f}s" if stage.duration > 0 else "-"

            details = ""
            if stage.success and stage.stats:
                if stage.name == "parse":
                    details = (
                        f"{stage.stats.get('questions', 0)} questions, "
                        f"{stage.stats.get('answers', 0)} answers"
                    )
                elif stage.name == "pair":
                    details = f"{stage.stats.get('answered_questions', 0)} answered questions"
                elif stage.name == "vectorize":
                    details = f"{stage.stats.get('vectors', 0)} vectors"
                elif stage.name == "sample":
                    details = f"{stage.stats.get('centers', 0)} centers"
                elif stage.name == "kmeans":
                    state = "converged" if stage.stats.get("converged") else "not converged"
                    details = f"{stage.stats.get('iterations', 0)} iterations, {state}"
                elif stage.name == "report":
                    details = f"{stage.stats.get('clusters', 0)} clusters"
            elif not stage.success:
                details = stage.error or "Skipped"

            table.add_row(stage.name.title(), status, duration, details)

        console.print("\n")
        console.print(table)

        if successful_stages == len(self.stages):
            console.print(Panel(
                f"[green]✅ Pipeline completed successfully![/green]\n\n"
                f"Run date: {run_date}\n"
                f"Duration: {total_duration:.1f} seconds\n"
                f"Output directory: {run_dir}\n\n"
                f"Generated files:\n"
                f"• {REPORT_FILENAME}\n"
                f"• {STATS_FILENAME}",
                style="green"
            ))
        else:
            failed_stages = [s.name for s in self.stages if s.error]
            console.print(Panel(
                f"[red]❌ Pipeline failed![/red]\n\n"
                f"Failed stages: {', '.join(failed_stages)}\n"
                f"Duration: {total_duration:.1f} seconds",
                style="red"
            ))

    def run(self, input_path: Path, run_date: str, debug: bool = False) -> bool:
        """
        Run the complete pipeline.

        Returns:
            True if pipeline completed successfully, False otherwise
        """
        self.total_start_time = time.time()

        console.print(Panel.fit(
            f"Stack Overflow language clustering\n"
            f"Date: {run_date} • Input: {input_path.name} • "
            f"Kernels: {self.kmeans_config.kernels}",
            style="bold blue"
        ))

        run_dir = self.config.get_run_dir(run_date)
        # A rerun on the same date must not leave an earlier report behind
        (run_dir / REPORT_FILENAME).unlink(missing_ok=True)

        try:
            success = self._execute_pipeline(input_path, debug)
            if success:
                print_results(self.results)
                (run_dir / REPORT_FILENAME).write_text(
                    "\n".join(format_results(self.results)) + "\n", encoding="utf-8"
                )
            return success
        finally:
            self._save_stage_stats(run_dir)
            self._print_summary(run_date, run_dir)

    def _execute_pipeline(self, input_path: Path, debug: bool) -> bool:
        """Execute the pipeline stages."""
        kmeans_config = self.kmeans_config

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=console,
            disable=debug,
        ) as progress:

            # Stage 1: Parse postings
            stage = self.stages[0]
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                postings = read_postings(input_path)
                questions = sum(1 for p in postings if p.is_question)
                stage.complete({
                    "postings": len(postings),
                    "questions": questions,
                    "answers": len(postings) - questions,
                })
                progress.advance(task, 1)

            except Exception as e:
                stage.fail(str(e))
                return False

            # Stage 2: Pair questions with answers
            stage = self.stages[1]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                scored = scored_postings(grouped_postings(postings))
                stage.complete({"answered_questions": len(scored)})
                progress.advance(task, 1)

            except Exception as e:
                stage.fail(str(e))
                return False

            # Stage 3: Vectorize
            stage = self.stages[2]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                vectors = vector_postings(scored, kmeans_config.languages, kmeans_config.spread)
                stage.complete({
                    "vectors": len(vectors),
                    "discarded": len(scored) - len(vectors),
                })
                progress.advance(task, 1)

            except Exception as e:
                stage.fail(str(e))
                return False

            # Stage 4: Sample initial centers
            stage = self.stages[3]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                means = sample_vectors(vectors, kmeans_config)
                stage.complete({"centers": len(means)})
                progress.advance(task, 1)

            except Exception as e:
                stage.fail(str(e))
                return False

            # Stage 5: K-means
            stage = self.stages[4]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                engine = KMeansEngine(kmeans_config)
                self.kmeans_result = engine.run(means, vectors, debug=debug)
                stage.complete({
                    "iterations": self.kmeans_result.iterations,
                    "converged": self.kmeans_result.converged,
                    "distance": self.kmeans_result.distance,
                })
                progress.advance(task, 1)

            except Exception as e:
                stage.fail(str(e))
                return False

            # Stage 6: Summarize clusters
            stage = self.stages[5]
            progress.remove_task(task)
            task = progress.add_task(stage.description, total=1)
            stage.start()

            try:
                self.results = cluster_results(
                    self.kmeans_result.centers,
                    vectors,
                    kmeans_config.languages,
                    kmeans_config.spread,
                )
                stage.complete({"clusters": len(self.results)})
                progress.advance(task, 1)

            except Exception as e:
                stage.fail(str(e))
                return False

        return all(stage.success for stage in self.stages)
