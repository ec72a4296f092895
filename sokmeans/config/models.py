"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_LANGUAGES = [
    "JavaScript", "Java", "PHP", "Python", "C#", "C++", "Ruby", "CSS",
    "Objective-C", "Perl", "Scala", "Haskell", "MATLAB", "Clojure", "Groovy",
]


class KMeansConfig(BaseModel):
    """K-means clustering parameters."""

    languages: List[str] = Field(
        default_factory=lambda: list(DEFAULT_LANGUAGES),
        description="Tracked languages, in index order",
    )
    spread: int = Field(50000, description="Distance between languages on the x axis", gt=0)
    kernels: int = Field(45, description="Number of cluster centers", ge=1)
    eta: float = Field(20.0, description="Convergence threshold", gt=0.0)
    max_iterations: int = Field(120, description="Iteration cap", ge=1)
    sample_seed: int = Field(42, description="Seed for uniform center sampling")
    uniform_sample_threshold: int = Field(
        500,
        description="Spread below which centers are sampled regardless of language",
        ge=0,
    )

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: List[str]) -> List[str]:
        """Require a non-empty list of distinct language names."""
        if not v:
            raise ValueError("At least one language must be tracked")
        if len(set(v)) != len(v):
            raise ValueError("Language names must be unique")
        return v

    @field_validator("kernels")
    @classmethod
    def validate_kernels(cls, v: int, info) -> int:
        """Validate that kernels is a multiple of the language count."""
        languages = info.data.get("languages")
        if languages and v % len(languages) != 0:
            raise ValueError(
                f"kernels ({v}) should be a multiple of the number of languages ({len(languages)})"
            )
        return v

    @property
    def per_language(self) -> int:
        """Initial centers drawn per language."""
        return self.kernels // len(self.languages)


class ConfigModel(BaseModel):
    """Main configuration model."""

    workspace_root: str = Field("~/SO-Clusters", description="Root directory for outputs")
    input_path: Optional[str] = Field(None, description="Default postings CSV")
    kmeans: KMeansConfig = Field(default_factory=KMeansConfig)
