"""Shared fixtures."""

from pathlib import Path
from typing import List

import pytest
import yaml

from sokmeans.config import KMeansConfig

SMALL_POSTINGS = [
    "1,1,,,0,Java",
    "1,2,,,0,Java",
    "1,3,,,0,Python",
    "2,11,,1,10",
    "2,12,,2,20",
    "2,13,,3,5",
]


@pytest.fixture
def small_lines() -> List[str]:
    """Three answered questions: two Java (10, 20) and one Python (5)."""
    return list(SMALL_POSTINGS)


@pytest.fixture
def two_language_config() -> KMeansConfig:
    return KMeansConfig(languages=["Java", "Python"], spread=50000, kernels=2)


@pytest.fixture
def small_csv(tmp_path: Path) -> Path:
    path = tmp_path / "postings.csv"
    path.write_text("\n".join(SMALL_POSTINGS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Config with a tmp workspace and a two-language, two-center setup."""
    path = tmp_path / "config" / "config.yaml"
    path.parent.mkdir(parents=True)
    path.write_text(
        yaml.safe_dump(
            {
                "workspace_root": str(tmp_path / "workspace"),
                "kmeans": {
                    "languages": ["Java", "Python"],
                    "spread": 50000,
                    "kernels": 2,
                    "max_iterations": 1,
                },
            }
        ),
        encoding="utf-8",
    )
    return path
