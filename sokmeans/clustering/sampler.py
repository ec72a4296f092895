"""Pick the initial k-means centers."""

import random
from itertools import islice
from typing import Dict, Iterable, List, Sequence

from ..config import KMeansConfig
from ..models import Vector


class SamplingShortfallError(ValueError):
    """Raised when the points cannot supply the requested number of centers."""


def reservoir_sampling(seed: int, points: Iterable[Vector], size: int) -> List[Vector]:
    """
    Keep a uniform sample of ``size`` points from a single pass over ``points``.

    Algorithm R: the first ``size`` points fill the reservoir, then the point
    at 0-based position ``i`` replaces a random slot with probability
    ``size / (i + 1)``.

    Args:
        seed: Seed for the random generator (the language index)
        points: Points of one language
        size: Reservoir size

    Returns:
        Exactly ``size`` points
    """
    rnd = random.Random(seed)
    stream = iter(points)

    reservoir = list(islice(stream, size))
    if len(reservoir) < size:
        raise SamplingShortfallError(
            f"Language {seed} has {len(reservoir)} points, need at least {size}"
        )

    for i, point in enumerate(stream, size):
        j = rnd.randrange(i + 1)
        if j < size:
            reservoir[j] = point

    return reservoir


def group_by_language(vectors: Iterable[Vector], spread: int) -> Dict[int, List[Vector]]:
    """Group vectors by the language index recovered from ``x``."""
    groups: Dict[int, List[Vector]] = {}
    for vector in vectors:
        groups.setdefault(vector[0] // spread, []).append(vector)
    return groups


def sample_vectors(vectors: Sequence[Vector], config: KMeansConfig) -> List[Vector]:
    """
    Sample ``config.kernels`` initial centers.

    When languages sit closer than ``uniform_sample_threshold`` the space is
    sampled regardless of language; otherwise each language contributes
    ``per_language`` centers by reservoir sampling, in language index order.

    Raises:
        SamplingShortfallError: if there are not enough points to sample from
    """
    if config.kernels % len(config.languages) != 0:
        raise SamplingShortfallError(
            "kmeans kernels should be a multiple of the number of languages studied"
        )

    if config.spread < config.uniform_sample_threshold:
        if len(vectors) < config.kernels:
            raise SamplingShortfallError(
                f"Cannot draw {config.kernels} centers from {len(vectors)} points"
            )
        sample = random.Random(config.sample_seed).sample(list(vectors), config.kernels)
    else:
        groups = group_by_language(vectors, config.spread)
        sample = []
        for lang in range(len(config.languages)):
            sample.extend(
                reservoir_sampling(lang, groups.get(lang, []), config.per_language)
            )

    if len(sample) != config.kernels:
        raise SamplingShortfallError(
            f"Sampled {len(sample)} centers, expected {config.kernels}"
        )
    return sample
