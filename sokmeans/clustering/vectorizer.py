"""Turn scored questions into clustering vectors."""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..models import Posting, Vector


def language_index(tags: Optional[str], languages: Sequence[str]) -> Optional[int]:
    """Return the index of the first language equal to ``tags``."""
    if tags is None:
        return None
    for index, language in enumerate(languages):
        if tags == language:
            return index
    return None


def vector_postings(
    scored: Iterable[Tuple[Posting, int]],
    languages: Sequence[str],
    spread: int,
) -> List[Vector]:
    """Map questions to ``(language_index * spread, high_score)``, dropping untracked ones."""
    vectors = []
    for question, high_score in scored:
        index = language_index(question.tags, languages)
        if index is not None:
            vectors.append((index * spread, high_score))
    return vectors
