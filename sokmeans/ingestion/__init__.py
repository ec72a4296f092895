"""Posting ingestion: parsing and question/answer pairing."""

from .pairing import answer_high_score, grouped_postings, scored_postings
from .parser import MalformedPostingError, parse_posting, parse_postings, read_postings

__all__ = [
    "MalformedPostingError",
    "parse_posting",
    "parse_postings",
    "read_postings",
    "grouped_postings",
    "scored_postings",
    "answer_high_score",
]
