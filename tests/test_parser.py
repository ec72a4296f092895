"""Tests for posting parsing."""

from pathlib import Path

import pytest

from sokmeans.ingestion import MalformedPostingError, parse_posting, parse_postings, read_postings
from sokmeans.models import PostingType


def test_parse_question_with_tag() -> None:
    posting = parse_posting("1,27233496,,,0,C#")
    assert posting.posting_type == PostingType.QUESTION
    assert posting.id == 27233496
    assert posting.accepted_answer is None
    assert posting.parent_id is None
    assert posting.score == 0
    assert posting.tags == "C#"


def test_parse_answer_without_tag() -> None:
    posting = parse_posting("2,23002281,,23002016,3")
    assert posting.posting_type == PostingType.ANSWER
    assert posting.parent_id == 23002016
    assert posting.score == 3
    assert posting.tags is None


def test_parse_accepted_answer_and_negative_score() -> None:
    posting = parse_posting("1,42,43,,-2,Scala")
    assert posting.accepted_answer == 43
    assert posting.score == -2


def test_line_terminator_is_stripped() -> None:
    assert parse_posting("1,1,,,2,Java\r\n").tags == "Java"


def test_empty_tag_field_means_no_tags() -> None:
    assert parse_posting("1,1,,,2,").tags is None


@pytest.mark.parametrize(
    "line",
    [
        "1,2,3",
        "x,2,,,0,Java",
        "1,y,,,0,Java",
        "1,2,,,high,Java",
        "1,2,z,,0,Java",
        "3,2,,,0,Java",
        "2,5,,,3",
        "1,1_0,,,0,Java",
        "1, 2,,,0,Java",
        "1,2,,,5 ,Java",
        "1,\u0663,,,0,Java",
    ],
)
def test_malformed_lines_are_rejected(line: str) -> None:
    with pytest.raises(MalformedPostingError):
        parse_posting(line)


def test_malformed_posting_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="at least 5 fields"):
        parse_posting("1,2")


def test_parse_postings_reports_line_number() -> None:
    lines = ["1,1,,,0,Java", "", "2,2,,1,4", "not,a,posting"]
    with pytest.raises(MalformedPostingError) as excinfo:
        list(parse_postings(lines))
    assert excinfo.value.line_number == 4
    assert "line 4" in str(excinfo.value)


def test_read_postings(small_csv: Path) -> None:
    postings = read_postings(small_csv)
    assert len(postings) == 6
    assert {p.posting_type for p in postings} <= {PostingType.QUESTION, PostingType.ANSWER}
    assert all(p.parent_id is not None for p in postings if p.is_answer)


def test_read_postings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_postings(tmp_path / "missing.csv")


def test_signed_integers_are_accepted() -> None:
    assert parse_posting("1,7,,,+3,Java").score == 3
    assert parse_posting("1,7,,,-12,Java").score == -12
