"""Parse raw CSV lines into postings."""

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from pydantic import ValidationError

from ..models import Posting

MIN_FIELDS = 5
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class MalformedPostingError(ValueError):
    """Raised when a line cannot be parsed into a posting."""

    def __init__(self, reason: str, line: str, line_number: Optional[int] = None) -> None:
        self.reason = reason
        self.line = line
        self.line_number = line_number
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{reason}: {line!r}")


def _parse_int(value: str, name: str, line: str) -> int:
    # ASCII digits only: no underscores, padding or other scripts
    if INTEGER_PATTERN.fullmatch(value) is None:
        raise MalformedPostingError(f"{name} is not an integer ({value!r})", line)
    return int(value)


def _parse_optional_int(value: str, name: str, line: str) -> Optional[int]:
    if value == "":
        return None
    return _parse_int(value, name, line)


def parse_posting(line: str) -> Posting:
    """
    Parse one CSV line into a posting.

    Fields are ``postingType,id,acceptedAnswerId,parentId,score[,tags]``. The
    two optional integer fields are empty when absent, and tags are only
    present when a sixth field exists.

    Raises:
        MalformedPostingError: if the line is short, an integer field does not
            parse, or the record is not a valid question or answer
    """
    line = line.rstrip("\r\n")
    fields = line.split(",")
    if len(fields) < MIN_FIELDS:
        raise MalformedPostingError(
            f"expected at least {MIN_FIELDS} fields, got {len(fields)}", line
        )

    posting_type = _parse_int(fields[0], "postingType", line)
    posting_id = _parse_int(fields[1], "id", line)
    accepted_answer = _parse_optional_int(fields[2], "acceptedAnswerId", line)
    parent_id = _parse_optional_int(fields[3], "parentId", line)
    score = _parse_int(fields[4], "score", line)
    tags = fields[5] if len(fields) >= 6 and fields[5] != "" else None

    try:
        return Posting(
            posting_type=posting_type,
            id=posting_id,
            accepted_answer=accepted_answer,
            parent_id=parent_id,
            score=score,
            tags=tags,
        )
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise MalformedPostingError(reason, line)


def parse_postings(lines: Iterable[str]) -> Iterator[Posting]:
    """Parse lines lazily, skipping blank ones."""
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            yield parse_posting(line)
        except MalformedPostingError as e:
            raise MalformedPostingError(e.reason, e.line, line_number) from None


def read_postings(path: Path) -> List[Posting]:
    """Load all postings from a CSV file."""
    if not path.exists():
        raise FileNotFoundError(f"Postings file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return list(parse_postings(f))
