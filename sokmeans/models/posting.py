"""Posting model for Stack Overflow questions and answers."""

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PostingType(IntEnum):
    """Posting kind, using the values found in the source CSV."""

    QUESTION = 1
    ANSWER = 2


class Posting(BaseModel):
    """A raw posting, either a question or an answer."""

    model_config = ConfigDict(frozen=True)

    posting_type: PostingType = Field(..., description="Question or answer")
    id: int = Field(..., description="Posting id")
    accepted_answer: Optional[int] = Field(None, description="Id of the accepted answer")
    parent_id: Optional[int] = Field(None, description="Question id, for answers")
    score: int = Field(..., description="Posting score")
    tags: Optional[str] = Field(None, description="Language tag")

    @model_validator(mode="after")
    def validate_parent(self) -> "Posting":
        """Answers must point at their question."""
        if self.posting_type == PostingType.ANSWER and self.parent_id is None:
            raise ValueError(f"Answer {self.id} has no parent id")
        return self

    @property
    def is_question(self) -> bool:
        return self.posting_type == PostingType.QUESTION

    @property
    def is_answer(self) -> bool:
        return self.posting_type == PostingType.ANSWER
