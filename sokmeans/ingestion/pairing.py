"""Join questions with their answers."""

from typing import Dict, Iterable, List, Tuple

from ..models import Posting

QuestionGroup = Tuple[Posting, List[Posting]]


def grouped_postings(postings: Iterable[Posting]) -> Dict[int, QuestionGroup]:
    """
    Group answers under their question.

    Questions are keyed by id and answers by parent id. Only questions with
    at least one answer are kept, in the order the questions were seen.
    """
    questions: Dict[int, Posting] = {}
    answers: Dict[int, List[Posting]] = {}

    for posting in postings:
        if posting.is_question:
            questions[posting.id] = posting
        else:
            answers.setdefault(posting.parent_id, []).append(posting)

    return {
        question_id: (question, answers[question_id])
        for question_id, question in questions.items()
        if question_id in answers
    }


def answer_high_score(answers: Iterable[Posting]) -> int:
    """Highest answer score, 0 when there are no answers."""
    return max((answer.score for answer in answers), default=0)


def scored_postings(grouped: Dict[int, QuestionGroup]) -> List[Tuple[Posting, int]]:
    """Pair each answered question with its highest answer score."""
    return [
        (question, answer_high_score(answers))
        for question, answers in grouped.values()
    ]
