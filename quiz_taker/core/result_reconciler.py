"""Join a grading result back onto the questions held for the quiz."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from quiz_taker.core.models import GradingResult, Question, ReviewedItem

logger = logging.getLogger(__name__)


def reconcile(questions: Sequence[Question], result: GradingResult) -> list[ReviewedItem]:
    """Pair each graded entry with its question, in the order the grader reported them.

    Entries whose question is not among ``questions`` are dropped: the
    grading service is authoritative, so a mismatch only affects display.
    """
    by_id = {question.id: question for question in questions}
    reviewed: list[ReviewedItem] = []
    for entry in result.per_question:
        question = by_id.get(entry.question_id)
        if question is None:
            logger.warning("Grading result references unknown question %s; skipping", entry.question_id)
            continue
        reviewed.append(ReviewedItem(question=question, result=entry))
    return reviewed
