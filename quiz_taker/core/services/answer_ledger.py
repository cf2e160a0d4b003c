"""Service for recording the option selected for each question."""

from __future__ import annotations

from collections.abc import Iterable

from quiz_taker.constants.quiz_constants import OPTION_LETTERS
from quiz_taker.core.errors import InvalidOption
from quiz_taker.core.models import Answer


class AnswerLedger:
    """Keeps at most one answer per question id."""

    def __init__(self) -> None:
        self._answers: dict[int, Answer] = {}

    @staticmethod
    def validate_option(option: str) -> None:
        if option not in OPTION_LETTERS:
            raise InvalidOption(f"Option must be one of {', '.join(OPTION_LETTERS)}, got {option!r}.")

    def set(self, question_id: int, option: str) -> bool:
        """Record an answer. Returns True if it's a new answer, False if update."""
        self.validate_option(option)

        is_new = question_id not in self._answers
        self._answers[question_id] = Answer(question_id=question_id, selected_option=option)
        return is_new

    def get(self, question_id: int) -> str | None:
        answer = self._answers.get(question_id)
        return answer.selected_option if answer else None

    def size(self) -> int:
        return len(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def is_complete_for(self, question_ids: Iterable[int]) -> bool:
        """Return True if every given question id has an answer."""
        return all(question_id in self._answers for question_id in question_ids)

    def snapshot(self) -> tuple[Answer, ...]:
        """Return an immutable copy of the recorded answers."""
        return tuple(self._answers.values())

    def clear(self) -> None:
        self._answers.clear()
