from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from quiz_taker.core.errors import QuizServiceError
from quiz_taker.core.models import Answer, GradingResult, Question, QuestionResult
from quiz_taker.core.services.quiz_session import QuizSession


def build_questions(count: int = 3, first_id: int = 1) -> list[Question]:
    """Create deterministic quiz questions with ids first_id, first_id + 1, ..."""

    return [
        Question(
            id=first_id + idx,
            prompt=f"Question {first_id + idx}",
            options=(f"a{idx}", f"b{idx}", f"c{idx}", f"d{idx}"),
        )
        for idx in range(count)
    ]


def build_result(entries: Sequence[tuple[int, str, str]], time_taken: str = "00:00") -> GradingResult:
    """Create a grading result from (question_id, selected, correct) triples."""

    per_question = tuple(
        QuestionResult(
            question_id=question_id,
            selected_option=selected,
            correct_option=correct,
            is_correct=selected == correct,
        )
        for question_id, selected, correct in entries
    )
    correct_count = sum(1 for entry in per_question if entry.is_correct)
    total = len(per_question)
    return GradingResult(
        total_questions=total,
        correct_count=correct_count,
        score_percent=round(correct_count / total * 100, 2) if total else 0.0,
        time_taken=time_taken,
        per_question=per_question,
    )


class FakeTicker:
    def __init__(self) -> None:
        self.callback: Callable[[], None] | None = None
        self.running = False
        self.start_calls = 0
        self.stop_calls = 0

    def bind(self, callback: Callable[[], None]) -> None:
        self.callback = callback

    def start(self) -> None:
        self.running = True
        self.start_calls += 1

    def stop(self) -> None:
        self.running = False
        self.stop_calls += 1

    def is_running(self) -> bool:
        return self.running

    def fire(self, times: int = 1) -> None:
        """Deliver timeouts the way a running timer would."""
        for _ in range(times):
            if self.running and self.callback is not None:
                self.callback()


class FakeProvider:
    def __init__(self, questions: list[Question] | None = None, error: Exception | None = None) -> None:
        self.questions = questions if questions is not None else build_questions()
        self.error = error

    def fetch_quiz_questions(self) -> list[Question]:
        if self.error is not None:
            raise self.error
        return list(self.questions)


class FakeGrader:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[tuple[Answer, ...], str]] = []

    def submit(self, answers: Sequence[Answer], time_taken: str) -> GradingResult:
        self.calls.append((tuple(answers), time_taken))
        if self.fail:
            raise QuizServiceError("grading service unavailable")
        return build_result(
            [(answer.question_id, answer.selected_option, "A") for answer in answers],
            time_taken=time_taken,
        )


@pytest.fixture
def questions() -> list[Question]:
    return build_questions()


@pytest.fixture
def started_session(questions: list[Question]) -> QuizSession:
    session = QuizSession()
    session.load_questions(questions)
    session.start_quiz()
    return session
