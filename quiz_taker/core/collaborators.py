"""Contracts for the services and scheduler a quiz session depends on."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from quiz_taker.core.models import Answer, GradingRecord, GradingResult, Question


class QuestionProvider(Protocol):
    def fetch_quiz_questions(self) -> list[Question]:
        """Return the questions for a new attempt, or raise ``QuizServiceError``."""
        ...


class GradingService(Protocol):
    def submit(self, answers: Sequence[Answer], time_taken: str) -> GradingResult:
        """Grade the answers, or raise ``QuizServiceError``."""
        ...


class HistoryService(Protocol):
    def list_history(self) -> list[GradingRecord]:
        ...


class Ticker(Protocol):
    """Periodic one-second signal owned by the host."""

    def bind(self, callback: Callable[[], None]) -> None:
        ...

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def is_running(self) -> bool:
        ...
