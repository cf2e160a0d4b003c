"""Domain models for taking a quiz and reviewing its grading result."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto


class QuizLifecycle(Enum):
    """Lifecycle states of a quiz attempt."""
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    SUBMITTING = auto()
    COMPLETED = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question as served for quiz taking (no correct answer)."""

    id: int
    prompt: str
    options: tuple[str, str, str, str]


@dataclass(frozen=True, slots=True)
class Answer:
    """The option a user selected for one question."""

    question_id: int
    selected_option: str


@dataclass(frozen=True, slots=True)
class QuestionResult:
    """Per-question correctness as reported by the grading service."""

    question_id: int
    selected_option: str
    correct_option: str
    is_correct: bool


@dataclass(frozen=True, slots=True)
class GradingResult:
    """Outcome of grading a submitted answer set."""

    total_questions: int
    correct_count: int
    score_percent: float
    time_taken: str
    per_question: tuple[QuestionResult, ...]


@dataclass(frozen=True, slots=True)
class ReviewedItem:
    """A loaded question joined with its grading entry, for review display."""

    question: Question
    result: QuestionResult


@dataclass(frozen=True, slots=True)
class GradingRecord:
    """A past grading result kept by the history service."""

    graded_at: datetime
    result: GradingResult


@dataclass(frozen=True, slots=True)
class SessionView:
    """Consistent read-only snapshot of a session for the UI."""

    lifecycle: QuizLifecycle
    cursor: int
    question_count: int
    answered_count: int
    elapsed_time: str
    is_complete: bool
    can_submit: bool
