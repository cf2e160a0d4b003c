"""Service for managing a single quiz attempt and its submission lifecycle."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import NamedTuple

from quiz_taker.constants.quiz_constants import OPTION_LETTERS
from quiz_taker.core.errors import (
    EmptySet,
    IncompleteAnswers,
    InvalidTransition,
    NoQuestionsLoaded,
    UnknownQuestion,
)
from quiz_taker.core.models import (
    Answer,
    GradingResult,
    Question,
    QuizLifecycle,
    SessionView,
)
from quiz_taker.core.services.answer_ledger import AnswerLedger
from quiz_taker.core.services.quiz_clock import QuizClock

logger = logging.getLogger(__name__)

_ANSWERABLE_STATES = (QuizLifecycle.NOT_STARTED, QuizLifecycle.IN_PROGRESS)


class Submission(NamedTuple):
    """Answers and elapsed time captured when submission begins."""

    answers: tuple[Answer, ...]
    time_taken: str


class QuizSession:
    """Owns navigation, answers, elapsed time and the submission lifecycle.

    The session is a plain object owned by whichever component drives the
    UI. It does not schedule anything itself: the host calls :meth:`tick`
    from its own one-second signal while the quiz is in progress.
    """

    def __init__(self) -> None:
        self._questions: tuple[Question, ...] = ()
        self._question_ids: frozenset[int] = frozenset()
        self._cursor: int = 0
        self._ledger = AnswerLedger()
        self._clock = QuizClock()
        self._lifecycle: QuizLifecycle = QuizLifecycle.NOT_STARTED
        self._result: GradingResult | None = None

    # --- Loading and lifecycle ---

    def load_questions(self, questions: Sequence[Question]) -> None:
        """Replace the question sequence, resetting cursor and answers."""
        if self._lifecycle is QuizLifecycle.SUBMITTING:
            raise InvalidTransition("Cannot load questions while a submission is in flight.")
        if not questions:
            raise EmptySet("Cannot start a quiz without questions.")

        loaded = tuple(questions)
        question_ids = frozenset(q.id for q in loaded)
        if len(question_ids) != len(loaded):
            raise ValueError("Question ids must be unique within a quiz.")
        if any(len(q.options) != len(OPTION_LETTERS) for q in loaded):
            raise ValueError("Each question must have exactly four options.")

        self._questions = loaded
        self._question_ids = question_ids
        self._cursor = 0
        self._ledger.clear()
        logger.info("Loaded %d question(s)", len(loaded))

    def start_quiz(self) -> None:
        if not self._questions:
            raise NoQuestionsLoaded("Load questions before starting the quiz.")
        if self._lifecycle is not QuizLifecycle.NOT_STARTED:
            raise InvalidTransition(f"Cannot start a quiz that is {self._lifecycle.name}.")

        self._cursor = 0
        self._ledger.clear()
        self._clock.reset()
        self._result = None
        self._lifecycle = QuizLifecycle.IN_PROGRESS
        logger.info("Quiz started with %d question(s)", len(self._questions))

    def restart(self) -> None:
        """Discard everything and return to a freshly constructed state."""
        self._questions = ()
        self._question_ids = frozenset()
        self._cursor = 0
        self._ledger.clear()
        self._clock.reset()
        self._result = None
        self._lifecycle = QuizLifecycle.NOT_STARTED
        logger.info("Quiz session restarted")

    def tick(self) -> None:
        """Advance the clock by one second; ignored unless the quiz is in progress."""
        if self._lifecycle is QuizLifecycle.IN_PROGRESS:
            self._clock.tick()

    # --- Navigation ---

    def go_to_question(self, index: int) -> None:
        """Move the cursor; out-of-range indexes are ignored."""
        if 0 <= index < len(self._questions):
            self._cursor = index

    def next_question(self) -> None:
        self.go_to_question(self._cursor + 1)

    def previous_question(self) -> None:
        self.go_to_question(self._cursor - 1)

    # --- Answers ---

    def record_answer(self, question_id: int, option: str) -> bool:
        """Record an answer. Returns True if it's a new answer, False otherwise.

        Answers are frozen once submission has begun; such calls are ignored.
        """
        AnswerLedger.validate_option(option)
        if question_id not in self._question_ids:
            raise UnknownQuestion(f"Question {question_id} is not part of this quiz.")
        if self._lifecycle not in _ANSWERABLE_STATES:
            logger.warning(
                "Ignoring answer for question %s while quiz is %s",
                question_id,
                self._lifecycle.name,
            )
            return False
        return self._ledger.set(question_id, option)

    def get_answer(self, question_id: int) -> str | None:
        return self._ledger.get(question_id)

    def is_complete(self) -> bool:
        """Return True when every loaded question has an answer."""
        return bool(self._questions) and self._ledger.is_complete_for(self._question_ids)

    # --- Submission ---

    def begin_submission(self) -> Submission:
        """Freeze answers and elapsed time for the grading call."""
        if not self.is_complete():
            raise IncompleteAnswers("Answer every question before submitting.")
        if self._lifecycle is not QuizLifecycle.IN_PROGRESS:
            raise InvalidTransition(f"Cannot submit a quiz that is {self._lifecycle.name}.")

        submission = Submission(answers=self._ledger.snapshot(), time_taken=self._clock.format())
        self._lifecycle = QuizLifecycle.SUBMITTING
        logger.info(
            "Submitting %d answer(s) after %s", len(submission.answers), submission.time_taken
        )
        return submission

    def complete_submission(self, result: GradingResult) -> None:
        self._require_submitting("complete")
        self._result = result
        self._lifecycle = QuizLifecycle.COMPLETED
        logger.info(
            "Quiz completed: %d/%d correct (%.2f%%)",
            result.correct_count,
            result.total_questions,
            result.score_percent,
        )

    def abort_submission(self) -> None:
        """Return to the quiz after a failed grading call, keeping all progress."""
        self._require_submitting("abort")
        self._lifecycle = QuizLifecycle.IN_PROGRESS
        logger.warning("Submission aborted; quiz resumed at %s", self._clock.format())

    def _require_submitting(self, action: str) -> None:
        if self._lifecycle is not QuizLifecycle.SUBMITTING:
            raise InvalidTransition(
                f"Cannot {action} a submission while quiz is {self._lifecycle.name}."
            )

    # --- Read access ---

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def lifecycle(self) -> QuizLifecycle:
        return self._lifecycle

    @property
    def result(self) -> GradingResult | None:
        return self._result

    @property
    def elapsed_seconds(self) -> int:
        return self._clock.elapsed_seconds

    def get_current_question(self) -> Question | None:
        if not self._questions:
            return None
        return self._questions[self._cursor]

    def get_answer_count(self) -> int:
        return self._ledger.size()

    def get_formatted_elapsed_time(self) -> str:
        return self._clock.format()

    def view(self) -> SessionView:
        complete = self.is_complete()
        return SessionView(
            lifecycle=self._lifecycle,
            cursor=self._cursor,
            question_count=len(self._questions),
            answered_count=self._ledger.size(),
            elapsed_time=self._clock.format(),
            is_complete=complete,
            can_submit=complete and self._lifecycle is QuizLifecycle.IN_PROGRESS,
        )
