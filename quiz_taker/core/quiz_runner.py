"""Host-side wiring between a quiz session, its services and the one-second ticker."""

from __future__ import annotations

import logging

from quiz_taker.core.collaborators import GradingService, HistoryService, QuestionProvider, Ticker
from quiz_taker.core.errors import EmptySet, QuizServiceError
from quiz_taker.core.models import GradingRecord, GradingResult, ReviewedItem
from quiz_taker.core.result_reconciler import reconcile
from quiz_taker.core.services.quiz_session import QuizSession, Submission

logger = logging.getLogger(__name__)


class QuizRunner:
    """Facade that drives a QuizSession from host events.

    The runner starts the ticker exactly when the quiz enters progress and
    stops it on every transition away from it, so elapsed time only
    accumulates while the user is answering.
    """

    def __init__(
        self,
        provider: QuestionProvider,
        grader: GradingService,
        ticker: Ticker | None = None,
        history: HistoryService | None = None,
        session: QuizSession | None = None,
    ) -> None:
        self._provider = provider
        self._grader = grader
        self._ticker = ticker
        self._history = history
        self._session = session or QuizSession()
        if self._ticker is not None:
            self._ticker.bind(self.handle_tick)

    @property
    def session(self) -> QuizSession:
        return self._session

    # --- Loading and lifecycle ---

    def load_quiz(self) -> bool:
        """Fetch questions into the session. Returns False if none are available."""
        try:
            questions = self._provider.fetch_quiz_questions()
            self._session.load_questions(questions)
        except (QuizServiceError, EmptySet) as exc:
            logger.warning("No questions available: %s", exc)
            return False
        return True

    def start_quiz(self) -> None:
        self._session.start_quiz()
        self._start_ticker()

    def handle_tick(self) -> None:
        self._session.tick()

    def restart(self) -> None:
        self._stop_ticker()
        self._session.restart()

    # --- Submission ---

    def begin_submit(self) -> Submission:
        submission = self._session.begin_submission()
        self._stop_ticker()
        return submission

    def resolve_submission(self, result: GradingResult) -> None:
        self._session.complete_submission(result)

    def reject_submission(self) -> None:
        self._session.abort_submission()
        self._start_ticker()

    def submit(self) -> GradingResult:
        """Grade the current answers, resuming the quiz if grading fails."""
        submission = self.begin_submit()
        try:
            result = self._grader.submit(submission.answers, submission.time_taken)
        except BaseException:
            # Cancellation must not leave the session stuck in SUBMITTING
            logger.exception("Grading failed; returning to the quiz")
            self.reject_submission()
            raise
        self.resolve_submission(result)
        return result

    # --- Review ---

    def reviewed_items(self) -> list[ReviewedItem]:
        result = self._session.result
        if result is None:
            return []
        return reconcile(self._session.questions, result)

    def history(self) -> list[GradingRecord]:
        if self._history is None:
            return []
        return self._history.list_history()

    def _start_ticker(self) -> None:
        if self._ticker is not None and not self._ticker.is_running():
            self._ticker.start()

    def _stop_ticker(self) -> None:
        if self._ticker is not None and self._ticker.is_running():
            self._ticker.stop()
