"""In-process question, grading and history services backed by a QuestionBank."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
import logging
from pathlib import Path
import random
from threading import Lock

from quiz_taker.core.models import Answer, GradingRecord, GradingResult, Question
from quiz_taker.core.question_bank import QuestionBank
from quiz_taker.core.quiz_importer import load_quiz_from_file

logger = logging.getLogger(__name__)


class LocalQuizBackend:
    """Serves and grades one quiz without a network hop.

    Shared between the HTTP server thread and in-process callers, so all
    access goes through a lock.
    """

    def __init__(self, bank: QuestionBank, shuffle: bool = False, seed: int | None = None) -> None:
        self._lock = Lock()
        self._bank = bank
        self._shuffle = shuffle
        self._shuffle_rng = random.Random(seed)
        self._history: list[GradingRecord] = []

    @classmethod
    def from_file(cls, file_path: Path, shuffle: bool = False, seed: int | None = None) -> "LocalQuizBackend":
        imported = load_quiz_from_file(file_path)
        bank = QuestionBank()
        bank.load_questions(imported.questions)
        logger.info("Loaded %d question(s) from %s", bank.get_question_count(), file_path)
        return cls(bank, shuffle=shuffle, seed=seed)

    def fetch_quiz_questions(self) -> list[Question]:
        with self._lock:
            questions = self._bank.quiz_questions()
            if self._shuffle:
                self._shuffle_rng.shuffle(questions)
            return questions

    def submit(self, answers: Sequence[Answer], time_taken: str) -> GradingResult:
        with self._lock:
            result = self._bank.grade(answers, time_taken)
            self._history.append(GradingRecord(graded_at=datetime.now(timezone.utc), result=result))
            return result

    def list_history(self) -> list[GradingRecord]:
        """Return past results, newest first."""
        with self._lock:
            return list(reversed(self._history))
