"""Errors raised by the quiz-taking core and its collaborators."""

from __future__ import annotations


class QuizSessionError(Exception):
    """Base class for precondition violations detected by the session."""


class EmptySet(QuizSessionError):
    """Raised when an empty question sequence is loaded."""


class NoQuestionsLoaded(QuizSessionError):
    """Raised when a quiz is started before any questions were loaded."""


class InvalidOption(QuizSessionError, ValueError):
    """Raised when a selected option is not one of A, B, C or D."""


class UnknownQuestion(QuizSessionError, KeyError):
    """Raised when answering a question id that is not part of the session."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class IncompleteAnswers(QuizSessionError):
    """Raised when submission is requested before every question is answered."""


class InvalidTransition(QuizSessionError):
    """Raised when a lifecycle operation is called from the wrong state."""


class QuizServiceError(Exception):
    """Raised by question, grading or history collaborators on transport failure."""
