"""Elapsed-time counter driven by an external one-second signal."""

from __future__ import annotations


class QuizClock:
    """Counts whole seconds and renders them as ``MM:SS``.

    Minutes are never wrapped: after 99 minutes the minute field simply
    grows (``100:00``).
    """

    def __init__(self) -> None:
        self._elapsed_seconds: int = 0

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    def reset(self) -> None:
        self._elapsed_seconds = 0

    def tick(self) -> None:
        self._elapsed_seconds += 1

    def format(self) -> str:
        minutes, seconds = divmod(self._elapsed_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"
