"""Qt timer that delivers the per-second signal for a running quiz."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer

from quiz_taker.constants.quiz_constants import TICK_INTERVAL_MS


class QtSecondTicker:
    """Wraps a QTimer so the quiz runner can start and stop it at state changes."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._callback: Callable[[], None] | None = None
        self._timer.timeout.connect(self._handle_timeout)

    def bind(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def _handle_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
