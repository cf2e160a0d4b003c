"""Quiz-related constants shared across core and host layers."""

from pathlib import Path

OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")
TICK_INTERVAL_MS: int = 1000
SCORE_DECIMALS: int = 2
DEFAULT_QUIZ_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "sample_quiz.txt"
