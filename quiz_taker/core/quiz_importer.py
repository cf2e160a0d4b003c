"""Utilities for importing a graded quiz from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated
       as part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D

Example:

    Q: What is 2 + 2?
    A: 3
    B: 4
    C: 5
    D: 22
    CORRECT: B
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

from quiz_taker.constants.quiz_constants import OPTION_LETTERS
from quiz_taker.core.question_bank import BankQuestion


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[BankQuestion]


_BLOCK_SEPARATOR = re.compile(r"^[ \t]*(?:---)?[ \t]*$", re.MULTILINE)
_SECTION_MARKER = re.compile(r"^(CORRECT|Q|[A-D])\s*:\s*(.*)$", re.IGNORECASE)


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_quiz_text(text: str) -> list[BankQuestion]:
    """Split on blank or '---' lines and parse each non-empty chunk as one question."""
    chunks = (chunk.strip() for chunk in _BLOCK_SEPARATOR.split(text))
    return [_parse_block(chunk) for chunk in chunks if chunk]


def _parse_block(block: str) -> BankQuestion:
    sections: dict[str, list[str]] = {}
    correct_letter: str | None = None
    current: str | None = None

    for line in filter(None, (raw.strip() for raw in block.splitlines())):
        marker = _SECTION_MARKER.match(line)
        if marker is None:
            if current is None:
                raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")
            sections[current].append(line)
            continue

        key, value = marker.group(1).upper(), marker.group(2)
        if key == "CORRECT":
            correct_letter = value.strip().upper()
            current = None
        else:
            sections[key] = [value]
            current = key

    if "Q" not in sections:
        raise QuizImportError("Question text missing (Q: ...)")
    if any(letter not in sections for letter in OPTION_LETTERS):
        raise QuizImportError("Each question must define exactly four options (A-D).")
    if correct_letter is None:
        raise QuizImportError("Each question must name its CORRECT option.")
    if correct_letter not in OPTION_LETTERS:
        raise QuizImportError("CORRECT must be one of A, B, C, or D.")

    prompt = _join_section(sections["Q"])
    options = tuple(_join_section(sections[letter]) for letter in OPTION_LETTERS)
    if not prompt:
        raise QuizImportError("Question text cannot be empty.")
    if not all(options):
        raise QuizImportError("Option text cannot be empty.")

    return BankQuestion(
        id=0,  # assigned by QuestionBank when the quiz is loaded
        prompt=prompt,
        options=options,  # type: ignore[arg-type]
        correct_option=correct_letter,
    )


def _join_section(lines: list[str]) -> str:
    return "\n".join(lines).strip()
