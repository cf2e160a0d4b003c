"""Question bank that serves quiz questions and grades submitted answers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from quiz_taker.constants.quiz_constants import OPTION_LETTERS, SCORE_DECIMALS
from quiz_taker.core.models import Answer, GradingResult, Question, QuestionResult


@dataclass(frozen=True, slots=True)
class BankQuestion:
    """Question as held by the grading authority, including the correct option."""

    id: int
    prompt: str
    options: tuple[str, str, str, str]
    correct_option: str

    def to_quiz_question(self) -> Question:
        return Question(id=self.id, prompt=self.prompt, options=self.options)


class QuestionBank:
    """Validates, numbers and grades the questions of one quiz."""

    def __init__(self) -> None:
        self._questions: list[BankQuestion] = []
        self._question_counter: int = 0

    def load_questions(self, questions: Sequence[BankQuestion]) -> None:
        """Replace the bank with a new list of questions."""
        if not questions:
            raise ValueError("Quiz must contain at least one question.")

        self._question_counter = 0
        self._questions = [self._prepare_question(q) for q in questions]

    def get_questions(self) -> list[BankQuestion]:
        return list(self._questions)

    def get_question_count(self) -> int:
        return len(self._questions)

    def quiz_questions(self) -> list[Question]:
        """Return the questions with the correct option withheld."""
        return [question.to_quiz_question() for question in self._questions]

    def grade(self, answers: Sequence[Answer], time_taken: str) -> GradingResult:
        """Grade answers in the order they were submitted."""
        by_id = {question.id: question for question in self._questions}
        per_question: list[QuestionResult] = []
        seen: set[int] = set()
        for answer in answers:
            question = by_id.get(answer.question_id)
            if question is None:
                raise ValueError(f"Question {answer.question_id} is not part of this quiz.")
            if answer.question_id in seen:
                raise ValueError(f"Question {answer.question_id} was answered more than once.")
            if answer.selected_option not in OPTION_LETTERS:
                raise ValueError(f"Invalid option {answer.selected_option!r} for question {answer.question_id}.")
            seen.add(answer.question_id)
            per_question.append(
                QuestionResult(
                    question_id=question.id,
                    selected_option=answer.selected_option,
                    correct_option=question.correct_option,
                    is_correct=answer.selected_option == question.correct_option,
                )
            )

        total = len(per_question)
        correct_count = sum(1 for entry in per_question if entry.is_correct)
        score = round(correct_count / total * 100, SCORE_DECIMALS) if total else 0.0
        return GradingResult(
            total_questions=total,
            correct_count=correct_count,
            score_percent=score,
            time_taken=time_taken,
            per_question=tuple(per_question),
        )

    def _prepare_question(self, question: BankQuestion) -> BankQuestion:
        """Validate and normalize a question before storage."""
        options = self._validate_options(question.options)
        if question.correct_option not in OPTION_LETTERS:
            raise ValueError("Correct option must be one of A, B, C or D.")

        cleaned_text = question.prompt.strip()
        if not cleaned_text:
            raise ValueError("Question text must not be empty.")

        return BankQuestion(
            id=self._next_question_id(),
            prompt=cleaned_text,
            options=options,
            correct_option=question.correct_option,
        )

    def _next_question_id(self) -> int:
        self._question_counter += 1
        return self._question_counter

    @staticmethod
    def _validate_options(options: Sequence[str]) -> tuple[str, str, str, str]:
        if len(options) != len(OPTION_LETTERS):
            raise ValueError("Each question must have exactly four options.")
        cleaned = tuple(option.strip() for option in options)
        if any(not option for option in cleaned):
            raise ValueError("Option text cannot be empty.")
        return cleaned  # type: ignore[return-value]
