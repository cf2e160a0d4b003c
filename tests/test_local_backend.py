from __future__ import annotations

from quiz_taker.constants.quiz_constants import DEFAULT_QUIZ_PATH
from quiz_taker.core.models import Answer, QuizLifecycle
from quiz_taker.core.question_bank import BankQuestion, QuestionBank
from quiz_taker.core.quiz_runner import QuizRunner
from quiz_taker.core.services.local_backend import LocalQuizBackend
from tests.conftest import FakeTicker


def _backend(**kwargs) -> LocalQuizBackend:
    bank = QuestionBank()
    bank.load_questions(
        [
            BankQuestion(id=0, prompt=f"Q{idx}", options=("a", "b", "c", "d"), correct_option="A")
            for idx in range(5)
        ]
    )
    return LocalQuizBackend(bank, **kwargs)


def test_fetch_serves_bank_order_by_default():
    questions = _backend().fetch_quiz_questions()

    assert [q.id for q in questions] == [1, 2, 3, 4, 5]


def test_seeded_shuffle_is_reproducible():
    first = [q.id for q in _backend(shuffle=True, seed=7).fetch_quiz_questions()]
    second = [q.id for q in _backend(shuffle=True, seed=7).fetch_quiz_questions()]

    assert first == second
    assert sorted(first) == [1, 2, 3, 4, 5]


def test_submit_records_history_newest_first():
    backend = _backend()

    backend.submit([Answer(question_id=1, selected_option="A")], "00:05")
    backend.submit([Answer(question_id=1, selected_option="B")], "00:09")

    history = backend.list_history()
    assert [record.result.time_taken for record in history] == ["00:09", "00:05"]
    assert history[0].graded_at >= history[1].graded_at


def test_runner_against_bundled_quiz():
    backend = LocalQuizBackend.from_file(DEFAULT_QUIZ_PATH, shuffle=True, seed=3)
    ticker = FakeTicker()
    runner = QuizRunner(backend, backend, ticker=ticker, history=backend)

    assert runner.load_quiz()
    runner.start_quiz()
    ticker.fire(65)
    for question in runner.session.questions:
        runner.session.record_answer(question.id, "B")
    result = runner.submit()

    assert runner.session.lifecycle is QuizLifecycle.COMPLETED
    assert result.time_taken == "01:05"
    assert result.correct_count == 2
    assert len(runner.reviewed_items()) == 4
    assert runner.history()[0].result == result
