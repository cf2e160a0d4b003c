from __future__ import annotations

from quiz_taker.core.result_reconciler import reconcile
from tests.conftest import build_questions, build_result


def test_output_follows_grading_order_not_question_order():
    q1, q2 = build_questions(2)
    result = build_result([(2, "B", "B"), (1, "A", "C")])

    reviewed = reconcile([q1, q2], result)

    assert [item.question for item in reviewed] == [q2, q1]
    assert [item.result.question_id for item in reviewed] == [2, 1]
    assert reviewed[0].result.is_correct
    assert not reviewed[1].result.is_correct


def test_entries_for_unknown_questions_are_dropped():
    questions = build_questions(2)
    result = build_result([(1, "A", "A"), (77, "B", "C"), (2, "D", "D")])

    reviewed = reconcile(questions, result)

    assert [item.question.id for item in reviewed] == [1, 2]


def test_questions_missing_from_result_are_not_invented():
    questions = build_questions(3)
    result = build_result([(3, "A", "B")])

    reviewed = reconcile(questions, result)

    assert len(reviewed) == 1
    assert reviewed[0].question is questions[2]
