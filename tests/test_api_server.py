from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from quiz_taker.core.question_bank import BankQuestion, QuestionBank
from quiz_taker.core.services.local_backend import LocalQuizBackend
from quiz_taker.server.api_server import create_api_app


@pytest.fixture
def client() -> TestClient:
    bank = QuestionBank()
    bank.load_questions(
        [
            BankQuestion(id=0, prompt="First", options=("a", "b", "c", "d"), correct_option="A"),
            BankQuestion(id=0, prompt="Second", options=("e", "f", "g", "h"), correct_option="D"),
        ]
    )
    return TestClient(create_api_app(LocalQuizBackend(bank)))


def test_start_serves_questions_without_answers(client: TestClient):
    response = client.get("/api/quiz/start")

    assert response.status_code == 200
    payload = response.json()
    assert payload[0] == {
        "id": 1,
        "question_text": "First",
        "option_a": "a",
        "option_b": "b",
        "option_c": "c",
        "option_d": "d",
    }
    assert all("correct_answer" not in item for item in payload)


def test_submit_grades_and_records_history(client: TestClient):
    response = client.post(
        "/api/quiz/submit",
        json={
            "answers": [
                {"question_id": 2, "selected_answer": "D"},
                {"question_id": 1, "selected_answer": "B"},
            ],
            "time_taken": "02:10",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_questions"] == 2
    assert body["correct_answers"] == 1
    assert body["score"] == 50.0
    assert body["time_taken"] == "02:10"
    assert [r["question_id"] for r in body["results"]] == [2, 1]
    assert body["results"][1] == {
        "question_id": 1,
        "selected_answer": "B",
        "correct_answer": "A",
        "is_correct": False,
    }

    history = client.get("/api/quiz/history").json()
    assert len(history) == 1
    assert history[0]["correct_answers"] == 1
    assert "graded_at" in history[0]


def test_submit_rejects_unknown_question(client: TestClient):
    response = client.post(
        "/api/quiz/submit",
        json={"answers": [{"question_id": 42, "selected_answer": "A"}], "time_taken": "00:01"},
    )

    assert response.status_code == 422
    assert "42" in response.json()["detail"]


def test_submit_rejects_invalid_option(client: TestClient):
    response = client.post(
        "/api/quiz/submit",
        json={"answers": [{"question_id": 1, "selected_answer": "E"}], "time_taken": "00:01"},
    )

    assert response.status_code == 422
