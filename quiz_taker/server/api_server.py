"""FastAPI server that exposes the quiz start, submit and history endpoints."""

from __future__ import annotations

from datetime import datetime
from threading import Thread
from typing import Literal

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from pydantic import BaseModel
import uvicorn

from quiz_taker.constants.network_constants import API_PREFIX, DEFAULT_HOST, DEFAULT_PORT
from quiz_taker.core.models import Answer, GradingRecord, GradingResult, Question
from quiz_taker.core.services.local_backend import LocalQuizBackend

OptionLetter = Literal["A", "B", "C", "D"]


class QuestionPayload(BaseModel):
    """Question as served to quiz takers, without the correct answer."""

    id: int
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str


class AnswerPayload(BaseModel):
    question_id: int
    selected_answer: OptionLetter


class SubmissionPayload(BaseModel):
    """Payload schema for a finished quiz."""

    answers: list[AnswerPayload]
    time_taken: str


class QuestionResultPayload(BaseModel):
    question_id: int
    selected_answer: OptionLetter
    correct_answer: OptionLetter
    is_correct: bool


class SubmissionResultPayload(BaseModel):
    total_questions: int
    correct_answers: int
    score: float
    time_taken: str
    results: list[QuestionResultPayload]


class HistoryEntryPayload(SubmissionResultPayload):
    graded_at: datetime


def question_to_payload(question: Question) -> QuestionPayload:
    option_a, option_b, option_c, option_d = question.options
    return QuestionPayload(
        id=question.id,
        question_text=question.prompt,
        option_a=option_a,
        option_b=option_b,
        option_c=option_c,
        option_d=option_d,
    )


def result_to_payload(result: GradingResult) -> SubmissionResultPayload:
    return SubmissionResultPayload(
        total_questions=result.total_questions,
        correct_answers=result.correct_count,
        score=result.score_percent,
        time_taken=result.time_taken,
        results=[
            QuestionResultPayload(
                question_id=entry.question_id,
                selected_answer=entry.selected_option,
                correct_answer=entry.correct_option,
                is_correct=entry.is_correct,
            )
            for entry in result.per_question
        ],
    )


def _record_to_payload(record: GradingRecord) -> HistoryEntryPayload:
    return HistoryEntryPayload(
        graded_at=record.graded_at,
        **result_to_payload(record.result).model_dump(),
    )


def _get_backend_dependency(backend: LocalQuizBackend):
    def dependency() -> LocalQuizBackend:
        return backend

    return dependency


def create_api_app(backend: LocalQuizBackend) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz backend."""
    app = FastAPI(title="Quiz Taker API", version="0.1.0")
    router = APIRouter(prefix=API_PREFIX)
    backend_dep = _get_backend_dependency(backend)

    @router.get("/quiz/start")
    def start_quiz(quiz: LocalQuizBackend = Depends(backend_dep)) -> list[QuestionPayload]:
        return [question_to_payload(question) for question in quiz.fetch_quiz_questions()]

    @router.post("/quiz/submit")
    def submit_quiz(
        payload: SubmissionPayload,
        quiz: LocalQuizBackend = Depends(backend_dep),
    ) -> SubmissionResultPayload:
        answers = [
            Answer(question_id=item.question_id, selected_option=item.selected_answer)
            for item in payload.answers
        ]
        try:
            result = quiz.submit(answers, payload.time_taken)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return result_to_payload(result)

    @router.get("/quiz/history")
    def quiz_history(quiz: LocalQuizBackend = Depends(backend_dep)) -> list[HistoryEntryPayload]:
        return [_record_to_payload(record) for record in quiz.list_history()]

    app.include_router(router)
    return app


def start_api_server(
    backend: LocalQuizBackend,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(backend)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
