from __future__ import annotations

from fastapi import Request

from app.services.quiz_sessions import QuizSessionService


def get_quiz_service(request: Request) -> QuizSessionService:
    return request.app.state.quiz_service
