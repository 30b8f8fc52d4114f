from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.deps import get_quiz_service
from app.schemas.quiz import QuizSummary
from app.services.quiz_sessions import QuizSessionService

router = APIRouter(tags=["quizzes"])


@router.get("/quizzes", response_model=list[QuizSummary])
def list_quizzes(service: QuizSessionService = Depends(get_quiz_service)):
    return [
        QuizSummary(
            id=q.id,
            name=q.name,
            theme=q.theme,
            description=q.description,
            icon=q.icon,
            backgroundImage=q.background_image,
            questionCount=q.total_questions,
        )
        for q in service.list_quizzes()
    ]
