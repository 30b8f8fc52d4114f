from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.core.deps import get_quiz_service
from app.services.quiz_sessions import QuizSessionService

router = APIRouter(tags=["health"])


@router.get("/health")
def health(service: QuizSessionService = Depends(get_quiz_service)):
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "activeSessions": service.active_sessions(),
    }


@router.get("/health/live")
def live():
    return {"status": "live"}
