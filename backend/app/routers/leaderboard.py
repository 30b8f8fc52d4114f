from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.deps import get_quiz_service
from app.schemas.leaderboard import LeaderboardEntryOut, LeaderboardResponse, QuizStatsResponse
from app.services.quiz_sessions import QuizSessionService

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard/{quiz_type}", response_model=LeaderboardResponse)
def leaderboard(quiz_type: str, service: QuizSessionService = Depends(get_quiz_service)):
    now = service.now()
    return LeaderboardResponse(
        quizType=quiz_type,
        entries=[
            LeaderboardEntryOut(
                rank=r.rank,
                score=r.entry.score,
                totalTime=r.entry.total_time,
                timeAgo=max(0, now - r.entry.timestamp),
            )
            for r in service.get_leaderboard(quiz_type)
        ],
    )


@router.get("/stats/{quiz_type}", response_model=QuizStatsResponse)
def quiz_stats(quiz_type: str, service: QuizSessionService = Depends(get_quiz_service)):
    stats = service.get_stats(quiz_type)
    return QuizStatsResponse(
        totalAttempts=stats.total_attempts,
        completedAttempts=stats.completed_attempts,
        averageScore=stats.average_score,
        averageTime=stats.average_time,
        perfectScores=stats.perfect_scores,
    )
