from __future__ import annotations

from pydantic import BaseModel


class LeaderboardEntryOut(BaseModel):
    rank: int
    score: int
    totalTime: int
    timeAgo: int


class LeaderboardResponse(BaseModel):
    quizType: str
    entries: list[LeaderboardEntryOut]


class QuizStatsResponse(BaseModel):
    totalAttempts: int
    completedAttempts: int
    averageScore: float
    averageTime: float
    perfectScores: int
