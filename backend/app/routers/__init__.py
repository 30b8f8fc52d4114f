from app.routers import health, leaderboard, quizzes, sessions

__all__ = [
    "health",
    "leaderboard",
    "quizzes",
    "sessions",
]
