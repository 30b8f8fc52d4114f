from app.models.quiz import Difficulty, Option, Question, Quiz
from app.models.session import AnswerRecord, LeaderboardEntry, QuizSession, RankedEntry

__all__ = [
    "Difficulty",
    "Option",
    "Question",
    "Quiz",
    "AnswerRecord",
    "LeaderboardEntry",
    "QuizSession",
    "RankedEntry",
]
