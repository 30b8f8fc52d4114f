from __future__ import annotations

from collections.abc import Sequence

from app.models.quiz import Difficulty, Question, Quiz
from app.models.session import AnswerRecord, QuizSession

NEUTRAL_ACCURACY = 0.5
HARD_THRESHOLD = 0.8
MEDIUM_THRESHOLD = 0.5


def accuracy(answers: Sequence[AnswerRecord]) -> float:
    if not answers:
        return NEUTRAL_ACCURACY
    correct = sum(1 for a in answers if a.is_correct)
    return correct / len(answers)


def target_difficulty(acc: float) -> Difficulty:
    if acc >= HARD_THRESHOLD:
        return Difficulty.hard
    if acc >= MEDIUM_THRESHOLD:
        return Difficulty.medium
    return Difficulty.easy


def select_next(quiz: Quiz, session: QuizSession) -> Question | None:
    """Pick the next question from answer history alone.

    Unanswered questions are scanned in catalog order; the first one tagged with
    the difficulty matching running accuracy wins, otherwise the first unanswered
    one. Same quiz and same history always give the same question.
    """
    answered = session.answered_ids
    candidates = [q for q in quiz.questions if q.id not in answered]
    if not candidates:
        return None

    target = target_difficulty(accuracy(session.answers))
    for q in candidates:
        if q.difficulty == target:
            return q
    return candidates[0]
