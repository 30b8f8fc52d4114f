from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from app.core.clock import Clock, now_ms
from app.core.errors import AlreadyCompleted, Exhausted, InvalidOption, InvalidQuiz
from app.models.quiz import Question, Quiz
from app.models.session import AnswerRecord, LeaderboardEntry, QuizSession, RankedEntry
from app.services.catalog import QuizCatalog
from app.services.leaderboard import Leaderboard
from app.services.selector import select_next
from app.services.session_store import SessionStore

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionView:
    quiz: Quiz
    question: Question
    question_number: int

    @property
    def total_questions(self) -> int:
        return self.quiz.total_questions


@dataclass(frozen=True)
class AnswerResult:
    is_correct: bool
    explanation: str | None
    is_completed: bool
    is_victory: bool
    current_score: int
    total_questions: int
    next_question_available: bool


@dataclass(frozen=True)
class ResultsView:
    session: QuizSession
    quiz: Quiz
    total_time: int
    percentage: int


@dataclass(frozen=True)
class QuizStats:
    total_attempts: int
    completed_attempts: int
    average_score: float
    average_time: float
    perfect_scores: int


def _percentage(score: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(math.floor(score * 100 / total + 0.5))


class QuizSessionService:
    """Drives a session from start to its terminal state.

    A session ends on the first wrong answer, or when every question has been
    answered correctly; only the latter reaches the leaderboard. The current
    question is always re-derived from answer history, never stored.
    """

    def __init__(
        self,
        catalog: QuizCatalog,
        store: SessionStore,
        leaderboard: Leaderboard,
        clock: Clock | None = None,
    ):
        self.catalog = catalog
        self.store = store
        self.leaderboard = leaderboard
        self._clock = clock or now_ms

    def now(self) -> int:
        return int(self._clock())

    def list_quizzes(self) -> list[Quiz]:
        return self.catalog.list_quizzes()

    def active_sessions(self) -> int:
        return len(self.store)

    def start_session(self, quiz_id: str) -> QuizSession:
        if not self.catalog.has_quiz(quiz_id):
            raise InvalidQuiz()
        session = self.store.create(quiz_id)
        log.info("session started: %s quiz=%s", session.id, session.quiz_id)
        return session

    def get_current_question(self, session_id: str) -> QuestionView:
        session = self.store.get(session_id)
        if session.completed:
            raise AlreadyCompleted()

        quiz = self.catalog.get_quiz(session.quiz_id)
        question = select_next(quiz, session)
        if question is None:
            raise Exhausted()
        return QuestionView(quiz=quiz, question=question, question_number=len(session.answers) + 1)

    def submit_answer(self, session_id: str, option_id: str) -> AnswerResult:
        def _apply(session: QuizSession) -> tuple[AnswerResult, LeaderboardEntry | None, str]:
            if session.completed:
                raise AlreadyCompleted()

            quiz = self.catalog.get_quiz(session.quiz_id)
            question = select_next(quiz, session)
            if question is None:
                raise Exhausted()

            option = question.find_option(str(option_id or ""))
            if option is None:
                raise InvalidOption()

            now = int(self._clock())
            total = quiz.total_questions
            session.answers.append(
                AnswerRecord(
                    question_id=question.id,
                    selected_option=option.id,
                    is_correct=option.correct,
                    timestamp=now,
                )
            )

            entry: LeaderboardEntry | None = None
            if option.correct:
                session.score += 1
                if len(session.answers) >= total:
                    session.completed = True
                    session.end_time = now
                    entry = LeaderboardEntry(
                        session_id=session.id,
                        score=session.score,
                        total_time=now - session.start_time,
                        timestamp=now,
                    )
            else:
                session.completed = True
                session.end_time = now

            result = AnswerResult(
                is_correct=option.correct,
                explanation=question.explanation,
                is_completed=session.completed,
                is_victory=session.completed and session.score == total,
                current_score=session.score,
                total_questions=total,
                next_question_available=(not session.completed) and len(session.answers) < total,
            )
            return result, entry, session.quiz_id

        result, entry, quiz_id = self.store.update(session_id, _apply)

        if result.is_completed:
            log.info(
                "session completed: %s victory=%s score=%d/%d",
                session_id,
                result.is_victory,
                result.current_score,
                result.total_questions,
            )
        if entry is not None:
            self.leaderboard.record(quiz_id, entry)
            log.info("leaderboard entry recorded: quiz=%s score=%d time_ms=%d", quiz_id, entry.score, entry.total_time)

        return result

    def get_results(self, session_id: str) -> ResultsView:
        session = self.store.get(session_id)
        quiz = self.catalog.get_quiz(session.quiz_id)

        if session.completed and session.end_time is not None:
            total_time = session.end_time - session.start_time
        else:
            total_time = int(self._clock()) - session.start_time

        return ResultsView(
            session=session,
            quiz=quiz,
            total_time=total_time,
            percentage=_percentage(session.score, quiz.total_questions),
        )

    def get_leaderboard(self, quiz_type: str) -> list[RankedEntry]:
        return self.leaderboard.list(quiz_type)

    def get_stats(self, quiz_type: str) -> QuizStats:
        quiz = self.catalog.get_quiz(quiz_type)

        sessions = self.store.sessions(quiz_type)
        completed = [s for s in sessions if s.completed]
        n = len(completed)

        return QuizStats(
            total_attempts=len(sessions),
            completed_attempts=n,
            average_score=(sum(s.score for s in completed) / n) if n else 0,
            average_time=(sum(s.total_time or 0 for s in completed) / n) if n else 0,
            perfect_scores=sum(1 for s in completed if s.score == quiz.total_questions),
        )
