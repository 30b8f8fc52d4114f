from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnswerRecord:
    question_id: int
    selected_option: str
    is_correct: bool
    timestamp: int


@dataclass
class QuizSession:
    """One attempt at a quiz. Timestamps are epoch milliseconds."""

    id: str
    quiz_id: str
    start_time: int
    answers: list[AnswerRecord] = field(default_factory=list)
    score: int = 0
    completed: bool = False
    end_time: int | None = None

    @property
    def answered_ids(self) -> set[int]:
        return {a.question_id for a in self.answers}

    @property
    def total_time(self) -> int | None:
        if self.end_time is None:
            return None
        return self.end_time - self.start_time


@dataclass(frozen=True)
class LeaderboardEntry:
    session_id: str
    score: int
    total_time: int
    timestamp: int


@dataclass(frozen=True)
class RankedEntry:
    rank: int
    entry: LeaderboardEntry
