from __future__ import annotations

import abc
import threading

from app.models.session import LeaderboardEntry, RankedEntry

DEFAULT_SIZE = 10


def _sort_key(entry: LeaderboardEntry) -> tuple[int, int]:
    return (-entry.score, entry.total_time)


class Leaderboard(abc.ABC):
    @abc.abstractmethod
    def record(self, quiz_type: str, entry: LeaderboardEntry) -> None: ...

    @abc.abstractmethod
    def list(self, quiz_type: str) -> list[RankedEntry]: ...


class InMemoryLeaderboard(Leaderboard):
    """Top-N board per quiz type, best score first, faster time breaking ties."""

    def __init__(self, size: int = DEFAULT_SIZE):
        if int(size) <= 0:
            raise ValueError("leaderboard size must be positive")
        self.size = int(size)
        self._boards: dict[str, list[LeaderboardEntry]] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def _lock_for(self, quiz_type: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault(quiz_type, threading.Lock())

    def record(self, quiz_type: str, entry: LeaderboardEntry) -> None:
        with self._lock_for(quiz_type):
            board = list(self._boards.get(quiz_type, []))
            board.append(entry)
            board.sort(key=_sort_key)
            self._boards[quiz_type] = board[: self.size]

    def list(self, quiz_type: str) -> list[RankedEntry]:
        with self._registry_lock:
            lock = self._locks.get(quiz_type)
        if lock is None:
            return []
        with lock:
            board = list(self._boards.get(quiz_type, []))
        return [RankedEntry(rank=i, entry=e) for i, e in enumerate(board, start=1)]
