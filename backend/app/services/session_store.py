from __future__ import annotations

import abc
import copy
import threading
import uuid
from typing import Callable, TypeVar

from app.core.clock import Clock, now_ms
from app.core.errors import InvalidQuiz, SessionNotFound
from app.models.session import QuizSession
from app.services.catalog import QuizCatalog

T = TypeVar("T")


class SessionStore(abc.ABC):
    """Keyed storage of quiz sessions.

    Callers never hold live records: ``get`` and ``sessions`` return snapshots,
    and the only write path is ``update``.
    """

    @abc.abstractmethod
    def create(self, quiz_id: str) -> QuizSession: ...

    @abc.abstractmethod
    def get(self, session_id: str) -> QuizSession: ...

    @abc.abstractmethod
    def update(self, session_id: str, mutator: Callable[[QuizSession], T]) -> T: ...

    @abc.abstractmethod
    def sessions(self, quiz_id: str | None = None) -> list[QuizSession]: ...

    @abc.abstractmethod
    def __len__(self) -> int: ...


class InMemorySessionStore(SessionStore):
    def __init__(self, catalog: QuizCatalog, clock: Clock | None = None):
        self._catalog = catalog
        self._clock = clock or now_ms
        self._records: dict[str, QuizSession] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create(self, quiz_id: str) -> QuizSession:
        if not self._catalog.has_quiz(quiz_id):
            raise InvalidQuiz()

        session = QuizSession(id=uuid.uuid4().hex, quiz_id=str(quiz_id), start_time=int(self._clock()))
        with self._registry_lock:
            self._records[session.id] = session
            self._locks[session.id] = threading.Lock()
        return copy.deepcopy(session)

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(str(session_id or ""))
        if lock is None:
            raise SessionNotFound()
        return lock

    def get(self, session_id: str) -> QuizSession:
        with self._registry_lock:
            session = self._records.get(str(session_id or ""))
            if session is None:
                raise SessionNotFound()
            return copy.deepcopy(session)

    def update(self, session_id: str, mutator: Callable[[QuizSession], T]) -> T:
        # The mutator works on a private copy; it is swapped in only on success.
        with self._lock_for(session_id):
            working = self.get(session_id)
            result = mutator(working)
            with self._registry_lock:
                self._records[working.id] = working
            return result

    def sessions(self, quiz_id: str | None = None) -> list[QuizSession]:
        with self._registry_lock:
            items = list(self._records.values())
            if quiz_id is not None:
                items = [s for s in items if s.quiz_id == quiz_id]
            return [copy.deepcopy(s) for s in items]

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._records)
