import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

backend_dir = Path(__file__).resolve().parents[1]
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from app.main import create_app
from app.services.catalog import load_catalog
from app.services.leaderboard import InMemoryLeaderboard
from app.services.quiz_sessions import QuizSessionService
from app.services.session_store import InMemorySessionStore


class FakeClock:
    def __init__(self, start: int = 1_000_000):
        self.now = int(start)

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += int(ms)


def _question(qid: int, difficulty: str | None, correct: str = "a") -> dict:
    return {
        "id": qid,
        "difficulty": difficulty,
        "question": f"Question {qid}?",
        "options": [
            {"id": "a", "text": "A", "correct": correct == "a"},
            {"id": "b", "text": "B", "correct": correct == "b"},
            {"id": "c", "text": "C", "correct": correct == "c"},
        ],
        "explanation": f"Because {qid}.",
    }


# Four tagged questions; every correct answer is "a".
SAMPLE_QUIZZES = {
    "sample": {
        "name": "Sample Quiz",
        "theme": "test",
        "backgroundImage": "/images/backgrounds/sample.jpg",
        "icon": "/images/icons/sample.jpg",
        "description": "A quiz for tests",
        "questions": [
            _question(1, "easy"),
            _question(2, "medium"),
            _question(3, "hard"),
            _question(4, "medium"),
        ],
    },
    "untagged": {
        "name": "Untagged Quiz",
        "theme": "plain",
        "questions": [_question(10, None), _question(11, None)],
    },
}


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def catalog():
    return load_catalog(SAMPLE_QUIZZES)


@pytest.fixture()
def service(catalog, clock):
    return QuizSessionService(
        catalog=catalog,
        store=InMemorySessionStore(catalog, clock=clock),
        leaderboard=InMemoryLeaderboard(size=10),
        clock=clock,
    )


@pytest.fixture()
def client(service):
    app = create_app(service=service)
    return TestClient(app)


@pytest.fixture()
def default_client():
    return TestClient(create_app())
