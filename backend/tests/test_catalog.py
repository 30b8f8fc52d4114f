import json

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.errors import CatalogError, QuizNotFound
from app.main import create_app
from app.models.quiz import Difficulty
from app.services.catalog import default_catalog, load_catalog, load_catalog_file


def _quiz(*questions):
    return {"q": {"name": "Q", "theme": "t", "questions": list(questions)}}


def _question(qid=1, options=None, difficulty=None):
    return {
        "id": qid,
        "difficulty": difficulty,
        "question": "?",
        "options": options
        if options is not None
        else [{"id": "a", "text": "A", "correct": True}, {"id": "b", "text": "B"}],
    }


def test_default_catalog():
    catalog = default_catalog()
    assert [q.id for q in catalog.list_quizzes()] == ["treasure", "programming", "mythology"]

    treasure = catalog.get_quiz("treasure")
    assert treasure.name == "Treasure Hunt"
    assert treasure.background_image == "/images/backgrounds/treasurebg.jpg"
    assert [q.difficulty for q in treasure.questions] == [
        Difficulty.easy,
        Difficulty.medium,
        Difficulty.hard,
        Difficulty.medium,
    ]

    prog = catalog.get_quiz("programming")
    assert prog.questions[0].code_example == "// Variable declaration in C"
    assert all(o.code for o in prog.questions[0].options)

    myth = catalog.get_quiz("mythology")
    assert myth.questions[0].translation == "Dharma protects those who protect it."
    assert myth.questions[0].find_option("a").correct is True


def test_get_unknown_quiz():
    with pytest.raises(QuizNotFound):
        default_catalog().get_quiz("nope")


@pytest.mark.parametrize(
    "options",
    [
        [{"id": "a", "text": "A", "correct": True}],
        [{"id": c, "text": c, "correct": c == "a"} for c in "abcde"],
        [{"id": "a", "text": "A", "correct": True}, {"id": "b", "text": "B", "correct": True}],
        [{"id": "a", "text": "A"}, {"id": "b", "text": "B"}],
        [{"id": "a", "text": "A", "correct": True}, {"id": "a", "text": "B"}],
    ],
    ids=["too-few", "too-many", "two-correct", "none-correct", "duplicate-ids"],
)
def test_invalid_options_rejected(options):
    with pytest.raises(CatalogError):
        load_catalog(_quiz(_question(options=options)))


def test_duplicate_question_ids_rejected():
    with pytest.raises(CatalogError):
        load_catalog(_quiz(_question(1), _question(1)))


def test_unknown_difficulty_rejected():
    with pytest.raises(CatalogError):
        load_catalog(_quiz(_question(difficulty="legendary")))


def test_missing_question_id_rejected():
    q = _question()
    del q["id"]
    with pytest.raises(CatalogError):
        load_catalog(_quiz(q))


@pytest.mark.parametrize(
    "raw",
    [
        _quiz(_question(options=[{"id": "a", "text": "A", "correct": "false"}, {"id": "b", "text": "B", "correct": True}])),
        _quiz(_question(options="ab")),
        _quiz(_question(qid=1.7)),
        _quiz(_question(qid="1")),
        _quiz(_question(difficulty=3)),
        _quiz("not a question"),
        {"q": []},
        {"q": {"name": "Q", "questions": "nope"}},
        [1, 2],
    ],
    ids=[
        "string-correct-flag",
        "string-options",
        "float-question-id",
        "string-question-id",
        "numeric-difficulty",
        "non-dict-question",
        "list-definition",
        "string-questions",
        "list-catalog",
    ],
)
def test_mistyped_definitions_rejected(raw):
    with pytest.raises(CatalogError):
        load_catalog(raw)


def test_load_catalog_file(tmp_path):
    path = tmp_path / "quizzes.json"
    path.write_text(json.dumps(_quiz(_question(1, difficulty="hard"))), encoding="utf-8")

    catalog = load_catalog_file(path)
    quiz = catalog.get_quiz("q")
    assert quiz.total_questions == 1
    assert quiz.questions[0].difficulty == Difficulty.hard


def test_load_catalog_file_errors(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog_file(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog_file(bad)


def test_app_uses_configured_catalog(tmp_path, monkeypatch):
    path = tmp_path / "quizzes.json"
    path.write_text(json.dumps(_quiz(_question(1))), encoding="utf-8")
    monkeypatch.setattr(settings, "quiz_catalog_path", str(path))

    client = TestClient(create_app())
    r = client.get("/api/quizzes")
    assert r.status_code == 200
    assert [q["id"] for q in r.json()] == ["q"]
