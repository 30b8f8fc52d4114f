from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt, ValidationError, model_validator

from app.core.errors import CatalogError, QuizNotFound
from app.models.quiz import Difficulty, Option, Question, Quiz
from app.services.catalog_data import DEFAULT_QUIZZES

log = logging.getLogger(__name__)

MIN_OPTIONS = 2
MAX_OPTIONS = 4


class QuizCatalog:
    """Read-only registry of quiz definitions, keyed by quiz id."""

    def __init__(self, quizzes: list[Quiz]):
        self._quizzes: dict[str, Quiz] = {}
        for q in quizzes:
            if q.id in self._quizzes:
                raise CatalogError(f"duplicate quiz id {q.id!r}")
            self._quizzes[q.id] = q

    def get_quiz(self, quiz_id: str) -> Quiz:
        quiz = self._quizzes.get(str(quiz_id or ""))
        if quiz is None:
            raise QuizNotFound()
        return quiz

    def has_quiz(self, quiz_id: str) -> bool:
        return str(quiz_id or "") in self._quizzes

    def list_quizzes(self) -> list[Quiz]:
        return list(self._quizzes.values())

    def __len__(self) -> int:
        return len(self._quizzes)


class OptionDef(BaseModel):
    id: str = Field(min_length=1)
    text: str = ""
    correct: StrictBool = False
    image: str | None = None
    code: StrictBool = False


class QuestionDef(BaseModel):
    id: StrictInt
    question: str = ""
    options: list[OptionDef] = Field(min_length=MIN_OPTIONS, max_length=MAX_OPTIONS)
    difficulty: Literal["easy", "medium", "hard"] | None = None
    explanation: str | None = None
    sanskritQuote: str | None = None
    translation: str | None = None
    codeExample: str | None = None

    @model_validator(mode="after")
    def _check_options(self) -> "QuestionDef":
        if len({o.id for o in self.options}) != len(self.options):
            raise ValueError(f"question {self.id}: duplicate option ids")
        n_correct = sum(1 for o in self.options if o.correct)
        if n_correct != 1:
            raise ValueError(f"question {self.id}: exactly one correct option required, got {n_correct}")
        return self

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            prompt=self.question,
            options=tuple(
                Option(id=o.id, text=o.text, correct=o.correct, image=o.image or None, code=o.code)
                for o in self.options
            ),
            difficulty=Difficulty(self.difficulty) if self.difficulty else None,
            explanation=self.explanation or None,
            sanskrit_quote=self.sanskritQuote or None,
            translation=self.translation or None,
            code_example=self.codeExample or None,
        )


class QuizDef(BaseModel):
    name: str | None = None
    theme: str = ""
    description: str = ""
    icon: str | None = None
    backgroundImage: str | None = None
    questions: list[QuestionDef] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_questions(self) -> "QuizDef":
        if len({q.id for q in self.questions}) != len(self.questions):
            raise ValueError("duplicate question ids")
        return self

    def to_quiz(self, quiz_id: str) -> Quiz:
        return Quiz(
            id=quiz_id,
            name=self.name or quiz_id,
            theme=self.theme,
            questions=tuple(q.to_question() for q in self.questions),
            description=self.description,
            icon=self.icon or None,
            background_image=self.backgroundImage or None,
        )


def load_catalog(raw: dict[str, dict[str, Any]]) -> QuizCatalog:
    """Build and validate a catalog from a ``{quiz_id: definition}`` mapping.

    Definitions use the JSON keys of the client contract (``backgroundImage``,
    ``sanskritQuote``, ``codeExample``). Any structural problem raises
    ``CatalogError``; the app refuses to start on a broken catalog.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise CatalogError("quiz catalog must be a mapping of quiz id to definition")

    quizzes: list[Quiz] = []
    for quiz_id, definition in raw.items():
        try:
            parsed = QuizDef.model_validate(definition)
        except ValidationError as e:
            raise CatalogError(f"quiz {quiz_id!r}: {e}") from e
        quizzes.append(parsed.to_quiz(str(quiz_id)))
    return QuizCatalog(quizzes)


def load_catalog_file(path: str | Path) -> QuizCatalog:
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"cannot read quiz catalog {str(p)!r}: {e}") from e
    if not isinstance(raw, dict):
        raise CatalogError(f"quiz catalog {str(p)!r} must be a JSON object")
    catalog = load_catalog(raw)
    log.info("loaded %d quizzes from %s", len(catalog), p)
    return catalog


def default_catalog() -> QuizCatalog:
    return load_catalog(DEFAULT_QUIZZES)
