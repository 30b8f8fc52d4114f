from __future__ import annotations

from pydantic import BaseModel

# Field names are camelCase: they are the wire contract of the quiz client.


class QuizSummary(BaseModel):
    id: str
    name: str
    theme: str
    description: str
    icon: str | None
    backgroundImage: str | None
    questionCount: int


class QuizOptionPublic(BaseModel):
    id: str
    text: str
    image: str | None = None
    code: bool = False


class QuizQuestionPublic(BaseModel):
    id: int
    difficulty: str | None
    question: str
    sanskritQuote: str | None = None
    translation: str | None = None
    codeExample: str | None = None
    options: list[QuizOptionPublic]


class QuestionResponse(BaseModel):
    questionNumber: int
    totalQuestions: int
    question: QuizQuestionPublic
    theme: str
    backgroundImage: str | None
