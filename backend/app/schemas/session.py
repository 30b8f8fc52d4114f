from __future__ import annotations

from pydantic import BaseModel


class SessionStartRequest(BaseModel):
    quizType: str


class SessionQuizInfo(BaseModel):
    name: str
    theme: str
    backgroundImage: str | None
    totalQuestions: int


class SessionStartResponse(BaseModel):
    sessionId: str
    quiz: SessionQuizInfo


class AnswerRequest(BaseModel):
    optionId: str


class AnswerResponse(BaseModel):
    isCorrect: bool
    explanation: str | None
    isCompleted: bool
    isVictory: bool
    currentScore: int
    totalQuestions: int
    nextQuestionAvailable: bool


class AnswerRecordOut(BaseModel):
    questionId: int
    selectedOption: str
    isCorrect: bool
    timestamp: int


class ResultsResponse(BaseModel):
    sessionId: str
    quizName: str
    theme: str
    score: int
    totalQuestions: int
    totalTime: int
    isCompleted: bool
    answers: list[AnswerRecordOut]
    percentage: int
