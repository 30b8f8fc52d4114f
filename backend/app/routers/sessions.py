from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.deps import get_quiz_service
from app.schemas.quiz import QuestionResponse, QuizOptionPublic, QuizQuestionPublic
from app.schemas.session import (
    AnswerRecordOut,
    AnswerRequest,
    AnswerResponse,
    ResultsResponse,
    SessionQuizInfo,
    SessionStartRequest,
    SessionStartResponse,
)
from app.services.quiz_sessions import QuizSessionService

router = APIRouter(prefix="/session", tags=["sessions"])


@router.post("/start", response_model=SessionStartResponse)
def start_session(body: SessionStartRequest, service: QuizSessionService = Depends(get_quiz_service)):
    session = service.start_session(body.quizType)
    quiz = service.catalog.get_quiz(session.quiz_id)
    return SessionStartResponse(
        sessionId=session.id,
        quiz=SessionQuizInfo(
            name=quiz.name,
            theme=quiz.theme,
            backgroundImage=quiz.background_image,
            totalQuestions=quiz.total_questions,
        ),
    )


@router.get("/{session_id}/question", response_model=QuestionResponse)
def current_question(session_id: str, service: QuizSessionService = Depends(get_quiz_service)):
    view = service.get_current_question(session_id)
    q = view.question
    # Correctness flags never leave the server.
    return QuestionResponse(
        questionNumber=view.question_number,
        totalQuestions=view.total_questions,
        question=QuizQuestionPublic(
            id=q.id,
            difficulty=q.difficulty.value if q.difficulty else None,
            question=q.prompt,
            sanskritQuote=q.sanskrit_quote,
            translation=q.translation,
            codeExample=q.code_example,
            options=[QuizOptionPublic(id=o.id, text=o.text, image=o.image, code=o.code) for o in q.options],
        ),
        theme=view.quiz.theme,
        backgroundImage=view.quiz.background_image,
    )


@router.post("/{session_id}/answer", response_model=AnswerResponse)
def submit_answer(
    session_id: str,
    body: AnswerRequest,
    service: QuizSessionService = Depends(get_quiz_service),
):
    result = service.submit_answer(session_id, body.optionId)
    return AnswerResponse(
        isCorrect=result.is_correct,
        explanation=result.explanation,
        isCompleted=result.is_completed,
        isVictory=result.is_victory,
        currentScore=result.current_score,
        totalQuestions=result.total_questions,
        nextQuestionAvailable=result.next_question_available,
    )


@router.get("/{session_id}/results", response_model=ResultsResponse)
def session_results(session_id: str, service: QuizSessionService = Depends(get_quiz_service)):
    res = service.get_results(session_id)
    return ResultsResponse(
        sessionId=res.session.id,
        quizName=res.quiz.name,
        theme=res.quiz.theme,
        score=res.session.score,
        totalQuestions=res.quiz.total_questions,
        totalTime=res.total_time,
        isCompleted=res.session.completed,
        answers=[
            AnswerRecordOut(
                questionId=a.question_id,
                selectedOption=a.selected_option,
                isCorrect=a.is_correct,
                timestamp=a.timestamp,
            )
            for a in res.session.answers
        ],
        percentage=res.percentage,
    )
