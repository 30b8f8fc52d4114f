from __future__ import annotations


class QuizError(Exception):
    """Base class for client-facing quiz errors.

    Each subclass carries the HTTP status and the machine-readable error code the
    API layer renders. None of them is fatal to the process.
    """

    status_code: int = 400
    error_code: str = "quiz_error"
    default_message: str = "quiz request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidQuiz(QuizError):
    status_code = 400
    error_code = "invalid_quiz"
    default_message = "invalid quiz type"


class QuizNotFound(QuizError):
    status_code = 404
    error_code = "quiz_not_found"
    default_message = "quiz not found"


class SessionNotFound(QuizError):
    status_code = 404
    error_code = "session_not_found"
    default_message = "session not found"


class AlreadyCompleted(QuizError):
    status_code = 400
    error_code = "already_completed"
    default_message = "quiz already completed"


class Exhausted(QuizError):
    status_code = 404
    error_code = "exhausted"
    default_message = "no more questions available"


class InvalidOption(QuizError):
    status_code = 400
    error_code = "invalid_option"
    default_message = "invalid option"


class CatalogError(ValueError):
    """Raised when quiz definitions fail validation at load time."""
