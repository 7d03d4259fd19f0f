class QuizGameError(Exception):
    """Base class for errors that are reported back to the caller as client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuizGameError):
    """Malformed or missing input, e.g. no quiz id or no questions left after filtering."""


class NotFoundError(QuizGameError):
    """No active session, missing session record or no current question."""


class StateError(NotFoundError):
    """The session exists but is no longer active."""
