"""Custom exception types used by the generator."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for errors raised before any file is written."""


class PromptValidationError(ScaffoldError):
    """Raised when an answer is rejected by its prompt."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InputSourceUnavailable(ScaffoldError):
    """Raised when the input source cannot supply any more answers."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class AnswerStoreError(ScaffoldError):
    """Raised when the remembered answers file cannot be read."""
