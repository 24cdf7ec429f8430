"""Custom exceptions for Password Evaluator."""

INVALID_INPUT_MESSAGE = "Password is required and must be a non-empty string."


class PasswordEvaluatorError(Exception):
    """Base exception for Password Evaluator."""


class InvalidInput(PasswordEvaluatorError, ValueError):
    """Password field is absent, not a string, or empty."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)
