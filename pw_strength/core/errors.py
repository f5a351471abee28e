"""Base exception class for all pw-strength-specific errors."""


class PwStrengthError(Exception):
    """Base class for all pw-strength errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
