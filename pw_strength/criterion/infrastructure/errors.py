"""Error types raised by criterion infrastructure."""

from pw_strength.core.errors import PwStrengthError


class CriterionNotSupportedError(PwStrengthError):
    """Raised when a criterion kind has no registered implementation."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Failed to create criterion: unsupported kind '{kind}'")
