"""Error types raised by config infrastructure."""

from pathlib import Path

from pw_strength.core.errors import PwStrengthError


class ConfigValidationError(PwStrengthError):
    """Raised when the loaded config fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(PwStrengthError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to load config: file not found: {path}")
