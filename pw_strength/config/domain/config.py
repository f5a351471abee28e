"""Top-level CheckerConfig aggregate — the root configuration object."""

from collections import Counter
from typing import Self

from pydantic import BaseModel, Field, model_validator

from pw_strength.criterion.domain.criterion import DEFAULT_CRITERIA
from pw_strength.evaluation.domain.strength import StrengthThresholds


class CheckerConfig(BaseModel, frozen=True):
    """Root configuration for a password checker.

    The defaults reproduce the canonical checker: all four criteria in
    canonical order with the 75 / 50 label thresholds.
    """

    name: str = Field(default="default", min_length=1)
    criteria: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CRITERIA), min_length=1
    )
    thresholds: StrengthThresholds = Field(default_factory=StrengthThresholds)

    @model_validator(mode="after")
    def _criteria_unique(self) -> Self:
        counts = Counter(self.criteria)
        duplicates = sorted(kind for kind, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"duplicate criteria: {', '.join(duplicates)}")
        return self
