"""Qualitative strength labels derived from a Report's total score."""

from typing import Literal, Self, TypeAlias

from pydantic import BaseModel, Field, model_validator

from pw_strength.evaluation.domain.report import MAX_TOTAL_SCORE, Report

StrengthLabel: TypeAlias = Literal["Very Strong", "Strong", "Medium", "Weak", "N/A"]


class StrengthThresholds(BaseModel, frozen=True):
    """Minimum total scores for the two upper labels."""

    very_strong: int = Field(default=75, ge=1, le=MAX_TOTAL_SCORE)
    strong: int = Field(default=50, ge=1, le=MAX_TOTAL_SCORE)

    @model_validator(mode="after")
    def _strong_below_very_strong(self) -> Self:
        if self.strong >= self.very_strong:
            raise ValueError(
                f"strong threshold ({self.strong}) must be lower than"
                f" very_strong threshold ({self.very_strong})"
            )
        return self


def classify_strength(
    report: Report, thresholds: StrengthThresholds | None = None
) -> StrengthLabel:
    """Map *report* to a label shared by every front end.

    "N/A" is reserved for the empty-password report; a password that was
    evaluated and scored nothing is "Weak".
    """
    thresholds = thresholds or StrengthThresholds()
    if not report.evaluated:
        return "N/A"
    if report.total_score >= thresholds.very_strong:
        return "Very Strong"
    if report.total_score >= thresholds.strong:
        return "Strong"
    if report.total_score > 0:
        return "Medium"
    return "Weak"
