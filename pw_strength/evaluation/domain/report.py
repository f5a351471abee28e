"""Report — the aggregate result of evaluating one password."""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from pw_strength.criterion.domain.verdict import Verdict

MAX_TOTAL_SCORE = 100


class CriterionOutcome(BaseModel, frozen=True):
    """One criterion's verdict, labelled with the criterion's descriptor."""

    name: str = Field(min_length=1)
    max_score: int = Field(ge=0)
    verdict: Verdict

    @model_validator(mode="after")
    def _score_within_max(self) -> Self:
        if self.verdict.score > self.max_score:
            raise ValueError(
                f"score {self.verdict.score} exceeds max_score {self.max_score}"
                f" for criterion '{self.name}'"
            )
        return self


class Report(BaseModel, frozen=True):
    """Immutable result returned by one evaluation.

    ``outcomes`` follows the evaluator's criterion order. An empty password
    produces ``total_score == 0``, ``evaluated=False`` and no outcomes at all.
    A non-empty password is always ``evaluated``, even with no criteria.
    """

    total_score: int = Field(ge=0, le=MAX_TOTAL_SCORE)
    evaluated: bool = False
    outcomes: tuple[CriterionOutcome, ...] = ()

    @model_validator(mode="after")
    def _outcomes_require_evaluation(self) -> Self:
        if self.outcomes and not self.evaluated:
            raise ValueError("a report with outcomes must be marked evaluated")
        return self

    @property
    def criteria_met(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.verdict.met)
