"""Evaluator — runs every criterion against a password and folds the verdicts."""

from collections.abc import Sequence

from pw_strength.criterion.domain.criterion import Criterion
from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.criterion.infrastructure.registry import create_criteria
from pw_strength.evaluation.domain.observer import EvaluationObserver
from pw_strength.evaluation.domain.report import (
    MAX_TOTAL_SCORE,
    CriterionOutcome,
    Report,
)

_EMPTY_PASSWORD = "empty_password"


class Evaluator:
    """Single evaluation entry point shared by every front end.

    Criteria are fixed at construction and hold no mutable state, so one
    Evaluator may serve concurrent callers. With no explicit criteria the
    canonical four are used: length, complexity, repetition, dictionary.
    """

    def __init__(
        self,
        observer: EvaluationObserver,
        criteria: Sequence[Criterion] | None = None,
    ) -> None:
        self._observer = observer
        self._criteria: tuple[Criterion, ...] = tuple(
            create_criteria() if criteria is None else criteria
        )

    @property
    def descriptors(self) -> list[CriterionDescriptor]:
        """Descriptors of the configured criteria, in evaluation order."""
        return [criterion.descriptor for criterion in self._criteria]

    def evaluate(self, password: str) -> Report:
        """Evaluate *password* and return its Report.

        An empty password short-circuits: no criterion is invoked and the
        report has a zero score and no outcomes. Never raises for any
        password when every criterion keeps its score within its descriptor's
        ``max_score``.

        Raises:
            pydantic.ValidationError: if a criterion returns a score above its
                own ``max_score``.
        """
        if not password:
            self._observer.evaluation_skipped(reason=_EMPTY_PASSWORD)
            return Report(total_score=0)

        outcomes: list[CriterionOutcome] = []
        raw_score = 0
        for criterion in self._criteria:
            descriptor = criterion.descriptor
            verdict = criterion.check(password)
            raw_score += verdict.score
            outcomes.append(
                CriterionOutcome(
                    name=descriptor.name,
                    max_score=descriptor.max_score,
                    verdict=verdict,
                )
            )
            self._observer.criterion_checked(
                criterion=descriptor.name,
                met=verdict.met,
                score=verdict.score,
                max_score=descriptor.max_score,
            )

        total_score = min(MAX_TOTAL_SCORE, raw_score)
        if total_score < raw_score:
            self._observer.evaluation_score_clamped(
                raw_score=raw_score, clamped_score=total_score
            )

        report = Report(
            total_score=total_score, evaluated=True, outcomes=tuple(outcomes)
        )
        self._observer.evaluation_completed(
            total_score=report.total_score,
            criteria_met=report.criteria_met,
            criteria_total=len(outcomes),
        )
        return report
