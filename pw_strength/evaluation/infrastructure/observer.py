"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluation_skipped(self, reason: str) -> None:
        self._log.info("evaluation.skipped", reason=reason)

    def criterion_checked(
        self, criterion: str, met: bool, score: int, max_score: int
    ) -> None:
        self._log.debug(
            "evaluation.criterion_checked",
            criterion=criterion,
            met=met,
            score=score,
            max_score=max_score,
        )

    def evaluation_score_clamped(self, raw_score: int, clamped_score: int) -> None:
        self._log.warning(
            "evaluation.score_clamped",
            raw_score=raw_score,
            clamped_score=clamped_score,
            message="Criterion weights sum above the maximum total score",
        )

    def evaluation_completed(
        self, total_score: int, criteria_met: int, criteria_total: int
    ) -> None:
        self._log.info(
            "evaluation.completed",
            total_score=total_score,
            criteria_met=criteria_met,
            criteria_total=criteria_total,
        )
