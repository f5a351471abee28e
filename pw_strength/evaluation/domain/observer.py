"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during password evaluation.

    Events never carry the password or any part of it.
    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def evaluation_skipped(self, reason: str) -> None: ...

    def criterion_checked(
        self, criterion: str, met: bool, score: int, max_score: int
    ) -> None: ...

    def evaluation_score_clamped(self, raw_score: int, clamped_score: int) -> None: ...

    def evaluation_completed(
        self, total_score: int, criteria_met: int, criteria_total: int
    ) -> None: ...
