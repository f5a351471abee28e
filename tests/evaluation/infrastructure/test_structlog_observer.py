"""Tests for StructlogEvaluationObserver."""

from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from pw_strength.evaluation.application.evaluator import Evaluator
from pw_strength.evaluation.infrastructure.observer import (
    StructlogEvaluationObserver,
)


@pytest.fixture(autouse=True)
def _default_structlog() -> Iterator[None]:
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestStructlogEvaluationObserver:
    """Each domain event is logged under a dotted event name."""

    def test_evaluation_skipped(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().evaluation_skipped(reason="empty_password")

        assert logs == [
            {
                "event": "evaluation.skipped",
                "log_level": "info",
                "reason": "empty_password",
            }
        ]

    def test_criterion_checked_is_debug(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().criterion_checked(
                criterion="Rule", met=False, score=0, max_score=10
            )

        assert logs[0]["event"] == "evaluation.criterion_checked"
        assert logs[0]["log_level"] == "debug"
        assert logs[0]["criterion"] == "Rule"
        assert logs[0]["met"] is False

    def test_score_clamped_is_warning(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().evaluation_score_clamped(
                raw_score=120, clamped_score=100
            )

        assert logs[0]["event"] == "evaluation.score_clamped"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["raw_score"] == 120

    def test_evaluation_completed(self) -> None:
        with capture_logs() as logs:
            StructlogEvaluationObserver().evaluation_completed(
                total_score=90, criteria_met=3, criteria_total=4
            )

        assert logs[0]["event"] == "evaluation.completed"
        assert logs[0]["total_score"] == 90
        assert logs[0]["criteria_met"] == 3

    def test_full_evaluation_never_logs_the_password(self) -> None:
        evaluator = Evaluator(observer=StructlogEvaluationObserver())

        with capture_logs() as logs:
            evaluator.evaluate("Sup3r$ecretValue")

        assert len(logs) == 5
        assert all("Sup3r$ecretValue" not in repr(entry) for entry in logs)
