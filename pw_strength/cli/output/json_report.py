"""Machine-readable rendering of an evaluation report."""

from typing import Any

from pw_strength.evaluation.domain.report import Report
from pw_strength.evaluation.domain.strength import StrengthLabel


def build_report_json(report: Report, label: StrengthLabel) -> dict[str, Any]:
    """Return a JSON-serialisable dict describing *report*.

    Criteria appear in evaluation order; the password itself is never included.
    """
    return {
        "score": report.total_score,
        "label": label,
        "criteria": [
            {
                "name": outcome.name,
                "max_score": outcome.max_score,
                "met": outcome.verdict.met,
                "score": outcome.verdict.score,
                "message": outcome.verdict.message,
            }
            for outcome in report.outcomes
        ],
    }
