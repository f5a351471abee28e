"""RepetitionCriterion — rejects three identical characters in a row."""

import re

from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.criterion.domain.verdict import Verdict

# Any character followed immediately by two more of itself; DOTALL so that
# line breaks count as characters too.
_TRIPLE_RUN = re.compile(r"(.)\1\1", re.DOTALL)


class RepetitionCriterion:
    """All-or-nothing rule on runs of three or more identical characters.

    Case-sensitive: ``"aAa"`` is not a run.

    Satisfies the Criterion protocol structurally.
    """

    def __init__(self) -> None:
        self._descriptor = CriterionDescriptor(
            name="No Repetitive Sequences (AAA)", max_score=15
        )

    @property
    def descriptor(self) -> CriterionDescriptor:
        return self._descriptor

    def check(self, password: str) -> Verdict:
        if _TRIPLE_RUN.search(password) is None:
            return Verdict(
                met=True,
                message="No obvious triple repetitions found.",
                score=self._descriptor.max_score,
            )
        return Verdict(
            met=False,
            message=(
                "Warning: Contains three or more identical characters"
                " in a row (e.g., 'aaa')."
            ),
            score=0,
        )
