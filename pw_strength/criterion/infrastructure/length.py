"""LengthCriterion — passwords must be at least eight characters long."""

from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.criterion.domain.verdict import Verdict

_MIN_LENGTH = 8


class LengthCriterion:
    """All-or-nothing rule on the password's character count.

    Satisfies the Criterion protocol structurally.
    """

    def __init__(self) -> None:
        self._descriptor = CriterionDescriptor(
            name=f"Minimum Length ({_MIN_LENGTH} characters)", max_score=25
        )

    @property
    def descriptor(self) -> CriterionDescriptor:
        return self._descriptor

    def check(self, password: str) -> Verdict:
        length = len(password)
        if length >= _MIN_LENGTH:
            return Verdict(
                met=True,
                message=f"Great! Password is {_MIN_LENGTH}+ characters long.",
                score=self._descriptor.max_score,
            )

        shortfall = _MIN_LENGTH - length
        return Verdict(
            met=False,
            message=f"Needs {shortfall} more character(s).",
            score=0,
        )
