"""DictionaryCriterion — rejects passwords containing a known weak substring."""

from pw_strength.criterion.domain.charset import WEAK_SUBSTRINGS
from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.criterion.domain.verdict import Verdict


class DictionaryCriterion:
    """All-or-nothing rule against the weak-substring list.

    Matching is case-insensitive substring containment, so ``"myabcdef"``
    fails because it contains ``"abc"``.

    Satisfies the Criterion protocol structurally.
    """

    def __init__(self, weak_substrings: frozenset[str] = WEAK_SUBSTRINGS) -> None:
        self._weak_substrings = weak_substrings
        self._descriptor = CriterionDescriptor(
            name="Not a Common Word/Pattern", max_score=10
        )

    @property
    def descriptor(self) -> CriterionDescriptor:
        return self._descriptor

    def check(self, password: str) -> Verdict:
        lowered = password.lower()
        if any(weak in lowered for weak in self._weak_substrings):
            return Verdict(
                met=False,
                message="Warning: Contains a common or dictionary word/sequence.",
                score=0,
            )
        return Verdict(
            met=True,
            message="Password does not contain common dictionary words.",
            score=self._descriptor.max_score,
        )
