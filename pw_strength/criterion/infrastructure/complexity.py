"""ComplexityCriterion — rewards each of the four character classes present."""

from pw_strength.criterion.domain.charset import (
    DIGITS,
    LOWERCASE,
    SPECIAL_CHARACTERS,
    UPPERCASE,
)
from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.criterion.domain.verdict import Verdict

# (display label, member set), in classification priority order.
_CHARACTER_CLASSES: tuple[tuple[str, frozenset[str]], ...] = (
    ("Uppercase", UPPERCASE),
    ("Lowercase", LOWERCASE),
    ("Digit", DIGITS),
    ("Special Char", SPECIAL_CHARACTERS),
)


def _classify(char: str) -> str | None:
    """Return the label of the first class containing *char*, or None."""
    for label, members in _CHARACTER_CLASSES:
        if char in members:
            return label
    return None


class ComplexityCriterion:
    """Partial-credit rule over uppercase, lowercase, digit and special classes.

    Characters outside all four classes (whitespace, non-ASCII letters) are
    ignored. The score is ``floor(max_score * types_met / 4)``, so the
    possible scores are 0, 12, 25, 37 and 50.

    Satisfies the Criterion protocol structurally.
    """

    def __init__(self) -> None:
        self._descriptor = CriterionDescriptor(
            name="Character Complexity (4 types)", max_score=50
        )

    @property
    def descriptor(self) -> CriterionDescriptor:
        return self._descriptor

    def check(self, password: str) -> Verdict:
        present = {_classify(char) for char in password}
        missing = [label for label, _ in _CHARACTER_CLASSES if label not in present]

        total_classes = len(_CHARACTER_CLASSES)
        types_met = total_classes - len(missing)
        score = self._descriptor.max_score * types_met // total_classes

        if not missing:
            return Verdict(
                met=True,
                message="Excellent! All 4 character types are present.",
                score=score,
            )
        return Verdict(
            met=False,
            message=f"Missing: {', '.join(missing)}.",
            score=score,
        )
