"""Criterion Protocol — structural interface for all password strength rules."""

from typing import Protocol, TypeAlias

from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.criterion.domain.verdict import Verdict


class Criterion(Protocol):
    """Structural interface satisfied by every strength rule.

    ``check`` must be a pure function of the password and the rule's fixed
    configuration, so a single instance can be shared across threads.
    """

    @property
    def descriptor(self) -> CriterionDescriptor: ...

    def check(self, password: str) -> Verdict: ...


CriterionKind: TypeAlias = str

# Canonical evaluation and display order.
DEFAULT_CRITERIA: tuple[CriterionKind, ...] = (
    "length",
    "complexity",
    "repetition",
    "dictionary",
)
