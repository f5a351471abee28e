"""Criterion registry — maps stable kind keys to rule implementations."""

from collections.abc import Callable, Sequence

from pw_strength.criterion.domain.criterion import (
    DEFAULT_CRITERIA,
    Criterion,
    CriterionKind,
)
from pw_strength.criterion.infrastructure.complexity import ComplexityCriterion
from pw_strength.criterion.infrastructure.dictionary import DictionaryCriterion
from pw_strength.criterion.infrastructure.errors import CriterionNotSupportedError
from pw_strength.criterion.infrastructure.length import LengthCriterion
from pw_strength.criterion.infrastructure.repetition import RepetitionCriterion

_REGISTRY: dict[CriterionKind, Callable[[], Criterion]] = {
    "length": LengthCriterion,
    "complexity": ComplexityCriterion,
    "repetition": RepetitionCriterion,
    "dictionary": DictionaryCriterion,
}


def supported_kinds() -> tuple[CriterionKind, ...]:
    """Return every registered criterion kind in canonical order."""
    return tuple(kind for kind in DEFAULT_CRITERIA if kind in _REGISTRY)


def create_criterion(kind: CriterionKind) -> Criterion:
    """Return a new criterion instance for *kind*.

    Raises:
        CriterionNotSupportedError: if *kind* is not registered.
    """
    try:
        constructor = _REGISTRY[kind]
    except KeyError:
        raise CriterionNotSupportedError(kind=kind) from None
    return constructor()


def create_criteria(
    kinds: Sequence[CriterionKind] = DEFAULT_CRITERIA,
) -> list[Criterion]:
    """Return criterion instances for *kinds*, preserving their order."""
    return [create_criterion(kind=kind) for kind in kinds]
