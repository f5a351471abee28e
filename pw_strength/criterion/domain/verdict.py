"""Verdict — structured outcome of one criterion check."""

from pydantic import BaseModel, Field


class Verdict(BaseModel, frozen=True):
    """Immutable result of checking one password against one criterion.

    Not meeting a rule is a normal outcome (``met=False``), never an error.
    The upper bound on ``score`` depends on the producing criterion and is
    enforced where the verdict is paired with its descriptor.
    """

    met: bool
    message: str
    score: int = Field(ge=0)
