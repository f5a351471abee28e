"""CriterionDescriptor — display identity of a single strength rule."""

from pydantic import BaseModel, Field


class CriterionDescriptor(BaseModel, frozen=True):
    """Immutable name and maximum score of a criterion, fixed at construction."""

    name: str = Field(min_length=1)
    max_score: int = Field(ge=0)
