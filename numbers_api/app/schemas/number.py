"""
Pydantic schemas for session‑stored numbers.

A ``NumberItem`` is one randomly generated integer together with its
1‑based position in the collection and the time it was created.  The
``NumberResponse`` bundles the collection with its count and sum and is
returned by every numbers endpoint.
"""

from datetime import datetime, timezone
from typing import List, Sequence

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NumberItem(BaseModel):
    """A single stored number."""

    id: int = Field(..., description="1‑based position at the time the number was added")
    value: int = Field(..., description="Randomly generated value")
    created_at: datetime = Field(
        default_factory=_utcnow,
        alias="createdAt",
        description="UTC timestamp of creation; informational only",
    )

    model_config = {
        "populate_by_name": True,
    }


class NumberResponse(BaseModel):
    """Aggregate view over the numbers stored in a session."""

    numbers: List[NumberItem] = Field(default_factory=list)
    count: int = 0
    sum: int = 0

    @classmethod
    def from_numbers(cls, numbers: Sequence[NumberItem]) -> "NumberResponse":
        """Build the view, recomputing ``count`` and ``sum`` from ``numbers``."""
        items = list(numbers)
        return cls(numbers=items, count=len(items), sum=sum(item.value for item in items))
