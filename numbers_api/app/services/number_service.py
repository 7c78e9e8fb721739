"""
Service layer for session‑scoped numbers.

Every operation follows the same cycle: read the stored collection from
the session, decode it, optionally transform and write it back, and
return a ``NumberResponse`` computed from the result.  Aggregates are
never stored; they are recomputed on each call.

When no session is available (``session`` is ``None``) the service
works on a transient empty collection and never writes.  Concurrent
requests from one session are not coordinated; the last write wins.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from numbers_api.app.core.config import settings
from numbers_api.app.core.session import SessionStore
from numbers_api.app.schemas.number import NumberItem, NumberResponse
from numbers_api.app.services import number_codec

SESSION_KEY = "Numbers"


class NumberService:
    """Operations over the numbers stored in one client session."""

    def __init__(
        self,
        session: Optional[SessionStore],
        rng: Optional[random.Random] = None,
        value_range: Optional[Tuple[int, int]] = None,
    ) -> None:
        low, high = value_range if value_range is not None else settings.value_range
        if low > high:
            raise ValueError(f"Invalid value range: {low} > {high}")
        self.session = session
        self.rng = rng or random.Random()
        self.value_range = (low, high)

    async def list_numbers(self) -> NumberResponse:
        """Return all stored numbers with their count and sum."""
        return NumberResponse.from_numbers(self._load())

    async def add_random_number(self) -> NumberResponse:
        """Append one random number and return the updated view.

        The new record's ``id`` is one more than the current count.
        Without a session this is a no‑op returning an empty view.
        """
        if self.session is None:
            return NumberResponse()
        numbers = self._load()
        low, high = self.value_range
        item = NumberItem(id=len(numbers) + 1, value=self.rng.randint(low, high))
        numbers.append(item)
        self._store(numbers)
        logging.getLogger(__name__).info("Added number %s (id=%s)", item.value, item.id)
        return NumberResponse.from_numbers(numbers)

    async def clear_numbers(self) -> NumberResponse:
        """Remove all stored numbers.  Without a session there is nothing to clear."""
        if self.session is None:
            return NumberResponse()
        self._store([])
        logging.getLogger(__name__).info("Cleared numbers")
        return NumberResponse()

    async def get_sum(self) -> NumberResponse:
        """Return the same view as :meth:`list_numbers`; ``sum`` is always present."""
        return NumberResponse.from_numbers(self._load())

    def _load(self) -> List[NumberItem]:
        if self.session is None:
            return []
        return number_codec.decode(self.session.get_string(SESSION_KEY))

    def _store(self, numbers: List[NumberItem]) -> None:
        if self.session is None:
            return
        self.session.set_string(SESSION_KEY, number_codec.encode(numbers))
