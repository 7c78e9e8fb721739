"""
Text codec for the numbers kept in a session.

The session stores strings only, so the collection is kept as a JSON
array of ``{"id", "value", "createdAt"}`` objects.  Decoding is
forgiving: a missing, empty or corrupted value yields an empty
collection instead of an error, because there is nothing a client
could do about a damaged cookie other than start over.
"""

import json
import logging
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from numbers_api.app.schemas.number import NumberItem

logger = logging.getLogger(__name__)

_number_list = TypeAdapter(List[NumberItem])


def decode(raw: Optional[str]) -> List[NumberItem]:
    """Parse a stored collection, returning ``[]`` for anything unusable."""
    if not raw:
        return []
    try:
        return _number_list.validate_json(raw)
    except (ValidationError, ValueError) as e:
        logger.warning("Discarding unreadable numbers in session: %s", e)
        return []


def encode(numbers: Sequence[NumberItem]) -> str:
    """Serialize ``numbers`` so that ``decode(encode(numbers)) == list(numbers)``."""
    payload = [item.model_dump(mode="json", by_alias=True) for item in numbers]
    return json.dumps(payload, separators=(",", ":"))
