"""Builders for test data."""
from datetime import datetime, timedelta, timezone

from numbers_api.app.schemas.number import NumberItem


def make_numbers(count):
    """Build ``count`` numbers with predictable values 10, 20, 30..."""
    now = datetime.now(timezone.utc)
    return [
        NumberItem(id=i, value=i * 10, created_at=now - timedelta(minutes=i))
        for i in range(1, count + 1)
    ]


class InMemorySessionStore:
    """Session store backed by a plain dict"""

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get_string(self, key):
        return self.data.get(key)

    def set_string(self, key, value):
        self.data[key] = value
