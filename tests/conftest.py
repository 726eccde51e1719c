import pytest


class TrackedIterator:
    """Iterator over a list that counts how often it is closed."""

    def __init__(self, items):
        self._items = iter(items)
        self.close_count = 0

    def __iter__(self):
        return self

    def __next__(self):
        return next(self._items)

    def close(self):
        self.close_count += 1


class FakeSource:
    """In-memory feature source keyed by contig."""

    def __init__(self, features=None, error=None):
        self.features = features or {}
        self.error = error
        self.calls = []
        self.iterators = []

    def query(self, contig, start, end):
        self.calls.append((contig, start, end))
        if self.error is not None:
            raise self.error
        hits = [
            f for f in self.features.get(contig, [])
            if f.start < end and f.end > start
        ]
        it = TrackedIterator(hits)
        self.iterators.append(it)
        return it


@pytest.fixture
def make_source():
    """Factory: ``make_source({"chr1": [Feature, ...]}, error=None)``."""
    return FakeSource
