import pytest

from collatz_search import SearchObserver


class RecordingObserver(SearchObserver):
    def __init__(self):
        self.checkpoints = []
        self.proven = []
        self.cycles = []

    def on_checkpoint(self, steps, validated):
        self.checkpoints.append((steps, [iv.as_tuple() for iv in validated]))

    def on_base_proven(self, base, value):
        self.proven.append((base, value))

    def on_cycle(self, value):
        self.cycles.append(value)


@pytest.fixture
def recorder():
    return RecordingObserver()
