import os

# keep Kivy quiet and away from the real command line / home directory
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

import pytest

from GravityApp.persistence.progress_store import ProgressStore


@pytest.fixture
def progress_file(tmp_path):
    return tmp_path / "progress.json"


@pytest.fixture
def store(progress_file):
    s = ProgressStore(progress_file)
    s.load()
    return s


@pytest.fixture
def catalog():
    """25 minimal word records: day 1 has 20 words, day 2 has 5."""
    return [{"word": f"word{i}", "meaning": f"meaning {i}"} for i in range(25)]


class FakeStore:
    """In-memory stand-in that records every persisted write."""

    def __init__(self, learned=()):
        self._learned = list(learned)
        self.writes = []

    def load(self):
        return list(self._learned)

    def mark_learned(self, index):
        if index in self._learned:
            return False
        self._learned.append(index)
        self.writes.append(list(self._learned))
        return True

    def __contains__(self, index):
        return index in self._learned

    def __len__(self):
        return len(self._learned)


@pytest.fixture
def fake_store():
    return FakeStore()
