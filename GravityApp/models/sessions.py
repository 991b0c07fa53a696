from __future__ import annotations
from collections import deque
import enum
import random
from typing import Callable, Iterable, Optional, Protocol

from .errors import SubmitWithoutCurrentWord

class StudyStep(enum.Enum):
    MOVED = "moved"
    COMPLETE = "complete"   # reached the end just now, offer the test
    STAY = "stay"           # still at the end, already offered

class StudySession:
    """Linear read-through of one day's words."""

    def __init__(self, words: Iterable[int]):
        self.words = list(words)
        if not self.words:
            raise ValueError("StudySession needs at least one word")
        self.index = 0
        self._end_signalled = False

    @property
    def current(self) -> int:
        return self.words[self.index]

    @property
    def position(self) -> int:
        return self.index + 1

    @property
    def total(self) -> int:
        return len(self.words)

    @property
    def at_end(self) -> bool:
        return self.index == len(self.words) - 1

    def prev(self) -> bool:
        if self.index == 0:
            return False
        self.index -= 1
        self._end_signalled = False
        return True

    def next(self) -> StudyStep:
        if not self.at_end:
            self.index += 1
            return StudyStep.MOVED
        if self._end_signalled:
            return StudyStep.STAY
        self._end_signalled = True
        return StudyStep.COMPLETE

class LearnedMarker(Protocol):
    def mark_learned(self, index: int) -> bool: ...

class TestSession:
    """Quiz over one day's words.

    The head of ``queue`` is the word on screen. A remembered word leaves the
    queue and is marked learned; a forgotten one goes to the back, so the
    session only ends once every word has been answered correctly.
    """

    __test__ = False  # not a pytest class

    def __init__(self, words: Iterable[int], progress: LearnedMarker,
                 shuffle: Callable[[list], None] = random.shuffle):
        order = list(words)
        shuffle(order)
        self._queue: deque[int] = deque(order)
        self._progress = progress
        self.revealed = False

    @property
    def queue(self) -> list[int]:
        return list(self._queue)

    @property
    def current(self) -> Optional[int]:
        return self._queue[0] if self._queue else None

    @property
    def remaining(self) -> int:
        return len(self._queue)

    @property
    def completed(self) -> bool:
        return not self._queue

    def reveal(self):
        if self._queue:
            self.revealed = True

    def submit(self, remembered: bool) -> Optional[int]:
        if not self._queue:
            raise SubmitWithoutCurrentWord()
        if remembered:
            # record first: a failed write must leave the word in the queue
            self._progress.mark_learned(self._queue[0])
            self._queue.popleft()
        else:
            self._queue.rotate(-1)
        self.revealed = False
        return self.current
