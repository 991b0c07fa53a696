class GravityError(Exception):
    """Base class for trainer errors."""


class InvalidDaySelection(GravityError, ValueError):
    """A day was requested that has no words in the catalog."""

    def __init__(self, day, total_days: int):
        self.day = day
        self.total_days = total_days
        super().__init__(f"Day {day!r} has no words (valid days: 1..{total_days})")


class SubmitWithoutCurrentWord(GravityError, RuntimeError):
    """A quiz result was submitted after the queue had already drained."""

    def __init__(self):
        super().__init__("No word is being tested; the queue is empty")
