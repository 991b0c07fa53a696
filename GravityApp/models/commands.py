"""User actions as plain values, consumed by ``AppController.dispatch``."""
from dataclasses import dataclass

@dataclass(frozen=True)
class OpenDay:
    day: int

@dataclass(frozen=True)
class PrevCard:
    pass

@dataclass(frozen=True)
class NextCard:
    pass

@dataclass(frozen=True)
class StartTest:
    pass

@dataclass(frozen=True)
class RevealAnswer:
    pass

@dataclass(frozen=True)
class SubmitResult:
    remembered: bool

@dataclass(frozen=True)
class GoHome:
    pass
