"""Partition of the catalog into fixed-size days, numbered from 1."""
from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Container

from .errors import InvalidDaySelection

@dataclass(frozen=True, slots=True)
class DaySummary:
    day: int
    start: int
    end: int
    completed: bool

    @property
    def size(self) -> int:
        return self.end - self.start

def total_days(catalog_size: int, page_size: int) -> int:
    return math.ceil(catalog_size / page_size) if catalog_size > 0 else 0

def range_for_day(day: int, catalog_size: int, page_size: int) -> range:
    start = (day - 1) * page_size
    end = min(day * page_size, catalog_size)
    if day < 1 or start >= end:
        raise InvalidDaySelection(day, total_days(catalog_size, page_size))
    return range(start, end)

def is_day_completed(day: int, learned: Container[int], catalog_size: int, page_size: int) -> bool:
    # clamped range: the last day may be shorter than page_size
    return all(idx in learned for idx in range_for_day(day, catalog_size, page_size))

def day_summaries(learned: Container[int], catalog_size: int, page_size: int) -> list[DaySummary]:
    out = []
    for d in range(1, total_days(catalog_size, page_size) + 1):
        r = range_for_day(d, catalog_size, page_size)
        out.append(DaySummary(d, r.start, r.stop, all(i in learned for i in r)))
    return out
