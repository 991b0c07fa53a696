"""Wires the trainer together: dashboard -> study -> test -> completion.

The controller never touches widgets. It consumes command values
(``GravityApp.models.commands``) and pushes plain data to a view object, so
the whole flow can be driven without Kivy running.
"""
from __future__ import annotations
import random
from typing import Callable, Optional, Protocol, Sequence

from kivy.logger import Logger

from GravityApp.config import WORDS_PER_DAY
from GravityApp.models import commands as cmd
from GravityApp.models.days import DaySummary, day_summaries, range_for_day
from GravityApp.models.errors import SubmitWithoutCurrentWord
from GravityApp.models.sessions import StudySession, StudyStep, TestSession
from GravityApp.models.state import (
    AppState, VIEW_COMPLETION, VIEW_DASHBOARD, VIEW_STUDY, VIEW_TEST,
)
from GravityApp.persistence.progress_store import ProgressStore

class View(Protocol):
    def render_dashboard(self, days: Sequence[DaySummary], total_learned: int): ...
    def render_study(self, day: int, word_index: int, position: int, total: int, at_end: bool): ...
    def render_test(self, day: int, word_index: int, remaining: int, revealed: bool): ...
    def render_completion(self, day: int, total_learned: int): ...

class AppController:
    def __init__(self, catalog: Sequence, store: ProgressStore, view: View,
                 page_size: int = WORDS_PER_DAY, shuffle: Optional[Callable[[list], None]] = None):
        self.catalog = catalog
        self.store = store
        self.view = view
        self.page_size = page_size
        self._shuffle = shuffle
        self.state = AppState()
        self._handlers = {
            cmd.OpenDay: self._open_day,
            cmd.PrevCard: self._prev_card,
            cmd.NextCard: self._next_card,
            cmd.StartTest: self._start_test,
            cmd.RevealAnswer: self._reveal_answer,
            cmd.SubmitResult: self._submit_result,
            cmd.GoHome: self._go_home,
        }

    def start(self):
        self.store.load()
        self._show_dashboard()

    def dispatch(self, command):
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unknown command: {command!r}")
        handler(command)

    # ---- Views ----
    def _show_dashboard(self):
        self.state.view = VIEW_DASHBOARD
        days = day_summaries(self.store, len(self.catalog), self.page_size)
        self.view.render_dashboard(days, len(self.store))

    def _show_study(self):
        s = self.state.study
        self.state.view = VIEW_STUDY
        self.view.render_study(self.state.current_day, s.current, s.position, s.total, s.at_end)

    def _show_test(self):
        t = self.state.test
        self.state.view = VIEW_TEST
        self.view.render_test(self.state.current_day, t.current, t.remaining, t.revealed)

    # ---- Handlers ----
    def _open_day(self, c: cmd.OpenDay):
        words = range_for_day(c.day, len(self.catalog), self.page_size)
        if self.state.session is not None:
            Logger.debug(f"Gravity: discarding unfinished {self.state.view} session")
        self.state.current_day = c.day
        self.state.session = StudySession(words)
        Logger.info(f"Gravity: day {c.day} opened ({len(words)} words)")
        self._show_study()

    def _prev_card(self, _c):
        s = self.state.study
        if s is None:
            Logger.warning("Gravity: PrevCard ignored, no study session")
            return
        if s.prev():
            self._show_study()

    def _next_card(self, _c):
        s = self.state.study
        if s is None:
            Logger.warning("Gravity: NextCard ignored, no study session")
            return
        step = s.next()
        if step is StudyStep.MOVED:
            self._show_study()
        elif step is StudyStep.COMPLETE:
            Logger.info(f"Gravity: day {self.state.current_day} studied, test available")
            self._show_study()

    def _start_test(self, _c):
        s = self.state.study
        if s is None:
            Logger.warning("Gravity: StartTest ignored, no study session")
            return
        self.state.session = TestSession(s.words, self.store, shuffle=self._shuffle or random.shuffle)
        Logger.info(f"Gravity: test started for day {self.state.current_day}")
        self._show_test()

    def _reveal_answer(self, _c):
        t = self.state.test
        if t is None:
            Logger.warning("Gravity: RevealAnswer ignored, no test session")
            return
        t.reveal()
        self._show_test()

    def _submit_result(self, c: cmd.SubmitResult):
        t = self.state.test
        if t is None:
            Logger.warning("Gravity: SubmitResult ignored, no test session")
            return
        try:
            t.submit(c.remembered)
        except SubmitWithoutCurrentWord as e:
            Logger.warning(f"Gravity: {e}")
            return
        except OSError as e:
            # word stays at the head of the queue, the learner can answer again
            Logger.error(f"Progress: could not save word {t.current}: {e}")
            self._show_test()
            return
        if t.completed:
            Logger.info(f"Gravity: day {self.state.current_day} test finished")
            self.state.session = None
            self.state.view = VIEW_COMPLETION
            self.view.render_completion(self.state.current_day, len(self.store))
        else:
            self._show_test()

    def _go_home(self, _c):
        self.state.session = None
        self._show_dashboard()
