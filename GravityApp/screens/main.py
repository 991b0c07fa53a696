from kivy.uix.screenmanager import ScreenManager, NoTransition
from kivy.uix.popup import Popup
from kivy.uix.label import Label
from kivy.core.text import LabelBase
from kivy.graphics import Color, Rectangle
from kivy.logger import Logger

from GravityApp.config import FONT_CANDIDATES, THEME
from .dashboard import DashboardScreen
from .study import StudyScreen
from .quiz import QuizScreen
from .completion import CompletionScreen

class GravityRoot(DashboardScreen, StudyScreen, QuizScreen, CompletionScreen, ScreenManager):
    """Root widget; one screen per view, implements the controller's view interface."""

    def __init__(self, catalog, **kwargs):
        kwargs.setdefault("transition", NoTransition())
        super().__init__(**kwargs)
        self.catalog = catalog
        self.controller = None
        self.theme = THEME
        self.font_name = self._register_font()

        with self.canvas.before:
            Color(*self.theme["bg"])
            self.rect = Rectangle(size=self.size, pos=self.pos)
        self.bind(size=self._update_rect, pos=self._update_rect)

        self.add_widget(self._build_dashboard_screen())
        self.add_widget(self._build_study_screen())
        self.add_widget(self._build_quiz_screen())
        self.add_widget(self._build_completion_screen())

    def _register_font(self):
        for p in FONT_CANDIDATES:
            if p.exists():
                LabelBase.register(name="GravityCJK", fn_regular=str(p))
                Logger.info(f"Fonts: loaded {p.name}")
                return "GravityCJK"
        Logger.info("Fonts: no CJK font in res/fonts, translations may not render")
        return None

    def _update_rect(self, instance, value):
        self.rect.pos = instance.pos
        self.rect.size = instance.size

    def send(self, command):
        if self.controller is None:
            Logger.warning(f"Gravity: {command!r} before the controller was attached")
            return
        self.controller.dispatch(command)

    def show_error_popup(self, message):
        popup = Popup(title="Gravity Vocab", content=Label(text=message), size_hint=(0.8, 0.4))
        popup.open()
