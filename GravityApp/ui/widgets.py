from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.uix.scrollview import ScrollView
from kivy.properties import BooleanProperty, NumericProperty
from kivy.graphics import Color, RoundedRectangle
from kivy.metrics import sp

from GravityApp.config import THEME
from GravityApp.models.catalog import NONE_MARK, card_sections, phonetics_line

class RoundedButton(Button):
    corner_radius = NumericProperty(12)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # eigener Hintergrund statt der Standard-Textur
        self.background_normal = ""
        self.background_down = ""
        self._fill = tuple(self.background_color)
        self.background_color = (0, 0, 0, 0)
        with self.canvas.before:
            self._bg_color_instr = Color(*self._fill)
            self._bg_rect = RoundedRectangle(pos=self.pos, size=self.size, radius=[self.corner_radius])
        self.bind(pos=self._update_canvas, size=self._update_canvas, state=self._update_canvas,
                  disabled=self._update_canvas, corner_radius=self._update_canvas)

    def set_fill(self, rgba):
        self._fill = tuple(rgba)
        self._update_canvas()

    def _update_canvas(self, *_):
        r, g, b, a = self._fill
        if self.state == "down":
            r, g, b = r * 0.8, g * 0.8, b * 0.8
        if self.disabled:
            a *= 0.4
        self._bg_color_instr.rgba = (r, g, b, a)
        self._bg_rect.pos = self.pos
        self._bg_rect.size = self.size
        self._bg_rect.radius = [self.corner_radius]

class DayTile(RoundedButton):
    completed = BooleanProperty(False)

    def __init__(self, day: int, **kwargs):
        self.day = day
        kwargs.setdefault("font_size", sp(22))
        kwargs.setdefault("halign", "center")
        super().__init__(**kwargs)
        self.bind(completed=lambda *_: self._refresh())
        self._refresh()

    def _refresh(self):
        self.text = f"Day {self.day}" + ("\ndone" if self.completed else "")
        self.set_fill(THEME["success"] if self.completed else THEME["surface"])

class WordCard(ScrollView):
    """Scrollable card with a word's full details."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.grid = GridLayout(cols=1, spacing=6, size_hint_y=None, padding=(12, 6))
        self.grid.bind(minimum_height=self.grid.setter("height"))
        # one width handler for the card, labels come and go with each word
        self.grid.bind(width=self._wrap_labels)
        self.add_widget(self.grid)
        self.font_name = None

    def _wrap_labels(self, *_):
        width = max(0, self.grid.width - 24)
        for lbl in self.grid.children:
            lbl.text_size = (width, None)

    def _add_wrapped_label(self, text: str, font_size, color=THEME["text"], bold=False):
        lbl = Label(text=text, font_size=font_size, size_hint_y=None, color=color,
                    halign="left", valign="top", bold=bold)
        if self.font_name:
            lbl.font_name = self.font_name
        lbl.text_size = (max(0, self.grid.width - 24), None)
        lbl.bind(texture_size=lambda inst, val: setattr(inst, "height", val[1] + 6))
        self.grid.add_widget(lbl)
        return lbl

    def show(self, record, with_header: bool = True):
        self.grid.clear_widgets()
        self.scroll_y = 1
        if with_header:
            self._add_wrapped_label(record.get("word", ""), sp(44), bold=True)
            phon = phonetics_line(record)
            if phon:
                self._add_wrapped_label(phon, sp(22), color=THEME["muted"])
        for title, lines in card_sections(record):
            self._add_wrapped_label(title, sp(20), color=THEME["primary"], bold=True)
            for line in lines:
                muted = line == NONE_MARK
                self._add_wrapped_label(line, sp(22), color=THEME["muted"] if muted else THEME["text"])

    def clear(self):
        self.grid.clear_widgets()

def button_bar(*buttons, height_hint=0.12):
    bar = BoxLayout(size_hint=(1, height_hint), spacing=8)
    for b in buttons:
        bar.add_widget(b)
    return bar
