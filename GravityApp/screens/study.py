from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.metrics import sp

from GravityApp.models import commands as cmd
from GravityApp.models.state import VIEW_STUDY
from GravityApp.ui.widgets import RoundedButton as Button, WordCard, button_bar

class StudyScreen:
    def _build_study_screen(self):
        screen = Screen(name=VIEW_STUDY)
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)

        top = BoxLayout(size_hint=(1, 0.08), spacing=8)
        back_btn = Button(text="Back", font_size=sp(20), size_hint=(None, 1), width=140,
                          background_color=self.theme["closeButton"])
        back_btn.bind(on_release=lambda *_: self.send(cmd.GoHome()))
        self.study_day_label = Label(text="", font_size=sp(26), color=self.theme["text"])
        self.study_pos_label = Label(text="", font_size=sp(22), size_hint=(None, 1), width=140,
                                     color=self.theme["muted"])
        top.add_widget(back_btn); top.add_widget(self.study_day_label); top.add_widget(self.study_pos_label)
        root.add_widget(top)

        self.study_card = WordCard(size_hint=(1, 0.78))
        self.study_card.font_name = self.font_name
        root.add_widget(self.study_card)

        self.study_prev_btn = Button(text="Previous", font_size=sp(24), background_color=self.theme["surface"])
        self.study_next_btn = Button(text="Next", font_size=sp(24), background_color=self.theme["primary"])
        self.study_test_btn = Button(text="Start test", font_size=sp(24), background_color=self.theme["warning"])
        self.study_prev_btn.bind(on_release=lambda *_: self.send(cmd.PrevCard()))
        self.study_next_btn.bind(on_release=lambda *_: self.send(cmd.NextCard()))
        self.study_test_btn.bind(on_release=lambda *_: self.send(cmd.StartTest()))
        self.study_bar = button_bar(self.study_prev_btn, self.study_next_btn, height_hint=0.14)
        root.add_widget(self.study_bar)

        screen.add_widget(root)
        return screen

    def render_study(self, day: int, word_index: int, position: int, total: int, at_end: bool):
        self.study_day_label.text = f"Day {day}"
        self.study_pos_label.text = f"{position} / {total}"
        self.study_card.show(self.catalog[word_index])
        self.study_prev_btn.disabled = position == 1
        # am letzten Wort ersetzt "Start test" den Weiter-Button
        wanted = self.study_test_btn if at_end else self.study_next_btn
        if wanted.parent is None:
            self.study_bar.clear_widgets()
            self.study_bar.add_widget(self.study_prev_btn)
            self.study_bar.add_widget(wanted)
        self.current = VIEW_STUDY
