from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.metrics import sp

from GravityApp.models import commands as cmd
from GravityApp.models.catalog import phonetics_line
from GravityApp.models.state import VIEW_TEST
from GravityApp.ui.widgets import RoundedButton as Button, WordCard, button_bar

class QuizScreen:
    def _build_quiz_screen(self):
        screen = Screen(name=VIEW_TEST)
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)

        top = BoxLayout(size_hint=(1, 0.08), spacing=8)
        back_btn = Button(text="Back", font_size=sp(20), size_hint=(None, 1), width=140,
                          background_color=self.theme["closeButton"])
        back_btn.bind(on_release=lambda *_: self.send(cmd.GoHome()))
        self.quiz_day_label = Label(text="", font_size=sp(26), color=self.theme["text"])
        self.quiz_remaining_label = Label(text="", font_size=sp(22), size_hint=(None, 1), width=200,
                                          color=self.theme["muted"])
        top.add_widget(back_btn); top.add_widget(self.quiz_day_label); top.add_widget(self.quiz_remaining_label)
        root.add_widget(top)

        # Vorderseite: nur Wort und Aussprache
        self.quiz_word_label = Label(text="", font_size=sp(56), bold=True, size_hint=(1, 0.16),
                                     color=self.theme["text"])
        self.quiz_phon_label = Label(text="", font_size=sp(22), size_hint=(1, 0.06), color=self.theme["muted"])
        if self.font_name:
            self.quiz_phon_label.font_name = self.font_name
        root.add_widget(self.quiz_word_label)
        root.add_widget(self.quiz_phon_label)

        self.quiz_back_card = WordCard(size_hint=(1, 0.56))
        self.quiz_back_card.font_name = self.font_name
        root.add_widget(self.quiz_back_card)

        self.quiz_reveal_btn = Button(text="Show answer", font_size=sp(24), background_color=self.theme["primary"])
        self.quiz_reveal_btn.bind(on_release=lambda *_: self.send(cmd.RevealAnswer()))
        self.quiz_forgot_btn = Button(text="Forgot", font_size=sp(24), background_color=self.theme["danger"])
        self.quiz_known_btn = Button(text="Remembered", font_size=sp(24), background_color=self.theme["success"])
        self.quiz_forgot_btn.bind(on_release=lambda *_: self.send(cmd.SubmitResult(remembered=False)))
        self.quiz_known_btn.bind(on_release=lambda *_: self.send(cmd.SubmitResult(remembered=True)))
        self.quiz_bar = button_bar(self.quiz_reveal_btn, height_hint=0.14)
        root.add_widget(self.quiz_bar)

        screen.add_widget(root)
        return screen

    def render_test(self, day: int, word_index: int, remaining: int, revealed: bool):
        record = self.catalog[word_index]
        self.quiz_day_label.text = f"Day {day} test"
        self.quiz_remaining_label.text = f"{remaining} remaining"
        self.quiz_word_label.text = record.get("word", "")
        self.quiz_phon_label.text = phonetics_line(record, order=("us", "uk"))
        self.quiz_bar.clear_widgets()
        if revealed:
            self.quiz_back_card.show(record, with_header=False)
            self.quiz_bar.add_widget(self.quiz_forgot_btn)
            self.quiz_bar.add_widget(self.quiz_known_btn)
        else:
            self.quiz_back_card.clear()
            self.quiz_bar.add_widget(self.quiz_reveal_btn)
        self.current = VIEW_TEST
