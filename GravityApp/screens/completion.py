from kivy.uix.anchorlayout import AnchorLayout
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.metrics import sp

from GravityApp.models import commands as cmd
from GravityApp.models.state import VIEW_COMPLETION
from GravityApp.ui.widgets import RoundedButton as Button

class CompletionScreen:
    def _build_completion_screen(self):
        screen = Screen(name=VIEW_COMPLETION)
        root = BoxLayout(orientation='vertical', spacing=16, padding=24)
        self.completion_title = Label(text="", font_size=sp(40), bold=True, size_hint=(1, 0.4),
                                      color=self.theme["text"])
        self.completion_detail = Label(text="", font_size=sp(24), size_hint=(1, 0.3), color=self.theme["muted"])
        root.add_widget(self.completion_title)
        root.add_widget(self.completion_detail)

        anchor = AnchorLayout(size_hint=(1, 0.3), anchor_x='center', anchor_y='center')
        home_btn = Button(text="Back to days", font_size=sp(26), size_hint=(None, None), size=(320, 90),
                          background_color=self.theme["success"])
        home_btn.bind(on_release=lambda *_: self.send(cmd.GoHome()))
        anchor.add_widget(home_btn)
        root.add_widget(anchor)

        screen.add_widget(root)
        return screen

    def render_completion(self, day: int, total_learned: int):
        self.completion_title.text = f"Day {day} complete"
        self.completion_detail.text = f"{total_learned} words learned so far"
        self.current = VIEW_COMPLETION
