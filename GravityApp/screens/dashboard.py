from kivy.uix.boxlayout import BoxLayout
from kivy.uix.gridlayout import GridLayout
from kivy.uix.scrollview import ScrollView
from kivy.uix.label import Label
from kivy.uix.screenmanager import Screen
from kivy.metrics import sp

from GravityApp.models import commands as cmd
from GravityApp.models.state import VIEW_DASHBOARD
from GravityApp.ui.widgets import DayTile

class DashboardScreen:
    def _build_dashboard_screen(self):
        screen = Screen(name=VIEW_DASHBOARD)
        root = BoxLayout(orientation='vertical', spacing=10, padding=12)

        header = BoxLayout(size_hint=(1, 0.12))
        header.add_widget(Label(text="Gravity Vocab", font_size=sp(34), bold=True, color=self.theme["text"]))
        self.total_learned_label = Label(text="0 learned", font_size=sp(24), color=self.theme["muted"])
        header.add_widget(self.total_learned_label)
        root.add_widget(header)

        sv = ScrollView(size_hint=(1, 0.88))
        self.days_grid = GridLayout(cols=4, spacing=10, size_hint_y=None, padding=(0, 6))
        self.days_grid.bind(minimum_height=self.days_grid.setter('height'))
        sv.add_widget(self.days_grid)
        root.add_widget(sv)

        screen.add_widget(root)
        return screen

    def render_dashboard(self, days, total_learned: int):
        self.total_learned_label.text = f"{total_learned} learned"
        self.days_grid.clear_widgets()
        for summary in days:
            tile = DayTile(summary.day, completed=summary.completed, size_hint_y=None, height=110)
            tile.bind(on_release=lambda inst: self.send(cmd.OpenDay(inst.day)))
            self.days_grid.add_widget(tile)
        if not days:
            self.days_grid.add_widget(Label(text="No words loaded.", size_hint_y=None, height=80,
                                            color=self.theme["muted"]))
        self.current = VIEW_DASHBOARD
