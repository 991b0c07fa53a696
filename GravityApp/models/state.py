from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from .sessions import StudySession, TestSession

VIEW_DASHBOARD = "dashboard"
VIEW_STUDY = "study"
VIEW_TEST = "test"
VIEW_COMPLETION = "completion"

@dataclass(slots=True)
class AppState:
    view: str = VIEW_DASHBOARD
    current_day: Optional[int] = None
    # nur eine aktive Sitzung; Ersetzen verwirft den Zwischenstand
    session: Union[StudySession, TestSession, None] = None

    @property
    def study(self) -> Optional[StudySession]:
        return self.session if isinstance(self.session, StudySession) else None

    @property
    def test(self) -> Optional[TestSession]:
        return self.session if isinstance(self.session, TestSession) else None
