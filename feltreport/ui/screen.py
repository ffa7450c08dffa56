"""
Display surfaces for the felt-report screen.

The thread that builds a Screen owns it. Text surfaces and the notice surface
may only be changed from that thread; anything else raises WrongThreadError.
"""

import threading
import time
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

# Logical ids of the surfaces on the main screen
TITLE = "title"
NUMBER_OF_PEOPLE = "number_of_people"
PERCEIVED_MAGNITUDE = "perceived_magnitude"

MAIN_LAYOUT = (TITLE, NUMBER_OF_PEOPLE, PERCEIVED_MAGNITUDE)

class WrongThreadError(RuntimeError):
    """Display state was touched from a thread that does not own it."""

@dataclass
class Notice:
    text: str
    shown_at: float
    duration: float

    def visible_at(self, now: float) -> bool:
        return now < self.shown_at + self.duration

class TextSurface:
    def __init__(self, view_id: str, screen: "Screen"):
        self.view_id = view_id
        self.text = ""
        self._screen = screen

    def set_text(self, text: str) -> None:
        self._screen.check_thread()
        self.text = text
        self._screen.mutations += 1

class Screen:
    def __init__(self, layout: Iterable[str] = MAIN_LAYOUT, clock=time.monotonic):
        self.owner_thread = threading.get_ident()
        self.clock = clock
        self.mutations = 0
        self.notices: List[Notice] = []
        self._views: Dict[str, TextSurface] = {view_id: TextSurface(view_id, self) for view_id in layout}

    def check_thread(self) -> None:
        if threading.get_ident() != self.owner_thread:
            raise WrongThreadError(
                "Only the thread that created the screen can change its surfaces."
            )

    def find_view_by_id(self, view_id: str) -> TextSurface:
        try:
            return self._views[view_id]
        except KeyError:
            raise LookupError(f"No surface with id '{view_id}'") from None

    def show_notice(self, text: str, duration: float) -> Notice:
        """Show a short-lived, non-blocking notice."""
        self.check_thread()
        notice = Notice(text=text, shown_at=self.clock(), duration=duration)
        self.notices.append(notice)
        return notice

    def active_notices(self, now: Optional[float] = None) -> List[str]:
        now = self.clock() if now is None else now
        return [n.text for n in self.notices if n.visible_at(now)]

    def text_of(self, view_id: str) -> str:
        return self.find_view_by_id(view_id).text
