import asyncio
import enum
from typing import Callable, Optional

from feltreport.core.config import settings
from feltreport.schemas import Event, FetchOutcome, NotFound, ScreenState
from feltreport.tasks.background import BackgroundTask
from feltreport.tasks.fetch_task import EarthquakeFetchTask
from feltreport.ui import screen as views
from feltreport.ui.strings import get_string

class PresenterState(enum.Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    DISPLAYED = "displayed"
    NOT_FOUND = "not_found"

class FeltReportPresenter:
    """
    Shows the perceived strength of a single earthquake, based on the
    responses of people who felt it.

    Lives on the event loop thread that owns the screen.
    """

    def __init__(
        self,
        screen: views.Screen,
        request_url: Optional[str] = None,
        task_factory: Callable[[Callable[[FetchOutcome], None]], BackgroundTask] = EarthquakeFetchTask,
    ):
        self.screen = screen
        self.request_url = settings.USGS_REQUEST_URL if request_url is None else request_url
        self.task_factory = task_factory
        self.state = PresenterState.IDLE
        self.task: Optional[BackgroundTask] = None

    def on_ready(self) -> BackgroundTask:
        """Start one background fetch. Call from the running event loop."""
        self.task = self.task_factory(self.on_result)
        self.state = PresenterState.FETCHING
        self.task.execute(self.request_url)
        return self.task

    def on_result(self, outcome: FetchOutcome) -> None:
        if isinstance(outcome, NotFound):
            # Nothing to show, just let the user know
            self.screen.show_notice(
                get_string("no_earthquake_data"), duration=settings.NOTICE_DURATION_SECONDS
            )
            self.state = PresenterState.NOT_FOUND
            return

        self.update_ui(outcome.event)
        self.state = PresenterState.DISPLAYED

    def update_ui(self, earthquake: Event) -> None:
        self.screen.find_view_by_id(views.TITLE).set_text(earthquake.title)
        self.screen.find_view_by_id(views.NUMBER_OF_PEOPLE).set_text(
            get_string("num_people_felt_it", earthquake.num_of_people)
        )
        self.screen.find_view_by_id(views.PERCEIVED_MAGNITUDE).set_text(earthquake.perceived_strength)

    async def wait_until_settled(self, timeout: Optional[float] = None) -> PresenterState:
        """Wait for the in-flight fetch to be delivered. Raises asyncio.TimeoutError."""
        if self.task is not None:
            await asyncio.wait_for(self.task.wait(), timeout)
        return self.state

    def to_state(self) -> ScreenState:
        return ScreenState(
            state=self.state.value,
            title=self.screen.text_of(views.TITLE),
            number_of_people=self.screen.text_of(views.NUMBER_OF_PEOPLE),
            perceived_strength=self.screen.text_of(views.PERCEIVED_MAGNITUDE),
            notices=self.screen.active_notices(),
        )
