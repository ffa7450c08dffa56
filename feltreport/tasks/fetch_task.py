from concurrent.futures import Executor
from typing import Callable, Optional

from feltreport.fetch import feed
from feltreport.schemas import FetchOutcome, NotFound, outcome_from
from feltreport.tasks.background import BackgroundTask

def run(url: Optional[str]) -> FetchOutcome:
    """
    Fetch the felt report behind url.

    An empty URL short-circuits to NotFound without any I/O. Otherwise exactly
    one feed request is made; every failure comes back as NotFound.
    """
    if not url:
        return NotFound()
    return outcome_from(feed.fetch_earthquake_data(url))

class EarthquakeFetchTask(BackgroundTask):
    """Runs the feed request off the event loop and hands the outcome back to it."""

    def __init__(self, on_result: Callable[[FetchOutcome], None], executor: Optional[Executor] = None):
        super().__init__(executor=executor)
        self.on_result = on_result

    def do_in_background(self, url: Optional[str] = None) -> FetchOutcome:
        return run(url)

    def on_post_execute(self, outcome: FetchOutcome) -> None:
        self.on_result(outcome)
