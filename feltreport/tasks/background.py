"""
Background task primitive.

Blocking work runs on a worker thread; its result is handed back to the
event loop that started the task, and only there is on_post_execute called.
Code that owns display state lives on the loop, so a task never touches it
from the worker.
"""

import asyncio
import enum
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any, Optional

# Background tasks share one worker thread and run one after another
_SERIAL_EXECUTOR = ThreadPoolExecutor(max_workers=1, thread_name_prefix="feltreport-worker")

class TaskStatus(enum.Enum):
    PENDING = "pending"
    RUNNING = "running"
    FINISHED = "finished"

class BackgroundTask:
    """Subclass and override do_in_background / on_post_execute."""

    def __init__(self, executor: Optional[Executor] = None):
        self.executor = executor or _SERIAL_EXECUTOR
        self.status = TaskStatus.PENDING
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._done: Optional[asyncio.Future] = None

    def do_in_background(self, *params: Any) -> Any:
        """Runs on the worker thread. Must not touch display state."""
        raise NotImplementedError

    def on_post_execute(self, result: Any) -> None:
        """Runs on the event loop thread with the background result."""

    def execute(self, *params: Any) -> "BackgroundTask":
        """
        Start the task. Must be called from the running event loop, which
        becomes the loop on_post_execute is delivered to.
        """
        if self.status is TaskStatus.RUNNING:
            raise RuntimeError("Cannot execute task: the task is already running.")
        if self.status is TaskStatus.FINISHED:
            raise RuntimeError("Cannot execute task: the task has already been executed "
                               "(a task can be executed only once)")

        self._loop = asyncio.get_running_loop()
        self._done = self._loop.create_future()
        self.status = TaskStatus.RUNNING

        worker = self._loop.run_in_executor(self.executor, self.do_in_background, *params)
        # asyncio schedules done callbacks on the loop thread
        worker.add_done_callback(self._finish)
        return self

    def _finish(self, worker: asyncio.Future) -> None:
        self.status = TaskStatus.FINISHED
        if worker.cancelled():
            self._done.cancel()
            return

        error = worker.exception()
        if error is not None:
            print(f"BACKGROUND TASK FAILED: {type(self).__name__}: {error}")
            self._done.set_exception(error)
            return

        result = worker.result()
        try:
            self.on_post_execute(result)
        except Exception as e:
            print(f"POST EXECUTE FAILED: {type(self).__name__}: {e}")
            self._done.set_exception(e)
            return
        self._done.set_result(result)

    async def wait(self) -> Any:
        """Wait until on_post_execute has run and return the background result."""
        if self._done is None:
            raise RuntimeError("Task has not been executed")
        return await asyncio.shield(self._done)
