# handycmd/utils/debounce.py
"""
Debounce scheduler for bursts of change notifications.

Editors often write a file several times per save. The debouncer collapses
such a burst into a single run of the callback, optionally running the very
first notification of a burst right away.
"""
import asyncio
from typing import Any, Awaitable, Callable, Optional, Set

from handycmd.utils.logging import get_logger

logger = get_logger(__name__)


class Debouncer:
    """
    Collapse rapid triggers into callback runs.

    With call_now, a trigger on an idle debouncer runs the callback
    immediately and opens a quiet window of `delay` seconds. Triggers inside
    the window restart it; once it closes after at least one suppressed
    trigger the callback runs again. Without call_now only the trailing run
    happens.
    """

    def __init__(
        self,
        callback: Callable[[], Awaitable[Any]],
        delay: float,
        call_now: bool = False
    ):
        if not callable(callback):
            raise TypeError(f"Expected a callable, got {type(callback).__name__}")
        if delay < 0:
            raise ValueError("delay must not be negative")

        self._callback = callback
        self.delay = delay
        self.call_now = call_now
        self._window: Optional[asyncio.TimerHandle] = None
        self._pending = False
        self._tasks: Set[asyncio.Task] = set()

    @property
    def idle(self) -> bool:
        """True when no quiet window is open."""
        return self._window is None

    @property
    def running(self) -> int:
        """Number of callback runs still in flight."""
        return len(self._tasks)

    def trigger(self) -> None:
        """Signal a change. Must be called from the event loop thread."""
        loop = asyncio.get_running_loop()

        if self._window is not None:
            self._window.cancel()
            self._pending = True
        elif self.call_now:
            self._start_run(loop)
        else:
            self._pending = True

        self._window = loop.call_later(self.delay, self._close_window)

    def cancel(self) -> None:
        """Drop the open window and any suppressed trigger."""
        if self._window is not None:
            self._window.cancel()
            self._window = None
        self._pending = False

    async def drain(self) -> None:
        """Wait for every callback run that has already started."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _close_window(self) -> None:
        self._window = None
        if self._pending:
            self._pending = False
            loop = asyncio.get_running_loop()
            self._start_run(loop)
            # trailing run gets its own quiet window
            self._window = loop.call_later(self.delay, self._close_window)

    def _start_run(self, loop: asyncio.AbstractEventLoop) -> None:
        task = loop.create_task(self._run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self) -> None:
        try:
            await self._callback()
        except Exception as e:
            logger.exception(f"Debounced callback failed: {str(e)}")
