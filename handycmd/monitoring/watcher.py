# handycmd/monitoring/watcher.py
"""
Command file watching for handycmd.

Watches the directory holding the command file, debounces bursts of change
events and hands the file's full text to the dispatcher.
"""
import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable, Optional, Set, Tuple, Union

from watchfiles import Change, awatch

from handycmd.commands.dispatcher import dispatch
from handycmd.commands.reporter import OutcomeReporter
from handycmd.constants import DEFAULT_CALL_NOW, DEFAULT_DEBOUNCE_DELAY, DEFAULT_ENCODING
from handycmd.errors import FileSystemError
from handycmd.execution import filesystem
from handycmd.utils.debounce import Debouncer
from handycmd.utils.logging import get_logger

logger = get_logger(__name__)

# Raw event batching inside watchfiles; the Debouncer does the real coalescing
_WATCHFILES_DEBOUNCE_MS = 50
_WATCHFILES_STEP_MS = 50


class CommandFileWatcher:
    """Runs a dispatch pass whenever the command file changes."""

    def __init__(
        self,
        path: Union[str, Path],
        dispatcher: Callable[..., Awaitable[Any]] = dispatch,
        delay: float = DEFAULT_DEBOUNCE_DELAY,
        call_now: bool = DEFAULT_CALL_NOW,
        encoding: str = DEFAULT_ENCODING,
        reporter: Optional[OutcomeReporter] = None
    ):
        self.path = Path(path)
        self.encoding = encoding
        self._target = self.path.resolve()
        self._dispatch = dispatcher
        self._reporter = reporter
        self._debouncer = Debouncer(self.process, delay, call_now=call_now)
        self._stop_event = asyncio.Event()
        self._logger = logger.with_context(path=str(self.path))

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    def ensure_file(self) -> None:
        """Create an empty command file if there is none yet."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
            self._logger.info(f"Created empty command file {self.path}")

    async def process(self) -> None:
        """Read the current text of the command file and dispatch it."""
        try:
            text = await filesystem.read_text(self.path, encoding=self.encoding)
        except FileSystemError as e:
            self._logger.warning(f"Could not read command file: {e}")
            return

        await self._dispatch(text, reporter=self._reporter)

    def handle_changes(self, changes: Iterable[Tuple[Change, str]]) -> bool:
        """
        React to one batch of raw change events for the command file.

        Returns:
            True if the batch triggered the debouncer.
        """
        kinds: Set[Change] = {change for change, _ in changes}

        if kinds & {Change.added, Change.modified}:
            self._debouncer.trigger()
            return True

        if Change.deleted in kinds:
            self._logger.warning(
                f"The watched file {self.path} was removed or renamed; "
                "watching continues for a file at the same path"
            )
        return False

    def _filter(self, change: Change, path: str) -> bool:
        return Path(path).resolve() == self._target

    async def watch(self) -> None:
        """Watch until stop() is called."""
        self.ensure_file()
        self._stop_event.clear()
        self._logger.info(f"Watching {self.path}")

        try:
            async for changes in awatch(
                self._target.parent,
                watch_filter=self._filter,
                stop_event=self._stop_event,
                recursive=False,
                debounce=_WATCHFILES_DEBOUNCE_MS,
                step=_WATCHFILES_STEP_MS,
            ):
                self.handle_changes(changes)
        finally:
            self._debouncer.cancel()
            await self._debouncer.drain()
            self._logger.info(f"Stopped watching {self.path}")

    def stop(self) -> None:
        """Ask watch() to return."""
        self._stop_event.set()
