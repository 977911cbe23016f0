# handycmd/commands/reporter.py
"""
Outcome reporting for handycmd.

Turns handler outcomes into categorized, colored console lines and mirrors
them into the application log.
"""
from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from handycmd.constants import MESSAGE_STYLES
from handycmd.commands.models import (
    CommandKind, MessageCategory, OperationOutcome, OutcomeStatus, ReportMessage
)
from handycmd.utils.logging import get_logger

logger = get_logger(__name__)

_SUCCESS_PHRASES: Dict[CommandKind, str] = {
    CommandKind.CREATE_FILE: 'created a new file at "{0}"',
    CommandKind.CREATE_FOLDER: 'created a new folder at "{0}"',
    CommandKind.DELETE_FILE: 'deleted a file at "{0}"',
    CommandKind.DELETE_FOLDER: 'deleted a folder at "{0}"',
    CommandKind.DELETE_FORCE: 'file/folder at "{0}" is deleted (or not found!)',
    CommandKind.WRITE: 'wrote the specified content in "{0}"',
    CommandKind.APPEND: 'appended the specified content in "{0}"',
    CommandKind.RENAME: 'renamed "{0}" to "{1}"',
}

_VERBS: Dict[CommandKind, str] = {
    CommandKind.CREATE_FILE: "create file",
    CommandKind.CREATE_FOLDER: "create folder",
    CommandKind.DELETE_FILE: "delete file",
    CommandKind.DELETE_FOLDER: "delete folder",
    CommandKind.DELETE_FORCE: "force delete",
    CommandKind.WRITE: "write to",
    CommandKind.APPEND: "append to",
    CommandKind.RENAME: "rename",
}

_LOG_LEVELS: Dict[MessageCategory, str] = {
    MessageCategory.SUCCESS: "SUCCESS",
    MessageCategory.WARN: "WARNING",
    MessageCategory.ERROR: "ERROR",
    MessageCategory.INFO: "INFO",
}


def format_outcome(outcome: OperationOutcome) -> ReportMessage:
    """Build the message for a single outcome."""
    if outcome.status == OutcomeStatus.SUCCEEDED:
        text = _SUCCESS_PHRASES[outcome.kind].format(*outcome.targets)
        return ReportMessage(category=MessageCategory.SUCCESS, text=text)

    if outcome.status == OutcomeStatus.ALREADY_EXISTS:
        return ReportMessage(category=MessageCategory.WARN, text=f'"{outcome.targets[0]}", already exists!')

    text = f'failed to {_VERBS[outcome.kind]} "{outcome.targets[0]}": {outcome.cause}'
    return ReportMessage(category=MessageCategory.ERROR, text=text)


class OutcomeReporter:
    """Prints one styled line per outcome."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(highlight=False)
        self._logger = logger

    def emit(self, message: ReportMessage) -> None:
        """Print a message in its category style and log it."""
        self._console.print(Text(message.text, style=MESSAGE_STYLES[message.category.value]))
        self._logger.log(_LOG_LEVELS[message.category], message.text)

    def info(self, text: str) -> None:
        self.emit(ReportMessage(category=MessageCategory.INFO, text=text))

    def report(self, kind: CommandKind, outcomes: Sequence[OperationOutcome]) -> List[ReportMessage]:
        """
        Emit the messages for a handler's outcome batch, in batch order.

        Args:
            kind: The statement kind the batch belongs to.
            outcomes: One outcome per extracted occurrence.

        Returns:
            The emitted messages.
        """
        messages = [format_outcome(outcome) for outcome in outcomes]
        self._logger.with_context(kind=kind.value).debug(f"Reporting {len(messages)} outcome(s)")
        for message in messages:
            self.emit(message)
        return messages


# Default reporter writing to the terminal
outcome_reporter = OutcomeReporter()
