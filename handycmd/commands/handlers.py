# handycmd/commands/handlers.py
"""
Command handlers for handycmd.

One handler per statement kind. A handler extracts its occurrences from the
document, runs the filesystem effect for all of them concurrently, waits for
every one to settle and hands the outcomes to the reporter. A failing
occurrence never stops its siblings.
"""
import asyncio
from typing import Awaitable, Callable, Dict, List, Optional

from handycmd.commands.models import CommandKind, ExtractedCommand, OperationOutcome
from handycmd.commands.patterns import PATTERNS_BY_KIND, StatementPattern, extract_commands, primary_targets
from handycmd.commands.reporter import OutcomeReporter, outcome_reporter
from handycmd.errors import MalformedStatementError
from handycmd.execution import filesystem
from handycmd.utils.logging import get_logger

logger = get_logger(__name__)

Effect = Callable[[ExtractedCommand], Awaitable[OperationOutcome]]
Handler = Callable[..., Awaitable[List[OperationOutcome]]]


def _targets(command: ExtractedCommand) -> tuple:
    # rename reports both paths, everything else only the path
    if command.kind == CommandKind.RENAME:
        return command.args[:2]
    return command.args[:1]


async def _settle_all(
    pattern: StatementPattern,
    text: str,
    effect: Effect,
    reporter: Optional[OutcomeReporter] = None
) -> List[OperationOutcome]:
    """
    Run an effect for every occurrence of a statement and report the results.

    Args:
        pattern: Pattern of the statement kind being handled.
        text: The full document text.
        effect: Coroutine function executing one occurrence.
        reporter: Where to report; the terminal reporter by default.

    Returns:
        One outcome per occurrence, in extraction order.
    """
    kind = pattern.kind
    reporter = reporter or outcome_reporter

    try:
        commands = extract_commands(pattern, text)
    except MalformedStatementError as e:
        logger.with_context(kind=kind.value).warning(f"Rejecting batch: {e}")
        outcomes = [OperationOutcome.failed(kind, target, cause=e) for target in primary_targets(pattern, text)]
        reporter.report(kind, outcomes)
        return outcomes

    logger.with_context(kind=kind.value).debug(f"Extracted {len(commands)} occurrence(s)")

    results = await asyncio.gather(*(effect(command) for command in commands), return_exceptions=True)

    outcomes = []
    for command, result in zip(commands, results):
        if isinstance(result, Exception):
            outcomes.append(OperationOutcome.failed(kind, *_targets(command), cause=result))
        elif isinstance(result, BaseException):
            raise result
        else:
            outcomes.append(result)

    reporter.report(kind, outcomes)
    return outcomes


# --- Effects, one occurrence each ---

async def _create_file(command: ExtractedCommand) -> OperationOutcome:
    if await filesystem.check_access(command.path):
        return OperationOutcome.already_exists(command.kind, command.path)
    await filesystem.create_file(command.path)
    return OperationOutcome.succeeded(command.kind, command.path)


async def _create_folder(command: ExtractedCommand) -> OperationOutcome:
    if await filesystem.check_access(command.path):
        return OperationOutcome.already_exists(command.kind, command.path)
    await filesystem.create_directory(command.path, parents=True)
    return OperationOutcome.succeeded(command.kind, command.path)


async def _delete_file(command: ExtractedCommand) -> OperationOutcome:
    await filesystem.delete_file(command.path)
    return OperationOutcome.succeeded(command.kind, command.path)


async def _delete_folder(command: ExtractedCommand) -> OperationOutcome:
    await filesystem.delete_directory(command.path)
    return OperationOutcome.succeeded(command.kind, command.path)


async def _delete_force(command: ExtractedCommand) -> OperationOutcome:
    await filesystem.delete_tree(command.path)
    return OperationOutcome.succeeded(command.kind, command.path)


async def _write(command: ExtractedCommand) -> OperationOutcome:
    path, body = command.args
    await filesystem.write_file(path, body)
    return OperationOutcome.succeeded(command.kind, path)


async def _append(command: ExtractedCommand) -> OperationOutcome:
    path, body = command.args
    await filesystem.write_file(path, body, append=True)
    return OperationOutcome.succeeded(command.kind, path)


async def _rename(command: ExtractedCommand) -> OperationOutcome:
    old_path, new_path = command.args
    await filesystem.rename_path(old_path, new_path)
    return OperationOutcome.succeeded(command.kind, old_path, new_path)


# --- Handlers ---

async def handle_create_file(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """CREATE FILE <path>;"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.CREATE_FILE], text, _create_file, reporter)


async def handle_create_folder(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """CREATE FOLDER <path>;"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.CREATE_FOLDER], text, _create_folder, reporter)


async def handle_delete_file(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """DELETE FILE <path>;"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.DELETE_FILE], text, _delete_file, reporter)


async def handle_delete_folder(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """DELETE FOLDER <path>; (empty folders only)"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.DELETE_FOLDER], text, _delete_folder, reporter)


async def handle_delete_force(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """DELETE <path> FORCE; removes files or folders recursively, missing targets included."""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.DELETE_FORCE], text, _delete_force, reporter)


async def handle_write(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """WRITE TO <path> THIS CONTENT: "<body>";"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.WRITE], text, _write, reporter)


async def handle_append(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """APPEND TO <path> THIS CONTENT: "<body>";"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.APPEND], text, _append, reporter)


async def handle_rename(text: str, reporter: Optional[OutcomeReporter] = None) -> List[OperationOutcome]:
    """RENAME <oldPath> TO <newPath>;"""
    return await _settle_all(PATTERNS_BY_KIND[CommandKind.RENAME], text, _rename, reporter)


HANDLERS: Dict[CommandKind, Handler] = {
    CommandKind.CREATE_FILE: handle_create_file,
    CommandKind.CREATE_FOLDER: handle_create_folder,
    CommandKind.DELETE_FILE: handle_delete_file,
    CommandKind.DELETE_FOLDER: handle_delete_folder,
    CommandKind.DELETE_FORCE: handle_delete_force,
    CommandKind.WRITE: handle_write,
    CommandKind.APPEND: handle_append,
    CommandKind.RENAME: handle_rename,
}
