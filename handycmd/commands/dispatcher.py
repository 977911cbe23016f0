# handycmd/commands/dispatcher.py
"""
Routes a command document to the handlers of the statement kinds it contains.
"""
from typing import Dict, List, Optional

from handycmd.commands.handlers import HANDLERS
from handycmd.commands.models import CommandKind, OperationOutcome
from handycmd.commands.patterns import STATEMENT_PATTERNS
from handycmd.commands.reporter import OutcomeReporter
from handycmd.utils.logging import get_logger

logger = get_logger(__name__)


def detect_kinds(text: str) -> List[CommandKind]:
    """Statement kinds whose marker tokens appear in the text, in dispatch order."""
    return [pattern.kind for pattern in STATEMENT_PATTERNS if pattern.is_present(text)]


async def dispatch(
    text: str,
    reporter: Optional[OutcomeReporter] = None
) -> Dict[CommandKind, List[OperationOutcome]]:
    """
    Run every handler whose markers are present in the document.

    Kinds run one after another in pattern order, so folders created in a
    pass exist before files are created or written inside them. Kinds whose
    markers are missing are never invoked.

    Args:
        text: Full text of the command file.
        reporter: Reporter handed to every handler.

    Returns:
        Outcomes per invoked kind.
    """
    kinds = detect_kinds(text)
    if not kinds:
        logger.debug("No statement markers found")
        return {}

    logger.info(f"Dispatching {', '.join(kind.value for kind in kinds)}")

    results: Dict[CommandKind, List[OperationOutcome]] = {}
    for kind in kinds:
        results[kind] = await HANDLERS[kind](text, reporter=reporter)
    return results
