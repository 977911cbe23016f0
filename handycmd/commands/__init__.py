# handycmd/commands/__init__.py
"""
Command extraction and dispatch for handycmd.
"""
from .models import (
    CommandKind, ExtractedCommand, OperationOutcome, OutcomeStatus,
    MessageCategory, ReportMessage
)
from .patterns import STATEMENT_PATTERNS, PATTERNS_BY_KIND, extract, extract_commands
from .reporter import OutcomeReporter, outcome_reporter
from .handlers import HANDLERS
from .dispatcher import dispatch, detect_kinds

__all__ = [
    'CommandKind', 'ExtractedCommand', 'OperationOutcome', 'OutcomeStatus',
    'MessageCategory', 'ReportMessage',
    'STATEMENT_PATTERNS', 'PATTERNS_BY_KIND', 'extract', 'extract_commands',
    'OutcomeReporter', 'outcome_reporter',
    'HANDLERS', 'dispatch', 'detect_kinds',
]
