# handycmd/commands/patterns.py
"""
Statement patterns for the command file grammar.

Each statement kind owns one or more matchers. A matcher is a regular
expression whose named groups are captured in slot order. When a kind has
several matchers, the Nth match of each is paired with the Nth match of the
others.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Pattern, Tuple

from handycmd import constants
from handycmd.commands.models import CommandKind, ExtractedCommand
from handycmd.errors import MalformedStatementError

# A path never spans a line and never contains the terminator
_PATH = r"[^;\n]+"


@dataclass(frozen=True)
class Matcher:
    """A compiled expression and the names of the groups it captures."""
    regex: Pattern
    slots: Tuple[str, ...]

    @classmethod
    def compile(cls, expression: str) -> "Matcher":
        regex = re.compile(expression)
        slots = tuple(sorted(regex.groupindex, key=regex.groupindex.get))
        return cls(regex=regex, slots=slots)

    def scan(self, text: str) -> List[Tuple[str, ...]]:
        """Every non-overlapping match, left to right, with trimmed captures."""
        return [
            tuple((match.group(slot) or "").strip() for slot in self.slots)
            for match in self.regex.finditer(text)
        ]


@dataclass(frozen=True)
class StatementPattern:
    """A statement kind with its matchers and dispatcher marker tokens."""
    kind: CommandKind
    matchers: Tuple[Matcher, ...]
    markers: Tuple[str, ...]
    excluded_markers: Tuple[str, ...] = ()

    @property
    def slots(self) -> Tuple[str, ...]:
        return tuple(slot for matcher in self.matchers for slot in matcher.slots)

    def is_present(self, text: str) -> bool:
        """Cheap substring pre-filter, run before any regex scan."""
        return (
            all(marker in text for marker in self.markers)
            and not any(marker in text for marker in self.excluded_markers)
        )


def _pattern(kind: CommandKind, expressions, markers, excluded=()) -> StatementPattern:
    return StatementPattern(
        kind=kind,
        matchers=tuple(Matcher.compile(expression) for expression in expressions),
        markers=tuple(markers),
        excluded_markers=tuple(excluded),
    )


# Declaration order is dispatch order
STATEMENT_PATTERNS: Tuple[StatementPattern, ...] = (
    _pattern(
        CommandKind.CREATE_FOLDER,
        [rf"CREATE FOLDER (?P<path>{_PATH});"],
        [constants.CREATE_FOLDER],
    ),
    _pattern(
        CommandKind.CREATE_FILE,
        [rf"CREATE FILE (?P<path>{_PATH});"],
        [constants.CREATE_FILE],
    ),
    _pattern(
        CommandKind.WRITE,
        [rf'WRITE TO\s(?P<path>{_PATH}?)\sTHIS CONTENT:\s{{0,3}}"(?P<body>[^;]*)";'],
        [constants.WRITE["main"], constants.WRITE["sub"]],
    ),
    _pattern(
        CommandKind.APPEND,
        [rf'APPEND TO\s(?P<path>{_PATH}?)\sTHIS CONTENT:\s{{0,3}}"(?P<body>[^;]*)";'],
        [constants.APPEND["main"], constants.APPEND["sub"]],
    ),
    _pattern(
        CommandKind.RENAME,
        [rf"RENAME (?P<path>{_PATH}?) TO (?P<new_path>{_PATH});"],
        [constants.RENAME["main"], constants.RENAME["sub"]],
    ),
    _pattern(
        CommandKind.DELETE_FILE,
        [rf"DELETE FILE (?P<path>{_PATH})(?<! FORCE);"],
        [constants.DELETE_FILE],
    ),
    _pattern(
        CommandKind.DELETE_FOLDER,
        [rf"DELETE FOLDER (?P<path>{_PATH})(?<! FORCE);"],
        [constants.DELETE_FOLDER],
        excluded=[constants.DELETE_FORCE["sub"]],
    ),
    _pattern(
        CommandKind.DELETE_FORCE,
        [rf"DELETE (?:(?:FILE|FOLDER) )?(?P<path>{_PATH}?) FORCE;"],
        [constants.DELETE_FORCE["main"], constants.DELETE_FORCE["sub"]],
    ),
)

PATTERNS_BY_KIND: Dict[CommandKind, StatementPattern] = {
    pattern.kind: pattern for pattern in STATEMENT_PATTERNS
}


def mask_bodies(text: str) -> str:
    """
    Blank out quoted write/append bodies, keeping offsets and line breaks.

    Statements quoted inside a body are content, not commands.
    """
    spans = [
        match.span("body")
        for pattern in STATEMENT_PATTERNS
        for matcher in pattern.matchers
        if "body" in matcher.slots
        for match in matcher.regex.finditer(text)
    ]
    if not spans:
        return text

    chars = list(text)
    for start, end in spans:
        for index in range(start, end):
            if chars[index] != "\n":
                chars[index] = " "
    return "".join(chars)


def _visible_text(pattern: StatementPattern, text: str) -> str:
    if "body" in pattern.slots:
        return text
    return mask_bodies(text)


def extract(pattern: StatementPattern, text: str) -> List[Tuple[str, ...]]:
    """
    Extract every occurrence of a statement from the text.

    Args:
        pattern: The statement pattern to scan for.
        text: The full document text.

    Returns:
        One tuple of trimmed captures per occurrence, in textual order.

    Raises:
        MalformedStatementError: If correlated matchers disagree on the
            number of occurrences.
    """
    text = _visible_text(pattern, text)
    columns = [matcher.scan(text) for matcher in pattern.matchers]
    counts = tuple(len(column) for column in columns)
    if len(set(counts)) > 1:
        raise MalformedStatementError(pattern.kind.value, counts)

    return [
        tuple(value for captures in row for value in captures)
        for row in zip(*columns)
    ]


def extract_commands(pattern: StatementPattern, text: str) -> List[ExtractedCommand]:
    """Same as extract(), wrapped into ExtractedCommand values."""
    return [ExtractedCommand(kind=pattern.kind, args=args) for args in extract(pattern, text)]


def primary_targets(pattern: StatementPattern, text: str) -> List[str]:
    """
    First captured value of each match of the matcher with the most matches.

    Used to label the occurrences of a rejected batch, so a batch whose first
    matcher found nothing still reports every occurrence another one found.
    """
    text = _visible_text(pattern, text)
    columns = [matcher.scan(text) for matcher in pattern.matchers]
    longest = max(columns, key=len)
    return [captures[0] if captures else "" for captures in longest]
