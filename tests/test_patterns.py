"""
Tests for statement patterns and extraction.
"""
import pytest

from handycmd.commands.models import CommandKind
from handycmd.commands.patterns import (
    PATTERNS_BY_KIND, STATEMENT_PATTERNS, Matcher, StatementPattern,
    extract, extract_commands, mask_bodies, primary_targets
)
from handycmd.errors import MalformedStatementError


def _extract(kind, text):
    return extract(PATTERNS_BY_KIND[kind], text)


def test_every_kind_has_a_pattern():
    assert {pattern.kind for pattern in STATEMENT_PATTERNS} == set(CommandKind)


@pytest.mark.parametrize("kind,text,expected", [
    (CommandKind.CREATE_FILE, "CREATE FILE tmp/test.txt;", [("tmp/test.txt",)]),
    (CommandKind.CREATE_FOLDER, "CREATE FOLDER tmp;", [("tmp",)]),
    (CommandKind.DELETE_FILE, "DELETE FILE tmp/test.txt;", [("tmp/test.txt",)]),
    (CommandKind.DELETE_FOLDER, "DELETE FOLDER tmp;", [("tmp",)]),
    (CommandKind.DELETE_FORCE, "DELETE tmp-1/tmp-2/tmp-3 FORCE;", [("tmp-1/tmp-2/tmp-3",)]),
    (CommandKind.WRITE, 'WRITE TO tmp.txt THIS CONTENT: "hello world!";', [("tmp.txt", "hello world!")]),
    (CommandKind.APPEND, 'APPEND TO tmp.txt THIS CONTENT: "hello world!";', [("tmp.txt", "hello world!")]),
    (CommandKind.RENAME, "RENAME temp.txt TO tmp.txt;", [("temp.txt", "tmp.txt")]),
])
def test_extract_single_statement(kind, text, expected):
    """Each statement form yields its captures."""
    assert _extract(kind, text) == expected


def test_extract_keeps_textual_order_and_trims():
    text = "CREATE FILE  b.txt ;\nsome notes\nCREATE FILE a.txt;\nCREATE FILE c.txt;"
    assert _extract(CommandKind.CREATE_FILE, text) == [("b.txt",), ("a.txt",), ("c.txt",)]


def test_extract_is_deterministic():
    text = 'WRITE TO a.txt THIS CONTENT: "X"; WRITE TO b.txt THIS CONTENT: "Y";'
    pattern = PATTERNS_BY_KIND[CommandKind.WRITE]
    assert extract(pattern, text) == extract(pattern, text)


def test_statements_on_one_line_do_not_merge():
    text = "CREATE FILE a.txt; CREATE FILE b.txt;"
    assert _extract(CommandKind.CREATE_FILE, text) == [("a.txt",), ("b.txt",)]


def test_write_bodies_correlate_with_paths():
    text = 'WRITE TO a.txt THIS CONTENT: "X";\nWRITE TO b.txt THIS CONTENT: "Y";'
    assert _extract(CommandKind.WRITE, text) == [("a.txt", "X"), ("b.txt", "Y")]


def test_write_body_may_span_lines_and_contain_quotes():
    text = 'WRITE TO notes.md THIS CONTENT:   "line one\nsay "hi"";'
    assert _extract(CommandKind.WRITE, text) == [("notes.md", 'line one\nsay "hi"')]


def test_write_and_append_do_not_cross_match():
    text = 'APPEND TO log.txt THIS CONTENT: "more";'
    assert _extract(CommandKind.WRITE, text) == []
    assert _extract(CommandKind.APPEND, text) == [("log.txt", "more")]


def test_missing_terminator_is_invisible():
    assert _extract(CommandKind.CREATE_FILE, "CREATE FILE a.txt") == []
    assert _extract(CommandKind.WRITE, 'WRITE TO a.txt THIS CONTENT: "x"') == []


def test_keywords_are_case_sensitive():
    assert _extract(CommandKind.CREATE_FILE, "create file a.txt;") == []


def test_delete_folder_and_force_do_not_cross_match():
    plain = "DELETE FOLDER tmp;"
    forced = "DELETE tmp FORCE;"

    assert _extract(CommandKind.DELETE_FOLDER, plain) == [("tmp",)]
    assert _extract(CommandKind.DELETE_FORCE, plain) == []

    assert _extract(CommandKind.DELETE_FOLDER, forced) == []
    assert _extract(CommandKind.DELETE_FORCE, forced) == [("tmp",)]


def test_force_accepts_file_and_folder_words():
    text = "DELETE FOLDER build FORCE;\nDELETE FILE out.log FORCE;"
    assert _extract(CommandKind.DELETE_FORCE, text) == [("build",), ("out.log",)]
    assert _extract(CommandKind.DELETE_FOLDER, text) == []
    assert _extract(CommandKind.DELETE_FILE, text) == []


def test_paths_containing_force_letters_are_kept():
    assert _extract(CommandKind.DELETE_FOLDER, "DELETE FOLDER REFORMED;") == [("REFORMED",)]


def test_extract_commands_wraps_results():
    commands = extract_commands(PATTERNS_BY_KIND[CommandKind.RENAME], "RENAME temp TO tmp;")
    assert len(commands) == 1
    assert commands[0].kind == CommandKind.RENAME
    assert commands[0].args == ("temp", "tmp")
    assert commands[0].path == "temp"


def test_matcher_slots_follow_group_order():
    matcher = Matcher.compile(r"RENAME (?P<path>\S+) TO (?P<new_path>\S+);")
    assert matcher.slots == ("path", "new_path")


def test_mismatched_matchers_raise():
    pattern = StatementPattern(
        kind=CommandKind.WRITE,
        matchers=(
            Matcher.compile(r"WRITE TO (?P<path>[^;\n]+?) THIS"),
            Matcher.compile(r'"(?P<body>[^;"]*)";'),
        ),
        markers=("WRITE TO",),
    )
    text = 'WRITE TO a.txt THIS CONTENT: "x";\nWRITE TO b.txt THIS CONTENT: unquoted;'

    with pytest.raises(MalformedStatementError) as excinfo:
        extract(pattern, text)

    assert excinfo.value.counts == (2, 1)
    assert primary_targets(pattern, text) == ["a.txt", "b.txt"]


def test_rejected_batch_targets_follow_the_busiest_matcher():
    pattern = StatementPattern(
        kind=CommandKind.WRITE,
        matchers=(
            Matcher.compile(r"WRITE TO (?P<path>[^;\n]+?) THIS"),
            Matcher.compile(r'"(?P<body>[^;"]*)";'),
        ),
        markers=("WRITE TO",),
    )
    text = 'WRITE TO THIS CONTENT: "x";\nWRITE TO THIS CONTENT: "y";'

    with pytest.raises(MalformedStatementError) as excinfo:
        extract(pattern, text)

    assert excinfo.value.counts == (0, 2)
    assert primary_targets(pattern, text) == ["x", "y"]


def test_multiple_matchers_correlate_positionally():
    pattern = StatementPattern(
        kind=CommandKind.WRITE,
        matchers=(
            Matcher.compile(r"WRITE TO (?P<path>[^;\n]+?) THIS"),
            Matcher.compile(r'"(?P<body>[^;"]*)";'),
        ),
        markers=("WRITE TO",),
    )
    text = 'WRITE TO a.txt THIS CONTENT: "X";\nWRITE TO b.txt THIS CONTENT: "Y";'
    assert extract(pattern, text) == [("a.txt", "X"), ("b.txt", "Y")]


@pytest.mark.parametrize("kind,text,present", [
    (CommandKind.CREATE_FILE, "CREATE FILE a;", True),
    (CommandKind.CREATE_FILE, "CREATE FOLDER a;", False),
    (CommandKind.DELETE_FOLDER, "DELETE FOLDER a;", True),
    (CommandKind.DELETE_FOLDER, "DELETE FOLDER a;\nDELETE b FORCE;", False),
    (CommandKind.DELETE_FORCE, "DELETE b FORCE;", True),
    (CommandKind.DELETE_FORCE, "DELETE FILE b;", False),
    (CommandKind.WRITE, "WRITE TO a", False),
    (CommandKind.WRITE, 'WRITE TO a THIS CONTENT: "b";', True),
    (CommandKind.RENAME, "RENAME a;", False),
])
def test_marker_presence(kind, text, present):
    assert PATTERNS_BY_KIND[kind].is_present(text) is present


def test_statements_quoted_in_bodies_are_content():
    text = 'WRITE TO notes.txt THIS CONTENT: "RENAME x TO y";'

    assert _extract(CommandKind.RENAME, text) == []
    assert _extract(CommandKind.WRITE, text) == [("notes.txt", "RENAME x TO y")]


def test_statements_after_a_body_are_still_found():
    text = 'APPEND TO log.txt THIS CONTENT: "CREATE FOLDER nope"; CREATE FOLDER yes;'

    assert _extract(CommandKind.CREATE_FOLDER, text) == [("yes",)]
    assert _extract(CommandKind.APPEND, text) == [("log.txt", "CREATE FOLDER nope")]


def test_mask_bodies_keeps_offsets_and_line_breaks():
    text = 'WRITE TO a.txt THIS CONTENT: "one\nRENAME a TO b";\nCREATE FILE c;'

    masked = mask_bodies(text)

    assert len(masked) == len(text)
    assert masked.count("\n") == text.count("\n")
    assert "RENAME" not in masked
    assert masked.endswith('"' + " " * 3 + "\n" + " " * 13 + '";\nCREATE FILE c;')
    assert mask_bodies("CREATE FILE c;") == "CREATE FILE c;"
