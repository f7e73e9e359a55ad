from __future__ import annotations

import pytest

from packscan.patterns import escape_glob_pattern, parse_ignore_content

pytestmark = pytest.mark.small


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("src/(categories)", r"src/\(categories\)"),
        ("app/[id]/page.tsx", r"app/\[id\]/page.tsx"),
        ("docs/{draft}", r"docs/\{draft\}"),
        ("plain/path.txt", "plain/path.txt"),
        ("**/*.py", "**/*.py"),
    ],
)
def test_escape_glob_pattern(raw: str, expected: str) -> None:
    assert escape_glob_pattern(raw) == expected


def test_escape_doubles_backslashes_before_metacharacters() -> None:
    # one literal backslash followed by a paren: the backslash is doubled,
    # then the paren gets its own escape
    assert escape_glob_pattern("a\\(b") == "a\\\\\\(b"


def test_escape_applied_twice_double_escapes() -> None:
    once = escape_glob_pattern("(x)")
    assert escape_glob_pattern(once) != once


def test_parse_strips_comments_and_blanks() -> None:
    assert parse_ignore_content("# comment\n\nfoo\n  bar  \n#baz") == ["foo", "bar"]


@pytest.mark.parametrize("content", ["", None, "\n\n", "# only\n   # comments\n"])
def test_parse_empty_inputs(content: str | None) -> None:
    assert parse_ignore_content(content) == []


def test_parse_keeps_inline_hash_and_order() -> None:
    assert parse_ignore_content("b.txt\nfile#1\na.txt\n") == ["b.txt", "file#1", "a.txt"]


def test_parse_handles_crlf_lines() -> None:
    assert parse_ignore_content("one\r\ntwo\r\n") == ["one", "two"]
