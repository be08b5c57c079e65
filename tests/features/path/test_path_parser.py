"""Tests for separator detection and root prefix parsing."""

import pytest

from lexpath.features.path.domain.parser import (
    detect_separator,
    drive_end,
    drive_name,
    prefix_length,
    with_separator,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a/b", "/"),
        ("a\\b", "\\"),
        ("a\\b/c", "\\"),
        ("a/b\\c", "/"),
        ("C:foo", "\\"),
        ("C:/foo", "\\"),
        ("abc", "/"),
        ("", "/"),
    ],
)
def test_detect_separator(text: str, expected: str) -> None:
    """The first separator-like character decides the convention."""
    assert detect_separator(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("a", 0),
        ("a/b", 0),
        ("a/b:c", 0),
        ("/", 1),
        ("/a/b", 1),
        ("\\a", 1),
        ("//server/share", 2),
        ("C:", 2),
        ("C:a", 2),
        ("C:\\a", 3),
        ("C:\\\\a", 4),
        ("C:/a", 3),
        ("a:b/c", 2),
    ],
)
def test_prefix_length(text: str, expected: int) -> None:
    """Roots cover drive specifiers and leading separators only."""
    assert prefix_length(text) == expected


def test_drive_helpers() -> None:
    """Drive helpers locate and upper-case the drive portion."""
    assert drive_end("C:\\a", 3) == 2
    assert drive_end("/a", 1) == 0
    assert drive_name("c:\\") == "C"
    assert drive_name("/") == "/"


def test_with_separator_rewrites_both_conventions() -> None:
    """Mixed separators are rewritten to a single one."""
    assert with_separator("a/b\\c", "\\") == "a\\b\\c"
    assert with_separator("a/b\\c", "/") == "a/b/c"
