"""
Summary: Parse raw path text into a separator and a root prefix length.
Why: Probe the text once at construction so navigation never re-scans it.
"""

from __future__ import annotations

from typing import Final

PARENT: Final[str] = ".."
SELF: Final[str] = "."

PORTABLE_SEPARATOR: Final[str] = "/"
WINDOWS_SEPARATOR: Final[str] = "\\"
DRIVE_SEPARATOR: Final[str] = ":"


def is_separator(char: str) -> bool:
    """Return whether ``char`` separates path names in either convention."""

    return char == PORTABLE_SEPARATOR or char == WINDOWS_SEPARATOR


def with_separator(text: str, separator: str) -> str:
    """Rewrite every separator in ``text`` to ``separator``."""

    return text.replace(PORTABLE_SEPARATOR, separator).replace(WINDOWS_SEPARATOR, separator)


def detect_separator(text: str) -> str:
    """Detect the separator convention used by ``text``.

    A forward slash wins if it comes first. A backslash or a drive colon
    appearing first selects the Windows convention.

    Args:
        text: Raw path text.

    Returns:
        str: ``"/"`` or ``"\\"``.
    """
    for char in text:
        if char == PORTABLE_SEPARATOR:
            return PORTABLE_SEPARATOR
        if char == WINDOWS_SEPARATOR or char == DRIVE_SEPARATOR:
            return WINDOWS_SEPARATOR
    return PORTABLE_SEPARATOR


def first_separator_index(text: str, start: int = 0) -> int:
    """Return the index of the first separator at or after ``start``, or ``len(text)``."""

    for index in range(start, len(text)):
        if is_separator(text[index]):
            return index
    return len(text)


def prefix_length(text: str) -> int:
    """Compute the length of the root portion of ``text``.

    Args:
        text: Raw path text.

    Returns:
        int: Length of the prefix. ``C:\\`` and ``C:`` style drives end after
            the colon plus any separators that follow it. Text starting with
            separators has them all as its root. Anything else has no root.
    """
    first_slash = first_separator_index(text)
    first_colon = text.find(DRIVE_SEPARATOR)
    if first_colon == -1:
        first_colon = len(text)

    prefix_end = first_colon + 1
    if first_colon >= first_slash:
        # No drive specifier before the first separator
        if first_slash > 0:
            return 0
        prefix_end = 0

    while prefix_end < len(text) and is_separator(text[prefix_end]):
        prefix_end += 1

    return prefix_end


def drive_end(text: str, prefix_end: int) -> int:
    """Return the index just past the last drive colon inside the prefix, or 0."""

    colon = text.rfind(DRIVE_SEPARATOR, 0, prefix_end)
    return colon + 1


def drive_name(root_text: str) -> str:
    """Return the upper-cased drive portion of a root, or the whole root if it has none."""

    colon = root_text.find(DRIVE_SEPARATOR)
    if colon == -1:
        return root_text.upper()
    return root_text[:colon].upper()


__all__ = [
    "PARENT",
    "SELF",
    "PORTABLE_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "DRIVE_SEPARATOR",
    "detect_separator",
    "drive_end",
    "drive_name",
    "first_separator_index",
    "is_separator",
    "prefix_length",
    "with_separator",
]
