"""
Summary: Immutable lexical path value that keeps its exact original text.
Why: Build tooling must reshape paths that may not exist on any mounted filesystem.
"""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Final, final
from urllib.parse import urlsplit

from .errors import PathRangeError
from .parser import (
    PARENT,
    PORTABLE_SEPARATOR,
    SELF,
    detect_separator,
    drive_end,
    drive_name,
    is_separator,
    prefix_length,
    with_separator,
)

if TYPE_CHECKING:
    from pathlib import PurePath
    import zipfile


DEFAULT_FILESYSTEM_URI: Final[str] = Path(os.sep).resolve().as_uri()

LOCAL_SCHEME: Final[str] = "file"


@final
class PathString:
    """A ``Path``-like value that can represent unix or Windows-style path names.

    Unlike ``pathlib`` paths, a ``PathString`` carries no filesystem flavour and
    can be built for filesystems that are not mounted, as long as they use
    compatible path names. It remembers the URI of its filesystem root and the
    exact text used to construct it, so ``str`` -> ``PathString`` -> ``str``
    conversions are lossless even for text with mixed separators.

    Values derived by navigation (``file_name``, ``parent``, ``subpath``...)
    share the original text and only move their index window over it.
    """

    __slots__ = (
        "_filesystem_uri",
        "_path",
        "_start",
        "_suffix_end",
        "_prefix_end",
        "_separator",
        "_hash",
    )

    _filesystem_uri: str
    _path: str
    _start: int
    _suffix_end: int
    _prefix_end: int
    _separator: str
    _hash: int

    def __init__(
        self,
        path: str | os.PathLike[str],
        filesystem_uri: str | None = None,
    ) -> None:
        """Parse ``path`` into a path value.

        Args:
            path: Raw path text or any ``os.PathLike``. Any text is accepted.
            filesystem_uri: URI of the filesystem root. Defaults to the local
                filesystem root.
        """
        text = os.fspath(path)
        root_length = prefix_length(text)
        self._assign(
            DEFAULT_FILESYSTEM_URI if filesystem_uri is None else filesystem_uri,
            text,
            root_length,
            len(text),
            root_length,
            detect_separator(text),
        )

    def _assign(
        self,
        filesystem_uri: str,
        path: str,
        start: int,
        suffix_end: int,
        prefix_end: int,
        separator: str,
    ) -> None:
        self._filesystem_uri = filesystem_uri
        self._path = path
        self._start = start
        self._suffix_end = suffix_end
        self._prefix_end = prefix_end
        self._separator = separator
        self._hash = hash((filesystem_uri, path[:prefix_end], path[start:suffix_end]))

    @classmethod
    def _create(
        cls,
        filesystem_uri: str,
        path: str,
        start: int,
        suffix_end: int,
        prefix_end: int,
        separator: str,
    ) -> PathString:
        """Build a value over an existing window without re-parsing ``path``."""

        instance = object.__new__(cls)
        instance._assign(filesystem_uri, path, start, suffix_end, prefix_end, separator)
        return instance

    @classmethod
    def _with_root(
        cls,
        filesystem_uri: str,
        path: str,
        root_length: int,
        separator: str | None = None,
    ) -> PathString:
        return cls._create(
            filesystem_uri,
            path,
            root_length,
            len(path),
            root_length,
            detect_separator(path) if separator is None else separator,
        )

    # String forms -------------------------------------------------------------

    @property
    def filesystem_uri(self) -> str:
        """URI of the filesystem root this path belongs to (``file:///`` locally)."""

        return self._filesystem_uri

    @property
    def scheme(self) -> str:
        """URI scheme of the filesystem, e.g. ``file`` or ``zip``."""

        return urlsplit(self._filesystem_uri).scheme

    @property
    def separator(self) -> str:
        """Separator detected when the text was parsed."""

        return self._separator

    @property
    def raw_path(self) -> str:
        """The original, unmodified path text."""

        return self._prefix_text + self._suffix_text

    @property
    def portable_path(self) -> str:
        """Path text using ``/`` separators."""

        return self.raw_path.replace("\\", PORTABLE_SEPARATOR)

    @property
    def native_path(self) -> str:
        """Path text using the separator of the local OS."""

        return with_separator(self.raw_path, os.sep)

    @property
    def _prefix_text(self) -> str:
        return self._path[: self._prefix_end]

    @property
    def _suffix_text(self) -> str:
        return self._path[self._start : self._suffix_end]

    # Navigation ---------------------------------------------------------------

    @property
    def is_absolute(self) -> bool:
        """True iff the path has a root that ends with a separator."""

        return self._prefix_end != 0 and is_separator(self._path[self._prefix_end - 1])

    @property
    def is_empty_path(self) -> bool:
        """True iff the path has neither a root nor any names.

        The empty path resolves to whatever is resolved against it.
        """
        return self._prefix_end == 0 and self._start == self._suffix_end

    @property
    def has_trailing_separator(self) -> bool:
        """True iff the path text ends with a separator after the root."""

        return self._suffix_end > self._start and is_separator(self._path[self._suffix_end - 1])

    @property
    def root(self) -> PathString | None:
        """The root component (``/``, ``C:\\``...), or ``None`` for relative paths."""

        if self._prefix_end == 0:
            return None
        return PathString._create(
            self._filesystem_uri,
            self._path,
            self._prefix_end,
            self._prefix_end,
            self._prefix_end,
            self._separator,
        )

    @property
    def file_name(self) -> PathString:
        """The name farthest from the root, or an empty path if there are no names."""

        end = self._end_index
        return PathString._create(
            self._filesystem_uri,
            self._path,
            self._name_start(end),
            end,
            0,
            self._separator,
        )

    @property
    def parent(self) -> PathString | None:
        """The path without its last name, or ``None`` at a root or for the empty path."""

        end = self._end_index
        if end <= self._start:
            return None
        new_end = self._name_start(end) - 1
        if new_end <= self._start:
            return self.root
        return PathString._create(
            self._filesystem_uri,
            self._path,
            self._start,
            new_end,
            self._prefix_end,
            self._separator,
        )

    @property
    def name_count(self) -> int:
        """Number of names in the path, not counting the root."""

        return len(self._segment_bounds())

    @property
    def segments(self) -> list[str]:
        """Names of the path in order, not counting the root."""

        return [self._path[begin:end] for begin, end in self._segment_bounds()]

    def get(self, index: int) -> PathString:
        """Return the name at ``index`` as a relative path.

        Raises:
            PathRangeError: If ``index`` is not within ``[0, name_count)``.
        """
        return self._sub_range(index, index + 1)

    def subpath(self, begin_index: int, end_index: int) -> PathString:
        """Return names ``begin_index`` (inclusive) to ``end_index`` (exclusive) as a relative path.

        Raises:
            PathRangeError: Unless ``0 <= begin_index <= end_index <= name_count``.
        """
        return self._sub_range(begin_index, end_index)

    def __getitem__(self, key: int | slice) -> PathString:
        if isinstance(key, slice):
            if key.step is not None and key.step != 1:
                raise ValueError("Step must be 1")
            begin = 0 if key.start is None else key.start
            end = self.name_count if key.stop is None else key.stop
            return self._sub_range(begin, end)
        return self.get(key)

    def __iter__(self) -> Iterator[PathString]:
        for begin, end in self._segment_bounds():
            yield PathString._create(self._filesystem_uri, self._path, begin, end, 0, self._separator)

    # Composition --------------------------------------------------------------

    def normalize(self) -> PathString:
        """Return an equivalent path without ``.`` names, empty names and resolvable ``..`` names."""

        absolute = self.is_absolute
        names: deque[str] = deque()
        for segment in self.segments:
            if segment == PARENT:
                last = names[-1] if names else None
                if last is not None and last != PARENT:
                    _ = names.pop()
                elif not absolute:
                    # A root has no parent, so extra ".." names are only kept on relative paths
                    names.append(segment)
            elif segment and segment != SELF:
                names.append(segment)

        if self.has_trailing_separator:
            names.append("")

        root = self.root
        root_text = with_separator(root.raw_path, self._separator) if root is not None else ""
        text = root_text + self._separator.join(names)
        return PathString._with_root(
            self._filesystem_uri, text, prefix_length(text), self._separator
        )

    def resolve(self, other: PathString | str | os.PathLike[str]) -> PathString:
        """Resolve ``other`` against this path.

        Picture a command prompt whose current directory is this path: the
        result is where ``cd other`` would end up. Relative paths are appended,
        absolute paths replace this one, except that a bare ``\\`` root picks up
        this path's drive letter.
        """
        other = self._coerce(other)
        other_root = other.root

        if self.is_empty_path:
            return other

        if other.is_absolute:
            if other_root is not None and other_root._prefix_end == 1:
                drive_separator_end = drive_end(self._path, self._prefix_end)
                if drive_separator_end > 0:
                    return PathString._with_root(
                        self._filesystem_uri,
                        self._path[:drive_separator_end]
                        + with_separator(other.raw_path, self._separator),
                        drive_separator_end + 1,
                    )
            return other

        if other_root is not None and not _compatible_roots(self.root, other_root):
            return other

        if other._start == other._suffix_end:
            return self

        text = self.raw_path
        if self._start < self._suffix_end and not is_separator(self._path[self._suffix_end - 1]):
            text += self._separator
        text += with_separator(other._suffix_text, self._separator)

        return PathString._create(
            self._filesystem_uri,
            text,
            self._prefix_end,
            len(text),
            self._prefix_end,
            self._separator,
        )

    def __truediv__(self, other: PathString | str | os.PathLike[str]) -> PathString:
        return self.resolve(other)

    def relativize(self, other: PathString | str | os.PathLike[str]) -> PathString:
        """Construct a path which, resolved against this one, points where ``other`` does.

        Returns ``other`` re-rooted on its own root when the two roots differ,
        since no relative path can bridge them. Empty names from repeated
        separators are ignored.
        """
        other = self._coerce(other)

        if self.is_empty_path:
            return other

        if self.is_absolute and other.is_empty_path:
            return other

        if _root_key(self.root) != _root_key(other.root):
            other_root = other.root
            root_text = other_root.raw_path if other_root is not None else ""
            after_drive = drive_end(self._path, self._prefix_end)
            if (
                after_drive > 0
                and other._prefix_end >= after_drive
                and other._path[:after_drive].upper() == self._path[:after_drive].upper()
            ):
                root_text = other._path[after_drive : other._prefix_end]
            return PathString._with_root(
                self._filesystem_uri,
                root_text + other._suffix_text,
                len(root_text),
            )

        # Empty names are skipped so the result never starts with a separator
        segments = [name for name in self.segments if name]
        other_segments = [name for name in other.segments if name]
        common = 0
        for mine, theirs in zip(segments, other_segments):
            if mine != theirs:
                break
            common += 1

        names = [PARENT] * (len(segments) - common) + other_segments[common:]
        separator = other._separator
        text = separator.join(names)
        if other.has_trailing_separator and names:
            text += separator

        return PathString._create(self._filesystem_uri, text, 0, len(text), 0, separator)

    # Bridges ------------------------------------------------------------------

    def to_file(self) -> Path | None:
        """Return a local ``Path`` for ``file`` filesystems, ``None`` for any other."""

        if self.scheme == LOCAL_SCHEME:
            return Path(self.raw_path)
        return None

    def to_path(self) -> PurePath | zipfile.Path | None:
        """Return a handle from the provider registered for this filesystem's scheme.

        Returns ``None`` when no provider is registered. Errors raised by the
        provider itself propagate unchanged.
        """
        from lexpath.features.path.adapters.providers import open_path

        return open_path(self)

    # Equality and ordering ----------------------------------------------------

    def compare_to(self, other: PathString) -> int:
        """Order by filesystem URI, then root text, then the remaining text."""

        mine = (self._filesystem_uri, self._prefix_text, self._suffix_text)
        theirs = (other._filesystem_uri, other._prefix_text, other._suffix_text)
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, PathString):
            return NotImplemented
        return (
            self._hash == other._hash
            and self._filesystem_uri == other._filesystem_uri
            and self._prefix_text == other._prefix_text
            and self._suffix_text == other._suffix_text
        )

    def __hash__(self) -> int:
        return self._hash

    def __lt__(self, other: PathString) -> bool:
        if not isinstance(other, PathString):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: PathString) -> bool:
        if not isinstance(other, PathString):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: PathString) -> bool:
        if not isinstance(other, PathString):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: PathString) -> bool:
        if not isinstance(other, PathString):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        scheme = self._filesystem_uri
        if scheme.endswith("///"):
            scheme = scheme[:-1]
        return scheme + self.raw_path

    def __repr__(self) -> str:
        return f"PathString({self.raw_path!r}, filesystem_uri={self._filesystem_uri!r})"

    # Internals ----------------------------------------------------------------

    @property
    def _end_index(self) -> int:
        """End of the window, excluding one trailing separator."""

        return self._suffix_end - 1 if self.has_trailing_separator else self._suffix_end

    def _name_start(self, end: int) -> int:
        index = end
        while index > self._start and not is_separator(self._path[index - 1]):
            index -= 1
        return index

    def _segment_bounds(self) -> list[tuple[int, int]]:
        bounds: list[tuple[int, int]] = []
        end = self._end_index
        segment_start = self._start
        for index in range(self._start, end):
            if is_separator(self._path[index]):
                bounds.append((segment_start, index))
                segment_start = index + 1
        if segment_start < end:
            bounds.append((segment_start, end))
        return bounds

    def _sub_range(self, begin: int, end: int) -> PathString:
        bounds = self._segment_bounds()
        if begin < 0 or end < begin or end > len(bounds):
            raise PathRangeError(begin, end, str(self))
        if begin == end:
            return PathString("", self._filesystem_uri)
        return PathString._create(
            self._filesystem_uri,
            self._path,
            bounds[begin][0],
            bounds[end - 1][1],
            0,
            self._separator,
        )

    def _coerce(self, other: PathString | str | os.PathLike[str]) -> PathString:
        if isinstance(other, PathString):
            return other
        return PathString(other, self._filesystem_uri)


def _compatible_roots(root: PathString | None, other_root: PathString | None) -> bool:
    if root == other_root:
        return True
    if root is None or other_root is None:
        return False
    return drive_name(root.raw_path) == drive_name(other_root.raw_path)


def _root_key(root: PathString | None) -> str:
    """Comparable form of a root: portable separators and an upper-cased drive."""

    if root is None:
        return ""
    text = with_separator(root.raw_path, PORTABLE_SEPARATOR)
    after_drive = drive_end(text, len(text))
    return text[:after_drive].upper() + text[after_drive:]


__all__ = ["DEFAULT_FILESYSTEM_URI", "LOCAL_SCHEME", "PathString"]
