"""Errors raised by path value navigation."""

from __future__ import annotations


class PathRangeError(IndexError):
    """Raised when a name index or range falls outside a path's names."""

    def __init__(self, begin: int, end: int, path: str) -> None:
        super().__init__(
            f"beginIndex {begin} and endIndex {end} are out of range for path {path}"
        )
        self.begin: int = begin
        self.end: int = end
        self.path: str = path


__all__ = ["PathRangeError"]
