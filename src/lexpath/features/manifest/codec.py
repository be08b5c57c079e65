"""
Summary: JSON record codec for path values.
Why: Manifests persist only the portable text and a non-default filesystem URI.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from lexpath.features.path import DEFAULT_FILESYSTEM_URI, PathString

from .errors import ManifestFormatError

PATH_KEY: Final[str] = "path"
FILESYSTEM_KEY: Final[str] = "filesystem"


def encode_path(value: PathString, default_uri: str = DEFAULT_FILESYSTEM_URI) -> dict[str, str]:
    """Encode ``value`` as a JSON-ready record.

    Args:
        value: Path value to encode.
        default_uri: Filesystem URI that is left implicit.

    Returns:
        dict[str, str]: ``{"path": <portable text>}`` plus ``"filesystem"``
            when the value lives on another filesystem.
    """
    record = {PATH_KEY: value.portable_path}
    if value.filesystem_uri != default_uri:
        record[FILESYSTEM_KEY] = value.filesystem_uri
    return record


def decode_path(record: Mapping[str, object], default_uri: str = DEFAULT_FILESYSTEM_URI) -> PathString:
    """Re-parse a record produced by ``encode_path``.

    Raises:
        ManifestFormatError: If the record lacks a string path or has a non-string filesystem.
    """
    text = record.get(PATH_KEY)
    if not isinstance(text, str):
        raise ManifestFormatError(f"Record has no string '{PATH_KEY}': {dict(record)!r}")

    filesystem_uri = record.get(FILESYSTEM_KEY, default_uri)
    if not isinstance(filesystem_uri, str):
        raise ManifestFormatError(f"Record '{FILESYSTEM_KEY}' must be a string: {filesystem_uri!r}")

    return PathString(text, filesystem_uri)


__all__ = ["FILESYSTEM_KEY", "PATH_KEY", "decode_path", "encode_path"]
