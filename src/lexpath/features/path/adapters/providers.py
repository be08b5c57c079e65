"""Where: src/lexpath/features/path/adapters/providers.py
What: Registry of filesystem providers that turn path values into host handles.
Why: Keep host lookups out of the pure value type; unknown schemes map to ``None``.
"""

from __future__ import annotations

import os
import zipfile
from pathlib import Path, PurePath
from typing import Final, Protocol
from urllib.parse import urlsplit
from urllib.request import url2pathname

from lexpath.features.path.domain.path_string import LOCAL_SCHEME, PathString
from lexpath.platform.logging import logger

ZIP_SCHEME: Final[str] = "zip"
_ARCHIVE_ROOT_MARKER: Final[str] = "!/"

HostPath = PurePath | zipfile.Path


class FilesystemProvider(Protocol):
    """Callable producing a host handle for a raw path inside a filesystem."""

    def __call__(self, filesystem_uri: str, raw_path: str) -> HostPath:
        ...


def _local_provider(filesystem_uri: str, raw_path: str) -> HostPath:
    _ = filesystem_uri
    return Path(raw_path)


def _zip_provider(filesystem_uri: str, raw_path: str) -> HostPath:
    """Open ``raw_path`` inside the archive named by a ``zip:<file-uri>!/`` URI.

    Raises:
        ValueError: If the URI does not name a local archive.
        FileNotFoundError: If the archive does not exist.
    """
    archive_uri = filesystem_uri.removeprefix(f"{ZIP_SCHEME}:").partition("!")[0]
    parts = urlsplit(archive_uri)
    if parts.scheme != LOCAL_SCHEME:
        raise ValueError(f"Unsupported archive location: {archive_uri}")
    archive = Path(url2pathname(parts.path))
    member = raw_path.replace("\\", "/").lstrip("/")
    return zipfile.Path(archive, at=member)


_PROVIDERS: dict[str, FilesystemProvider] = {
    LOCAL_SCHEME: _local_provider,
    ZIP_SCHEME: _zip_provider,
}


def register_filesystem_provider(scheme: str, provider: FilesystemProvider) -> None:
    """Register ``provider`` for filesystem URIs using ``scheme``, replacing any previous one."""

    _PROVIDERS[scheme] = provider
    logger.debug("Registered filesystem provider for scheme '%s'", scheme)


def unregister_filesystem_provider(scheme: str) -> bool:
    """Remove the provider for ``scheme``.

    Returns:
        bool: ``True`` if a provider was registered.
    """
    return _PROVIDERS.pop(scheme, None) is not None


def open_path(value: PathString) -> HostPath | None:
    """Map ``value`` onto a host handle.

    Args:
        value: Path value to convert.

    Returns:
        HostPath | None: The provider's handle, or ``None`` when no provider
            is registered for the value's scheme. Provider failures propagate.
    """
    provider = _PROVIDERS.get(value.scheme)
    if provider is None:
        logger.debug("No filesystem provider for %s", value.filesystem_uri)
        return None
    return provider(value.filesystem_uri, value.raw_path)


def zip_filesystem_uri(archive: str | os.PathLike[str]) -> str:
    """Return the filesystem URI for paths stored inside ``archive``."""

    return f"{ZIP_SCHEME}:{Path(archive).absolute().as_uri()}{_ARCHIVE_ROOT_MARKER}"


def to_path_string(handle: str | os.PathLike[str] | zipfile.Path) -> PathString:
    """Build a path value from a host handle.

    ``zipfile.Path`` handles map onto the archive's ``zip:`` filesystem with an
    absolute member path. Anything else is treated as a local path.

    Raises:
        ValueError: If a ``zipfile.Path`` belongs to an archive without a file name.
    """
    if isinstance(handle, zipfile.Path):
        archive = handle.root.filename
        if archive is None:
            raise ValueError("Archive has no file name and cannot be addressed by URI")
        return PathString("/" + handle.at, zip_filesystem_uri(archive))
    return PathString(handle)


__all__ = [
    "FilesystemProvider",
    "HostPath",
    "ZIP_SCHEME",
    "open_path",
    "register_filesystem_provider",
    "to_path_string",
    "unregister_filesystem_provider",
    "zip_filesystem_uri",
]
