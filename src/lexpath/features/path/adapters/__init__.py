"""Host filesystem adapters for path values."""

from .providers import (
    FilesystemProvider,
    HostPath,
    ZIP_SCHEME,
    open_path,
    register_filesystem_provider,
    to_path_string,
    unregister_filesystem_provider,
    zip_filesystem_uri,
)

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
