# Path: `src/lexpath/features/path/__init__.py`
# Summary: Export the path value type and its host bridges.
# Why: Provide a stable import surface for the manifest codec, CLI and tests.

from .domain import (
    DEFAULT_FILESYSTEM_URI,
    LOCAL_SCHEME,
    PARENT,
    SELF,
    PathRangeError,
    PathString,
)
from .adapters import (
    FilesystemProvider,
    ZIP_SCHEME,
    register_filesystem_provider,
    to_path_string,
    unregister_filesystem_provider,
    zip_filesystem_uri,
)

__all__ = [
    "DEFAULT_FILESYSTEM_URI",
    "LOCAL_SCHEME",
    "PARENT",
    "SELF",
    "PathRangeError",
    "PathString",
    "FilesystemProvider",
    "ZIP_SCHEME",
    "register_filesystem_provider",
    "to_path_string",
    "unregister_filesystem_provider",
    "zip_filesystem_uri",
]
