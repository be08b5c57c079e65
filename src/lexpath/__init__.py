"""lexpath: lexical path values for build tooling.

The public surface re-exports the path value type, its host bridges and the
build-output manifest codec.
"""

from lexpath.features.path import (
    DEFAULT_FILESYSTEM_URI,
    PARENT,
    SELF,
    PathRangeError,
    PathString,
    register_filesystem_provider,
    to_path_string,
    unregister_filesystem_provider,
    zip_filesystem_uri,
)
from lexpath.features.manifest import (
    BuildOutput,
    BuildOutputManifest,
    ManifestFormatError,
    decode_path,
    encode_path,
)

__version__ = "0.1.0"

__all__ = [
    "BuildOutput",
    "BuildOutputManifest",
    "DEFAULT_FILESYSTEM_URI",
    "ManifestFormatError",
    "PARENT",
    "PathRangeError",
    "PathString",
    "SELF",
    "decode_path",
    "encode_path",
    "register_filesystem_provider",
    "to_path_string",
    "unregister_filesystem_provider",
    "zip_filesystem_uri",
]
