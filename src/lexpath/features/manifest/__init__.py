# Path: `src/lexpath/features/manifest/__init__.py`
# Summary: Export the build-output manifest and the path record codec.
# Why: Provide a stable import surface for the CLI and tests.

from .build_outputs import (
    BuildOutput,
    BuildOutputManifest,
    METADATA_FILE_NAME,
    metadata_file,
)
from .codec import decode_path, encode_path
from .errors import ManifestFormatError

__all__ = [
    "BuildOutput",
    "BuildOutputManifest",
    "METADATA_FILE_NAME",
    "ManifestFormatError",
    "decode_path",
    "encode_path",
    "metadata_file",
]
