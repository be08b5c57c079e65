"""Pure path value domain: parser, value type and errors."""

from .errors import PathRangeError
from .parser import PARENT, SELF
from .path_string import DEFAULT_FILESYSTEM_URI, LOCAL_SCHEME, PathString

__all__ = [
    "DEFAULT_FILESYSTEM_URI",
    "LOCAL_SCHEME",
    "PARENT",
    "SELF",
    "PathRangeError",
    "PathString",
]
