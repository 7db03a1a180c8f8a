from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ptrwalk")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .errors import InvalidPointerError, PointerError, ResolutionError
from .json_pointer import (
    build_json_pointer,
    escape_json_pointer_token,
    parse_json_pointer,
    unescape_json_pointer_token,
)
from .pointer import Pointer
from .resolve import ResolveOptions
from .types import Document, Found, JsonValue, Missing, ResolveResult
from .validation import resolve_error_inputs, validation_error_pointers

__all__ = [
    "Document",
    "Found",
    "InvalidPointerError",
    "JsonValue",
    "Missing",
    "Pointer",
    "PointerError",
    "ResolutionError",
    "ResolveOptions",
    "ResolveResult",
    "build_json_pointer",
    "escape_json_pointer_token",
    "parse_json_pointer",
    "resolve_error_inputs",
    "unescape_json_pointer_token",
    "validation_error_pointers",
]
