from __future__ import annotations

from collections.abc import Iterable

from .errors import InvalidPointerError


def escape_json_pointer_token(token: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901)."""
    # "~" first, otherwise the "~" of a fresh "~1" would be escaped again.
    return token.replace("~", "~0").replace("/", "~1")


def unescape_json_pointer_token(token: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901)."""
    # "~1" first, so "~01" decodes to "~1" rather than "/".
    return token.replace("~1", "/").replace("~0", "~")


def parse_json_pointer(path: str) -> list[str]:
    """Split a JSON Pointer into unescaped tokens.

    The root pointer ``""`` returns an empty list.  Anything else must start
    with ``/``; otherwise :class:`~ptrwalk.errors.InvalidPointerError` is
    raised carrying *path* unchanged.
    """
    if path == "":
        return []
    if not path.startswith("/"):
        raise InvalidPointerError(path)
    return [unescape_json_pointer_token(tok) for tok in path[1:].split("/")]


def build_json_pointer(tokens: Iterable[str]) -> str:
    """Build a JSON Pointer string from raw tokens."""
    escaped = [escape_json_pointer_token(token) for token in tokens]
    if not escaped:
        return ""
    return "/" + "/".join(escaped)
