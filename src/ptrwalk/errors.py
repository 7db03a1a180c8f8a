"""Exceptions raised while parsing and evaluating JSON Pointers.

Two failure kinds exist and they are siblings:

* :class:`InvalidPointerError` -- the pointer *string* is malformed.
* :class:`ResolutionError` -- the pointer is well formed but names a member
  the document does not have.

Both derive from :class:`PointerError` so callers can catch either one.  Each
also derives from the closest builtin (``ValueError`` / ``LookupError``).
"""

from __future__ import annotations

from typing import Any


class PointerError(Exception):
    """Base exception for all JSON Pointer errors."""


class InvalidPointerError(PointerError, ValueError):
    """Raised when a string is not a valid JSON Pointer representation.

    Attributes
    ----------
    pointer : str
        The offending input, verbatim.
    """

    def __init__(self, pointer: str) -> None:
        super().__init__(f"Invalid JSON Pointer: {pointer!r}")
        self.pointer = pointer

    def __reduce__(self):
        return (type(self), (self.pointer,))


class ResolutionError(PointerError, LookupError):
    """Raised when a document lacks a member referenced by a JSON Pointer.

    Attributes
    ----------
    instance : Any
        The node being accessed when resolution failed (not the document
        root, unless the failure happened on the first token).
    token : str
        The reference token that *instance* does not have.
    """

    def __init__(self, instance: Any, token: str) -> None:
        super().__init__(f"no member {token!r} on {type(instance).__name__} value {instance!r}")
        self.instance = instance
        self.token = token

    def __reduce__(self):
        return (type(self), (self.instance, self.token))


__all__ = ["InvalidPointerError", "PointerError", "ResolutionError"]
