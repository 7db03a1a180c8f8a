"""Bridge between pydantic validation errors and JSON Pointers.

Pydantic reports failing locations as ``loc`` tuples such as
``('user', 'pets', 0, 'age')``.  These helpers turn them into
:class:`~ptrwalk.pointer.Pointer` objects and look the offending values up in
the original input.
"""

from __future__ import annotations

from pydantic import ValidationError

from .pointer import Pointer
from .resolve import ResolveOptions
from .types import Document, ResolveResult


def validation_error_pointers(error: ValidationError) -> list[Pointer]:
    """Convert the ``loc`` of every error in *error* to a :class:`Pointer`.

    Returns a deduplicated list in the order the locations first appear.
    """
    seen: set[Pointer] = set()
    pointers: list[Pointer] = []
    for err in error.errors():
        pointer = Pointer.from_loc(err.get("loc", ()))
        if pointer not in seen:
            seen.add(pointer)
            pointers.append(pointer)
    return pointers


def resolve_error_inputs(
    error: ValidationError, document: Document, *, options: ResolveOptions | None = None
) -> dict[str, ResolveResult]:
    """Resolve each failing location of *error* against *document*.

    Keys are the pointer strings.  A location the input does not contain
    (e.g. a required field that was never sent) maps to ``Missing``.
    """
    return {
        str(pointer): pointer.resolve(document, options)
        for pointer in validation_error_pointers(error)
    }


__all__ = ["resolve_error_inputs", "validation_error_pointers"]
