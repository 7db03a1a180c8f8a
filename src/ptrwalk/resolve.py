"""Read-only evaluation of JSON Pointer tokens against a document (RFC 6901 §4).

Node kinds
----------
* **Mappings** (``dict`` and any :class:`collections.abc.Mapping`) have a
  member for every key; a token is present when ``token in node``.
* **Sequences** (``list``, ``tuple`` and other non-text
  :class:`collections.abc.Sequence` types) have a member for every valid
  array index.  Only the RFC 6901 ``array-index`` form addresses an element:
  ``"0"`` or digits without a leading zero.  ``"-"``, negative numbers and
  out-of-range indices are absent.
* **Everything else** -- ``None``, booleans, numbers and strings -- has no
  members at all.

With :attr:`ResolveOptions.traverse_models` enabled, a pydantic
:class:`~pydantic.BaseModel` is walked through its declared fields.

The document is never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from .types import Document, Found, Missing, ResolveResult, is_scalar

_ABSENT = object()


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    """Knobs for pointer evaluation.

    Attributes
    ----------
    strict_array_index : bool
        Reject array indices with leading zeros (``"01"``).  When ``False``
        any run of ASCII digits is accepted.
    traverse_models : bool
        Treat pydantic models as containers keyed by field name.
    max_depth : int | None
        Refuse pointers with more tokens than this.
    """

    strict_array_index: bool = True
    traverse_models: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")


_DEFAULT_OPTIONS = ResolveOptions()


def array_index(token: str, *, strict: bool = True) -> int | None:
    """Interpret *token* as an array index, or return ``None``.

    >>> array_index("10")
    10
    >>> array_index("01") is None
    True
    """
    if not token or not (token.isascii() and token.isdigit()):
        return None
    if strict and len(token) > 1 and token[0] == "0":
        return None
    return int(token)


def _member(node: Any, token: str, opts: ResolveOptions) -> Any:
    """Return the member of *node* named by *token*, or a private sentinel."""
    if is_scalar(node):
        return _ABSENT
    if isinstance(node, Mapping):
        if token in node:
            return node[token]
        return _ABSENT
    if isinstance(node, Sequence) and not isinstance(node, (bytes, bytearray)):
        idx = array_index(token, strict=opts.strict_array_index)
        if idx is None or idx >= len(node):
            return _ABSENT
        return node[idx]
    if opts.traverse_models and isinstance(node, BaseModel):
        if token in type(node).model_fields:
            return getattr(node, token)
        return _ABSENT
    return _ABSENT


def _check_depth(tokens: Sequence[str], opts: ResolveOptions) -> None:
    if opts.max_depth is not None and len(tokens) > opts.max_depth:
        raise ValueError(
            f"Pointer depth {len(tokens)} exceeds max_depth={opts.max_depth}"
        )


def resolve(
    document: Document, tokens: Sequence[str], *, options: ResolveOptions | None = None
) -> ResolveResult:
    """Walk *tokens* through *document* and report the outcome.

    Returns :class:`~ptrwalk.types.Found` with the referenced node, or
    :class:`~ptrwalk.types.Missing` describing the first absent member.
    An empty token sequence yields *document* itself.

    Raises
    ------
    ValueError
        If *tokens* is longer than ``options.max_depth``.
    """
    opts = options or _DEFAULT_OPTIONS
    _check_depth(tokens, opts)
    current = document
    for depth, token in enumerate(tokens):
        nxt = _member(current, token, opts)
        if nxt is _ABSENT:
            return Missing(instance=current, token=token, depth=depth)
        current = nxt
    return Found(current)


def evaluate(
    document: Document, tokens: Sequence[str], *, options: ResolveOptions | None = None
) -> Document:
    """Like :func:`resolve`, but raise :class:`ResolutionError` on failure."""
    match resolve(document, tokens, options=options):
        case Found(value=value):
            return value
        case Missing() as missing:
            raise missing.to_error()


__all__ = ["ResolveOptions", "array_index", "evaluate", "resolve"]
