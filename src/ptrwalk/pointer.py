"""The :class:`Pointer` value object (RFC 6901 JSON Pointer).

A pointer is an immutable sequence of already-unescaped reference tokens::

    >>> ptr = Pointer.parse("/foo/1/bar")
    >>> ptr.tokens
    ('foo', '1', 'bar')
    >>> ptr.eval({"foo": [None, {"bar": "x"}]})
    'x'
    >>> str(Pointer(["o~/p"]))
    '/o~0~1p'

``Pointer`` also works as a pydantic field type: it validates from a string,
serializes back to one, and advertises ``{"type": "string"}`` in JSON Schema.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .json_pointer import build_json_pointer, parse_json_pointer
from .resolve import ResolveOptions, evaluate, resolve
from .types import Document, Found, ResolveResult


@dataclass(frozen=True, slots=True)
class Pointer:
    """A JSON Pointer: an ordered tuple of unescaped reference tokens.

    Constructing from tokens is the trusted path -- no validation happens
    beyond copying *tokens* into a tuple.  Use :meth:`parse` for strings.
    An empty pointer refers to the whole document.
    """

    tokens: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.tokens, str):
            raise TypeError("Pointer tokens must be a sequence of strings, not a str")
        object.__setattr__(self, "tokens", tuple(self.tokens))

    # -- string form --------------------------------------------------------

    @classmethod
    def parse(cls, s: str) -> Pointer:
        """Parse *s* as a JSON Pointer, un-escaping ``~1`` and ``~0``.

        Raises
        ------
        InvalidPointerError
            If *s* is non-empty and does not start with ``/``.
        """
        return cls(parse_json_pointer(s))

    @classmethod
    def from_loc(cls, loc: Iterable[str | int]) -> Pointer:
        """Build a pointer from a pydantic error location like ``('pets', 0, 'age')``."""
        return cls([str(part) for part in loc])

    def __str__(self) -> str:
        return build_json_pointer(self.tokens)

    # -- evaluation ---------------------------------------------------------

    def eval(self, instance: Document, options: ResolveOptions | None = None) -> Document:
        """Return the node of *instance* this pointer refers to.

        Raises
        ------
        ResolutionError
            If a token names a member the current node does not have.  The
            error carries that node and token.
        """
        return evaluate(instance, self.tokens, options=options)

    def resolve(self, instance: Document, options: ResolveOptions | None = None) -> ResolveResult:
        """Non-raising :meth:`eval`: returns ``Found`` or ``Missing``."""
        return resolve(instance, self.tokens, options=options)

    def get(
        self, instance: Document, default: Any = None, options: ResolveOptions | None = None
    ) -> Any:
        result = self.resolve(instance, options)
        if isinstance(result, Found):
            return result.value
        return default

    # -- pydantic integration -----------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.parse),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )


__all__ = ["Pointer"]
