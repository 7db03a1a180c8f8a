from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, JsonValue

from .errors import ResolutionError

# Decoded JSON, plus the read-only containers and models a walk can descend into.
type Document = JsonValue | Mapping[str, Document] | Sequence[Document] | BaseModel


@dataclass(frozen=True, slots=True)
class Found:
    """Successful resolution: *value* is the referenced node."""

    value: Document


@dataclass(frozen=True, slots=True)
class Missing:
    """Failed resolution.

    ``instance`` is the node being accessed when the walk stopped, ``token``
    the member it lacks, and ``depth`` the index of that token in the
    pointer.
    """

    instance: Document
    token: str
    depth: int

    def to_error(self) -> ResolutionError:
        return ResolutionError(self.instance, self.token)


type ResolveResult = Found | Missing


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


__all__ = ["Document", "Found", "JsonValue", "Missing", "ResolveResult", "is_scalar"]
