"""
Hints advertised for a single resource link.

Hints tell a client how a resource may be used without fetching it first:
which HTTP methods are allowed and which media types are produced or
accepted.

MERGE RULES
-----------
- ``allows`` merges as a set union.
- ``representations``, ``accept_put`` and ``accept_post`` merge as an
  order-preserving, de-duplicating concatenation: the receiver's order is
  kept, and novel entries of the argument are appended in their own order.

The merge is always defined, idempotent (``h.merge_with(h) == h``) and
associative.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field, field_validator


class Allow(str, Enum):
    """HTTP methods that may be advertised in ``hints.allow``."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


_ALLOW_ORDER = {allow: index for index, allow in enumerate(Allow)}


def merge_ordered(this: Iterable[str], other: Iterable[str]) -> tuple[str, ...]:
    """Concatenate two sequences, dropping duplicates and keeping first-seen order."""
    merged: list[str] = []
    seen: set[str] = set()
    for item in (*this, *other):
        if item in seen:
            continue
        seen.add(item)
        merged.append(item)
    return tuple(merged)


def coerce_allows(value) -> frozenset[Allow]:
    """Accept a single method or an iterable of methods, names in any case."""
    if isinstance(value, (str, Allow)):
        value = [value]
    if not isinstance(value, Iterable):
        raise ValueError(f"Expected a method or a list of methods, got {type(value).__name__}")
    return frozenset(
        item if isinstance(item, Allow) else Allow(str(item).upper())
        for item in value
    )


class Hints(BaseModel):
    """
    Allowed methods and representation lists of one resource link.

    Sequences never contain duplicates; they are removed at construction,
    first appearance wins.
    """

    allows: frozenset[Allow] = Field(default_factory=frozenset)
    representations: tuple[str, ...] = ()
    accept_put: tuple[str, ...] = ()
    accept_post: tuple[str, ...] = ()

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("allows", mode="before")
    @classmethod
    def normalize_allows(cls, value):
        return coerce_allows(value)

    @field_validator("representations", "accept_put", "accept_post", mode="after")
    @classmethod
    def dedupe_sequences(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return merge_ordered(value, ())

    def merge_with(self, other: "Hints") -> "Hints":
        return Hints(
            allows=self.allows | other.allows,
            representations=merge_ordered(self.representations, other.representations),
            accept_put=merge_ordered(self.accept_put, other.accept_put),
            accept_post=merge_ordered(self.accept_post, other.accept_post),
        )

    def sorted_allows(self) -> list[Allow]:
        return sorted(self.allows, key=_ALLOW_ORDER.__getitem__)

    def to_json(self) -> dict:
        json_hints: dict = {
            "allow": [allow.value for allow in self.sorted_allows()],
            "representations": list(self.representations),
        }
        if self.accept_put:
            json_hints["accept-put"] = list(self.accept_put)
        if self.accept_post:
            json_hints["accept-post"] = list(self.accept_post)
        return json_hints

    @classmethod
    def from_json(cls, payload: dict) -> "Hints":
        return cls(
            allows=payload.get("allow", ()),
            representations=payload.get("representations", ()),
            accept_put=payload.get("accept-put", ()),
            accept_post=payload.get("accept-post", ()),
        )


def hints(
    allows: Iterable[Allow | str] = (),
    representations: Iterable[str] = (),
    accept_put: Iterable[str] = (),
    accept_post: Iterable[str] = (),
) -> Hints:
    return Hints(
        allows=list(allows),
        representations=tuple(representations),
        accept_put=tuple(accept_put),
        accept_post=tuple(accept_post),
    )


def empty_hints() -> Hints:
    return Hints()
