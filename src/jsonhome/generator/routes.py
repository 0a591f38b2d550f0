"""
Route descriptors supplied by the route-discovery collaborator.

Discovering routes (walking a web framework's routing table or annotations)
is not done here. A discovery adapter describes what it found as plain data:
one RouteGroup per controller-level mapping, holding one RouteDescriptor per
handler. Anything exposing ``route_groups()`` is a RouteSource.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from ..models.hints import Allow, coerce_allows
from ..models.links import HrefVar


class RouteDescriptor(BaseModel):
    """One route handler as seen by the discovery adapter.

    Fields:
    - relation_type: link-relation type of the handler; None means the
      handler is not part of the discovery surface (unless its group has one)
    - paths: path suffixes below the group's prefixes
    - methods: declared HTTP methods; empty means "unspecified"
    - produces / consumes: declared media types, in declaration order
    - href_vars: path variables with their semantic types
    - query_params: request parameters, rendered as a ``{?a,b}`` query template
    """

    relation_type: str | None = None
    paths: tuple[str, ...] = ("",)
    methods: frozenset[Allow] = Field(default_factory=frozenset)
    produces: tuple[str, ...] = ()
    consumes: tuple[str, ...] = ()
    href_vars: tuple[HrefVar, ...] = ()
    query_params: tuple[HrefVar, ...] = ()

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("methods", mode="before")
    @classmethod
    def normalize_methods(cls, value):
        return coerce_allows(value)

    @field_validator("paths", mode="after")
    @classmethod
    def default_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return value or ("",)


class RouteGroup(BaseModel):
    """A controller-level mapping: shared path prefixes and relation type."""

    relation_type: str | None = None
    paths: tuple[str, ...] = ("",)
    routes: tuple[RouteDescriptor, ...] = ()

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("paths", mode="after")
    @classmethod
    def default_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return value or ("",)


@runtime_checkable
class RouteSource(Protocol):
    """Producer of route data, e.g. an adapter over a web application."""

    def route_groups(self) -> Iterable[RouteGroup]:
        ...


class StaticRouteSource:
    """RouteSource over an already materialized list of groups."""

    def __init__(self, groups: Iterable[RouteGroup]):
        self._groups = tuple(groups)

    def route_groups(self) -> Iterable[RouteGroup]:
        return self._groups


_route_groups_adapter = TypeAdapter(list[RouteGroup])


def parse_route_groups(payload: object) -> list[RouteGroup]:
    """Validate route data.

    Accepts a list of groups, or a ``{"groups": [...]}`` object.
    """
    if isinstance(payload, dict) and "groups" in payload:
        payload = payload["groups"]
    return _route_groups_adapter.validate_python(payload)


def load_route_groups(file_path: str | Path) -> list[RouteGroup]:
    """
    Load route data from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        pydantic.ValidationError: If the data does not describe route groups
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Route file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return parse_route_groups(json.load(f))
