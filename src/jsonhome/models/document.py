"""
The json-home discovery document.

A JsonHome holds resource links unique by relation type, in order of first
appearance. Links passed to the constructor are folded through the merge
engine, so a constructed document is always canonical; a conflict raises
IncompatibleLinksError and no document is produced.
"""

from __future__ import annotations

import json
from typing import Iterable

from pydantic import BaseModel, field_validator

from ..errors import InvalidLinkError
from ..merge import merge_resources
from .links import ResourceLink, resource_link_from_json


class JsonHome(BaseModel):
    """Aggregated, de-duplicated collection of resource links."""

    resources: tuple[ResourceLink, ...] = ()

    model_config = {"frozen": True}

    @field_validator("resources", mode="after")
    @classmethod
    def fold_resources(cls, value: tuple[ResourceLink, ...]) -> tuple[ResourceLink, ...]:
        return merge_resources((), value)

    def merge_with(self, other: "JsonHome") -> "JsonHome":
        """Combine two documents; entries of ``other`` fold into this one."""
        return JsonHome(resources=(*self.resources, *other.resources))

    def resource_for(self, relation_type: str) -> ResourceLink | None:
        for resource in self.resources:
            if resource.relation_type == relation_type:
                return resource
        return None

    def has_resource_for(self, relation_type: str) -> bool:
        return self.resource_for(relation_type) is not None

    def relation_types(self) -> list[str]:
        return [resource.relation_type for resource in self.resources]

    def to_json(self) -> dict:
        return {
            "resources": {
                resource.relation_type: resource.to_json()
                for resource in self.resources
            }
        }

    def dumps(self, indent: int | None = None) -> str:
        return json.dumps(self.to_json(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_json(cls, payload: dict) -> "JsonHome":
        """Parse a wire-format document back into links."""
        if not isinstance(payload, dict):
            raise InvalidLinkError("json-home document must be a JSON object")
        resources = payload.get("resources")
        if not isinstance(resources, dict):
            raise InvalidLinkError("json-home document must contain a 'resources' object")
        return cls(
            resources=tuple(
                resource_link_from_json(relation_type, entry)
                for relation_type, entry in resources.items()
            )
        )


def json_home(resources: Iterable[ResourceLink] = ()) -> JsonHome:
    return JsonHome(resources=tuple(resources))


def empty_json_home() -> JsonHome:
    return JsonHome()
