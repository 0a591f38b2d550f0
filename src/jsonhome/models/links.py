"""
Resource links of a json-home document.

A resource link is one entry point of an API, identified by its link-relation
type. It comes in exactly two variants:

- DirectLink: a concrete URI (``href``).
- TemplatedLink: a URI template (``href-template``) plus one HrefVar per
  template placeholder (``href-vars``).

CRITICAL INVARIANTS:
--------------------
1. The relation type is an absolute URI. It is the identity key for merging;
   links with different relation types never merge.

2. A relation type is represented consistently. Merging a DirectLink with a
   TemplatedLink fails, as does merging direct links with different hrefs or
   templated links with different templates or variables.

3. Every placeholder of ``href_template`` has exactly one HrefVar, in template
   order, and there are no extra vars.

4. Links are immutable values. A merge returns a new link whose identity
   fields come from the receiver and whose hints are the merged hints.

Templates are opaque strings compared for equality. Only variable names are
extracted from them; there is no expansion.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from ..errors import IncompatibleLinksError, InvalidLinkError
from ..logging import logger
from ..result import Failure, Result, Success
from .hints import Hints

_PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]*)\}")
_TEMPLATE_OPERATORS = "+#./;?&"


def template_var_names(template: str) -> list[str]:
    """Extract placeholder names of a URI template, preserving first-seen order.

    ``/pages/{pageId}{?q,lang*}`` -> ``["pageId", "q", "lang"]``
    """
    names: list[str] = []
    seen: set[str] = set()
    for match in _PLACEHOLDER_PATTERN.finditer(template):
        expression = match.group(1)
        if expression[:1] in _TEMPLATE_OPERATORS:
            expression = expression[1:]
        for varspec in expression.split(","):
            name = varspec.strip().rstrip("*").split(":", 1)[0]
            if not name or name in seen:
                continue
            seen.add(name)
            names.append(name)
    return names


def _check_relation_type(relation_type: str) -> None:
    if not relation_type:
        raise InvalidLinkError("Relation type must not be empty")
    if not urlsplit(relation_type).scheme:
        raise InvalidLinkError(f"Relation type must be an absolute URI, got {relation_type!r}")


class Documentation(BaseModel):
    """Human-readable documentation attached to an href variable."""

    value: tuple[str, ...] = ()
    link: str | None = None

    model_config = {"frozen": True}


def empty_documentation() -> Documentation:
    return Documentation()


class HrefVar(BaseModel):
    """A named, semantically typed placeholder of a templated link."""

    name: str
    var_type: str
    documentation: Documentation = Field(default_factory=empty_documentation)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_name(self) -> "HrefVar":
        if not self.name:
            raise InvalidLinkError("HrefVar name must not be empty")
        return self


class DirectLink(BaseModel):
    """A resource link pointing to one concrete URI."""

    kind: Literal["direct"] = "direct"
    relation_type: str
    href: str
    hints: Hints = Field(default_factory=Hints)

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @model_validator(mode="after")
    def check_identity(self) -> "DirectLink":
        _check_relation_type(self.relation_type)
        if not self.href:
            raise InvalidLinkError(f"Direct link {self.relation_type} has an empty href")
        if "{" in self.href or "}" in self.href:
            raise InvalidLinkError(
                f"Direct link {self.relation_type} must not contain template syntax: {self.href}"
            )
        return self

    def try_merge_with(self, other: "ResourceLink") -> Result["ResourceLink", IncompatibleLinksError]:
        return merge_links(self, other)

    def merge_with(self, other: "ResourceLink") -> "ResourceLink":
        return merge_links(self, other).unwrap()

    def to_json(self) -> dict:
        return {
            "href": self.href,
            "hints": self.hints.to_json(),
        }


class TemplatedLink(BaseModel):
    """A resource link pointing to a parameterized URI template."""

    kind: Literal["templated"] = "templated"
    relation_type: str
    href_template: str
    href_vars: tuple[HrefVar, ...] = ()
    hints: Hints = Field(default_factory=Hints)

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @model_validator(mode="after")
    def check_identity(self) -> "TemplatedLink":
        _check_relation_type(self.relation_type)
        placeholder_names = template_var_names(self.href_template)
        if not placeholder_names:
            raise InvalidLinkError(
                f"Templated link {self.relation_type} has no placeholders: {self.href_template}"
            )
        var_names = [var.name for var in self.href_vars]
        if len(set(var_names)) != len(var_names):
            raise InvalidLinkError(
                f"Templated link {self.relation_type} declares duplicate href-vars: {var_names}"
            )
        if var_names != placeholder_names:
            raise InvalidLinkError(
                f"href-vars {var_names} of {self.relation_type} do not match "
                f"the placeholders {placeholder_names} of {self.href_template}"
            )
        return self

    def try_merge_with(self, other: "ResourceLink") -> Result["ResourceLink", IncompatibleLinksError]:
        return merge_links(self, other)

    def merge_with(self, other: "ResourceLink") -> "ResourceLink":
        return merge_links(self, other).unwrap()

    def to_json(self) -> dict:
        return {
            "href-template": self.href_template,
            "href-vars": {var.name: var.var_type for var in self.href_vars},
            "hints": self.hints.to_json(),
        }


ResourceLink = Annotated[Union[DirectLink, TemplatedLink], Field(discriminator="kind")]

_resource_link_adapter = TypeAdapter(ResourceLink)


def parse_resource_link(payload: Any) -> ResourceLink:
    """Validate a python payload (dict or link) into a ResourceLink."""
    if isinstance(payload, (DirectLink, TemplatedLink)):
        return payload
    return _resource_link_adapter.validate_python(payload)


def direct_link(
    relation_type: str,
    href: str,
    allows=(),
    representations=(),
    hints: Hints | None = None,
) -> DirectLink:
    if hints is None:
        hints = Hints(allows=list(allows), representations=tuple(representations))
    return DirectLink(relation_type=relation_type, href=href, hints=hints)


def templated_link(
    relation_type: str,
    href_template: str,
    href_vars=(),
    hints: Hints | None = None,
) -> TemplatedLink:
    return TemplatedLink(
        relation_type=relation_type,
        href_template=href_template,
        href_vars=tuple(href_vars),
        hints=hints if hints is not None else Hints(),
    )


def resource_link_from_json(relation_type: str, payload: dict) -> ResourceLink:
    """Parse one wire-format entry (the value under a relation type key)."""
    if not isinstance(payload, dict):
        raise InvalidLinkError(f"Entry {relation_type} must be an object, got {type(payload).__name__}")
    hints_payload = payload.get("hints", {})
    if not isinstance(hints_payload, dict):
        raise InvalidLinkError(f"Hints of {relation_type} must be an object")
    hints = Hints.from_json(hints_payload)
    has_href = "href" in payload
    has_template = "href-template" in payload
    if has_href == has_template:
        raise InvalidLinkError(
            f"Entry {relation_type} must contain exactly one of 'href' and 'href-template'"
        )
    if has_href:
        return DirectLink(relation_type=relation_type, href=payload["href"], hints=hints)
    href_vars_payload = payload.get("href-vars", {})
    if not isinstance(href_vars_payload, dict):
        raise InvalidLinkError(f"href-vars of {relation_type} must be an object")
    href_vars = tuple(
        HrefVar(name=name, var_type=var_type)
        for name, var_type in href_vars_payload.items()
    )
    return TemplatedLink(
        relation_type=relation_type,
        href_template=payload["href-template"],
        href_vars=href_vars,
        hints=hints,
    )


def merge_links(this: ResourceLink, other: ResourceLink) -> Result[ResourceLink, IncompatibleLinksError]:
    """Merge two links sharing a relation type.

    Checks run in a fixed order: relation type, variant, then href (direct)
    or template and href-vars (templated). The first violated check decides
    the failure.
    """
    if this.relation_type != other.relation_type:
        return Failure(IncompatibleLinksError(
            f"Cannot merge links with different relation types: "
            f"{this.relation_type} and {other.relation_type}",
            this,
            other,
        ))

    match (this, other):
        case (DirectLink(), DirectLink()):
            if this.href != other.href:
                return Failure(IncompatibleLinksError(
                    f"Relation type {this.relation_type} maps to different hrefs: "
                    f"{this.href} and {other.href}",
                    this,
                    other,
                ))
        case (TemplatedLink(), TemplatedLink()):
            if this.href_template != other.href_template:
                return Failure(IncompatibleLinksError(
                    f"Relation type {this.relation_type} maps to different href-templates: "
                    f"{this.href_template} and {other.href_template}",
                    this,
                    other,
                ))
            if this.href_vars != other.href_vars:
                return Failure(IncompatibleLinksError(
                    f"Relation type {this.relation_type} declares different href-vars for "
                    f"{this.href_template}",
                    this,
                    other,
                ))
        case _:
            return Failure(IncompatibleLinksError(
                f"Relation type {this.relation_type} is mapped both as {this.kind} "
                f"and as {other.kind} link",
                this,
                other,
            ))

    logger.debug("Merging hints of %s", this.relation_type)
    return Success(this.model_copy(update={"hints": this.hints.merge_with(other.hints)}))
