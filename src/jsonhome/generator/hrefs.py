"""Href and href-var derivation for discovered routes."""

from __future__ import annotations

from ..errors import InvalidLinkError
from ..logging import logger
from ..models.links import HrefVar, template_var_names
from .routes import RouteDescriptor


def query_template_of(route: RouteDescriptor) -> str:
    """Query part of an href-template, like ``{?param1,param2}``; empty without params."""
    if not route.query_params:
        return ""
    return "{?" + ",".join(param.name for param in route.query_params) + "}"


def href_vars_of(route: RouteDescriptor, href_template: str) -> tuple[HrefVar, ...]:
    """Declared path vars and query params, ordered as they appear in ``href_template``.

    Declared vars without a placeholder in this template are dropped; a
    placeholder without a declared var is an error.
    """
    declared: dict[str, HrefVar] = {}
    for var in (*route.href_vars, *route.query_params):
        declared.setdefault(var.name, var)

    href_vars: list[HrefVar] = []
    for name in template_var_names(href_template):
        if name not in declared:
            raise InvalidLinkError(f"No href-var declared for placeholder {name!r} of {href_template}")
        href_vars.append(declared.pop(name))

    if declared:
        logger.debug("Unused href-vars %s for %s", sorted(declared), href_template)
    return tuple(href_vars)
