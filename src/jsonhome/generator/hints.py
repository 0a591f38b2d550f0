"""
Hints derivation for discovered routes.

Defaulting rules, applied per route:
- No declared methods -> ``{GET}``.
- Supported representations are the produced types followed by the consumed
  types not already listed. When nothing is consumed and the route allows
  exactly ``{POST}``, the form media type is appended. An empty result falls
  back to the default representation.
- The supported representations are placed by method: GET or HEAD ->
  ``representations``, PUT -> ``accept_put``, POST -> ``accept_post``.
  PATCH is treated like PUT.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from ..models.hints import Allow, Hints, merge_ordered
from .routes import RouteDescriptor

_DEFAULT_CONFIG = GeneratorConfig()


def allowed_methods_of(route: RouteDescriptor) -> frozenset[Allow]:
    if not route.methods:
        return frozenset({Allow.GET})
    return route.methods


def supported_representations_of(
    route: RouteDescriptor,
    config: GeneratorConfig = _DEFAULT_CONFIG,
) -> tuple[str, ...]:
    representations = merge_ordered(route.produces, route.consumes)
    if not route.consumes and allowed_methods_of(route) == {Allow.POST}:
        representations = merge_ordered(representations, (config.form_representation,))
    if not representations:
        representations = (config.default_representation,)
    return representations


def hints_of(route: RouteDescriptor, config: GeneratorConfig = _DEFAULT_CONFIG) -> Hints:
    allows = allowed_methods_of(route)
    supported = supported_representations_of(route, config)
    representations: tuple[str, ...] = ()
    accept_put: tuple[str, ...] = ()
    accept_post: tuple[str, ...] = ()
    if Allow.PUT in allows or Allow.PATCH in allows:
        accept_put = supported
    if Allow.POST in allows:
        accept_post = supported
    if Allow.GET in allows or Allow.HEAD in allows:
        representations = supported
    return Hints(
        allows=allows,
        representations=representations,
        accept_put=accept_put,
        accept_post=accept_post,
    )
