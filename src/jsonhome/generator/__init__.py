"""
Generator - turns discovered routes into a json-home document.

Public API:
- JsonHomeGenerator: folds route groups into a JsonHome
- RouteDescriptor, RouteGroup: route data produced by a discovery adapter
- RouteSource, StaticRouteSource: producers of route groups
- hints_of, allowed_methods_of, supported_representations_of: defaulting rules
"""

from .generator import JsonHomeGenerator
from .hints import allowed_methods_of, hints_of, supported_representations_of
from .hrefs import href_vars_of, query_template_of
from .routes import (
    RouteDescriptor,
    RouteGroup,
    RouteSource,
    StaticRouteSource,
    load_route_groups,
    parse_route_groups,
)

__all__ = [
    "JsonHomeGenerator",
    "RouteDescriptor",
    "RouteGroup",
    "RouteSource",
    "StaticRouteSource",
    "allowed_methods_of",
    "hints_of",
    "href_vars_of",
    "load_route_groups",
    "parse_route_groups",
    "query_template_of",
    "supported_representations_of",
]
