"""
JsonHomeGenerator - builds a json-home document from discovered routes.

Flow:
1. For every route handler, resolve its relation type (handler overrides
   group; relative values are resolved against the root URI). Handlers
   without a relation type are skipped.
2. Build one href per group prefix x handler path, appending the query
   template of the handler's request parameters.
3. Hrefs containing a ``{...}`` placeholder become TemplatedLinks, all others
   DirectLinks, each carrying the handler's derived hints.
4. Fold every link into the result through the merge engine. A conflict
   raises IncompatibleLinksError; no partial document is emitted.

Independent sources are generated separately and combined pairwise in the
order given, so the document order is deterministic for a fixed source order.
"""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlsplit

from loguru import logger

from ..config import GeneratorConfig
from ..merge import merge_resources
from ..models.document import JsonHome, empty_json_home
from ..models.links import DirectLink, ResourceLink, TemplatedLink
from .hints import hints_of
from .hrefs import href_vars_of, query_template_of
from .routes import RouteDescriptor, RouteGroup, RouteSource

_TEMPLATED_HREF = re.compile(r"\{.*\}")


class JsonHomeGenerator:
    """Generate json-home documents from route descriptors."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config if config is not None else GeneratorConfig()

    @classmethod
    def for_root(cls, root_uri: str) -> "JsonHomeGenerator":
        return cls(GeneratorConfig(root_uri=root_uri))

    def relation_type_of(self, group: RouteGroup, route: RouteDescriptor) -> str | None:
        """
        Resolve the relation type of a handler.

        The handler's relation type overrides the group's. Values with a URI
        scheme are used as-is, others are resolved against the root URI.

        Returns:
            Absolute relation type, or None if neither handler nor group has one.
        """
        relation_type = route.relation_type or group.relation_type
        if not relation_type:
            return None
        if urlsplit(relation_type).scheme:
            return relation_type
        return self.config.root_uri + relation_type

    def resource_links_for_route(self, group: RouteGroup, route: RouteDescriptor) -> list[ResourceLink]:
        relation_type = self.relation_type_of(group, route)
        if relation_type is None:
            logger.debug(f"JsonHomeGenerator: skipping route {route.paths} without relation type")
            return []

        hints = hints_of(route, self.config)
        query_template = query_template_of(route)
        links: list[ResourceLink] = []
        for prefix in group.paths:
            for suffix in route.paths:
                href = self.config.root_uri + prefix + suffix + query_template
                if _TEMPLATED_HREF.search(href):
                    links.append(TemplatedLink(
                        relation_type=relation_type,
                        href_template=href,
                        href_vars=href_vars_of(route, href),
                        hints=hints,
                    ))
                else:
                    links.append(DirectLink(
                        relation_type=relation_type,
                        href=href,
                        hints=hints,
                    ))
        return links

    def resource_links_for(self, group: RouteGroup) -> tuple[ResourceLink, ...]:
        resources: tuple[ResourceLink, ...] = ()
        for route in group.routes:
            resources = merge_resources(resources, self.resource_links_for_route(group, route))
        return resources

    def generate(self, groups: Iterable[RouteGroup]) -> JsonHome:
        """
        Build a JsonHome from route groups.

        Raises:
            IncompatibleLinksError: if two handlers map one relation type
                inconsistently.
            InvalidLinkError: if a handler yields a malformed link.
        """
        resources: tuple[ResourceLink, ...] = ()
        group_count = 0
        for group in groups:
            group_count += 1
            resources = merge_resources(resources, self.resource_links_for(group))

        logger.info(
            f"JsonHomeGenerator: {len(resources)} resources from {group_count} route groups"
        )
        return JsonHome(resources=resources)

    def generate_from_sources(self, sources: Iterable[RouteSource]) -> JsonHome:
        document = empty_json_home()
        for source in sources:
            document = document.merge_with(self.generate(source.route_groups()))
        return document
