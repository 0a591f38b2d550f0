from .hints import Allow, Hints, empty_hints
from .links import (
    DirectLink,
    Documentation,
    HrefVar,
    ResourceLink,
    TemplatedLink,
    direct_link,
    empty_documentation,
    merge_links,
    parse_resource_link,
    resource_link_from_json,
    template_var_names,
    templated_link,
)
from .document import JsonHome, empty_json_home, json_home

__all__ = [
    "Allow",
    "Hints",
    "empty_hints",
    "DirectLink",
    "Documentation",
    "HrefVar",
    "ResourceLink",
    "TemplatedLink",
    "direct_link",
    "empty_documentation",
    "merge_links",
    "parse_resource_link",
    "resource_link_from_json",
    "template_var_names",
    "templated_link",
    "JsonHome",
    "empty_json_home",
    "json_home",
]
