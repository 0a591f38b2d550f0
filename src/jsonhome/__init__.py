"""
Public API for the jsonhome package.
"""

from .models import (
    Allow,
    DirectLink,
    Documentation,
    HrefVar,
    Hints,
    JsonHome,
    ResourceLink,
    TemplatedLink,
    direct_link,
    empty_json_home,
    json_home,
    templated_link,
)
from .merge import merge_resources, try_merge_resources
from .errors import IncompatibleLinksError, InvalidLinkError, JsonHomeError
from .result import Failure, Result, Success
from .config import GeneratorConfig
from .generator import JsonHomeGenerator, RouteDescriptor, RouteGroup, RouteSource

__all__ = [
    "Allow",
    "DirectLink",
    "Documentation",
    "HrefVar",
    "Hints",
    "JsonHome",
    "ResourceLink",
    "TemplatedLink",
    "direct_link",
    "empty_json_home",
    "json_home",
    "templated_link",
    "merge_resources",
    "try_merge_resources",
    "IncompatibleLinksError",
    "InvalidLinkError",
    "JsonHomeError",
    "Failure",
    "Result",
    "Success",
    "GeneratorConfig",
    "JsonHomeGenerator",
    "RouteDescriptor",
    "RouteGroup",
    "RouteSource",
]
