"""
Generator configuration.

Values come from keyword arguments first, then from the environment
(``JSONHOME_ROOT_URI``, ``JSONHOME_DEFAULT_REPRESENTATION``), then from the
defaults below.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, field_validator

DEFAULT_REPRESENTATION = "text/html"
FORM_REPRESENTATION = "application/x-www-form-urlencoded"


class GeneratorConfig(BaseModel):
    root_uri: str = ""
    default_representation: str = DEFAULT_REPRESENTATION
    form_representation: str = FORM_REPRESENTATION

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator("root_uri")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorConfig":
        values: dict[str, str] = {}
        root_uri = os.getenv("JSONHOME_ROOT_URI")
        if root_uri:
            values["root_uri"] = root_uri
        default_representation = os.getenv("JSONHOME_DEFAULT_REPRESENTATION")
        if default_representation:
            values["default_representation"] = default_representation
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
