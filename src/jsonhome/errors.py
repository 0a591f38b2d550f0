"""
Error taxonomy for json-home generation.

Both errors describe defects in the input route set, never transient
conditions. They are raised to the caller unchanged; nothing in this package
retries, drops the offending entry or emits a partial document.

They deliberately do not derive from ``ValueError``: pydantic converts
``ValueError`` raised inside validators into ``ValidationError``, and these
must reach the caller as themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.links import ResourceLink


class JsonHomeError(Exception):
    """Base class of all jsonhome errors."""


class InvalidLinkError(JsonHomeError):
    """Malformed identity fields of a link, detected at construction."""


class IncompatibleLinksError(JsonHomeError):
    """Two links sharing a merge key cannot be merged into one."""

    def __init__(self, reason: str, this: ResourceLink | None = None, other: ResourceLink | None = None):
        self.reason = reason
        self.this = this
        self.other = other
        super().__init__(reason)
