"""
Merge engine: folds incoming resource links into an ordered collection.

For each incoming link (in order) the collection is searched for an entry
with the same relation type, including incoming links already folded in.
A match is replaced in place by ``match.merge_with(incoming)``; otherwise the
link is appended. The result is unique by relation type and ordered by first
appearance.

Any conflict aborts the whole batch: no partially merged collection is ever
returned.
"""

from __future__ import annotations

from typing import Iterable

from .errors import IncompatibleLinksError
from .logging import logger
from .models.links import ResourceLink, merge_links
from .result import Failure, Result, Success


def try_merge_resources(
    existing: Iterable[ResourceLink],
    incoming: Iterable[ResourceLink],
) -> Result[tuple[ResourceLink, ...], IncompatibleLinksError]:
    merged: list[ResourceLink] = list(existing)
    # relation type -> position in ``merged``; same outcome as a linear scan
    positions: dict[str, int] = {}
    for index, link in enumerate(merged):
        positions.setdefault(link.relation_type, index)

    for link in incoming:
        index = positions.get(link.relation_type)
        if index is None:
            positions[link.relation_type] = len(merged)
            merged.append(link)
            logger.debug("Added resource %s", link.relation_type)
            continue
        outcome = merge_links(merged[index], link)
        if isinstance(outcome, Failure):
            logger.debug("Merge of %s failed: %s", link.relation_type, outcome.error)
            return outcome
        merged[index] = outcome.value
        logger.debug("Merged resource %s at position %d", link.relation_type, index)

    return Success(tuple(merged))


def merge_resources(
    existing: Iterable[ResourceLink],
    incoming: Iterable[ResourceLink],
) -> tuple[ResourceLink, ...]:
    """Raising variant of ``try_merge_resources``.

    Raises:
        IncompatibleLinksError: if any incoming link conflicts with an entry
            sharing its relation type.
    """
    return try_merge_resources(existing, incoming).unwrap()
