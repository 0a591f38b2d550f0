"""Result types for merge operations that can fail.

Merges return ``Success`` or ``Failure`` so callers handle the conflict path
explicitly instead of relying on exceptions:

    match try_merge_resources(existing, incoming):
        case Success(value=links):
            ...
        case Failure(error=error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E", bound=BaseException)  # Error type


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful merge.

    Attributes:
        value: The merged value.
    """

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """A failed merge.

    Attributes:
        error: The exception describing the conflict.
    """

    error: E

    def unwrap(self):
        raise self.error


Result = Union[Success[T], Failure[E]]
