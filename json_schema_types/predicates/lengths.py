"""
Length predicates, shared by strings and arrays.
"""

from typing import Any, Tuple

from .base import Predicate


class MinLength(Predicate):
    """Requires `len(value) >= length`."""

    def __init__(self, length: int):
        self.length = length

    def __call__(self, value: Any) -> bool:
        return len(value) >= self.length

    @property
    def kind(self) -> str:
        return "minLength"

    def _params(self) -> Tuple[Any, ...]:
        return (self.length,)


class MaxLength(Predicate):
    """Requires `len(value) <= length`."""

    def __init__(self, length: int):
        self.length = length

    def __call__(self, value: Any) -> bool:
        return len(value) <= self.length

    @property
    def kind(self) -> str:
        return "maxLength"

    def _params(self) -> Tuple[Any, ...]:
        return (self.length,)
