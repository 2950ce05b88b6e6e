"""
Array predicates.
"""

from typing import Any

from .base import Predicate
from ..utils import TypeUtils


class UniqueItems(Predicate):
    """
    Requires all elements of a sequence to be pairwise distinct.

    Elements are compared by JSON value equality, so unhashable items such
    as dicts and lists are supported. Comparison is quadratic in the length
    of the sequence.
    """

    def __call__(self, value: Any) -> bool:
        items = list(value)
        for i, item in enumerate(items):
            for other in items[i + 1:]:
                if TypeUtils.json_equal(item, other):
                    return False
        return True

    @property
    def kind(self) -> str:
        return "uniqueItems"
