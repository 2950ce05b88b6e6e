"""
Numeric predicates.
"""

from typing import Any, Tuple, Union

from .base import Predicate
from ..utils import TypeUtils

Number = Union[int, float]


class _Bound(Predicate):
    """Shared storage for the comparison predicates."""

    def __init__(self, bound: Number):
        self.bound = bound

    def _params(self) -> Tuple[Any, ...]:
        return (self.bound,)


class GreaterThan(_Bound):
    """Requires `value > bound`."""

    def __call__(self, value: Any) -> bool:
        return value > self.bound

    @property
    def kind(self) -> str:
        return "gt"


class GreaterThanOrEqual(_Bound):
    """Requires `value >= bound`."""

    def __call__(self, value: Any) -> bool:
        return value >= self.bound

    @property
    def kind(self) -> str:
        return "gte"


class LessThan(_Bound):
    """Requires `value < bound`."""

    def __call__(self, value: Any) -> bool:
        return value < self.bound

    @property
    def kind(self) -> str:
        return "lt"


class LessThanOrEqual(_Bound):
    """Requires `value <= bound`."""

    def __call__(self, value: Any) -> bool:
        return value <= self.bound

    @property
    def kind(self) -> str:
        return "lte"


class IsWholeNumber(Predicate):
    """Requires a number with no fractional part."""

    def __call__(self, value: Any) -> bool:
        return TypeUtils.is_integer(value)

    @property
    def kind(self) -> str:
        return "integer"
