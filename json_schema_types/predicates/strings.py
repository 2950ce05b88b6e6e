"""
String predicates.
"""

import re
from typing import Any, Callable, Pattern, Tuple

from .base import Predicate


class PatternMatch(Predicate):
    """
    Requires a string to contain a match for a regular expression.

    The pattern is not anchored: `"^a"` must be written explicitly to
    require a prefix.
    """

    def __init__(self, pattern: str):
        """
        Initialize a new pattern predicate.

        Args:
            pattern: Regular expression source

        Raises:
            re.error: If the pattern does not compile
        """
        self.pattern = pattern
        self._compiled_pattern: Pattern = re.compile(pattern)

    def __call__(self, value: Any) -> bool:
        return self._compiled_pattern.search(value) is not None

    @property
    def kind(self) -> str:
        return "pattern"

    def _params(self) -> Tuple[Any, ...]:
        return (self.pattern,)


class FormatPredicate(Predicate):
    """
    Wraps a function registered under a format name.
    """

    def __init__(self, name: str, func: Callable[[Any], bool]):
        """
        Initialize a new format predicate.

        Args:
            name: Format name, e.g. "email"
            func: Registered check for the format
        """
        self.name = name
        self.func = func

    def __call__(self, value: Any) -> bool:
        return bool(self.func(value))

    @property
    def kind(self) -> str:
        return "format"

    def _params(self) -> Tuple[Any, ...]:
        return (self.name, self.func)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __str__(self) -> str:
        return f"format({self.name!r})"
