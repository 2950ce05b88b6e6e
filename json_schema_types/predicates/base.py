"""
Base predicate classes for the JSON Schema type transformer.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple


class Predicate(ABC):
    """
    Base class for all predicates.

    A predicate is a callable that answers whether a value satisfies a
    single constraint. Predicates compare equal when they are of the same
    class and were built from the same parameters, so two transformations
    of the same schema produce equal types.
    """

    @abstractmethod
    def __call__(self, value: Any) -> bool:
        """
        Test a value against this predicate.

        Args:
            value: Value to test

        Returns:
            True if the value satisfies the predicate, False otherwise
        """
        pass

    @property
    def kind(self) -> str:
        """Short name of the constraint this predicate checks."""
        return self.__class__.__name__

    def _params(self) -> Tuple[Any, ...]:
        """Parameters that identify this predicate."""
        return ()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Predicate):
            return NotImplemented
        return type(self) is type(other) and self._params() == other._params()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._params())

    def __str__(self) -> str:
        """String representation of the predicate."""
        params = ", ".join(repr(p) for p in self._params())
        return f"{self.kind}({params})"

    def __repr__(self) -> str:
        """Detailed representation of the predicate."""
        return self.__str__()


class AndPredicate(Predicate):
    """
    Predicate that requires both of two predicates to pass.

    The left predicate is tested first; the right one is only tested if the
    left one passed.
    """

    def __init__(self, left: Predicate, right: Predicate):
        """
        Initialize a new conjunction.

        Args:
            left: Predicate tested first
            right: Predicate tested second
        """
        self.left = left
        self.right = right

    def __call__(self, value: Any) -> bool:
        return self.left(value) and self.right(value)

    @property
    def kind(self) -> str:
        return "and"

    def predicates(self) -> Tuple[Predicate, ...]:
        """
        Flatten a chain of conjunctions.

        Returns:
            The conjoined predicates in evaluation order
        """
        left = self.left.predicates() if isinstance(self.left, AndPredicate) else (self.left,)
        right = self.right.predicates() if isinstance(self.right, AndPredicate) else (self.right,)
        return left + right

    def _params(self) -> Tuple[Any, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return " & ".join(str(p) for p in self.predicates())


def and_(f: Optional[Predicate], g: Predicate) -> Predicate:
    """
    Fold a predicate onto an optional accumulated predicate.

    Args:
        f: Predicate accumulated so far, or None if there is none yet
        g: Predicate to add

    Returns:
        `g` alone when `f` is None, otherwise a conjunction testing `f` then `g`
    """
    return AndPredicate(f, g) if f is not None else g
