"""
Predicate package initialization.
"""

from .base import Predicate, AndPredicate, and_
from .lengths import MinLength, MaxLength
from .strings import PatternMatch, FormatPredicate
from .numbers import (
    GreaterThan,
    GreaterThanOrEqual,
    LessThan,
    LessThanOrEqual,
    IsWholeNumber
)
from .arrays import UniqueItems

__all__ = [
    "Predicate",
    "AndPredicate",
    "and_",
    "MinLength",
    "MaxLength",
    "PatternMatch",
    "FormatPredicate",
    "GreaterThan",
    "GreaterThanOrEqual",
    "LessThan",
    "LessThanOrEqual",
    "IsWholeNumber",
    "UniqueItems"
]
