"""
Utility classes and functions for the JSON Schema type transformer.
"""

from enum import Enum
from typing import Any, List, Optional


class SchemaKind(Enum):
    """The closed set of schema kinds a `type` keyword may name."""
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"

    @classmethod
    def from_name(cls, name: Any) -> Optional["SchemaKind"]:
        """
        Look up a kind by its JSON Schema name.

        Args:
            name: Value of a `type` keyword (or one entry of it)

        Returns:
            The matching kind, or None if `name` is not a known kind name
        """
        if not isinstance(name, str):
            return None
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def names(cls) -> List[str]:
        return [kind.value for kind in cls]


class TypeUtils:
    """Utilities for classifying Python values as JSON types."""

    @staticmethod
    def is_string(value: Any) -> bool:
        return isinstance(value, str)

    @staticmethod
    def is_number(value: Any) -> bool:
        # bool is a subclass of int but never a JSON number
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def is_integer(value: Any) -> bool:
        """
        Check whether a value is a whole number.

        Integral floats such as `2.0` count, since decoded JSON does not
        distinguish them.
        """
        if not TypeUtils.is_number(value):
            return False
        if isinstance(value, float):
            return value.is_integer()
        return True

    @staticmethod
    def is_boolean(value: Any) -> bool:
        return isinstance(value, bool)

    @staticmethod
    def is_object(value: Any) -> bool:
        return isinstance(value, dict)

    @staticmethod
    def is_array(value: Any) -> bool:
        return isinstance(value, (list, tuple))

    @staticmethod
    def is_null(value: Any) -> bool:
        return value is None

    @staticmethod
    def json_equal(a: Any, b: Any) -> bool:
        """
        Compare two values the way JSON does.

        Unlike Python equality, booleans never equal numbers (`True != 1`).
        """
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        if isinstance(a, dict) and isinstance(b, dict):
            return a.keys() == b.keys() and all(TypeUtils.json_equal(a[k], b[k]) for k in a)
        if TypeUtils.is_array(a) and TypeUtils.is_array(b):
            return len(a) == len(b) and all(TypeUtils.json_equal(x, y) for x, y in zip(a, b))
        return a == b


class SchemaKeywords:
    """Constants for the JSON Schema keywords the transformer understands."""

    # Type keywords
    TYPE = "type"

    # Number keywords
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    INTEGER = "integer"

    # String keywords
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    FORMAT = "format"

    # Array keywords
    ITEMS = "items"
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    UNIQUE_ITEMS = "uniqueItems"

    # Object keywords
    PROPERTIES = "properties"
    REQUIRED = "required"

    # Enumerations
    ENUM = "enum"
    ENUM_NAMES = "enumNames"

    # Schema metadata
    DESCRIPTION = "description"
