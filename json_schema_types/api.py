"""
Public error API for the JSON Schema type transformer.
"""

from enum import Enum, auto
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Enumeration of transformation error codes."""
    DUPLICATE_FORMAT = auto()
    UNKNOWN_FORMAT = auto()
    ENUM_LENGTH_MISMATCH = auto()
    UNSUPPORTED_SCHEMA = auto()
    INVALID_INPUT = auto()
    INVALID_VALUE = auto()


class SchemaTypeError(Exception):
    """
    Base class for all errors raised by the transformer.

    Attributes:
        code: The error code identifying the type of error
        message: Human-readable error message
    """

    code: ErrorCode = ErrorCode.UNSUPPORTED_SCHEMA

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class DuplicateFormatError(SchemaTypeError):
    """Raised when a format name is registered twice."""

    code = ErrorCode.DUPLICATE_FORMAT

    def __init__(self, name: str):
        super().__init__(f"duplicated format '{name}'")
        self.name = name


class UnknownFormatError(SchemaTypeError):
    """Raised when a string schema references a format that is not registered."""

    code = ErrorCode.UNKNOWN_FORMAT

    def __init__(self, name: str):
        super().__init__(f"missing format '{name}', use `register_format` to add it")
        self.name = name


class EnumLengthMismatchError(SchemaTypeError):
    """Raised when `enum` and `enumNames` have different lengths."""

    code = ErrorCode.ENUM_LENGTH_MISMATCH

    def __init__(self, schema: Dict[str, Any]):
        super().__init__(
            f"enumNames {schema.get('enumNames')!r} and enum {schema.get('enum')!r} "
            f"of unequal length"
        )
        self.schema = schema


class UnsupportedSchemaError(SchemaTypeError):
    """Raised for a schema node that cannot be turned into a type."""

    code = ErrorCode.UNSUPPORTED_SCHEMA

    def __init__(self, schema: Any, reason: Optional[str] = None):
        message = f"unsupported json schema {schema!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.schema = schema


class InvalidInputError(SchemaTypeError):
    """Raised when the argument to `transform` is not an object-shaped node."""

    code = ErrorCode.INVALID_INPUT

    def __init__(self, schema: Any):
        super().__init__(
            f"schema must be an object, got {type(schema).__name__}: {schema!r}"
        )
        self.schema = schema


class InvalidValueError(SchemaTypeError):
    """Raised when a value is checked against a type it does not conform to."""

    code = ErrorCode.INVALID_VALUE

    def __init__(self, value: Any, type_: Any):
        super().__init__(f"Invalid value {value!r} supplied to {type_}")
        self.value = value
        self.type = type_
