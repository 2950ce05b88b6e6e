#!/usr/bin/env python3
"""
JSON Schema Type Transformer

This package turns decoded JSON Schema documents into type descriptors that
can check values structurally.
"""

import logging

from .api import (
    ErrorCode,
    SchemaTypeError,
    DuplicateFormatError,
    UnknownFormatError,
    EnumLengthMismatchError,
    UnsupportedSchemaError,
    InvalidInputError,
    InvalidValueError
)
from .formats import FormatRegistry, default_registry, register_format, reset_formats
from .transformer import SchemaTransformer, transform
from .types import (
    TypeDescriptor,
    AnyType,
    PrimitiveType,
    EnumType,
    RefinedType,
    MaybeType,
    StructType,
    ListType,
    TupleType,
    UnionType,
    Anything,
    Str,
    Num,
    Int,
    Bool,
    Obj,
    Arr,
    Null
)
from .utils import SchemaKind
from .version import __version__

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger("json_schema_types")

# Export public classes and functions
__all__ = [
    "transform",
    "register_format",
    "reset_formats",
    "SchemaTransformer",
    "FormatRegistry",
    "default_registry",
    "SchemaKind",
    "ErrorCode",
    "SchemaTypeError",
    "DuplicateFormatError",
    "UnknownFormatError",
    "EnumLengthMismatchError",
    "UnsupportedSchemaError",
    "InvalidInputError",
    "InvalidValueError",
    "TypeDescriptor",
    "AnyType",
    "PrimitiveType",
    "EnumType",
    "RefinedType",
    "MaybeType",
    "StructType",
    "ListType",
    "TupleType",
    "UnionType",
    "Anything",
    "Str",
    "Num",
    "Int",
    "Bool",
    "Obj",
    "Arr",
    "Null",
    "__version__"
]
