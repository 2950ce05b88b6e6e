"""
Schema transformer: turns JSON Schema nodes into type descriptors.
"""

import logging
import re
from typing import Any, Callable, Dict, Optional

from .api import (
    EnumLengthMismatchError,
    InvalidInputError,
    UnsupportedSchemaError
)
from .formats import FormatRegistry, default_registry
from .predicates import (
    Predicate,
    and_,
    MinLength,
    MaxLength,
    PatternMatch,
    FormatPredicate,
    GreaterThan,
    GreaterThanOrEqual,
    LessThan,
    LessThanOrEqual,
    IsWholeNumber,
    UniqueItems
)
from .types import (
    TypeDescriptor,
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
from .utils import SchemaKeywords, SchemaKind, TypeUtils

logger = logging.getLogger("json_schema_types")

Schema = Dict[str, Any]


class SchemaTransformer:
    """
    Transforms JSON Schemas into type descriptors.

    Each schema kind named by the `type` keyword has its own builder. Nested
    schemas (object properties, array items, union branches) are transformed
    recursively. Schemas must be finite trees; self-referencing schemas are
    not supported.
    """

    def __init__(self, formats: Optional[FormatRegistry] = None, verbose: bool = False):
        """
        Initialize a new schema transformer.

        Args:
            formats: Registry used to resolve the `format` keyword; defaults
                to the process-wide registry
            verbose: Whether to log each transformation step
        """
        self.formats = formats if formats is not None else default_registry
        self.verbose = verbose
        self.builders: Dict[SchemaKind, Callable[[Schema], TypeDescriptor]] = {
            SchemaKind.NULL: self._create_null_type,
            SchemaKind.STRING: self._create_string_type,
            SchemaKind.NUMBER: self._create_number_type,
            SchemaKind.INTEGER: self._create_integer_type,
            SchemaKind.BOOLEAN: self._create_boolean_type,
            SchemaKind.OBJECT: self._create_object_type,
            SchemaKind.ARRAY: self._create_array_type,
        }

        if verbose:
            logger.setLevel(logging.DEBUG)

    def transform(self, schema: Schema) -> TypeDescriptor:
        """
        Transform a JSON Schema into a type descriptor.

        Args:
            schema: Decoded JSON Schema node

        Returns:
            Type descriptor for the schema

        Raises:
            InvalidInputError: If the schema is not a dict
            UnsupportedSchemaError: If the `type` keyword is malformed or
                names an unknown kind
            UnknownFormatError: If a string schema uses an unregistered format
            EnumLengthMismatchError: If `enum` and `enumNames` differ in length
        """
        if not TypeUtils.is_object(schema):
            raise InvalidInputError(schema)

        if SchemaKeywords.TYPE not in schema:
            return Anything

        type_value = schema[SchemaKeywords.TYPE]

        kind = SchemaKind.from_name(type_value)
        if kind is not None:
            logger.debug(f"Transforming {kind.value} schema")
            return self.builders[kind](schema)

        if isinstance(type_value, list):
            kinds = [SchemaKind.from_name(name) for name in type_value]
            if not kinds or None in kinds:
                raise UnsupportedSchemaError(
                    schema, f"type must list kinds from {SchemaKind.names()}")
            logger.debug(f"Transforming union schema of {type_value}")
            # Every branch sees the whole node, so shared keywords apply to each
            return UnionType([self.builders[k](schema) for k in kinds])

        raise UnsupportedSchemaError(schema)

    def _create_enum_type(self, schema: Schema) -> EnumType:
        """
        Create an enumeration from `enum` and, if present, `enumNames`.

        Args:
            schema: Schema containing an `enum` keyword

        Returns:
            EnumType pairing each value with its label
        """
        values = schema[SchemaKeywords.ENUM]
        if SchemaKeywords.ENUM_NAMES not in schema:
            return EnumType.of(values)

        names = schema[SchemaKeywords.ENUM_NAMES]
        if len(values) != len(names):
            raise EnumLengthMismatchError(schema)
        return EnumType(list(zip(values, names)))

    def _create_string_type(self, schema: Schema) -> TypeDescriptor:
        """
        Create a string type.

        Args:
            schema: Schema containing string constraints

        Returns:
            EnumType, a RefinedType over Str, or Str itself
        """
        if SchemaKeywords.ENUM in schema:
            return self._create_enum_type(schema)

        predicate: Optional[Predicate] = None
        if SchemaKeywords.MIN_LENGTH in schema:
            predicate = and_(predicate, MinLength(schema[SchemaKeywords.MIN_LENGTH]))
        if SchemaKeywords.MAX_LENGTH in schema:
            predicate = and_(predicate, MaxLength(schema[SchemaKeywords.MAX_LENGTH]))
        if SchemaKeywords.PATTERN in schema:
            predicate = and_(predicate, self._create_pattern(schema))
        if SchemaKeywords.FORMAT in schema:
            name = schema[SchemaKeywords.FORMAT]
            predicate = and_(predicate, FormatPredicate(name, self.formats.get(name)))

        return RefinedType(Str, predicate) if predicate is not None else Str

    def _create_pattern(self, schema: Schema) -> PatternMatch:
        try:
            return PatternMatch(schema[SchemaKeywords.PATTERN])
        except (re.error, TypeError) as e:
            raise UnsupportedSchemaError(schema, f"invalid pattern: {e}") from e

    def _create_bounds(self, schema: Schema, predicate: Optional[Predicate]) -> Optional[Predicate]:
        """
        Fold `minimum` and `maximum` onto a predicate.

        Args:
            schema: Schema containing number constraints
            predicate: Predicate accumulated so far

        Returns:
            The extended predicate, or None if no bound is present
        """
        if SchemaKeywords.MINIMUM in schema:
            minimum = schema[SchemaKeywords.MINIMUM]
            if schema.get(SchemaKeywords.EXCLUSIVE_MINIMUM):
                predicate = and_(predicate, GreaterThan(minimum))
            else:
                predicate = and_(predicate, GreaterThanOrEqual(minimum))
        if SchemaKeywords.MAXIMUM in schema:
            maximum = schema[SchemaKeywords.MAXIMUM]
            if schema.get(SchemaKeywords.EXCLUSIVE_MAXIMUM):
                predicate = and_(predicate, LessThan(maximum))
            else:
                predicate = and_(predicate, LessThanOrEqual(maximum))
        return predicate

    def _create_number_type(self, schema: Schema) -> TypeDescriptor:
        """
        Create a number type.

        The `integer: true` flag adds a whole-number check; it is only read
        here, since `type: "integer"` is whole-number by construction.
        """
        if SchemaKeywords.ENUM in schema:
            return self._create_enum_type(schema)

        predicate = self._create_bounds(schema, None)
        if schema.get(SchemaKeywords.INTEGER):
            predicate = and_(predicate, IsWholeNumber())

        return RefinedType(Num, predicate) if predicate is not None else Num

    def _create_integer_type(self, schema: Schema) -> TypeDescriptor:
        if SchemaKeywords.ENUM in schema:
            return self._create_enum_type(schema)

        predicate = self._create_bounds(schema, None)
        return RefinedType(Int, predicate) if predicate is not None else Int

    def _create_boolean_type(self, schema: Schema) -> TypeDescriptor:
        return Bool

    def _create_null_type(self, schema: Schema) -> TypeDescriptor:
        return Null

    def _create_object_type(self, schema: Schema) -> TypeDescriptor:
        """
        Create an object type.

        Args:
            schema: Schema containing `properties` and `required`

        Returns:
            StructType over the declared properties, or Obj if there are none
        """
        properties = schema.get(SchemaKeywords.PROPERTIES)
        if not properties:
            return Obj
        if not TypeUtils.is_object(properties):
            raise UnsupportedSchemaError(schema, "properties must be an object")

        required = set(schema.get(SchemaKeywords.REQUIRED) or [])
        props: Dict[str, TypeDescriptor] = {}
        for prop, prop_schema in properties.items():
            type_ = self.transform(prop_schema)
            # Booleans always hold a concrete value, so they are never optional
            props[prop] = type_ if prop in required or type_ is Bool else MaybeType(type_)

        return StructType(props, schema.get(SchemaKeywords.DESCRIPTION))

    def _create_array_type(self, schema: Schema) -> TypeDescriptor:
        """
        Create an array type.

        Args:
            schema: Schema containing array constraints

        Returns:
            ListType, TupleType or Arr, refined by the item count and
            uniqueness constraints when present
        """
        type_: TypeDescriptor = Arr
        if SchemaKeywords.ITEMS in schema:
            items = schema[SchemaKeywords.ITEMS]
            if TypeUtils.is_object(items):
                type_ = ListType(self.transform(items))
            elif isinstance(items, list):
                type_ = TupleType([self.transform(item) for item in items])
            else:
                raise UnsupportedSchemaError(schema, "items must be an object or an array")

        predicate: Optional[Predicate] = None
        if SchemaKeywords.MIN_ITEMS in schema:
            predicate = and_(predicate, MinLength(schema[SchemaKeywords.MIN_ITEMS]))
        if SchemaKeywords.MAX_ITEMS in schema:
            predicate = and_(predicate, MaxLength(schema[SchemaKeywords.MAX_ITEMS]))
        if schema.get(SchemaKeywords.UNIQUE_ITEMS):
            predicate = and_(predicate, UniqueItems())

        return RefinedType(type_, predicate) if predicate is not None else type_


def transform(schema: Schema) -> TypeDescriptor:
    """
    Transform a JSON Schema using the process-wide format registry.

    Args:
        schema: Decoded JSON Schema node

    Returns:
        Type descriptor for the schema
    """
    return SchemaTransformer().transform(schema)
