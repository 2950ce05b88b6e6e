#!/usr/bin/env python3
"""
Tests for transforming scalar schemas and for the dispatcher.
"""
import pytest

# autopep8: off
from utils import setup
setup()
from json_schema_types import (
    ErrorCode,
    EnumLengthMismatchError,
    InvalidInputError,
    InvalidValueError,
    UnknownFormatError,
    UnsupportedSchemaError,
    SchemaTransformer,
    FormatRegistry,
    Anything,
    Str,
    Num,
    Int,
    Bool,
    Null,
    EnumType,
    RefinedType,
    UnionType,
    transform
)
from json_schema_types.predicates import AndPredicate, FormatPredicate, IsWholeNumber
# autopep8: on


def test_empty_schema():
    """A schema without a type accepts anything."""
    assert transform({}) is Anything
    assert transform({"minLength": 3}) is Anything


class TestStringSchema:
    """Tests for string schemas."""

    def test_simple_schema(self):
        assert transform({"type": "string"}) is Str

    def test_min_length(self):
        Type = transform({"type": "string", "minLength": 2})
        assert Type.kind == "refined"
        assert Type.base is Str
        assert not Type.predicate("a")
        assert Type.predicate("aa")

    def test_max_length(self):
        Type = transform({"type": "string", "maxLength": 2})
        assert Type.base is Str
        assert Type.predicate("aa")
        assert not Type.predicate("aaa")

    def test_zero_min_length_is_a_constraint(self):
        Type = transform({"type": "string", "minLength": 0})
        assert isinstance(Type, RefinedType)
        assert Type.is_("")

    def test_pattern(self):
        Type = transform({"type": "string", "pattern": "^[a-z]+$"})
        assert Type.base is Str
        assert Type.is_("abc")
        assert not Type.is_("ABC")

    def test_invalid_pattern(self):
        with pytest.raises(UnsupportedSchemaError) as excinfo:
            transform({"type": "string", "pattern": "("})
        assert excinfo.value.code == ErrorCode.UNSUPPORTED_SCHEMA

    def test_combined_constraints(self):
        Type = transform({
            "type": "string",
            "minLength": 2,
            "maxLength": 4,
            "pattern": "^a"
        })
        assert isinstance(Type.predicate, AndPredicate)
        assert [p.kind for p in Type.predicate.predicates()] == ["minLength", "maxLength", "pattern"]
        assert Type.is_("ab")
        assert Type.is_("abcd")
        assert not Type.is_("a")
        assert not Type.is_("abcde")
        assert not Type.is_("ba")

    def test_format(self):
        registry = FormatRegistry()
        registry.register("upper", lambda value: value.isupper())
        Type = SchemaTransformer(formats=registry).transform({"type": "string", "format": "upper"})
        assert isinstance(Type.predicate, FormatPredicate)
        assert Type.is_("ABC")
        assert not Type.is_("abc")

    def test_format_after_other_constraints(self):
        registry = FormatRegistry()
        registry.register("upper", lambda value: value.isupper())
        Type = SchemaTransformer(formats=registry).transform({
            "type": "string",
            "minLength": 2,
            "format": "upper"
        })
        assert [p.kind for p in Type.predicate.predicates()] == ["minLength", "format"]
        assert not Type.is_("A")
        assert Type.is_("AB")

    def test_unknown_format(self):
        transformer = SchemaTransformer(formats=FormatRegistry())
        with pytest.raises(UnknownFormatError) as excinfo:
            transformer.transform({"type": "string", "format": "email"})
        assert excinfo.value.name == "email"

    def test_enum(self):
        Type = transform({"type": "string", "enum": ["a", "b"]})
        assert isinstance(Type, EnumType)
        assert Type.pairs == [("a", "a"), ("b", "b")]
        assert Type.is_("b")
        assert not Type.is_("c")
        with pytest.raises(InvalidValueError):
            Type("c")

    def test_enum_ignores_other_constraints(self):
        Type = transform({"type": "string", "enum": ["a"], "minLength": 5})
        assert isinstance(Type, EnumType)
        assert Type.is_("a")

    def test_enum_names(self):
        Type = transform({
            "type": "string",
            "enum": ["US", "IT"],
            "enumNames": ["United States", "Italy"]
        })
        assert Type.pairs == [("US", "United States"), ("IT", "Italy")]
        assert Type.label("IT") == "Italy"

    def test_enum_names_length_mismatch(self):
        with pytest.raises(EnumLengthMismatchError) as excinfo:
            transform({"type": "string", "enum": ["a", "b"], "enumNames": ["A"]})
        assert excinfo.value.code == ErrorCode.ENUM_LENGTH_MISMATCH


class TestNumberSchema:
    """Tests for number schemas."""

    def test_simple_schema(self):
        assert transform({"type": "number"}) is Num

    def test_minimum(self):
        Type = transform({"type": "number", "minimum": 2})
        assert Type.base is Num
        assert not Type.predicate(1)
        assert Type.predicate(2)
        assert Type.predicate(3)

    def test_exclusive_minimum(self):
        Type = transform({"type": "number", "minimum": 2, "exclusiveMinimum": True})
        assert Type.base is Num
        assert not Type.predicate(1)
        assert not Type.predicate(2)
        assert Type.predicate(2.0001)

    def test_maximum(self):
        Type = transform({"type": "number", "maximum": 2})
        assert Type.predicate(1)
        assert Type.predicate(2)
        assert not Type.predicate(3)

    def test_exclusive_maximum(self):
        Type = transform({"type": "number", "maximum": 2, "exclusiveMaximum": True})
        assert Type.predicate(1)
        assert not Type.predicate(2)
        assert not Type.predicate(3)

    def test_exclusive_flag_false_is_inclusive(self):
        Type = transform({"type": "number", "minimum": 0, "exclusiveMinimum": False})
        assert Type.is_(0)

    def test_integer_flag(self):
        Type = transform({"type": "number", "integer": True})
        assert Type.base is Num
        assert Type.predicate == IsWholeNumber()
        assert Type.is_(3)
        assert not Type.is_(3.5)

    def test_integer_flag_false(self):
        assert transform({"type": "number", "integer": False}) is Num

    def test_enum_names(self):
        Type = transform({"type": "number", "enum": [1, 2], "enumNames": ["one", "two"]})
        assert Type.pairs == [(1, "one"), (2, "two")]

    def test_enum_keeps_booleans_apart_from_numbers(self):
        Type = transform({"type": "number", "enum": [1, True], "enumNames": ["one", "yes"]})
        assert Type.values == [1, True]
        assert Type.labels == ["one", "yes"]
        assert Type.label(1) == "one"
        assert Type.label(True) == "yes"
        assert Type.is_(True)
        assert Type.is_(1.0)
        assert not Type.is_(2)

    def test_enum_keeps_every_member(self):
        Type = transform({"type": "number", "enum": [1, True, 1.0]})
        assert len(Type.values) == 3
        assert Type.name == "Enums(1, True, 1.0)"

    def test_rejects_booleans(self):
        assert not transform({"type": "number", "minimum": 0}).is_(True)


class TestIntegerSchema:
    """Tests for integer schemas."""

    def test_simple_schema(self):
        Type = transform({"type": "integer"})
        assert Type is Int
        assert Type.is_(1)
        assert not Type.is_(1.5)

    def test_bounds(self):
        Type = transform({"type": "integer", "minimum": 0, "maximum": 10, "exclusiveMaximum": True})
        assert Type.base is Int
        assert Type.is_(0)
        assert Type.is_(9)
        assert not Type.is_(10)
        assert not Type.is_(0.5)

    def test_integer_flag_is_not_consulted(self):
        assert transform({"type": "integer", "integer": True}) is Int

    def test_enum(self):
        Type = transform({"type": "integer", "enum": [1, 2, 3]})
        assert Type.values == [1, 2, 3]


def test_boolean_schema():
    assert transform({"type": "boolean"}) is Bool


def test_null_schema():
    Type = transform({"type": "null"})
    assert Type is Null
    assert Type.is_(None)
    assert not Type.is_(0)


class TestUnionSchema:
    """Tests for schemas whose type is a list of kinds."""

    def test_number_or_string(self):
        Type = transform({"type": ["number", "string"]})
        assert isinstance(Type, UnionType)
        assert len(Type.types) == 2
        assert Type.types[0] is Num
        assert Type.types[1] is Str

    def test_constraints_apply_to_each_branch(self):
        Type = transform({"type": ["integer", "null"], "minimum": 1})
        assert Type.types[0].base is Int
        assert Type.types[1] is Null
        assert Type.is_(None)
        assert Type.is_(1)
        assert not Type.is_(0)

    def test_single_kind_list(self):
        Type = transform({"type": ["string"]})
        assert isinstance(Type, UnionType)
        assert Type.types == [Str]

    def test_unknown_kind_in_list(self):
        with pytest.raises(UnsupportedSchemaError):
            transform({"type": ["string", "date"]})

    def test_empty_list(self):
        with pytest.raises(UnsupportedSchemaError):
            transform({"type": []})


class TestErrors:
    """Tests for malformed input."""

    @pytest.mark.parametrize("schema", [None, "string", 1, ["type"]])
    def test_non_object_input(self, schema):
        with pytest.raises(InvalidInputError) as excinfo:
            transform(schema)
        assert excinfo.value.code == ErrorCode.INVALID_INPUT

    def test_unknown_kind(self):
        schema = {"type": "date"}
        with pytest.raises(UnsupportedSchemaError) as excinfo:
            transform(schema)
        assert excinfo.value.schema is schema
        assert "date" in str(excinfo.value)

    def test_malformed_type(self):
        with pytest.raises(UnsupportedSchemaError):
            transform({"type": 1})


class TestDeterminism:
    """Transforming a schema twice gives equal types."""

    def test_same_schema_gives_equal_types(self):
        schema = {
            "type": "object",
            "description": "Point",
            "properties": {
                "x": {"type": "number", "minimum": 0},
                "tags": {"type": "array", "items": {"type": "string"}, "uniqueItems": True},
                "kind": {"type": ["string", "null"], "enum": ["a", "b"]}
            },
            "required": ["x"]
        }
        assert transform(schema) == transform(schema)

    def test_schema_is_not_mutated(self):
        schema = {"type": "object", "properties": {"a": {"type": "string"}}}
        transform(schema)
        assert schema == {"type": "object", "properties": {"a": {"type": "string"}}}
