"""
Type descriptors produced by the transformer.

A type descriptor describes how to check a conforming value. Every
descriptor can test a value with `is_` and can be called to assert that a
value conforms:

    Age = RefinedType(Int, GreaterThanOrEqual(0))
    Age.is_(3)      # True
    Age(-1)         # raises InvalidValueError

Descriptors are immutable once built and compare equal when they are
structurally identical.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .api import InvalidValueError
from .predicates import Predicate
from .utils import TypeUtils


class TypeDescriptor(ABC):
    """
    Base class for all type descriptors.
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """
        Get the descriptor kind.

        Returns:
            One of "any", "primitive", "enums", "refined", "maybe",
            "struct", "list", "tuple" or "union"
        """
        pass

    @abstractmethod
    def is_(self, value: Any) -> bool:
        """
        Check whether a value conforms to this type.

        Args:
            value: Value to check

        Returns:
            True if the value conforms, False otherwise
        """
        pass

    @property
    def name(self) -> str:
        """Display name of the type."""
        return self.kind

    def _params(self) -> Tuple[Any, ...]:
        """Parameters that identify this type structurally."""
        return ()

    def __call__(self, value: Any) -> Any:
        """
        Assert that a value conforms to this type.

        Args:
            value: Value to check

        Returns:
            The value itself

        Raises:
            InvalidValueError: If the value does not conform
        """
        if not self.is_(value):
            raise InvalidValueError(value, self)
        return value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TypeDescriptor):
            return NotImplemented
        return type(self) is type(other) and self._params() == other._params()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._params())

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class AnyType(TypeDescriptor):
    """Type that every value conforms to."""

    @property
    def kind(self) -> str:
        return "any"

    def is_(self, value: Any) -> bool:
        return True

    @property
    def name(self) -> str:
        return "Any"


class PrimitiveType(TypeDescriptor):
    """
    Base JSON type with no further constraints.

    Use the shared instances (`Str`, `Num`, `Int`, `Bool`, `Obj`, `Arr`,
    `Null`) rather than building new ones.
    """

    def __init__(self, json_type: str, display_name: str, check: Callable[[Any], bool]):
        """
        Initialize a new primitive type.

        Args:
            json_type: JSON Schema type name
            display_name: Short display name, e.g. "Str"
            check: Function classifying values of this type
        """
        self.json_type = json_type
        self._display_name = display_name
        self._check = check

    @property
    def kind(self) -> str:
        return "primitive"

    def is_(self, value: Any) -> bool:
        return self._check(value)

    @property
    def name(self) -> str:
        return self._display_name

    def _params(self) -> Tuple[Any, ...]:
        return (self.json_type,)


class EnumType(TypeDescriptor):
    """
    Type whose values are a fixed set, each paired with a display label.

    Members are kept as ordered `(value, label)` pairs and matched with JSON
    equality, so `1`, `1.0` and `true` stay distinct members.
    """

    def __init__(self, pairs: Sequence[Tuple[Any, Any]]):
        """
        Initialize a new enumeration.

        Args:
            pairs: Allowed values with their labels, in schema order
        """
        self.pairs = [(value, label) for value, label in pairs]

    @classmethod
    def of(cls, values: Sequence[Any]) -> "EnumType":
        """Build an enumeration whose labels are the values themselves."""
        return cls([(value, value) for value in values])

    @property
    def kind(self) -> str:
        return "enums"

    @property
    def values(self) -> List[Any]:
        return [value for value, _ in self.pairs]

    @property
    def labels(self) -> List[Any]:
        return [label for _, label in self.pairs]

    def is_(self, value: Any) -> bool:
        return any(TypeUtils.json_equal(value, v) for v, _ in self.pairs)

    def label(self, value: Any) -> Any:
        """
        Get the display label of an enumerated value.

        Raises:
            InvalidValueError: If the value is not a member
        """
        for v, label in self.pairs:
            if TypeUtils.json_equal(value, v):
                return label
        raise InvalidValueError(value, self)

    @property
    def name(self) -> str:
        return f"Enums({', '.join(repr(v) for v, _ in self.pairs)})"

    def _params(self) -> Tuple[Any, ...]:
        # type names keep 1 and True apart
        return tuple((type(v).__name__, v, label) for v, label in self.pairs)


class RefinedType(TypeDescriptor):
    """
    Base type narrowed by a predicate: a value must satisfy both.
    """

    def __init__(self, base: TypeDescriptor, predicate: Predicate):
        """
        Initialize a new refined type.

        Args:
            base: Type checked first
            predicate: Predicate checked once the base type accepts the value
        """
        self.base = base
        self.predicate = predicate

    @property
    def kind(self) -> str:
        return "refined"

    def is_(self, value: Any) -> bool:
        return self.base.is_(value) and self.predicate(value)

    @property
    def name(self) -> str:
        return f"Refined({self.base.name}, {self.predicate})"

    def _params(self) -> Tuple[Any, ...]:
        return (self.base, self.predicate)


class MaybeType(TypeDescriptor):
    """Optional type: accepts None or a value of the wrapped type."""

    def __init__(self, type_: TypeDescriptor):
        self.type = type_

    @property
    def kind(self) -> str:
        return "maybe"

    def is_(self, value: Any) -> bool:
        return value is None or self.type.is_(value)

    @property
    def name(self) -> str:
        return f"?{self.type.name}"

    def _params(self) -> Tuple[Any, ...]:
        return (self.type,)


class StructType(TypeDescriptor):
    """
    Record type with named, typed fields.

    Optional fields are wrapped in `MaybeType` and may be missing; required
    fields must be present, even when their type accepts None. Keys not
    declared as fields are ignored.
    """

    def __init__(self, props: Dict[str, TypeDescriptor], name: Optional[str] = None):
        """
        Initialize a new struct.

        Args:
            props: Field types by field name, in schema order
            name: Optional display name, usually the schema description
        """
        self.props = dict(props)
        self._name = name

    @property
    def kind(self) -> str:
        return "struct"

    def is_(self, value: Any) -> bool:
        if not TypeUtils.is_object(value):
            return False
        for key, type_ in self.props.items():
            if key not in value:
                if not isinstance(type_, MaybeType):
                    return False
            elif not type_.is_(value[key]):
                return False
        return True

    def required_fields(self) -> List[str]:
        return [key for key, type_ in self.props.items() if not isinstance(type_, MaybeType)]

    def optional_fields(self) -> List[str]:
        return [key for key, type_ in self.props.items() if isinstance(type_, MaybeType)]

    @property
    def name(self) -> str:
        if self._name:
            return self._name
        fields = ", ".join(f"{key}: {type_.name}" for key, type_ in self.props.items())
        return f"{{{fields}}}"

    def _params(self) -> Tuple[Any, ...]:
        return (tuple(self.props.items()), self._name)


class ListType(TypeDescriptor):
    """Homogeneous list: every element conforms to one type."""

    def __init__(self, type_: TypeDescriptor):
        self.type = type_

    @property
    def kind(self) -> str:
        return "list"

    def is_(self, value: Any) -> bool:
        return TypeUtils.is_array(value) and all(self.type.is_(item) for item in value)

    @property
    def name(self) -> str:
        return f"[{self.type.name}]"

    def _params(self) -> Tuple[Any, ...]:
        return (self.type,)


class TupleType(TypeDescriptor):
    """Fixed-length list, each position checked by its own type."""

    def __init__(self, types: Sequence[TypeDescriptor]):
        self.types = list(types)

    @property
    def kind(self) -> str:
        return "tuple"

    def is_(self, value: Any) -> bool:
        return (
            TypeUtils.is_array(value)
            and len(value) == len(self.types)
            and all(type_.is_(item) for type_, item in zip(self.types, value))
        )

    @property
    def name(self) -> str:
        return f"({', '.join(type_.name for type_ in self.types)})"

    def _params(self) -> Tuple[Any, ...]:
        return tuple(self.types)


class UnionType(TypeDescriptor):
    """
    Value conforms to at least one of several types, tried in order.
    """

    def __init__(self, types: Sequence[TypeDescriptor]):
        self.types = list(types)

    @property
    def kind(self) -> str:
        return "union"

    def dispatch(self, value: Any) -> Optional[TypeDescriptor]:
        """
        Find the branch a value belongs to.

        Args:
            value: Value to classify

        Returns:
            The first branch accepting the value, or None if none does
        """
        for type_ in self.types:
            if type_.is_(value):
                return type_
        return None

    def is_(self, value: Any) -> bool:
        return self.dispatch(value) is not None

    @property
    def name(self) -> str:
        return " | ".join(type_.name for type_ in self.types)

    def _params(self) -> Tuple[Any, ...]:
        return tuple(self.types)


Anything = AnyType()
Str = PrimitiveType("string", "Str", TypeUtils.is_string)
Num = PrimitiveType("number", "Num", TypeUtils.is_number)
Int = PrimitiveType("integer", "Int", TypeUtils.is_integer)
Bool = PrimitiveType("boolean", "Bool", TypeUtils.is_boolean)
Obj = PrimitiveType("object", "Obj", TypeUtils.is_object)
Arr = PrimitiveType("array", "Arr", TypeUtils.is_array)
Null = PrimitiveType("null", "Null", TypeUtils.is_null)
