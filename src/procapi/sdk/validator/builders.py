"""Constructors for validator nodes.

Names that collide with Python builtins or keywords carry a trailing
underscore (``object_``, ``any_``, ``enum_``).
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .nodes import (
    AnyNode,
    ArrayNode,
    BooleanNode,
    DateNode,
    EffectsNode,
    EnumNode,
    IntersectionNode,
    LazyNode,
    LiteralNode,
    NativeEnumNode,
    NeverNode,
    NullNode,
    NumberNode,
    ObjectNode,
    RecordNode,
    StringNode,
    UndefinedNode,
    UnionNode,
    UnknownNode,
    ValidatorNode,
    VoidNode,
)


def string() -> StringNode:
    return StringNode()


def number() -> NumberNode:
    return NumberNode()


def integer() -> NumberNode:
    return NumberNode(integer=True)


def boolean() -> BooleanNode:
    return BooleanNode()


def date() -> DateNode:
    return DateNode()


def null() -> NullNode:
    return NullNode()


def undefined() -> UndefinedNode:
    return UndefinedNode()


def void() -> VoidNode:
    return VoidNode()


def never() -> NeverNode:
    return NeverNode()


def any_() -> AnyNode:
    return AnyNode()


def unknown() -> UnknownNode:
    return UnknownNode()


def object_(shape: Mapping[str, ValidatorNode] | None = None) -> ObjectNode:
    return ObjectNode(shape=dict(shape or {}))


def array(element: ValidatorNode) -> ArrayNode:
    return ArrayNode(element)


def record(value: ValidatorNode) -> RecordNode:
    return RecordNode(value)


def union(options: Iterable[ValidatorNode]) -> UnionNode:
    return UnionNode(tuple(options))


def intersection(left: ValidatorNode, right: ValidatorNode) -> IntersectionNode:
    return IntersectionNode((left, right))


def literal(value: Any) -> LiteralNode:
    return LiteralNode(value)


def enum_(values: Iterable[str]) -> EnumNode:
    """A closed set of strings.

    Raises:
        TypeError: If a value is not a string; use :func:`native_enum` for
            numeric Python enums.
    """
    values = tuple(values)
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"enum_() values must be strings, got {type(value).__name__}")
    return EnumNode(values)


def native_enum(enum_class: type[enum.Enum]) -> NativeEnumNode:
    """The values of a Python :class:`enum.Enum` subclass, in definition order."""
    return NativeEnumNode(tuple(member.value for member in enum_class))


def preprocess(fn: Callable[[Any], Any], schema: ValidatorNode) -> EffectsNode:
    return EffectsNode(schema, "preprocess", fn)


def lazy(getter: Callable[[], ValidatorNode]) -> LazyNode:
    return LazyNode(getter)
