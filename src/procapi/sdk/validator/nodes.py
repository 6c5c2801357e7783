"""Validator node definitions.

Every shape a procedure input or output can take is one frozen dataclass.
Wrappers (optional, nullable, default, effects, lazy) are distinct variants
holding exactly one child, so translation is a recursive match over classes
rather than a check of flags on a shared base.

Nodes are normally built through :mod:`procapi.sdk.validator.builders` and the
fluent methods defined here::

    >>> from procapi.sdk.validator import object_, string
    >>> user = object_({"id": string().uuid(), "name": string().optional()})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from ._types import EffectKind


@dataclass(frozen=True, kw_only=True)
class ValidatorNode:
    """Base class for all validator nodes.

    Attributes:
        description: Optional human readable label, emitted as ``description``.
    """

    description: str | None = None

    def describe(self, description: str) -> ValidatorNode:
        """Return a copy of this node labelled with ``description``."""
        return replace(self, description=description)

    def optional(self) -> OptionalNode:
        return OptionalNode(self)

    def nullable(self) -> NullableNode:
        return NullableNode(self)

    def nullish(self) -> OptionalNode:
        """Accept a missing value or ``None``."""
        return OptionalNode(NullableNode(self))

    def default(self, value: Any) -> DefaultNode:
        """Use ``value`` when the field is missing. Callables are evaluated lazily."""
        return DefaultNode(self, value)

    def refine(self, check: Callable[[Any], bool], message: str | None = None) -> EffectsNode:
        return EffectsNode(self, "refinement", check, message=message)

    def transform(self, fn: Callable[[Any], Any]) -> EffectsNode:
        return EffectsNode(self, "transform", fn)

    def or_(self, other: ValidatorNode) -> UnionNode:
        return UnionNode((self, other))

    def and_(self, other: ValidatorNode) -> IntersectionNode:
        return IntersectionNode((self, other))

    def array(self) -> ArrayNode:
        return ArrayNode(self)


# Primitives


@dataclass(frozen=True)
class StringNode(ValidatorNode):
    format: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None

    def email(self) -> StringNode:
        return replace(self, format="email")

    def uuid(self) -> StringNode:
        return replace(self, format="uuid")

    def url(self) -> StringNode:
        return replace(self, format="uri")

    def datetime(self) -> StringNode:
        return replace(self, format="date-time")

    def min(self, length: int) -> StringNode:
        return replace(self, min_length=length)

    def max(self, length: int) -> StringNode:
        return replace(self, max_length=length)

    def length(self, length: int) -> StringNode:
        return replace(self, min_length=length, max_length=length)

    def regex(self, pattern: str) -> StringNode:
        return replace(self, pattern=pattern)


@dataclass(frozen=True)
class NumberNode(ValidatorNode):
    integer: bool = False
    minimum: int | float | None = None
    maximum: int | float | None = None

    def int_(self) -> NumberNode:
        return replace(self, integer=True)

    def min(self, value: int | float) -> NumberNode:
        return replace(self, minimum=value)

    def max(self, value: int | float) -> NumberNode:
        return replace(self, maximum=value)

    def nonnegative(self) -> NumberNode:
        return replace(self, minimum=0)


@dataclass(frozen=True)
class BooleanNode(ValidatorNode):
    pass


@dataclass(frozen=True)
class DateNode(ValidatorNode):
    pass


@dataclass(frozen=True)
class NullNode(ValidatorNode):
    pass


@dataclass(frozen=True)
class UndefinedNode(ValidatorNode):
    pass


@dataclass(frozen=True)
class VoidNode(ValidatorNode):
    """No value at all. Translates to no schema."""


@dataclass(frozen=True)
class NeverNode(ValidatorNode):
    pass


@dataclass(frozen=True)
class AnyNode(ValidatorNode):
    pass


@dataclass(frozen=True)
class UnknownNode(ValidatorNode):
    pass


# Composites


@dataclass(frozen=True)
class ObjectNode(ValidatorNode):
    """An object with a fixed, ordered set of properties.

    Unknown keys are never accepted, so the translated schema always carries
    ``additionalProperties: false``.
    """

    shape: Mapping[str, ValidatorNode] = field(default_factory=dict)

    def extend(self, shape: Mapping[str, ValidatorNode]) -> ObjectNode:
        return replace(self, shape={**self.shape, **shape})

    def omit(self, *keys: str) -> ObjectNode:
        return replace(self, shape={k: v for k, v in self.shape.items() if k not in keys})


@dataclass(frozen=True)
class ArrayNode(ValidatorNode):
    element: ValidatorNode
    min_items: int | None = None
    max_items: int | None = None

    def min(self, count: int) -> ArrayNode:
        return replace(self, min_items=count)

    def max(self, count: int) -> ArrayNode:
        return replace(self, max_items=count)

    def nonempty(self) -> ArrayNode:
        return replace(self, min_items=1)


@dataclass(frozen=True)
class RecordNode(ValidatorNode):
    """An object with arbitrary string keys and uniformly typed values."""

    value: ValidatorNode


@dataclass(frozen=True)
class UnionNode(ValidatorNode):
    options: tuple[ValidatorNode, ...]


@dataclass(frozen=True)
class IntersectionNode(ValidatorNode):
    members: tuple[ValidatorNode, ...]


@dataclass(frozen=True)
class LiteralNode(ValidatorNode):
    value: Any


@dataclass(frozen=True)
class EnumNode(ValidatorNode):
    """A closed set of string values."""

    values: tuple[str, ...]


@dataclass(frozen=True)
class NativeEnumNode(ValidatorNode):
    """Values taken from a Python :class:`enum.Enum`; may be numeric."""

    values: tuple[Any, ...]


# Wrappers


@dataclass(frozen=True)
class OptionalNode(ValidatorNode):
    inner: ValidatorNode


@dataclass(frozen=True)
class NullableNode(ValidatorNode):
    inner: ValidatorNode


@dataclass(frozen=True)
class DefaultNode(ValidatorNode):
    inner: ValidatorNode
    value: Any = None

    def default_value(self) -> Any:
        return self.value() if callable(self.value) else self.value


@dataclass(frozen=True)
class EffectsNode(ValidatorNode):
    """A refinement, transform or preprocessor around ``inner``.

    Effects only act on values at runtime; the declared shape is the one of
    ``inner``.
    """

    inner: ValidatorNode
    effect: EffectKind
    fn: Callable[[Any], Any] | None = None
    message: str | None = None


@dataclass(frozen=True)
class LazyNode(ValidatorNode):
    """A node resolved on demand, used for recursive or late-bound schemas."""

    getter: Callable[[], ValidatorNode]

    def resolve(self) -> ValidatorNode:
        return self.getter()


WRAPPER_NODES = (OptionalNode, NullableNode, DefaultNode, EffectsNode, LazyNode)
