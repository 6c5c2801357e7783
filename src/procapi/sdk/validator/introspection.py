"""Structural questions about validator nodes.

These helpers look through wrapper nodes to answer what a value may be,
without translating anything.
"""

from __future__ import annotations

from .nodes import (
    AnyNode,
    DefaultNode,
    EffectsNode,
    EnumNode,
    IntersectionNode,
    LazyNode,
    LiteralNode,
    NativeEnumNode,
    NeverNode,
    NullableNode,
    ObjectNode,
    OptionalNode,
    StringNode,
    UndefinedNode,
    UnionNode,
    UnknownNode,
    ValidatorNode,
    VoidNode,
)


def unwrap(node: ValidatorNode, *, unwrap_preprocess: bool = False) -> ValidatorNode:
    """Strip optional, nullable, default, lazy and effect wrappers.

    Preprocessors are kept unless ``unwrap_preprocess`` is set, since they may
    coerce any incoming value into the inner shape.

    Raises:
        RecursionError: If a lazy node resolves back to itself without ever
            reaching a concrete node.
    """
    seen: set[int] = set()
    while True:
        if isinstance(node, (OptionalNode, NullableNode, DefaultNode)):
            node = node.inner
        elif isinstance(node, EffectsNode) and (
            node.effect != "preprocess" or unwrap_preprocess
        ):
            node = node.inner
        elif isinstance(node, LazyNode):
            if id(node.getter) in seen:
                raise RecursionError("Lazy validator resolves to itself")
            seen.add(id(node.getter))
            node = node.resolve()
        else:
            return node


def is_optional(node: ValidatorNode) -> bool:
    """Whether a missing value is accepted by ``node``."""
    if isinstance(node, (OptionalNode, DefaultNode)):
        return True
    if isinstance(node, (UndefinedNode, VoidNode, AnyNode, UnknownNode)):
        return True
    if isinstance(node, (NullableNode, EffectsNode)):
        return is_optional(node.inner)
    if isinstance(node, LazyNode):
        return is_optional(node.resolve())
    if isinstance(node, UnionNode):
        return any(is_optional(option) for option in node.options)
    if isinstance(node, IntersectionNode):
        return all(is_optional(member) for member in node.members)
    return False


def is_string_like(node: ValidatorNode) -> bool:
    """Whether values of ``node`` can be carried as a raw string.

    Path segments and query strings only ever hold text, so only strings,
    string literals, string enums, preprocessors (which may parse the text)
    and unions or intersections of those qualify.
    """
    node = unwrap(node)
    if isinstance(node, EffectsNode):
        return node.effect == "preprocess"
    if isinstance(node, UnionNode):
        return all(is_string_like(option) for option in node.options)
    if isinstance(node, IntersectionNode):
        return all(is_string_like(member) for member in node.members)
    if isinstance(node, LiteralNode):
        return isinstance(node.value, str)
    if isinstance(node, EnumNode):
        return True
    if isinstance(node, NativeEnumNode):
        return not any(isinstance(value, (int, float)) for value in node.values)
    return isinstance(node, StringNode)


def is_void_like(node: ValidatorNode) -> bool:
    """Whether ``node`` describes the absence of any input."""
    return isinstance(
        unwrap(node, unwrap_preprocess=True), (VoidNode, UndefinedNode, NeverNode)
    )


def as_object(node: ValidatorNode) -> ObjectNode | None:
    """The object underneath every wrapper of ``node``, or ``None``."""
    unwrapped = unwrap(node, unwrap_preprocess=True)
    return unwrapped if isinstance(unwrapped, ObjectNode) else None
