"""Translation of validator nodes into OpenAPI 3.0 schema objects."""

from __future__ import annotations

import logging
from typing import Any

from ._types import SchemaObject
from .introspection import is_optional
from .nodes import (
    AnyNode,
    ArrayNode,
    BooleanNode,
    DateNode,
    DefaultNode,
    EffectsNode,
    EnumNode,
    IntersectionNode,
    LazyNode,
    LiteralNode,
    NativeEnumNode,
    NeverNode,
    NullableNode,
    NullNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    RecordNode,
    StringNode,
    UndefinedNode,
    UnionNode,
    UnknownNode,
    ValidatorNode,
    VoidNode,
)

logger = logging.getLogger(__name__)


def _impossible() -> SchemaObject:
    # no value can match: used for undefined and never
    return {"not": {}}


def _null() -> SchemaObject:
    return {"enum": ["null"], "nullable": True}


class SchemaConverter:
    """Converts validator nodes into OpenAPI schema objects.

    Every call builds fresh dictionaries, so results can be mutated by the
    caller without affecting later conversions. A converter tracks the lazy
    nodes it is currently resolving and refuses to re-enter one, since an
    eagerly inlined self-reference never terminates.
    """

    def __init__(self) -> None:
        self._resolving: list[int] = []

    def convert(self, node: ValidatorNode) -> SchemaObject | None:
        """Translate ``node``. Returns ``None`` when the node describes no value."""
        schema = self._convert(node)
        if schema is not None and node.description is not None:
            schema["description"] = node.description
        return schema

    def convert_property(self, node: ValidatorNode) -> SchemaObject | None:
        """Translate an object property or parameter value.

        A top-level optional wrapper is dropped, since optionality is
        expressed by the enclosing ``required`` list instead.
        """
        description = node.description
        target = node
        while isinstance(target, EffectsNode):
            target = target.inner
            description = description or target.description
        if not isinstance(target, OptionalNode):
            return self.convert(node)

        schema = self.convert(target.inner)
        description = description or target.description
        if schema is not None and description is not None:
            schema["description"] = description
        return schema

    def _convert(self, node: ValidatorNode) -> SchemaObject | None:
        if isinstance(node, StringNode):
            return self._string(node)
        if isinstance(node, NumberNode):
            return self._number(node)
        if isinstance(node, BooleanNode):
            return {"type": "boolean"}
        if isinstance(node, DateNode):
            return {"type": "string", "format": "date-time"}
        if isinstance(node, NullNode):
            return _null()
        if isinstance(node, (UndefinedNode, NeverNode)):
            return _impossible()
        if isinstance(node, VoidNode):
            return None
        if isinstance(node, (AnyNode, UnknownNode)):
            return {}
        if isinstance(node, ObjectNode):
            return self._object(node)
        if isinstance(node, ArrayNode):
            return self._array(node)
        if isinstance(node, RecordNode):
            value = self.convert(node.value)
            return {"type": "object", "additionalProperties": value if value is not None else {}}
        if isinstance(node, UnionNode):
            return self._union(node)
        if isinstance(node, IntersectionNode):
            members = [self.convert(member) for member in node.members]
            return {"allOf": [member for member in members if member is not None]}
        if isinstance(node, LiteralNode):
            return self._literal(node.value)
        if isinstance(node, EnumNode):
            return {"type": "string", "enum": list(node.values)}
        if isinstance(node, NativeEnumNode):
            return self._native_enum(node)
        if isinstance(node, OptionalNode):
            return self._optional(node)
        if isinstance(node, NullableNode):
            inner = self.convert(node.inner)
            if inner is None:
                return _null()
            return {**inner, "nullable": True}
        if isinstance(node, DefaultNode):
            inner = self.convert(node.inner)
            if inner is None:
                return None
            return {**inner, "default": node.default_value()}
        if isinstance(node, EffectsNode):
            return self.convert(node.inner)
        if isinstance(node, LazyNode):
            return self._lazy(node)
        raise TypeError(f"Unsupported validator node: {type(node).__name__}")

    def _string(self, node: StringNode) -> SchemaObject:
        schema: SchemaObject = {"type": "string"}
        if node.format is not None:
            schema["format"] = node.format
        if node.min_length is not None:
            schema["minLength"] = node.min_length
        if node.max_length is not None:
            schema["maxLength"] = node.max_length
        if node.pattern is not None:
            schema["pattern"] = node.pattern
        return schema

    def _number(self, node: NumberNode) -> SchemaObject:
        schema: SchemaObject = {"type": "integer" if node.integer else "number"}
        if node.minimum is not None:
            schema["minimum"] = node.minimum
        if node.maximum is not None:
            schema["maximum"] = node.maximum
        return schema

    def _object(self, node: ObjectNode) -> SchemaObject:
        properties: dict[str, SchemaObject] = {}
        required: list[str] = []
        for name, prop in node.shape.items():
            prop_schema = self.convert_property(prop)
            if prop_schema is None:
                continue
            properties[name] = prop_schema
            if not is_optional(prop):
                required.append(name)

        schema: SchemaObject = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        schema["additionalProperties"] = False
        return schema

    def _array(self, node: ArrayNode) -> SchemaObject:
        items = self.convert(node.element)
        schema: SchemaObject = {"type": "array", "items": items if items is not None else {}}
        if node.min_items is not None:
            schema["minItems"] = node.min_items
        if node.max_items is not None:
            schema["maxItems"] = node.max_items
        return schema

    def _union(self, node: UnionNode) -> SchemaObject | None:
        options = [
            option
            for option in node.options
            if not isinstance(option, NullNode)
            and not (isinstance(option, LiteralNode) and option.value is None)
        ]
        has_null = len(options) != len(node.options)

        schemas = [s for s in (self.convert(option) for option in options) if s is not None]
        if not schemas:
            return _null() if has_null else None

        schema = schemas[0] if len(schemas) == 1 else {"anyOf": schemas}
        if has_null:
            schema["nullable"] = True
        return schema

    def _literal(self, value: Any) -> SchemaObject:
        if value is None:
            return _null()
        if isinstance(value, bool):
            return {"type": "boolean", "enum": [value]}
        if isinstance(value, (int, float)):
            return {"type": "number", "enum": [value]}
        if isinstance(value, str):
            return {"type": "string", "enum": [value]}
        return {"enum": [value]}

    def _native_enum(self, node: NativeEnumNode) -> SchemaObject:
        values = list(node.values)
        if all(isinstance(value, str) for value in values):
            return {"type": "string", "enum": values}
        if all(
            isinstance(value, (int, float)) and not isinstance(value, bool) for value in values
        ):
            return {"type": "number", "enum": values}
        return {"enum": values}

    def _optional(self, node: OptionalNode) -> SchemaObject | None:
        inner = self.convert(node.inner)
        if inner is None:
            return None
        # nullish: the null flag belongs to the whole union, not its branch
        nullable = inner.pop("nullable", False) if inner != _null() else False
        schema: SchemaObject = {"anyOf": [_impossible(), inner]}
        if nullable:
            schema["nullable"] = True
        return schema

    def _lazy(self, node: LazyNode) -> SchemaObject | None:
        key = id(node.getter)
        if key in self._resolving:
            raise RecursionError(
                "Lazy validator refers back to itself; recursive schemas cannot be inlined"
            )
        self._resolving.append(key)
        try:
            resolved = node.resolve()
            logger.debug("Resolved lazy validator to %s", type(resolved).__name__)
            return self.convert(resolved)
        finally:
            self._resolving.pop()


def to_openapi_schema(node: ValidatorNode) -> SchemaObject | None:
    """Translate a validator node into an OpenAPI 3.0 schema object.

    Args:
        node: The validator node to translate.

    Returns:
        A new schema dictionary, or ``None`` for ``void`` (no value at all).

    Example:
        >>> from procapi.sdk.validator import string
        >>> to_openapi_schema(string().nullish())
        {'anyOf': [{'not': {}}, {'type': 'string'}], 'nullable': True}
    """
    return SchemaConverter().convert(node)


def to_property_schema(node: ValidatorNode) -> SchemaObject | None:
    """Translate ``node`` as an object property, without its optional wrapper."""
    return SchemaConverter().convert_property(node)
