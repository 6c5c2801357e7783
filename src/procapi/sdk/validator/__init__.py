"""procapi SDK Validator - composable validator nodes and OpenAPI translation.

This module provides the validator algebra procedures are declared with:
- Primitive, composite and wrapper nodes (optional, nullable, default, effects, lazy)
- Fluent builders in the style of common schema libraries
- Translation of any node tree into an OpenAPI 3.0 schema object
- Structural introspection (optionality, string-likeness, unwrapping)

## Key Components

### Builders
- `string()`, `number()`, `integer()`, `boolean()`, `date()`, `null()`
- `object_()`, `array()`, `record()`, `union()`, `intersection()`
- `literal()`, `enum_()`, `native_enum()`, `lazy()`, `preprocess()`

### Translation
- `to_openapi_schema`: Node to schema object
- `SchemaConverter`: The stateful converter behind it

## Quick Examples

```python
from procapi.sdk.validator import object_, string, number, to_openapi_schema

user = object_({
    "id": string().uuid().describe("User ID"),
    "age": number().min(0).max(122).optional(),
}).describe("User data")

to_openapi_schema(user)
# {
#     "type": "object",
#     "properties": {
#         "id": {"type": "string", "format": "uuid", "description": "User ID"},
#         "age": {"type": "number", "minimum": 0, "maximum": 122},
#     },
#     "required": ["id"],
#     "additionalProperties": False,
#     "description": "User data",
# }
```
"""

from ._types import EffectKind, SchemaObject
from .builders import (
    any_,
    array,
    boolean,
    date,
    enum_,
    integer,
    intersection,
    lazy,
    literal,
    native_enum,
    never,
    null,
    number,
    object_,
    preprocess,
    record,
    string,
    undefined,
    union,
    unknown,
    void,
)
from .converters import SchemaConverter, to_openapi_schema, to_property_schema
from .introspection import as_object, is_optional, is_string_like, is_void_like, unwrap
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

__all__ = [
    # Types
    "EffectKind",
    "SchemaObject",
    # Nodes
    "ValidatorNode",
    "StringNode",
    "NumberNode",
    "BooleanNode",
    "DateNode",
    "NullNode",
    "UndefinedNode",
    "VoidNode",
    "NeverNode",
    "AnyNode",
    "UnknownNode",
    "ObjectNode",
    "ArrayNode",
    "RecordNode",
    "UnionNode",
    "IntersectionNode",
    "LiteralNode",
    "EnumNode",
    "NativeEnumNode",
    "OptionalNode",
    "NullableNode",
    "DefaultNode",
    "EffectsNode",
    "LazyNode",
    # Builders
    "string",
    "number",
    "integer",
    "boolean",
    "date",
    "null",
    "undefined",
    "void",
    "never",
    "any_",
    "unknown",
    "object_",
    "array",
    "record",
    "union",
    "intersection",
    "literal",
    "enum_",
    "native_enum",
    "preprocess",
    "lazy",
    # Translation
    "SchemaConverter",
    "to_openapi_schema",
    "to_property_schema",
    # Introspection
    "unwrap",
    "is_optional",
    "is_string_like",
    "is_void_like",
    "as_object",
]
