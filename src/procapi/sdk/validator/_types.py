"""Type aliases for the procapi validator."""

from typing import Any, Literal

EffectKind = Literal["refinement", "transform", "preprocess"]

# JSON-compatible OpenAPI 3.0 schema object
SchemaObject = dict[str, Any]

__all__ = ["EffectKind", "SchemaObject"]
