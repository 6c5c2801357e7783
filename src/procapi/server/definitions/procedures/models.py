from __future__ import annotations

import warnings
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator

from procapi.sdk.models import SdkBaseModel

ProcedureKind = Literal["query", "mutation", "subscription"]


class HeaderParameterModel(SdkBaseModel):
    """A request header documented for an operation.

    Headers are not part of the input validator, so they carry no schema
    unless one is given explicitly.
    """

    name: str
    required: bool = False
    description: str | None = None
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Header name cannot be empty")
        return value


class OpenApiMetaModel(SdkBaseModel):
    """Routing metadata exposing a procedure as an OpenAPI operation.

    Attributes:
        path: Path template, e.g. ``/users/{id}``.
        method: HTTP method. Checked at generation time so that a bad value
            is reported against the procedure declaring it.
        enabled: Disabled procedures are left out of the document.
        summary: Short operation summary.
        description: Verbose operation description.
        tags: Operation tags, in order.
        protect: Whether the operation requires the bearer ``Authorization`` scheme.
        headers: Extra header parameters.
    """

    path: str
    method: str
    enabled: bool = True
    summary: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    protect: bool = False
    headers: list[HeaderParameterModel] | None = None

    @model_validator(mode="before")
    @classmethod
    def normalize_tag(cls, values: Any) -> Any:
        """Fold the deprecated singular ``tag`` into ``tags``."""
        if isinstance(values, dict) and "tag" in values:
            values = dict(values)
            tag = values.pop("tag")
            warnings.warn(
                "OpenAPI meta 'tag' is deprecated, use 'tags' instead",
                DeprecationWarning,
                stacklevel=2,
            )
            if tag is not None and not values.get("tags"):
                values["tags"] = [tag]
        return values


class ProcedureDefinitionModel(SdkBaseModel):
    """A registered procedure.

    ``input`` and ``output`` are expected to be validator nodes; anything
    else is reported when a document is generated.
    """

    kind: ProcedureKind
    name: str
    input: Any = None
    output: Any = None
    meta: OpenApiMetaModel | None = None

    @property
    def qualified_name(self) -> str:
        return f"{self.kind}.{self.name}"
