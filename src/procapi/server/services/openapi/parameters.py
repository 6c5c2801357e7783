"""Splitting procedure input into path, query and header parameters and a request body."""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from procapi.sdk.validator import (
    SchemaConverter,
    ValidatorNode,
    as_object,
    is_optional,
    is_void_like,
)
from procapi.server.definitions.procedures import HeaderParameterModel

from .routes import QUERY_METHODS, get_path_parameters

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class ClassifiedParameters:
    """The parameter objects and optional request body of one operation."""

    parameters: list[dict[str, Any]] = field(default_factory=list)
    request_body: dict[str, Any] | None = None


def header_parameter(header: HeaderParameterModel) -> dict[str, Any]:
    parameter: dict[str, Any] = {"name": header.name, "in": "header", "required": header.required}
    if header.description is not None:
        parameter["description"] = header.description
    if header.schema_ is not None:
        parameter["schema"] = copy.deepcopy(header.schema_)
    return parameter


def _input_parameter(
    converter: SchemaConverter, name: str, node: ValidatorNode, location: str, required: bool
) -> dict[str, Any]:
    schema = converter.convert_property(node)
    if schema is None:
        schema = {}
    # the label documents the parameter, not its schema
    description = schema.pop("description", None)

    parameter: dict[str, Any] = {"name": name, "in": location, "required": required}
    if description is not None:
        parameter["description"] = description
    parameter["schema"] = schema
    return parameter


def classify_parameters(
    method: str,
    path: str,
    input: ValidatorNode,
    headers: Sequence[HeaderParameterModel] | None = None,
) -> ClassifiedParameters:
    """Decide where each input field travels on the wire.

    Header parameters come first, then path parameters. For GET and DELETE
    every other field becomes a query parameter; for POST, PUT and PATCH the
    other fields form a single JSON request body.

    The input is expected to have passed
    :func:`~procapi.server.services.openapi.validator.validate_procedure`.

    Args:
        method: HTTP method.
        path: Path template with ``{name}`` placeholders.
        input: The procedure input validator.
        headers: Header parameters declared in the procedure metadata.

    Returns:
        The classified parameters.

    Raises:
        ValueError: If the input is neither an object nor void-like.
    """
    method = method.upper()
    parameters = [header_parameter(header) for header in headers or ()]
    path_parameters = get_path_parameters(path)

    input_object = as_object(input)
    if input_object is None:
        if path_parameters or not is_void_like(input):
            raise ValueError("Input validator must describe an object")
        return ClassifiedParameters(parameters, None)

    converter = SchemaConverter()
    shape = input_object.shape
    for name in path_parameters:
        parameters.append(_input_parameter(converter, name, shape[name], "path", required=True))

    remaining = input_object.omit(*path_parameters)
    if method in QUERY_METHODS:
        for name, node in remaining.shape.items():
            parameters.append(
                _input_parameter(converter, name, node, "query", required=not is_optional(node))
            )
        return ClassifiedParameters(parameters, None)

    if path_parameters and not remaining.shape:
        return ClassifiedParameters(parameters, None)

    request_body = {
        "required": not is_optional(input),
        "content": {JSON_CONTENT_TYPE: {"schema": converter.convert(remaining)}},
    }
    return ClassifiedParameters(parameters, request_body)
