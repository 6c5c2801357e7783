"""Structural rules a procedure must satisfy to become an OpenAPI operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from procapi.sdk.validator import (
    ObjectNode,
    ValidatorNode,
    as_object,
    is_optional,
    is_string_like,
    is_void_like,
)
from procapi.server.definitions.procedures import OpenApiMetaModel, ProcedureDefinitionModel

from .errors import ErrorCategory, GenerationError
from .routes import HTTP_METHODS, QUERY_METHODS, get_path_parameters, route_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedProcedure:
    """A procedure that passed every per-procedure check.

    Attributes:
        procedure: The original definition.
        meta: Its OpenAPI metadata.
        method: Upper-cased HTTP method.
        path_parameters: Placeholder names of the path template.
        input_object: The object underneath the input wrappers, or ``None``
            when the procedure takes no input.
    """

    procedure: ProcedureDefinitionModel
    meta: OpenApiMetaModel
    method: str
    path_parameters: tuple[str, ...]
    input_object: ObjectNode | None

    @property
    def qualified_name(self) -> str:
        return self.procedure.qualified_name

    @property
    def input(self) -> ValidatorNode:
        return self.procedure.input

    @property
    def output(self) -> ValidatorNode:
        return self.procedure.output


def validate_procedure(procedure: ProcedureDefinitionModel) -> ValidatedProcedure | None:
    """Check a single procedure against the OpenAPI mapping rules.

    Args:
        procedure: The procedure to check.

    Returns:
        The validated procedure, or ``None`` when it is not exposed (no
        OpenAPI metadata, or disabled).

    Raises:
        GenerationError: If the procedure breaks a rule.
    """
    name = procedure.qualified_name

    def fail(reason: str, category: ErrorCategory) -> GenerationError:
        return GenerationError(name, reason, category)

    meta = procedure.meta
    if meta is None:
        logger.debug("Skipping %s: no OpenAPI metadata", name)
        return None
    if procedure.kind == "subscription":
        raise fail("Subscriptions are not supported by OpenAPI v3", "unsupported_kind")
    if not meta.enabled:
        logger.debug("Skipping %s: disabled", name)
        return None

    method = meta.method.upper()
    if method not in HTTP_METHODS:
        raise fail("Method must be GET, POST, PATCH, PUT or DELETE", "method")

    if not isinstance(procedure.input, ValidatorNode):
        raise fail("Input parser expects a validator", "validator")
    if not isinstance(procedure.output, ValidatorNode):
        raise fail("Output parser expects a validator", "validator")

    path_parameters = tuple(get_path_parameters(meta.path))
    input_object = as_object(procedure.input)
    if input_object is None:
        if path_parameters or not is_void_like(procedure.input):
            raise fail("Input parser must be an Object schema", "validator")
        return ValidatedProcedure(procedure, meta, method, path_parameters, None)

    shape = input_object.shape
    # path keys first, so a missing placeholder is reported before query keys
    for parameter in path_parameters:
        if parameter not in shape:
            raise fail(f'Input parser expects key from path: "{parameter}"', "path_parameter")
        if is_optional(shape[parameter]):
            raise fail(f'Path parameter: "{parameter}" must not be optional', "path_parameter")
        if not is_string_like(shape[parameter]):
            raise fail(f'Input parser key: "{parameter}" must be String', "path_parameter")

    if method in QUERY_METHODS:
        for key, node in shape.items():
            if key not in path_parameters and not is_string_like(node):
                raise fail(f'Input parser key: "{key}" must be String', "validator")

    return ValidatedProcedure(procedure, meta, method, path_parameters, input_object)


class RouteTable:
    """Tracks the routes claimed so far; the first procedure on a route wins."""

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], str] = {}

    def register(self, validated: ValidatedProcedure) -> None:
        """Claim the route of ``validated``.

        Raises:
            GenerationError: If another procedure already claimed the same
                method and normalized path.
        """
        key = route_key(validated.method, validated.meta.path)
        if key in self._routes:
            method, path = key
            raise GenerationError(
                validated.qualified_name,
                f"Duplicate procedure defined for route {method} {path}",
                "duplicate_route",
            )
        self._routes[key] = validated.qualified_name

    def __contains__(self, key: object) -> bool:
        return key in self._routes

    def __len__(self) -> int:
        return len(self._routes)
