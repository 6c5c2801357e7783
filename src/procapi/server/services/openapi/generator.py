"""Assembly of the OpenAPI document from a collection of procedures."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from procapi.sdk.validator import ObjectNode, array, object_, string, to_openapi_schema
from procapi.server.core.config.models import DocumentConfigModel
from procapi.server.definitions.procedures import ProcedureDefinitionModel

from .errors import GenerationError
from .parameters import JSON_CONTENT_TYPE, classify_parameters
from .validator import RouteTable, ValidatedProcedure, validate_procedure

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.3"

ERROR_RESPONSE_REF = "#/components/responses/error"
SECURITY_SCHEME_NAME = "Authorization"


def error_response_validator() -> ObjectNode:
    """Shape of the body returned by every failing operation."""
    return object_(
        {
            "message": string(),
            "code": string(),
            "issues": array(object_({"message": string()})).optional(),
        }
    )


def build_components() -> dict[str, Any]:
    return {
        "securitySchemes": {
            SECURITY_SCHEME_NAME: {"type": "http", "scheme": "bearer"},
        },
        "responses": {
            "error": {
                "description": "Error response",
                "content": {
                    JSON_CONTENT_TYPE: {"schema": to_openapi_schema(error_response_validator())}
                },
            },
        },
    }


def build_operation(validated: ValidatedProcedure) -> dict[str, Any]:
    """The operation object of a single validated procedure."""
    meta = validated.meta
    classified = classify_parameters(
        validated.method, meta.path, validated.input, meta.headers
    )

    operation: dict[str, Any] = {"operationId": validated.qualified_name}
    if meta.summary is not None:
        operation["summary"] = meta.summary
    if meta.description is not None:
        operation["description"] = meta.description
    if meta.tags is not None:
        operation["tags"] = list(meta.tags)
    if meta.protect:
        operation["security"] = [{SECURITY_SCHEME_NAME: []}]
    operation["parameters"] = classified.parameters
    if classified.request_body is not None:
        operation["requestBody"] = classified.request_body

    media_type: dict[str, Any] = {}
    output_schema = to_openapi_schema(validated.output)
    if output_schema is not None:
        media_type["schema"] = output_schema
    operation["responses"] = {
        "200": {
            "description": "Successful response",
            "content": {JSON_CONTENT_TYPE: media_type},
        },
        "default": {"$ref": ERROR_RESPONSE_REF},
    }
    return operation


def generate_openapi_document(
    procedures: Iterable[ProcedureDefinitionModel],
    config: DocumentConfigModel | Mapping[str, Any],
) -> dict[str, Any]:
    """Generate an OpenAPI 3.0.3 document describing ``procedures``.

    Args:
        procedures: A :class:`~procapi.Router` or any iterable of procedure
            definitions, in registration order.
        config: Document metadata, as a model or a mapping using either the
            field names or their camelCase aliases.

    Returns:
        A new document dictionary, ready to be serialized as JSON or YAML.

    Raises:
        GenerationError: If any exposed procedure breaks a mapping rule. No
            partial document is ever returned.
    """
    if not isinstance(config, DocumentConfigModel):
        config = DocumentConfigModel.model_validate(config)

    routes = RouteTable()
    paths: dict[str, dict[str, Any]] = {}
    for procedure in procedures:
        try:
            validated = validate_procedure(procedure)
            if validated is None:
                continue
            routes.register(validated)
            operation = build_operation(validated)
        except RecursionError as exc:
            # self-referential lazy validators cannot be inlined
            raise GenerationError(procedure.qualified_name, str(exc), "validator") from exc
        paths.setdefault(validated.meta.path, {})[validated.method.lower()] = operation
        logger.debug(
            "Added %s %s for %s", validated.method, validated.meta.path, validated.qualified_name
        )

    info: dict[str, Any] = {"title": config.title, "version": config.version}
    if config.description is not None:
        info["description"] = config.description

    document: dict[str, Any] = {
        "openapi": OPENAPI_VERSION,
        "info": info,
        "servers": [{"url": config.base_url}],
        "paths": paths,
        "components": build_components(),
    }
    if config.tags is not None:
        document["tags"] = [tag.model_dump(exclude_none=True) for tag in config.tags]
    if config.docs_url is not None:
        document["externalDocs"] = {"url": config.docs_url}

    logger.info("Generated OpenAPI document with %d operations on %d paths", len(routes), len(paths))
    return document
