"""procapi - OpenAPI documents from typed remote procedures.

Procedures are registered on a :class:`Router` with an input validator, an
output validator and OpenAPI routing metadata. :func:`generate_openapi_document`
folds them into a single OpenAPI 3.0.3 document.

Example:
    >>> from procapi import Router, generate_openapi_document
    >>> from procapi.sdk.validator import object_, string
    >>>
    >>> router = Router().query(
    ...     "readUser",
    ...     input=object_({"id": string()}),
    ...     output=object_({"id": string(), "name": string()}),
    ...     meta={"path": "/users/{id}", "method": "GET"},
    ... )
    >>> document = generate_openapi_document(
    ...     router, {"title": "Users", "version": "1.0.0", "baseUrl": "http://localhost/api"}
    ... )
    >>> list(document["paths"])
    ['/users/{id}']
"""

from procapi.server.definitions.procedures import (
    HeaderParameterModel,
    OpenApiMetaModel,
    ProcedureDefinitionModel,
    Router,
)
from procapi.server.services.openapi import (
    OPENAPI_VERSION,
    DocumentConfigModel,
    GenerationError,
    generate_openapi_document,
)

__all__ = [
    "OPENAPI_VERSION",
    "DocumentConfigModel",
    "GenerationError",
    "HeaderParameterModel",
    "OpenApiMetaModel",
    "ProcedureDefinitionModel",
    "Router",
    "generate_openapi_document",
]
