"""OpenAPI generation service.

The public entry point is :func:`generate_openapi_document`; the other
modules are its stages (route validation, parameter classification and
schema translation).
"""

from procapi.server.core.config.models import DocumentConfigModel, TagModel

from .errors import ErrorCategory, GenerationError
from .generator import OPENAPI_VERSION, build_components, generate_openapi_document
from .parameters import ClassifiedParameters, classify_parameters
from .routes import HTTP_METHODS, get_path_parameters, normalize_path, route_key
from .validator import RouteTable, ValidatedProcedure, validate_procedure

__all__ = [
    "OPENAPI_VERSION",
    "HTTP_METHODS",
    "ClassifiedParameters",
    "DocumentConfigModel",
    "ErrorCategory",
    "GenerationError",
    "RouteTable",
    "TagModel",
    "ValidatedProcedure",
    "build_components",
    "classify_parameters",
    "generate_openapi_document",
    "get_path_parameters",
    "normalize_path",
    "route_key",
    "validate_procedure",
]
