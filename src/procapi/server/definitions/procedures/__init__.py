"""Procedure definitions and the router registry."""

from .models import (
    HeaderParameterModel,
    OpenApiMetaModel,
    ProcedureDefinitionModel,
    ProcedureKind,
)
from .router import Router

__all__ = [
    "HeaderParameterModel",
    "OpenApiMetaModel",
    "ProcedureDefinitionModel",
    "ProcedureKind",
    "Router",
]
