from __future__ import annotations

from typing import Literal

from pydantic import Field

from procapi.sdk.models import SdkBaseModel


class TagModel(SdkBaseModel):
    """An entry of the document-level tag catalogue."""

    name: str
    description: str | None = None


class DocumentConfigModel(SdkBaseModel):
    """Document-level metadata for a generated OpenAPI document.

    Example:
        >>> DocumentConfigModel.model_validate(
        ...     {"title": "API", "version": "1.0.0", "baseUrl": "http://localhost/api"}
        ... ).base_url
        'http://localhost/api'
    """

    title: str
    version: str
    description: str | None = None
    base_url: str = Field(alias="baseUrl")
    docs_url: str | None = Field(default=None, alias="docsUrl")
    tags: list[TagModel] | None = None


class OutputConfigModel(SdkBaseModel):
    path: str | None = None
    format: Literal["json", "yaml"] = "json"


class SiteConfigModel(SdkBaseModel):
    """Contents of ``procapi-site.yml``.

    Attributes:
        router: Import target of the router, as ``module:attribute``.
        openapi: Document metadata.
        output: Where and how the CLI writes the document.
    """

    router: str | None = None
    openapi: DocumentConfigModel
    output: OutputConfigModel = Field(default_factory=OutputConfigModel)
