"""Base Pydantic models for the procapi SDK.

This module provides the base model class that SDK and server Pydantic models
inherit from. It establishes consistent configuration across all models:

- Strict field validation (no extra fields allowed)
- Immutable instances, so definitions can be shared between generations

Example:
    >>> from procapi.sdk.models import SdkBaseModel
    >>>
    >>> class TagModel(SdkBaseModel):
    ...     name: str
    >>>
    >>> TagModel(name="users").model_dump()
    {'name': 'users'}
"""

from pydantic import BaseModel, ConfigDict


class SdkBaseModel(BaseModel):
    """Base model for all procapi Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    - populate_by_name=True: Accepts both field names and camelCase aliases
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
