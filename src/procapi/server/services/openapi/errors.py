"""Errors raised while generating an OpenAPI document."""

from typing import Literal

ErrorCategory = Literal[
    "validator",
    "method",
    "path_parameter",
    "duplicate_route",
    "unsupported_kind",
]


class GenerationError(ValueError):
    """A procedure cannot be represented in the OpenAPI document.

    Generation stops at the first error; no partial document is produced.

    Attributes:
        procedure: Qualified procedure name (``kind.name``), if any.
        reason: The message without the procedure prefix.
        category: What kind of rule was broken.
    """

    def __init__(self, procedure: str | None, reason: str, category: ErrorCategory) -> None:
        self.procedure = procedure
        self.reason = reason
        self.category = category
        super().__init__(f"[{procedure}] - {reason}" if procedure else reason)
