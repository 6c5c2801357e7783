from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .models import OpenApiMetaModel, ProcedureDefinitionModel, ProcedureKind

logger = logging.getLogger(__name__)


class Router:
    """Ordered registry of procedures.

    Registration methods return the router itself so definitions can be
    chained::

        router = (
            Router()
            .query("readUser", input=..., output=..., meta={"path": "/users/{id}", "method": "GET"})
            .mutation("createUser", input=..., output=..., meta={"path": "/users", "method": "POST"})
        )
    """

    def __init__(self, procedures: Iterable[ProcedureDefinitionModel] = ()) -> None:
        self._procedures: dict[str, ProcedureDefinitionModel] = {}
        for procedure in procedures:
            self._register(procedure)

    def query(
        self,
        name: str,
        *,
        input: Any = None,
        output: Any = None,
        meta: OpenApiMetaModel | Mapping[str, Any] | None = None,
    ) -> Router:
        return self._add("query", name, input, output, meta)

    def mutation(
        self,
        name: str,
        *,
        input: Any = None,
        output: Any = None,
        meta: OpenApiMetaModel | Mapping[str, Any] | None = None,
    ) -> Router:
        return self._add("mutation", name, input, output, meta)

    def subscription(
        self,
        name: str,
        *,
        input: Any = None,
        output: Any = None,
        meta: OpenApiMetaModel | Mapping[str, Any] | None = None,
    ) -> Router:
        return self._add("subscription", name, input, output, meta)

    def merge(self, prefix: str | Router, router: Router | None = None) -> Router:
        """Copy the procedures of another router into this one.

        Args:
            prefix: Name prefix for the merged procedures (e.g. ``"users."``),
                or the router itself when no prefix is wanted.
            router: The router to merge when a prefix is given.
        """
        if isinstance(prefix, Router):
            router, prefix = prefix, ""
        if router is None:
            raise TypeError("merge() requires a router")
        for procedure in router.procedures:
            self._register(procedure.model_copy(update={"name": f"{prefix}{procedure.name}"}))
        return self

    @property
    def procedures(self) -> tuple[ProcedureDefinitionModel, ...]:
        return tuple(self._procedures.values())

    def __iter__(self) -> Iterator[ProcedureDefinitionModel]:
        return iter(self.procedures)

    def __len__(self) -> int:
        return len(self._procedures)

    def _add(
        self,
        kind: ProcedureKind,
        name: str,
        input: Any,
        output: Any,
        meta: OpenApiMetaModel | Mapping[str, Any] | None,
    ) -> Router:
        procedure = ProcedureDefinitionModel.model_validate(
            {"kind": kind, "name": name, "input": input, "output": output, "meta": meta}
        )
        self._register(procedure)
        return self

    def _register(self, procedure: ProcedureDefinitionModel) -> None:
        key = procedure.qualified_name
        if key in self._procedures:
            raise ValueError(f"Duplicate procedure registered: {key}")
        logger.debug("Registered procedure %s", key)
        self._procedures[key] = procedure
