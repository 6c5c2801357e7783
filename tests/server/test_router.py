"""Tests for procedure registration."""

import warnings

import pytest
from pydantic import ValidationError

from procapi import OpenApiMetaModel, ProcedureDefinitionModel, Router
from procapi.sdk.validator import object_, string


class TestRouter:
    def test_registration_order_is_kept(self):
        router = (
            Router()
            .mutation("b", input=object_({}), output=string())
            .query("a", input=object_({}), output=string())
        )
        assert [p.qualified_name for p in router] == ["mutation.b", "query.a"]
        assert len(router) == 2

    def test_meta_mapping_is_validated(self):
        router = Router().query("a", meta={"path": "/a", "method": "GET"})
        meta = router.procedures[0].meta
        assert isinstance(meta, OpenApiMetaModel)
        assert meta.enabled is True
        assert meta.protect is False

    def test_duplicate_name(self):
        router = Router().query("a")
        with pytest.raises(ValueError, match="Duplicate procedure registered: query.a"):
            router.query("a")

    def test_same_name_different_kind(self):
        router = Router().query("a").mutation("a")
        assert len(router) == 2

    def test_merge_with_prefix(self):
        users = Router().query("read").mutation("create")
        app = Router().merge("users.", users)
        assert [p.name for p in app] == ["users.read", "users.create"]
        assert [p.name for p in users] == ["read", "create"]

    def test_merge_without_prefix(self):
        app = Router().merge(Router().query("health"))
        assert [p.qualified_name for p in app] == ["query.health"]

    def test_from_definitions(self):
        procedure = ProcedureDefinitionModel(kind="query", name="a")
        assert Router([procedure]).procedures == (procedure,)

    def test_unknown_kind(self):
        with pytest.raises(ValidationError):
            ProcedureDefinitionModel.model_validate({"kind": "event", "name": "a"})


class TestOpenApiMeta:
    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            OpenApiMetaModel.model_validate({"path": "/a", "method": "GET", "verb": "GET"})

    def test_deprecated_tag(self):
        with pytest.warns(DeprecationWarning, match="'tag' is deprecated"):
            meta = OpenApiMetaModel.model_validate({"path": "/a", "method": "GET", "tag": "tag"})
        assert meta.tags == ["tag"]

    def test_tags_win_over_tag(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            meta = OpenApiMetaModel.model_validate(
                {"path": "/a", "method": "GET", "tag": "old", "tags": ["new"]}
            )
        assert meta.tags == ["new"]

    def test_header_schema_alias(self):
        meta = OpenApiMetaModel.model_validate(
            {
                "path": "/a",
                "method": "GET",
                "headers": [{"name": "x-id", "schema": {"type": "string"}}],
            }
        )
        assert meta.headers[0].schema_ == {"type": "string"}
        assert meta.headers[0].required is False

    def test_empty_header_name(self):
        with pytest.raises(ValidationError, match="Header name cannot be empty"):
            OpenApiMetaModel.model_validate(
                {"path": "/a", "method": "GET", "headers": [{"name": ""}]}
            )
