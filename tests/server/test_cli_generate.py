"""Tests for the generate and validate CLI commands."""

import json
import shutil

import pytest
import yaml
from click.testing import CliRunner
from openapi_spec_validator import validate as validate_spec

from procapi.__main__ import cli


@pytest.fixture
def project(fixtures_dir, tmp_path, monkeypatch):
    """A copy of the sample project, used as the working directory."""
    project_dir = tmp_path / "sample-project"
    shutil.copytree(fixtures_dir / "sample-project", project_dir)
    monkeypatch.syspath_prepend(str(project_dir))
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture
def runner():
    return CliRunner()


def json_payload(output):
    # click may report the abort on the same captured stream
    return json.loads(output[output.index("{") : output.rindex("}") + 1])


class TestGenerate:
    def test_prints_json_document(self, runner, project):
        result = runner.invoke(cli, ["generate"])
        assert result.exit_code == 0, result.output

        document = json.loads(result.output)
        validate_spec(document)
        assert document["info"]["title"] == "Sample API"
        assert document["tags"] == [{"name": "users", "description": "User management"}]
        assert list(document["paths"]) == ["/users", "/users/{id}"]
        assert document["paths"]["/users"]["post"]["operationId"] == "mutation.users.create"
        assert document["paths"]["/users"]["post"]["security"] == [{"Authorization": []}]

    def test_yaml_format(self, runner, project):
        result = runner.invoke(cli, ["generate", "--format", "yaml"])
        assert result.exit_code == 0, result.output

        document = yaml.safe_load(result.output)
        assert document["openapi"] == "3.0.3"
        assert list(document) == [
            "openapi",
            "info",
            "servers",
            "paths",
            "components",
            "tags",
            "externalDocs",
        ]

    def test_output_file(self, runner, project):
        result = runner.invoke(cli, ["generate", "--output", "build/openapi.json"])
        assert result.exit_code == 0, result.output
        assert "OpenAPI document written to" in result.output

        document = json.loads((project / "build" / "openapi.json").read_text())
        assert len(document["paths"]) == 2

    def test_output_from_config(self, runner, project):
        config_path = project / "procapi-site.yml"
        config = yaml.safe_load(config_path.read_text())
        config["output"] = {"path": "docs/openapi.yaml", "format": "yaml"}
        config_path.write_text(yaml.safe_dump(config))

        result = runner.invoke(cli, ["generate", "--json-output"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["status"] == "ok"
        assert payload["result"]["format"] == "yaml"

        document = yaml.safe_load((project / "docs" / "openapi.yaml").read_text())
        assert document["info"]["version"] == "1.0.0"

    def test_explicit_target(self, runner, project):
        result = runner.invoke(cli, ["generate", "sample_api:users_router"])
        assert result.exit_code == 0, result.output
        document = json.loads(result.output)
        assert document["paths"]["/users"]["get"]["operationId"] == "query.list"

    def test_explicit_config(self, runner, project, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            cli, ["generate", "--config", str(project / "procapi-site.yml")]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["servers"] == [{"url": "http://localhost:3000/api"}]

    def test_generation_error(self, runner, project):
        result = runner.invoke(cli, ["generate", "sample_api:broken_router"])
        assert result.exit_code == 1
        assert 'Error: [query.search] - Input parser key: "limit" must be String' in result.output

    def test_generation_error_json(self, runner, project):
        result = runner.invoke(cli, ["generate", "sample_api:broken_router", "--json-output"])
        assert result.exit_code == 1
        payload = json_payload(result.output)
        assert payload["status"] == "error"
        assert payload["error"].startswith("[query.search]")

    def test_bad_target(self, runner, project):
        result = runner.invoke(cli, ["generate", "sample_api"])
        assert result.exit_code == 2
        assert "Expected 'module:attribute'" in result.output

    def test_missing_module(self, runner, project):
        result = runner.invoke(cli, ["generate", "no_such_module_here:router"])
        assert result.exit_code == 2
        assert "Cannot import module 'no_such_module_here'" in result.output

    def test_not_a_router(self, runner, project):
        result = runner.invoke(cli, ["generate", "sample_api:not_a_router"])
        assert result.exit_code == 2
        assert "is not a Router" in result.output

    def test_no_config(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["generate"])
        assert result.exit_code == 1
        assert "procapi-site.yml not found" in result.output


class TestValidate:
    def test_valid_router(self, runner, project):
        result = runner.invoke(cli, ["validate"])
        assert result.exit_code == 0, result.output
        assert "Validation passed!" in result.output

    def test_valid_router_json(self, runner, project):
        result = runner.invoke(cli, ["validate", "--json-output"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "status": "ok",
            "result": {"operations": 3, "paths": 2},
        }

    def test_invalid_router(self, runner, project):
        result = runner.invoke(cli, ["validate", "sample_api:broken_router"])
        assert result.exit_code == 1
        assert '[query.search] - Input parser key: "limit" must be String' in result.output


def test_help_without_command(runner):
    result = runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "generate" in result.output
    assert "validate" in result.output
