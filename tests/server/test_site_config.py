"""Tests for loading procapi-site.yml."""

import pytest

from procapi.server.core.config import (
    SITE_CONFIG_FILENAME,
    find_repo_root,
    load_site_config,
)


@pytest.fixture
def sample_project(fixtures_dir):
    return fixtures_dir / "sample-project"


def write_config(path, content):
    config_path = path / SITE_CONFIG_FILENAME
    config_path.write_text(content)
    return config_path


class TestLoadSiteConfig:
    def test_load_fixture_project(self, sample_project):
        config = load_site_config(sample_project)
        assert config.router == "sample_api:app_router"
        assert config.openapi.title == "Sample API"
        assert config.openapi.version == "1.0.0"
        assert config.openapi.base_url == "http://localhost:3000/api"
        assert config.openapi.docs_url == "http://localhost:3000/docs"
        assert config.openapi.tags[0].name == "users"
        assert config.output.format == "json"
        assert config.output.path is None

    def test_explicit_config_path(self, tmp_path):
        config_path = write_config(
            tmp_path,
            "openapi:\n  title: T\n  version: '2'\n  baseUrl: http://x\n"
            "output:\n  path: build/openapi.yaml\n  format: yaml\n",
        )
        config = load_site_config(config_path=config_path)
        assert config.router is None
        assert config.output.path == "build/openapi.yaml"
        assert config.output.format == "yaml"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="procapi-site.yml not found"):
            load_site_config(tmp_path)

    def test_missing_base_url(self, tmp_path):
        write_config(tmp_path, "openapi:\n  title: T\n  version: '1'\n")
        with pytest.raises(ValueError, match="Site config validation error: openapi: 'baseUrl'"):
            load_site_config(tmp_path)

    def test_unknown_key(self, tmp_path):
        write_config(tmp_path, "openapi:\n  title: T\n  version: '1'\n  baseUrl: x\nprofile: dev\n")
        with pytest.raises(ValueError, match="Site config validation error"):
            load_site_config(tmp_path)

    def test_bad_router_target(self, tmp_path):
        write_config(
            tmp_path, "router: not-a-target\nopenapi:\n  title: T\n  version: '1'\n  baseUrl: x\n"
        )
        with pytest.raises(ValueError, match="router"):
            load_site_config(tmp_path)

    def test_bad_output_format(self, tmp_path):
        write_config(
            tmp_path,
            "openapi:\n  title: T\n  version: '1'\n  baseUrl: x\noutput:\n  format: xml\n",
        )
        with pytest.raises(ValueError, match="output.format"):
            load_site_config(tmp_path)

    def test_empty_file(self, tmp_path):
        write_config(tmp_path, "")
        with pytest.raises(ValueError, match="'openapi' is a required property"):
            load_site_config(tmp_path)


class TestFindRepoRoot:
    def test_from_nested_directory(self, sample_project, monkeypatch):
        monkeypatch.chdir(sample_project / "nested")
        assert find_repo_root() == sample_project.resolve()

    def test_not_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(FileNotFoundError, match="not found in current directory"):
            find_repo_root()
