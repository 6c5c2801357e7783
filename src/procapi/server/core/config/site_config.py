from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import ValidationError as SchemaValidationError
from jsonschema import validate
from pydantic import ValidationError

from .models import SiteConfigModel

logger = logging.getLogger(__name__)

SITE_CONFIG_FILENAME = "procapi-site.yml"

__all__ = ["SITE_CONFIG_FILENAME", "find_repo_root", "load_site_config"]


def find_repo_root() -> Path:
    """Find the project root by looking for procapi-site.yml.

    Returns:
        Path to the project root

    Raises:
        FileNotFoundError: If procapi-site.yml is not found in current directory or any parent
    """
    current = Path.cwd()
    for parent in [current] + list(current.parents):
        if (parent / SITE_CONFIG_FILENAME).exists():
            return parent
    raise FileNotFoundError(
        f"{SITE_CONFIG_FILENAME} not found in current directory or any parent directory"
    )


@lru_cache(maxsize=1)
def _load_site_schema() -> dict[str, Any]:
    schema_path = Path(__file__).parent.parent.parent / "schemas" / "procapi-site-schema-1.json"
    with open(schema_path) as f:
        schema: dict[str, Any] = json.load(f)
    return schema


def load_site_config(
    repo_path: Path | None = None, config_path: Path | None = None
) -> SiteConfigModel:
    """Load and validate procapi-site.yml.

    Args:
        repo_path: Optional path to the project root. Defaults to the nearest
            directory containing procapi-site.yml.
        config_path: Explicit config file, overriding ``repo_path``.

    Returns:
        The validated site configuration

    Raises:
        FileNotFoundError: If the config file is not found
        ValueError: If validation fails
    """
    if config_path is None:
        if repo_path is None:
            repo_path = find_repo_root()
        config_path = repo_path / SITE_CONFIG_FILENAME

    if not config_path.exists():
        raise FileNotFoundError(f"{config_path.name} not found at {config_path}")

    logger.debug("Loading site config from %s", config_path)
    with open(config_path) as f:
        config = yaml.safe_load(f) or {}

    try:
        validate(instance=config, schema=_load_site_schema())
    except SchemaValidationError as e:
        location = ".".join(str(part) for part in e.absolute_path)
        detail = f"{location}: {e.message}" if location else e.message
        raise ValueError(f"Site config validation error: {detail}") from e

    try:
        return SiteConfigModel.model_validate(config)
    except ValidationError as exc:
        raise ValueError(f"Site config validation error: {exc}") from exc
