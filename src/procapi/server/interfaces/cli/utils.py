import importlib
import json
import logging
import os
import sys
import traceback
from pathlib import Path
from typing import Any

import click

from procapi.server.core.config import (
    SITE_CONFIG_FILENAME,
    SiteConfigModel,
    find_repo_root,
    load_site_config,
)
from procapi.server.definitions.procedures import ProcedureDefinitionModel, Router


def get_env_flag(env_var: str, default: bool = False) -> bool:
    """Get a boolean flag from an environment variable.

    Args:
        env_var: Name of the environment variable
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to "1", "true", or "yes" (case insensitive)
        False otherwise
    """
    value = os.environ.get(env_var, "").lower()
    return value in ("1", "true", "yes") if value else default


def configure_logging(debug: bool = False) -> None:
    """Configure logging for all modules.

    Args:
        debug: Whether to enable debug logging. ``PROCAPI_DEBUG`` enables it too.
    """
    if not debug:
        debug = get_env_flag("PROCAPI_DEBUG")

    level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicate messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
    root_logger.addHandler(stream_handler)

    for logger_name in logging.root.manager.loggerDict:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


def format_error(error: Exception, debug: bool = False) -> dict[str, Any]:
    """Format an error for output.

    Args:
        error: The exception that occurred
        debug: Whether to include debug information

    Returns:
        Dict containing error information
    """
    error_info = {"error": str(error)}

    if debug:
        error_info["traceback"] = traceback.format_exc()
        error_info["type"] = error.__class__.__name__

    return error_info


def output_result(result: Any, json_output: bool = False) -> None:
    """Output a result in either JSON or human-readable format."""
    if json_output:
        print(json.dumps({"status": "ok", "result": result}, indent=2, default=str))
    else:
        click.echo(result)


def output_error(error: Exception, json_output: bool = False, debug: bool = False) -> None:
    """Output an error in either JSON or human-readable format, then abort.

    Args:
        error: The exception that occurred
        json_output: Whether to output in JSON format
        debug: Whether to include debug information
    """
    error_info = format_error(error, debug)

    if json_output:
        print(json.dumps({"status": "error", **error_info}, indent=2))
    else:
        click.echo(f"Error: {error_info['error']}", err=True)
        if debug and "traceback" in error_info:
            click.echo("\nTraceback:", err=True)
            click.echo(error_info["traceback"], err=True)

    raise click.Abort()


def load_router_target(
    target: str, search_path: Path | None = None
) -> Router | list[ProcedureDefinitionModel]:
    """Import the procedures named by ``module:attribute``.

    Args:
        target: Import target, e.g. ``myapp.api:app_router``.
        search_path: Directory to make importable first, usually the project root.

    Returns:
        The router, or the list of procedure definitions the attribute holds.

    Raises:
        click.BadParameter: If the target is malformed, cannot be imported,
            or does not hold procedures.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter(f"Expected 'module:attribute', got '{target}'", param_hint="TARGET")

    if search_path is not None and str(search_path) not in sys.path:
        sys.path.insert(0, str(search_path))

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(
            f"Cannot import module '{module_name}': {e}", param_hint="TARGET"
        ) from e

    value: Any = module
    for part in attribute.split("."):
        try:
            value = getattr(value, part)
        except AttributeError as e:
            raise click.BadParameter(
                f"Module '{module_name}' has no attribute '{attribute}'", param_hint="TARGET"
            ) from e

    if isinstance(value, Router):
        return value
    if isinstance(value, (list, tuple)) and all(
        isinstance(item, ProcedureDefinitionModel) for item in value
    ):
        return list(value)
    raise click.BadParameter(
        f"'{target}' is not a Router (got {type(value).__name__})", param_hint="TARGET"
    )


def load_project(
    target: str | None, config: str | None
) -> tuple[SiteConfigModel, Path, Router | list[ProcedureDefinitionModel]]:
    """Load the site config and the router it (or ``target``) names.

    Returns:
        The site config, the directory holding it, and the procedures.
    """
    if config is not None:
        config_path = Path(config)
    else:
        config_path = find_repo_root() / SITE_CONFIG_FILENAME
    site_config = load_site_config(config_path=config_path)
    project_root = config_path.resolve().parent

    target = target or site_config.router
    if not target:
        raise click.BadParameter(
            f"No router given and none configured in {config_path.name}", param_hint="TARGET"
        )
    return site_config, project_root, load_router_target(target, project_root)
