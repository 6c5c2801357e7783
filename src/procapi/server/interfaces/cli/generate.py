import json
from pathlib import Path
from typing import Any

import click
import yaml

from procapi.server.interfaces.cli.utils import (
    configure_logging,
    load_project,
    output_error,
    output_result,
)
from procapi.server.services.openapi import generate_openapi_document


def serialize_document(document: dict[str, Any], output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


@click.command(name="generate")
@click.argument("target", required=False)
@click.option("--config", "config", type=click.Path(dir_okay=False), help="Path to procapi-site.yml")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    help="Document format (defaults to output.format from the config)",
)
@click.option("--output", "output", type=click.Path(dir_okay=False), help="Write to this file")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def generate(
    target: str | None,
    config: str | None,
    output_format: str | None,
    output: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Generate the OpenAPI document of a router.

    TARGET is the router to document, as ``module:attribute``. It defaults
    to the ``router`` entry of procapi-site.yml.

    \b
    Examples:
        procapi generate                           # Print the configured router as JSON
        procapi generate myapp.api:app_router      # Document a specific router
        procapi generate --format yaml             # Print YAML instead
        procapi generate --output openapi.json     # Write to a file
    """
    configure_logging(debug)
    try:
        site_config, project_root, procedures = load_project(target, config)
        document = generate_openapi_document(procedures, site_config.openapi)

        output_format = output_format or site_config.output.format
        if output is not None:
            output_path: Path | None = Path(output)
        elif site_config.output.path is not None:
            output_path = project_root / site_config.output.path
        else:
            output_path = None

        if output_path is None:
            if json_output:
                output_result(document, json_output)
            else:
                click.echo(serialize_document(document, output_format), nl=False)
            return

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(serialize_document(document, output_format), encoding="utf-8")
        if json_output:
            output_result({"path": str(output_path), "format": output_format}, json_output)
        else:
            click.echo(
                f"{click.style('✅ OpenAPI document written to', fg='green')} {output_path}"
            )

    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
