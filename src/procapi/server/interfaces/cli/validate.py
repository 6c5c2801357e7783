import click

from procapi.server.interfaces.cli.utils import (
    configure_logging,
    load_project,
    output_error,
    output_result,
)
from procapi.server.services.openapi import generate_openapi_document


@click.command(name="validate")
@click.argument("target", required=False)
@click.option("--config", "config", type=click.Path(dir_okay=False), help="Path to procapi-site.yml")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def validate(target: str | None, config: str | None, json_output: bool, debug: bool) -> None:
    """Check that every procedure of a router maps onto OpenAPI.

    \b
    Examples:
        procapi validate                         # Validate the configured router
        procapi validate myapp.api:app_router    # Validate a specific router
        procapi validate --json-output           # Output results in JSON format
    """
    configure_logging(debug)
    try:
        site_config, _, procedures = load_project(target, config)
        document = generate_openapi_document(procedures, site_config.openapi)
        operations = sum(len(methods) for methods in document["paths"].values())

        if json_output:
            output_result({"operations": operations, "paths": len(document["paths"])}, json_output)
        else:
            click.echo(f"{click.style('✅ Validation passed!', fg='green', bold=True)}")
            click.echo(
                f"   {click.style(str(operations), fg='yellow')} operations on "
                f"{click.style(str(len(document['paths'])), fg='yellow')} paths"
            )

    except click.ClickException:
        raise
    except Exception as e:
        output_error(e, json_output, debug)
