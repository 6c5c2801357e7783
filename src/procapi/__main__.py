import click

from procapi.server.interfaces.cli.generate import generate
from procapi.server.interfaces.cli.validate import validate


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """procapi CLI"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(generate)
cli.add_command(validate)


if __name__ == "__main__":
    cli()
