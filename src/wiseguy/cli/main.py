"""Main CLI entry point for Wise Guy"""

import typer

from wiseguy import __version__
from wiseguy.cli.commands import chat as chat_module
from wiseguy.cli.commands import server as server_module
from wiseguy.cli.commands import validate as validate_module

app = typer.Typer(
    name="wiseguy",
    help="Wise Guy - knock-knock joke voice skill",
    add_completion=False,
)

# Register subcommands
app.add_typer(chat_module.app, name="chat", help="Start an interactive joke session")
app.add_typer(server_module.app, name="server", help="Start the skill API server")
app.add_typer(validate_module.app, name="validate", help="Validate a configuration file")


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"Wise Guy version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Wise Guy - knock-knock joke voice skill"""
    pass


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
