"""Validate command - check a config and list its jokes."""

from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wiseguy.config.loader import ConfigLoader
from wiseguy.core.errors import ConfigError

app = typer.Typer(help="Validate a configuration file")


@app.callback(invoke_without_command=True)
def validate(
    config: Path = typer.Option(
        "wiseguy.yaml", "--config", "-c", help="Path to wiseguy.yaml or config directory"
    ),
) -> None:
    """Load the configuration and print the joke catalog."""
    console = Console()

    try:
        wiseguy_config = ConfigLoader.load(config)
    except (FileNotFoundError, ConfigError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config:[/] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Jokes in {config}")
    table.add_column("#", justify="right")
    table.add_column("Setup")
    table.add_column("Speech punchline")
    table.add_column("Card punchline")
    for index, joke in enumerate(wiseguy_config.jokes):
        table.add_row(
            str(index),
            escape(joke.setup),
            escape(joke.speech_punchline),
            escape(joke.card_punchline),
        )

    console.print(table)
    skill = wiseguy_config.skill
    console.print(f"App id check: {'on' if skill.app_id else 'off'}")
    console.print(f"[green]OK[/] {len(wiseguy_config.jokes)} joke(s)")
