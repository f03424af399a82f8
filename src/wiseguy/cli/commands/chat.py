"""Chat command for interactive sessions."""

from pathlib import Path

import typer

app = typer.Typer(help="Start an interactive joke session")


@app.callback(invoke_without_command=True)
def run_chat(
    config: Path = typer.Option(
        "wiseguy.yaml", "--config", "-c", help="Path to wiseguy.yaml or config directory"
    ),
    session_id: str | None = typer.Option(None, "--session", "-s", help="Session ID"),
    seed: int | None = typer.Option(None, "--seed", help="Seed joke selection"),
    show_state: bool = typer.Option(False, "--show-state", help="Print stage and reprompts"),
    debug: bool = typer.Option(False, "--debug", help="Debug mode"),
    ctx: typer.Context = typer.Option(None, hidden=True),
) -> None:
    """Start interactive chat session."""
    if ctx and ctx.invoked_subcommand:
        return

    from dotenv import load_dotenv

    from wiseguy.cli.chat_runner import ChatConfig, run_chat_session
    from wiseguy.observability.logging import setup_logging

    load_dotenv()
    setup_logging("DEBUG" if debug else "WARNING")

    chat_config = ChatConfig(
        config_path=config,
        session_id=session_id,
        seed=seed,
        show_state=show_state,
        debug=debug,
    )

    try:
        run_chat_session(chat_config)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        typer.echo(f"Fatal error: {e}", err=True)
        raise typer.Exit(1)
