"""Interactive console session for the Wise Guy skill.

There is no language understanding here: the user types an intent name or
one of its short aliases, and the console plays the platform's part by
keeping the session state between turns.
"""

import uuid
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from wiseguy.config.loader import ConfigLoader
from wiseguy.core.errors import ConfigError, IntentError
from wiseguy.core.response import OutputSpeech, ResponseDescriptor
from wiseguy.core.state import SessionState, create_empty_state
from wiseguy.core.types import Intent, SpeechMode
from wiseguy.dm.engine import stage_name
from wiseguy.framework import WiseGuyApp

BANNER_ART = r"""
 __      ___           ___
 \ \    / (_)___ ___  / __|_  _ _  _
  \ \/\/ /| (_-</ -_)| (_ | || | || |
   \_/\_/ |_/__/\___| \___|\_,_|\_, |
                                |__/
"""

INTENT_ALIASES: dict[str, Intent] = {
    "joke": Intent.START_JOKE,
    "tell me a joke": Intent.START_JOKE,
    "who": Intent.WHOS_THERE,
    "who's there": Intent.WHOS_THERE,
    "whos there": Intent.WHOS_THERE,
    "punch": Intent.DELIVER_PUNCHLINE,
    "punchline": Intent.DELIVER_PUNCHLINE,
    "why": Intent.DELIVER_PUNCHLINE,
    "help": Intent.HELP,
    "stop": Intent.STOP,
    "cancel": Intent.CANCEL,
}


def parse_intent(user_input: str) -> Intent:
    """
    Map console input to an intent.

    Raises:
        IntentError: If the input names no intent
    """
    text = user_input.strip().lower()
    if text in INTENT_ALIASES:
        return INTENT_ALIASES[text]
    for intent in Intent:
        if intent.value.lower() == text:
            return intent
    raise IntentError(f"Unknown intent: {user_input!r}")


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    config_path: Path
    session_id: str | None = None
    seed: int | None = None
    show_state: bool = False
    debug: bool = False


class ChatRunner:
    """Interactive chat session runner."""

    def __init__(self, config: ChatConfig, console: Console | None = None):
        """Initialize chat runner.

        Args:
            config: Chat configuration
            console: Console to print to (a fresh one by default)
        """
        self.config = config
        self.console = console or Console()
        self.skill_app: WiseGuyApp | None = None
        self.session_id = config.session_id or f"cli_{uuid.uuid4().hex[:6]}"
        self.state: SessionState = create_empty_state()

    def setup(self) -> None:
        """Load configuration and build the skill.

        Raises:
            ConfigError: If config is invalid
        """
        try:
            wiseguy_config = ConfigLoader.load(self.config.config_path)
        except ConfigError as e:
            self.console.print(f"[red]Invalid config: {e}[/]")
            raise

        if self.config.seed is not None:
            wiseguy_config.settings.random_seed = self.config.seed

        self.skill_app = WiseGuyApp(wiseguy_config)

    def start(self) -> None:
        """Start the interactive session."""
        if self.skill_app is None:
            self.setup()

        self.console.print(BANNER_ART, style="bold magenta")
        self.console.print(f"Session ID: [green]{self.session_id}[/]")
        self.console.print(
            "Intents: " + ", ".join(sorted(INTENT_ALIASES)) + ". Type 'exit' or 'quit' to end.\n"
        )

        while True:
            try:
                user_input = Prompt.ask("[bold green]Doctor[/]", console=self.console)
            except (KeyboardInterrupt, EOFError):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if self._is_exit_command(user_input):
                self.console.print("\n[yellow]Goodbye![/]")
                break

            if not user_input.strip():
                continue

            try:
                self.turn(parse_intent(user_input))
            except IntentError as e:
                self.console.print(f"[red]{e}[/]")
            except Exception as e:
                if self.config.debug:
                    self.console.print_exception()
                else:
                    self.console.print(f"[red]Error: {e}[/]")

    def turn(self, intent: Intent) -> ResponseDescriptor:
        """Run one intent and print the response."""
        if self.skill_app is None:
            self.setup()
        response = self.skill_app.handle(intent, self.state)
        self.render(response)

        if response.terminal:
            # The platform drops the session after a terminal response
            self.state = create_empty_state()
            self.session_id = f"cli_{uuid.uuid4().hex[:6]}"
            self.console.print(f"[dim]Session ended. New session: {self.session_id}[/]\n")
        elif self.config.show_state:
            self.console.print(f"[dim]stage: {stage_name(self.state.stage)}[/]")
        return response

    def render(self, response: ResponseDescriptor) -> None:
        self.console.print(f"[bold magenta]Patient > [/]{self._speech(response.speech)}")
        if response.card is not None:
            self.console.print(
                Panel(escape(response.card.content), title=escape(response.card.title), expand=False)
            )
        if response.reprompt is not None and self.config.show_state:
            self.console.print(f"[dim]reprompt: {self._speech(response.reprompt)}[/]")
        self.console.print()

    @staticmethod
    def _speech(speech: OutputSpeech) -> str:
        text = escape(speech.text)
        return f"[cyan]{text}[/]" if speech.mode == SpeechMode.SSML else text

    def _is_exit_command(self, user_input: str) -> bool:
        """Check if input is an exit command."""
        return user_input.strip().lower() in ("quit", "exit", "q", "/quit", "/exit")


def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive chat session.

    Args:
        config: Chat configuration
    """
    runner = ChatRunner(config)
    runner.setup()
    runner.start()
