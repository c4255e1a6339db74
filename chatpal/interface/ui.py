"""
Terminal UI for the chat session, built on Rich.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from chatpal import __version__
from chatpal.core.config import BotConfig


def render_reply(text: str) -> Text:
    """
    Lay out a model reply for the terminal.

    Paragraphs are separated by one blank line. Markdown-style headings get
    their own colour; every other line is indented by two spaces.
    """
    out = Text()
    for i, para in enumerate(text.split("\n\n")):
        if i > 0:
            out.append("\n")
        for line in para.split("\n"):
            if line.startswith("###"):
                out.append(line.replace("###", "  "), style="bold blue")
            elif line.startswith("##"):
                out.append("\n")
                out.append(line.replace("##", ""), style="bold magenta")
            elif line.startswith("#"):
                out.append("\n")
                out.append(line.replace("#", ""), style="bold yellow")
            else:
                out.append(f"  {line}")
            out.append("\n")
    return out


class ChatUI:
    """Rich console output for one session."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def banner(self, config: BotConfig):
        self.console.print(Panel(
            f"[bold cyan]{escape(config.name)}[/bold cyan] [yellow]v{__version__}[/yellow]\n"
            f"[dim]User: {escape(config.username)} | Model: {escape(config.model)} | "
            f"Memory: {config.max_history} exchanges[/dim]",
            border_style="cyan", padding=(1, 2),
        ))
        self.info("  Type /exit to quit, /save to save the conversation.")
        self.console.print()

    def info(self, text):
        self.console.print(f"[dim]{escape(text)}[/dim]")

    def success(self, text):
        self.console.print(f"[bold green]{escape(text)}[/bold green]")

    def error(self, text):
        self.console.print(f"[bold red]{escape(text)}[/bold red]")

    def warning(self, text):
        self.console.print(f"[yellow]{escape(text)}[/yellow]")

    def prompt(self, label: str) -> str:
        return self.console.input(f"\n[bold blue]{escape(label)}[/bold blue]: ")

    @contextmanager
    def thinking(self, config: BotConfig) -> Iterator[None]:
        with self.console.status(
            f"[bold green]{escape(config.name)} is thinking... [dim]({escape(config.model)})[/dim]",
            spinner="dots",
        ):
            yield

    def reply(self, name: str, text: str):
        self.console.print(f"\n[bold green]{escape(name)}[/bold green]:")
        self.console.print(render_reply(text), end="")

    def token_usage(self, tokens: int, max_tokens: int):
        self.console.print(f"\n[yellow]Tokens used: {tokens}[/yellow][dim]/{max_tokens}[/dim]")
