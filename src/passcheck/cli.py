"""
passcheck CLI - terminal front-end for hints and breach checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import json
import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.status import Status
from rich.table import Table

from passcheck import __version__
from passcheck.checker import build_checker
from passcheck.client import PwnedPasswordsClient
from passcheck.config import PasscheckConfig
from passcheck.exceptions import NetworkError, ValidationError
from passcheck.hints import evaluate_hints
from passcheck.models import Verdict
from passcheck.session import CheckerSession

console = Console()

EXIT_ERROR = 1
EXIT_BREACHED = 2


def verdict_text(verdict: Verdict) -> str:
    """Get rich markup for a verdict."""
    labels = {
        Verdict.UNKNOWN: "[dim]Not checked[/dim]",
        Verdict.CLEAN: "[green]✅ Safe Password[/green]",
        Verdict.BREACHED: "[bold red]⚠️ Compromised Password[/bold red]",
    }
    return labels[verdict]


def print_hints(hints: list[str], out: Console = console) -> None:
    if not hints:
        out.print("[green]No hints - looks strong.[/green]")
        return
    out.print("[bold]Hints:[/bold]")
    for hint in hints:
        out.print(f"  • {hint}")


class ConsoleEffects:
    """Shows session updates on a rich console."""

    def __init__(self, out: Console):
        self.console = out
        self._status: Status | None = None

    def display_hints(self, hints: list[str]) -> None:
        print_hints(hints, self.console)

    def display_verdict(self, verdict: Verdict) -> None:
        if verdict != Verdict.UNKNOWN:
            self.console.print(verdict_text(verdict))

    def notify_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def notify_success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")

    def notify_loading(self, message: str) -> None:
        self.notify_dismiss()
        self._status = self.console.status(message)
        self._status.start()

    def notify_dismiss(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None


def _read_password(password: str | None) -> str:
    if password is None:
        password = click.prompt("Password to check", hide_input=True, default="", show_default=False)
    return password


@click.group()
@click.version_option(version=__version__, prog_name="passcheck")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """passcheck - password strength hints and breach checking.

    Breach checks use the Pwned Passwords range API with k-anonymity:
    only the first 5 characters of the SHA-1 hash are sent.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = PasscheckConfig.from_env()


@main.command("hints")
@click.argument("password", required=False)
def show_hints(password: str | None) -> None:
    """Show improvement hints for a password.

    Nothing is sent over the network.

    Example:
        passcheck hints
    """
    print_hints(evaluate_hints(_read_password(password)))


@main.command("check")
@click.option("--password", "-p", help="Password to check (or prompts securely)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def check_password(ctx: click.Context, password: str | None, json_output: bool) -> None:
    """Check if a password has been exposed in data breaches.

    Exit status is 0 when clean, 2 when breached and 1 on error.

    Example:
        passcheck check
        passcheck check --json
    """
    config: PasscheckConfig = ctx.obj["config"]
    password = _read_password(password)
    hints = evaluate_hints(password)

    async def _check():
        async with PwnedPasswordsClient(config) as client:
            return await build_checker(config, client).check(password)

    try:
        with Status("Checking password...", console=console):
            result = asyncio.run(_check())
    except ValidationError as e:
        console.print(f"[red]{e.message}[/red]")
        raise SystemExit(EXIT_ERROR)
    except NetworkError:
        console.print(f"[red]{NetworkError.DEFAULT_MESSAGE}[/red]")
        raise SystemExit(EXIT_ERROR)

    if json_output:
        click.echo(json.dumps({"hints": hints, "result": result.to_dict()}, indent=2))
    else:
        print_hints(hints)
        console.print(Panel(verdict_text(result.verdict), title="Password Check Result"))

    if result.is_breached:
        raise SystemExit(EXIT_BREACHED)


@main.command("interactive")
@click.pass_context
def interactive(ctx: click.Context) -> None:
    """Check passwords one after another.

    Enter an empty password to quit.
    """
    config: PasscheckConfig = ctx.obj["config"]

    async def _run():
        async with PwnedPasswordsClient(config) as client:
            session = CheckerSession(build_checker(config, client), ConsoleEffects(console))
            while True:
                pwd = click.prompt(
                    "Password (empty to quit)",
                    hide_input=True,
                    default="",
                    show_default=False,
                )
                if not pwd:
                    return
                session.set_password(pwd)
                await session.check()

    asyncio.run(_run())


@main.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show effective configuration."""
    config: PasscheckConfig = ctx.obj["config"]

    table = Table(title="passcheck Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("API Base URL", config.api_base)
    table.add_row("User-Agent", config.user_agent)
    table.add_row("Timeout", f"{config.timeout}s" if config.timeout else "none")
    table.add_row("Minimum Length", str(config.min_length))

    console.print(table)

    for problem in config.validate():
        console.print(f"[yellow]Warning: {problem}[/yellow]")


if __name__ == "__main__":
    main()
