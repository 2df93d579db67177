"""CLI entry point for agent-session-handoff.

Invoked as::

    agent-session-handoff [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m agent_session_handoff.cli.main

The commands run the offline parts of the pipeline so templates, titles,
and classification rules can be inspected without a host.

Commands
--------
- version   — Show version information
- classify  — Print the category of a goal
- title     — Print the session title derived from a goal
- prompts   — Print the system and user instructions for a goal
- refs      — List the @file references found in text
- settings  — Show the effective settings
"""
from __future__ import annotations

import logging
import sys
from typing import IO

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_session_handoff.handoff.category import HandoffCategory
from agent_session_handoff.handoff.classifier import classify
from agent_session_handoff.handoff.references import extract_file_references
from agent_session_handoff.handoff.settings import HandoffSettings
from agent_session_handoff.handoff.templates import build_system_prompt, build_user_prompt
from agent_session_handoff.handoff.titles import derive_session_title

console = Console()

_CATEGORY_CHOICE = click.Choice([c.value for c in HandoffCategory], case_sensitive=False)


def _resolve_category(goal: str, category: str | None) -> HandoffCategory:
    return HandoffCategory.parse(category) if category else classify(goal)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="agent-session-handoff")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with handoff settings.",
)
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Session handoff tooling"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.ensure_object(dict)
    try:
        settings = HandoffSettings.from_yaml(config_path) if config_path else HandoffSettings()
    except (ValueError, TypeError) as exc:
        console.print(f"[red]Invalid settings:[/red] {exc}")
        sys.exit(1)
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from agent_session_handoff import __version__

    console.print(f"[bold]agent-session-handoff[/bold] v{__version__}")


# ---------------------------------------------------------------------------
# classify / title / prompts
# ---------------------------------------------------------------------------


@cli.command(name="classify")
@click.argument("goal")
def classify_command(goal: str) -> None:
    """Print the handoff category of GOAL."""
    console.print(classify(goal).value)


@cli.command(name="title")
@click.argument("goal")
@click.option("--category", default=None, type=_CATEGORY_CHOICE, help="Override the category.")
@click.pass_context
def title_command(ctx: click.Context, goal: str, category: str | None) -> None:
    """Print the session title derived from GOAL."""
    settings: HandoffSettings = ctx.obj["settings"]
    resolved = _resolve_category(goal, category)
    console.print(
        derive_session_title(
            goal,
            resolved,
            max_length=settings.title_max_length,
            prefixes=settings.title_prefixes,
            fillers=settings.filler_prefixes,
        ),
        markup=False,
    )


@cli.command(name="prompts")
@click.argument("goal")
@click.option("--category", default=None, type=_CATEGORY_CHOICE, help="Override the category.")
def prompts_command(goal: str, category: str | None) -> None:
    """Print the instructions that would be sent for GOAL."""
    goal = goal.strip()
    if not goal:
        console.print("[red]Goal must not be empty.[/red]")
        sys.exit(1)
    resolved = _resolve_category(goal, category)
    console.print(
        Panel(Text(build_system_prompt(resolved)), title=f"system ({resolved.value})", expand=False)
    )
    console.print(Panel(Text(build_user_prompt(goal, resolved)), title="user", expand=False))


# ---------------------------------------------------------------------------
# refs
# ---------------------------------------------------------------------------


@cli.command(name="refs")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
def refs_command(source: IO[str]) -> None:
    """List the @file references in SOURCE (a file, or stdin)."""
    references = extract_file_references(source.read())
    if not references:
        console.print("[yellow]No file references found.[/yellow]")
        return
    for path in references:
        console.print(path, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# settings
# ---------------------------------------------------------------------------


@cli.command(name="settings")
@click.pass_context
def settings_command(ctx: click.Context) -> None:
    """Show the effective handoff settings."""
    settings: HandoffSettings = ctx.obj["settings"]
    table = Table(title="Handoff settings", show_lines=False)
    table.add_column("Setting", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for name, value in settings.to_dict().items():
        table.add_row(name, Text(repr(value)))
    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    cli()
