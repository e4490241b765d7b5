from __future__ import annotations

import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console

from .client import GitHubClient
from .config import load_settings
from .errors import PrChangesError
from .formatters import get_formatter
from .helper import ChangeLogHelper

_stderr = Console(stderr=True)


load_dotenv()


@click.group()
def cli() -> None:
    """prchanges — collect pull requests for a changelog."""


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="YAML file with the github and labels sections.",
)
@click.option(
    "--version",
    "changelog_version",
    default="",
    help="Version the changes are recorded under.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="json",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Write output to a file instead of stdout.",
)
def fetch(
    config_path: Path,
    changelog_version: str,
    output_format: str,
    output_path: Path | None,
) -> None:
    """Fetch the changelog pull requests described by a config file."""
    try:
        settings = load_settings(config_path)
        with GitHubClient(settings.token, base_url=settings.api_url) as client:
            helper = ChangeLogHelper(
                client,
                settings.users,
                settings.repo,
                settings.labels,
                include_author=settings.include_author,
                include_link=settings.include_link,
            )
            changes = helper.get_changes(changelog_version or settings.labels.version_prefix)
    except PrChangesError as exc:
        _stderr.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    output = get_formatter(output_format)(changes)

    if output_path is not None:
        output_path.write_text(output, encoding="utf-8")
        _stderr.print(f"[green]Wrote {len(changes)} changes to {output_path}[/green]")
    else:
        click.echo(output)
