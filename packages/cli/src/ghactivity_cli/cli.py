"""CLI entry point for gh-activity.

Usage:
  gh-activity USERNAME   print a summary of USERNAME's recent public GitHub activity
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from ghactivity_core.errors import ActivityError
from ghactivity_core.feed import write_feed
from ghactivity_core.gh.events import fetch_events, get_client

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.command()
@click.version_option(
    version=importlib.metadata.version("gh-activity"),
    prog_name="gh-activity",
)
@click.argument("username")
@click.option(
    "--config",
    "config_path",
    default=".ghactivity.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="GHACTIVITY_CONFIG",
)
@click.option(
    "--per-page",
    type=click.IntRange(1, 100),
    default=None,
    help="Number of events to request. Overrides config file.",
)
@click.option("--anonymous", is_flag=True, help="Do not send a GitHub token, even if one is available.")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and decoding details to stderr.")
def main(username: str, config_path: str, per_page: int | None, anonymous: bool, verbose: bool):
    """Print a user's recent GitHub activity.

    Fetches the public events of USERNAME and prints one summary line per
    event, most recent first.

    \b
    Optional environment variables:
      GITHUB_TOKEN         GitHub token (or use gh CLI); raises the API rate limit
      GHACTIVITY_CONFIG    Path to the configuration file
    """
    from ghactivity_core.config import load_config
    from ghactivity_cli.auth import resolve_github_token

    _configure_logging(verbose)

    try:
        config = load_config(config_path, cli_overrides={"per_page": per_page})
    except (ValueError, OSError) as e:
        raise click.ClickException(f"Could not load {config_path}: {e}")

    token = None if anonymous else (config.get("github_token") or resolve_github_token())
    client = get_client(token, base_url=config["api_url"], timeout=config["timeout"])

    try:
        events = fetch_events(client, username, per_page=config["per_page"])
        write_feed(username, events, click.get_text_stream("stdout"))
    except ActivityError as e:
        logger.debug("Aborting report for %s: %r", username, e)
        raise click.ClickException(str(e))
