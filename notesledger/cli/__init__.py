"""
notesledger/cli/__init__.py

notesledger CLI: root Click command group.

Registered in pyproject.toml as:

    [project.scripts]
    notesledger = "notesledger.cli:cli"
"""

from pathlib import Path
from typing import Optional

import click

from notesledger.cli.notes import EXIT_ERROR, add_command, comment_command, remove_command, show_command
from notesledger.config import NotesConfig
from notesledger.core.exceptions import ConfigError
from notesledger.utils.logging_utils import configure_logging


@click.group()
@click.version_option(package_name="notesledger")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    metavar="PATH",
    help="YAML config file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """
    notesledger: keep a notes section inside a markdown document.

    \b
    Commands:
      add       Append a note
      remove    Remove the first note with a title
      comment   Apply the note command found in a comment
      show      Print the stored notes

    \b
    Quick start:
      notesledger add ISSUE.md fix-typo --author alice --comment-url https://x/1
      notesledger show ISSUE.md
    """
    try:
        config = NotesConfig.from_yaml(config_path) if config_path else NotesConfig()
    except ConfigError as e:
        click.echo(f"❌ {e}", err=True)
        ctx.exit(EXIT_ERROR)

    configure_logging(level=log_level or config.log_level, log_file=config.log_file)
    ctx.obj = {"config": config}


cli.add_command(add_command)
cli.add_command(remove_command)
cli.add_command(comment_command)
cli.add_command(show_command)
