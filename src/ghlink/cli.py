"""CLI for ghlink."""

import sys
from pathlib import Path

import click
import structlog

from ghlink import __version__
from ghlink.config.logging import configure_logging
from ghlink.config.settings import get_settings
from ghlink.core.exceptions import FileReadError, GhlinkError, InvalidQueryError
from ghlink.core.models.query import query_from_options
from ghlink.services.linking import LinkService

logger = structlog.get_logger(__name__)

STDIN_SENTINEL = "-"


def read_search_text(search: str | None) -> str | None:
    """Replace the stdin sentinel with everything read from standard input."""
    if search != STDIN_SENTINEL:
        return search
    try:
        return click.get_text_stream("stdin").read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"cannot read standard input: {e}") from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", type=click.Path(path_type=Path))
@click.option("-l1", "--line1", type=click.IntRange(min=1), help="Start line number")
@click.option("-l2", "--line2", type=click.IntRange(min=1), help="End line number (requires -l1)")
@click.option(
    "-s",
    "--search",
    help="Link to the lines matching TEXT; '-' reads the text from standard input",
    metavar="TEXT",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(__version__, prog_name="ghlink")
def cli(
    path: Path,
    line1: int | None,
    line2: int | None,
    search: str | None,
    verbose: bool,
) -> None:
    """Print a permanent link to PATH at the current commit.

    \b
    ghlink FILE                     link to FILE
    ghlink -l1 3 FILE               link to line 3
    ghlink -l1 3 -l2 8 FILE         link to lines 3 through 8
    ghlink -s 'text' FILE           link to the lines matching text
    """
    settings = get_settings()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )

    try:
        query = query_from_options(line1=line1, line2=line2, search=search)
    except InvalidQueryError as e:
        raise click.UsageError(e.message) from e

    try:
        if query.kind == "search":
            query = query_from_options(search=read_search_text(query.pattern))
        url = LinkService(settings).create_link(query, path)
    except InvalidQueryError as e:
        raise click.UsageError(e.message) from e
    except GhlinkError as e:
        logger.debug("Link creation failed", error=type(e).__name__, **e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(url)


if __name__ == "__main__":
    cli()
