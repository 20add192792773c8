"""text-to-sql-proxy CLI - Main entry point."""

import logging

import click

from text_to_sql_proxy import __version__

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@click.group()
@click.version_option(version=__version__, prog_name="text-to-sql-proxy")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """text-to-sql-proxy - runtime configuration tools.

    Settings are read from TEXT_TO_SQL_PROXY_* environment variables.
    """
    _setup_logging(verbose)


from .config_commands import config  # noqa: E402

cli.add_command(config)


if __name__ == "__main__":
    cli()
