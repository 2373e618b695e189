"""Main CLI entry point for libbids."""

import logging
from typing import List, Optional

import click

from libbids import __version__
from libbids.cli.catalog import catalog as catalog_cmd
from libbids.cli.catalog import init as init_cmd
from libbids.cli.catalog import pattern as pattern_cmd
from libbids.cli.query import drop_na as drop_na_cmd
from libbids.cli.query import filter_cmd
from libbids.cli.query import iterate as iterate_cmd
from libbids.cli.query import json_cmd
from libbids.cli.query import sidecars as sidecars_cmd
from libbids.cli.query import unique as unique_cmd
from libbids.config import ConfigLoadError, load_config

_installed_handlers: List[logging.Handler] = []


def configure_logging(log_level: str, log_file: Optional[str] = None) -> None:
    """Send log records to stderr and, optionally, to a file.

    Args:
        log_level: Level name for the console handler
        log_file: File receiving DEBUG and above, if given
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers installed by an earlier invocation in the same process
    for handler in list(root_logger.handlers):
        if handler in _installed_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    _installed_handlers.clear()

    # Console handler writes to stderr so stdout only carries results
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    _installed_handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        root_logger.addHandler(handler)


@click.group()
@click.version_option(version=__version__, prog_name="libbids")
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file path [default: .libbids/config.yaml if present]",
)
@click.option(
    "--custom-dir",
    "custom_dirs",
    multiple=True,
    type=click.Path(file_okay=False),
    help="Directory with custom entity/suffix definitions (replaces configured ones)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Console logging level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write DEBUG logs to this file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    custom_dirs: tuple[str, ...],
    log_level: str,
    log_file: Optional[str],
) -> None:
    """libbids: Catalog and query BIDS datasets as comma-separated tables.

    Tables use a header row, 'NA' for missing values and no quoting.
    Commands reading a table take a file path or '-' for stdin.
    """
    configure_logging(log_level, log_file)

    try:
        cfg = load_config(config)
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if custom_dirs:
        cfg = cfg.model_copy(update={"custom_dirs": list(custom_dirs)})

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


# Register commands
cli.add_command(init_cmd, name="init")
cli.add_command(catalog_cmd, name="catalog")
cli.add_command(pattern_cmd, name="pattern")
cli.add_command(filter_cmd, name="filter")
cli.add_command(drop_na_cmd, name="drop-na")
cli.add_command(unique_cmd, name="unique")
cli.add_command(sidecars_cmd, name="sidecars")
cli.add_command(iterate_cmd, name="iterate")
cli.add_command(json_cmd, name="json")


if __name__ == "__main__":
    cli()
