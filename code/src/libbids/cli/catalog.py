"""Catalog, pattern and init CLI commands."""

from typing import Optional

import click

from libbids.catalog import CatalogError, TableFormatError, build_catalog, write_table
from libbids.config import ConfigLoadError, create_example_config, load_vocabulary
from libbids.discovery import build_discovery_pattern


@click.command()
@click.argument("root", type=click.Path(file_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the table to this file instead of stdout",
)
@click.pass_context
def catalog(ctx: click.Context, root: str, output: Optional[str]) -> None:
    """Catalog all BIDS files under ROOT.

    Prints one row per file with the columns derivatives, data_type, one
    column per entity, suffix, extension and path.

    \b
    Examples:
        libbids catalog /data/ds000001
        libbids --custom-dir ./custom catalog /data/ds000001 -o catalog.csv
    """
    cfg = ctx.obj["config"]
    try:
        table = build_catalog(root, config=cfg)
        if output:
            write_table(table, output)
            click.echo(f"✓ Cataloged {len(table)} files to {output}", err=True)
        else:
            click.echo(table.to_csv(), nl=False)
    except CatalogError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except TableFormatError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.command()
@click.option("--regex", is_flag=True, help="Print the regular expression instead of the glob")
@click.pass_context
def pattern(ctx: click.Context, regex: bool) -> None:
    """Print the filename grammar used for discovery.

    \b
    Examples:
        libbids pattern
        libbids pattern --regex
    """
    discovery_pattern = build_discovery_pattern(load_vocabulary(ctx.obj["config"]))
    click.echo(discovery_pattern.regex.pattern if regex else discovery_pattern.glob)


@click.command()
@click.option(
    "--output",
    default=".libbids/config.yaml",
    help="Where to write the example configuration",
    show_default=True,
)
@click.pass_context
def init(ctx: click.Context, output: str) -> None:
    """Write an example configuration file.

    \b
    Example:
        libbids init
    """
    try:
        create_example_config(output)
    except ConfigLoadError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(f"✓ Wrote {output}", err=True)
