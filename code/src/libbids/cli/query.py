"""Table query CLI commands."""

import json
from typing import IO, List, NoReturn, Optional

import click

from libbids.catalog import NA, Table, TableFormatError
from libbids.metadata import JSONMappingError, load_json_mapping
from libbids.query import (
    QueryError,
    TableCursor,
    attach_json_sidecars,
    column_values,
    drop_na_columns,
    filter_table,
    parse_row_filter,
)

table_argument = click.argument("table", type=click.File("r", encoding="utf-8"), default="-")


def _split_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated option value, dropping empty items."""
    if not value:
        return []
    return [item for item in value.split(",") if item]


def _fail(ctx: click.Context, error: Exception) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


@click.command(name="filter")
@table_argument
@click.option("--columns", "-c", help="Comma-separated column names or 1-based indices to keep")
@click.option(
    "--row-filter",
    "-r",
    "row_filters",
    multiple=True,
    help="column:pattern; keep rows whose cell matches the regex (repeatable, AND-combined)",
)
@click.option("--drop-na", "-d", help="Comma-separated columns in which NA rejects the row")
@click.pass_context
def filter_cmd(
    ctx: click.Context,
    table: IO[str],
    columns: Optional[str],
    row_filters: tuple[str, ...],
    drop_na: Optional[str],
) -> None:
    """Select columns and filter rows of TABLE.

    \b
    Examples:
        libbids filter catalog.csv -c subject,session,path -r task:rest -d run
        libbids catalog /data/ds | libbids filter -r 'suffix:^bold$'
    """
    try:
        result = filter_table(
            Table.from_csv(table.read()),
            columns=_split_list(columns),
            row_filters=[parse_row_filter(spec) for spec in row_filters],
            drop_na=_split_list(drop_na),
        )
        click.echo(result.to_csv(), nl=False)
    except (QueryError, TableFormatError) as e:
        _fail(ctx, e)


@click.command(name="drop-na")
@table_argument
@click.pass_context
def drop_na(ctx: click.Context, table: IO[str]) -> None:
    """Remove columns of TABLE that hold only NA."""
    try:
        click.echo(drop_na_columns(Table.from_csv(table.read())).to_csv(), nl=False)
    except TableFormatError as e:
        _fail(ctx, e)


@click.command()
@table_argument
@click.argument("column")
@click.option("--unique/--all", default=True, help="Drop repeated values", show_default=True)
@click.option(
    "--exclude-na/--include-na", default=True, help="Leave out NA values", show_default=True
)
@click.pass_context
def unique(ctx: click.Context, table: IO[str], column: str, unique: bool, exclude_na: bool) -> None:
    """Print the values of COLUMN in TABLE, one per line.

    \b
    Example:
        libbids unique catalog.csv subject
    """
    try:
        values = column_values(
            Table.from_csv(table.read()), column, unique=unique, exclude_na=exclude_na
        )
    except (QueryError, TableFormatError) as e:
        _fail(ctx, e)
    for value in values:
        click.echo(NA if value is None else value)


@click.command()
@table_argument
@click.pass_context
def sidecars(ctx: click.Context, table: IO[str]) -> None:
    """Fold JSON sidecar rows of TABLE into a json_path column."""
    try:
        click.echo(attach_json_sidecars(Table.from_csv(table.read())).to_csv(), nl=False)
    except (QueryError, TableFormatError) as e:
        _fail(ctx, e)


@click.command()
@table_argument
@click.option(
    "--sort", "-s", "sort_columns", multiple=True, help="Sort column, primary first (repeatable)"
)
@click.option("--reverse", "-r", is_flag=True, help="Sort in descending order")
@click.pass_context
def iterate(
    ctx: click.Context, table: IO[str], sort_columns: tuple[str, ...], reverse: bool
) -> None:
    """Print the rows of TABLE as JSON lines in version-sorted order.

    Without --sort, rows are ordered by all columns left to right.

    \b
    Example:
        libbids iterate catalog.csv -s subject -s session
    """
    try:
        cursor = TableCursor(Table.from_csv(table.read()), sort_columns=sort_columns, reverse=reverse)
    except (QueryError, TableFormatError) as e:
        _fail(ctx, e)
    for row in cursor:
        click.echo(json.dumps(row))


@click.command(name="json")
@click.argument("json_file", type=click.Path(dir_okay=False))
@click.pass_context
def json_cmd(ctx: click.Context, json_file: str) -> None:
    """Print the top-level keys of JSON_FILE as key=type:value lines."""
    try:
        mapping = load_json_mapping(json_file)
    except JSONMappingError as e:
        _fail(ctx, e)
    for key, value in mapping.items():
        click.echo(f"{key}={value}")
