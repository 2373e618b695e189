"""In-memory tables and their comma-separated text format.

Cells hold ``None`` for absent values; the literal ``NA`` is only used in
the text form. The text form has no quoting, so cells must not contain
commas or line breaks.
"""

import csv
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

NA = "NA"

Cell = Optional[str]
Row = Tuple[Cell, ...]


class TableFormatError(Exception):
    """Raised when table text is malformed or a cell cannot be represented."""

    pass


def to_text(value: Cell) -> str:
    """Convert a cell to its text form, using 'NA' for None."""
    if value is None:
        return NA
    return value


def from_text(value: str) -> Cell:
    """Convert a text field to a cell, mapping 'NA' to None."""
    if value == NA:
        return None
    return value


@dataclass(frozen=True)
class Table:
    """Immutable table: a header and fixed-width rows.

    Attributes:
        columns: Header names
        rows: Data rows, each exactly len(columns) cells long
    """

    columns: Tuple[str, ...]
    rows: Tuple[Row, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))
        width = len(self.columns)
        for number, row in enumerate(self.rows, start=1):
            if len(row) != width:
                raise TableFormatError(
                    f"Row {number} has {len(row)} fields, expected {width}"
                )

    def __len__(self) -> int:
        return len(self.rows)

    def records(self) -> Iterator[Dict[str, Cell]]:
        """Iterate over rows as column-name to cell mappings."""
        for row in self.rows:
            yield dict(zip(self.columns, row))

    @classmethod
    def from_records(cls, columns: Sequence[str], records: Sequence[Dict[str, Any]]) -> "Table":
        """Build a table from mappings; missing keys become None."""
        rows = [tuple(record.get(column) for column in columns) for record in records]
        return cls(columns=tuple(columns), rows=tuple(rows))

    @classmethod
    def from_csv(cls, text: str) -> "Table":
        """Parse comma-separated text (header first, 'NA' for absence).

        Raises:
            TableFormatError: If there is no header or a row has the wrong width
        """
        reader = csv.reader(io.StringIO(text), delimiter=",", quoting=csv.QUOTE_NONE)
        lines = [line for line in reader if line]
        if not lines:
            raise TableFormatError("Table has no header row")

        header, data = lines[0], lines[1:]
        rows = []
        for number, line in enumerate(data, start=2):
            if len(line) != len(header):
                raise TableFormatError(
                    f"Line {number} has {len(line)} fields, expected {len(header)}"
                )
            rows.append(tuple(from_text(field) for field in line))

        return cls(columns=tuple(header), rows=tuple(rows))

    def to_csv(self) -> str:
        """Render as comma-separated text with a trailing newline.

        Raises:
            TableFormatError: If a header name or cell contains a comma or line break
        """
        output = io.StringIO()
        writer = csv.writer(output, delimiter=",", quoting=csv.QUOTE_NONE, quotechar=None, lineterminator="\n")
        try:
            writer.writerow(_checked(self.columns))
            for row in self.rows:
                writer.writerow(_checked(to_text(cell) for cell in row))
        except csv.Error as e:
            raise TableFormatError(f"Cannot render table: {e}") from e
        return output.getvalue()


def _checked(fields: Any) -> List[str]:
    fields = list(fields)
    for field in fields:
        if any(c in field for c in ",\n\r"):
            raise TableFormatError(f"Cannot represent value without quoting: {field!r}")
    return fields


def read_table(input_path: Union[str, Path]) -> Table:
    """Read a table from a comma-separated file.

    Args:
        input_path: Path to input file

    Returns:
        Parsed Table
    """
    with open(input_path, newline="", encoding="utf-8") as f:
        return Table.from_csv(f.read())


def write_table(table: Table, output_path: Union[str, Path]) -> None:
    """Write a table to a comma-separated file.

    Args:
        table: Table to write
        output_path: Path to output file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    text = table.to_csv()
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        f.write(text)
