"""Association of JSON sidecars with the files they describe."""

import logging
from typing import Dict, List, Tuple

from libbids.catalog.table import Cell, Table
from libbids.query.columns import MissingColumnError

logger = logging.getLogger(__name__)

JSON_PATH_COLUMN = "json_path"


def _is_json(extension: Cell) -> bool:
    return extension is not None and extension.lower().lstrip(".") == "json"


def attach_json_sidecars(table: Table) -> Table:
    """Fold JSON rows into a json_path column of the rows they describe.

    Rows are grouped by every cell except extension and path. Within a
    group, JSON rows are dropped when the group also has a non-JSON row,
    and that row gets the JSON path in json_path. A JSON row without a
    non-JSON partner stays, with its own path as json_path. Other rows get
    no json_path value.

    When several JSON rows share a group, the last one wins.

    Args:
        table: Table with extension and path columns (header match is case-insensitive)

    Returns:
        New Table with json_path appended

    Raises:
        MissingColumnError: If extension or path is absent
    """
    lowered = [column.lower() for column in table.columns]
    if "extension" not in lowered or "path" not in lowered:
        raise MissingColumnError("Required columns (extension, path) not found")
    ext_idx = lowered.index("extension")
    path_idx = lowered.index("path")

    def group_key(row: Tuple[Cell, ...]) -> Tuple[Cell, ...]:
        return tuple(cell for i, cell in enumerate(row) if i not in (ext_idx, path_idx))

    json_paths: Dict[Tuple[Cell, ...], Cell] = {}
    has_data_file = set()
    for row in table.rows:
        key = group_key(row)
        if _is_json(row[ext_idx]):
            if key in json_paths:
                logger.warning(
                    f"Several JSON sidecars for {row[path_idx]}; keeping the last one"
                )
            json_paths[key] = row[path_idx]
        else:
            has_data_file.add(key)

    rows: List[Tuple[Cell, ...]] = []
    for row in table.rows:
        key = group_key(row)
        if _is_json(row[ext_idx]):
            if key in has_data_file:
                continue
            rows.append(row + (row[path_idx],))
        else:
            rows.append(row + (json_paths.get(key),))

    return Table(columns=table.columns + (JSON_PATH_COLUMN,), rows=tuple(rows))
