from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Set

from tablehead.columns import ColumnSchema
from tablehead.resolver import map_indices

if TYPE_CHECKING:
    from tablehead.rows import LabelSource
    from tablehead.schema import Schema


def customize(schema: "Schema", specs: Sequence[str], wide: bool = False) -> "Schema":
    """
    Build the schema to display for a list of requested column specs.

    Requested columns come first, in request order, and are never wide.
    Specs that match no column become bare columns named after their
    custom name. In wide mode the remaining original columns follow,
    flagged wide.

    The extraction bag is not returned; callers rendering synthesized
    columns resolve it again with ``map_indices``.
    """
    if not specs:
        return schema

    _, bag = map_indices(schema, specs, wide)

    columns: List[ColumnSchema] = []
    consumed: Set[int] = set()
    for i, spec in enumerate(specs):
        idx, ok = schema.index_of(spec, True)
        if not ok:
            info = bag.get(i)
            columns.append(ColumnSchema(name=info.custom_name if info else ""))
            continue
        consumed.add(idx)
        columns.append(schema[idx].with_wide(False))

    if wide:
        for i, col in enumerate(schema):
            if i in consumed:
                continue
            columns.append(col.with_wide(True))

    return schema.derive(columns)


def labelize(
    schema: "Schema",
    column_indices: Sequence[int],
    label_column_index: int,
    row_source: "LabelSource",
) -> "Schema":
    """Select columns by index, then add one column per discovered label key."""
    columns = [schema[c] for c in column_indices]
    for key in row_source.extract_header_labels(label_column_index):
        columns.append(ColumnSchema(name=key))
    return schema.derive(columns)
