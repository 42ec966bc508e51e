import polars as pl

from tablehead.columns import ColumnSchema
from tablehead.rows import RowTable, parse_labels
from tablehead.schema import Schema


def _table():
    return RowTable.from_rows(
        ["NAME", "AGE", "LABELS"],
        [
            ["api", "3d", "app=web,tier=front"],
            ["db", "10d", "app=pg,zone=eu"],
            ["job", "1h", ""],
        ],
    )


def test_parse_labels():
    assert parse_labels("app=web,tier=front") == {"app": "web", "tier": "front"}
    assert parse_labels(" a = 1 , junk, b=x=y") == {"a": "1", "b": "x=y"}
    assert parse_labels("") == {}
    assert parse_labels(None) == {}


def test_extract_header_labels_sorted_distinct():
    table = _table()
    assert table.extract_header_labels(2) == ["app", "tier", "zone"]
    assert table.extract_header_labels(0) == []
    assert table.extract_header_labels(7) == []
    assert table.extract_header_labels(-1) == []


def test_row_table_feeds_labelize():
    schema = Schema([ColumnSchema("NAME"), ColumnSchema("AGE"), ColumnSchema("LABELS")])
    out = schema.labelize([0], 2, _table())
    assert out.column_names(True) == ["NAME", "app", "tier", "zone"]


def test_project_customized_rows():
    schema = Schema([ColumnSchema("NAME"), ColumnSchema("AGE"), ColumnSchema("LABELS")])
    specs = ["NAME", "grp: LABELS[app]", "UNKNOWN", "AGE"]
    indices, bag = schema.map_indices(specs)
    frame = _table().project(indices, bag)
    assert isinstance(frame, pl.DataFrame)
    assert frame.width == len(schema.customize(specs, False))
    assert frame.rows() == [
        ("api", "web", "", "3d"),
        ("db", "pg", "", "10d"),
        ("job", "", "", "1h"),
    ]


def test_project_label_spec_without_labels_column():
    table = RowTable.from_rows(["NAME"], [["a"], ["b"]])
    schema = Schema([ColumnSchema("NAME")])
    indices, bag = schema.map_indices(["LABELS[app]"])
    frame = table.project(indices, bag)
    assert frame.rows() == [("",), ("",)]
