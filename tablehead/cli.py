import json
import logging
import os
from typing import Optional, Sequence

import fire

from tablehead.columns import ColumnSchema
from tablehead.configuration import TableheadConfig
from tablehead.schema import Schema


def _disable_fire_pager() -> None:
    if "PAGER" not in os.environ:
        os.environ["PAGER"] = "cat"


def _split(value) -> list[str]:
    """Fire hands over comma lists as tuples or as a single string."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [v.strip() for v in str(value).split(",") if v.strip()]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        force=True,
    )


def _build_schema(columns: Sequence[str], wide_columns: Sequence[str] = ()) -> Schema:
    wide = set(wide_columns)
    return Schema(ColumnSchema(name=c, wide=c in wide) for c in columns)


def _emit(names: list[str], as_json: bool):
    if as_json:
        return json.dumps(names)
    return names


def header(
    columns,
    specs=None,
    wide_columns=None,
    wide: bool = False,
    json: bool = False,
    logging_level: str = "WARNING",
):
    """
    Print the column names of a customized header.

    Example:
        tablehead header --columns=NAME,AGE,LABELS --specs="NAME,grp: LABELS[app]"
    """
    cfg = TableheadConfig(LOGGING_LEVEL=logging_level.upper(), WIDE=wide)
    _configure_logging(cfg.LOGGING_LEVEL)
    schema = _build_schema(_split(columns), _split(wide_columns))
    out = schema.customize(_split(specs), cfg.WIDE)
    return _emit(out.column_names(True), json)


def views(
    config: str,
    resource: str,
    columns,
    wide_columns=None,
    wide: bool = False,
    json: bool = False,
    logging_level: str = "WARNING",
):
    """
    Apply the view configured for a resource to a header.
    """
    cfg = TableheadConfig(
        LOGGING_LEVEL=logging_level.upper(), VIEWS_FILE=config, WIDE=wide
    )
    _configure_logging(cfg.LOGGING_LEVEL)
    schema = _build_schema(_split(columns), _split(wide_columns))
    out = cfg.load_views().customize(resource, schema, cfg.WIDE)
    return _emit(out.column_names(True), json)


def main(argv: Optional[Sequence[str]] = None):
    _disable_fire_pager()
    fire.Fire({"header": header, "views": views}, command=argv)


if __name__ == "__main__":
    main()
