"""
tablehead: column schema model for terminal resource listings.
"""

from .columns import AGE_COLUMN, Align, ColumnSchema
from .grammar import LABELS_HEADER, ColumnSpec, is_synthesized_spec, parse_column_spec
from .resolver import NOT_FOUND, ExtractionInfo, ExtractionInfoBag, map_indices
from .customize import customize, labelize
from .schema import Schema
from .rows import LabelSource, RowTable, parse_labels
from .configuration import TableheadConfig, ViewSetting, ViewsConfig, load_views_config

__all__ = [
    "AGE_COLUMN",
    "Align",
    "ColumnSchema",
    "LABELS_HEADER",
    "ColumnSpec",
    "is_synthesized_spec",
    "parse_column_spec",
    "NOT_FOUND",
    "ExtractionInfo",
    "ExtractionInfoBag",
    "map_indices",
    "customize",
    "labelize",
    "Schema",
    "LabelSource",
    "RowTable",
    "parse_labels",
    "TableheadConfig",
    "ViewSetting",
    "ViewsConfig",
    "load_views_config",
]
