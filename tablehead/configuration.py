from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from tablehead.schema import Schema


SORT_DIRECTIONS = ("asc", "desc")


class ViewSetting(BaseModel):
    """
    Column customization for one resource listing.
    """

    model_config = ConfigDict(populate_by_name=True)

    columns: List[str] = Field(
        default_factory=list,
        description=(
            "Column specs to display, in order. Plain names select existing "
            "columns; 'NAME: LABELS[key]' synthesizes a column from a label."
        ),
    )
    sort_column: Optional[str] = Field(
        None,
        alias="sortColumn",
        description="Initial sort column, as NAME or NAME:asc|desc.",
    )

    @field_validator("sort_column")
    @classmethod
    def _check_sort_column(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        name, _, direction = value.partition(":")
        if not name.strip():
            raise ValueError(f"Invalid sortColumn {value!r}: missing column name.")
        if direction and direction not in SORT_DIRECTIONS:
            raise ValueError(
                f"Invalid sortColumn {value!r}: direction must be one of {SORT_DIRECTIONS}."
            )
        return value

    @property
    def sort_name(self) -> Optional[str]:
        if self.sort_column is None:
            return None
        return self.sort_column.partition(":")[0].strip()

    @property
    def sort_ascending(self) -> bool:
        if self.sort_column is None:
            return True
        return self.sort_column.partition(":")[2] != "desc"


class ViewsConfig(BaseModel):
    views: Dict[str, ViewSetting] = Field(
        default_factory=dict,
        description="Per-resource view settings, keyed by resource name (e.g. 'v1/pods').",
    )

    def columns_for(self, resource: str) -> List[str]:
        setting = self.views.get(resource)
        if setting is None:
            return []
        return list(setting.columns)

    def customize(self, resource: str, schema: Schema, wide: bool = False) -> Schema:
        return schema.customize(self.columns_for(resource), wide)


class TableheadConfig(BaseModel):
    LOGGING_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level for diagnostics.",
    )
    VIEWS_FILE: Optional[str] = Field(
        None,
        description="Path to a YAML file with per-resource view settings.",
    )
    WIDE: bool = Field(
        False,
        description="Show wide columns after the requested ones.",
    )

    def load_views(self) -> ViewsConfig:
        if not self.VIEWS_FILE:
            return ViewsConfig()
        return load_views_config(self.VIEWS_FILE)


def _load_yaml(path: str | Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
            return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        return {}


def load_views_config(path: str | Path) -> ViewsConfig:
    """
    Load view settings from YAML.

    A missing file or a non-mapping document yields an empty config.
    """
    return ViewsConfig.model_validate(_load_yaml(path))
