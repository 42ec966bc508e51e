from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Tuple

from tablehead.columns import AGE_COLUMN, ColumnSchema
from tablehead.customize import customize, labelize
from tablehead.resolver import NOT_FOUND, ExtractionInfoBag, map_indices

if TYPE_CHECKING:
    from tablehead.rows import LabelSource


class Schema:
    """
    Ordered table header.

    Column ``i`` describes cell ``i`` of every row produced by the row model.
    Names are not required to be unique; lookups return the first match.
    Consumers treat a Schema as a snapshot: customize and labelize return
    new instances.
    """

    def __init__(
        self,
        columns: Optional[Iterable[ColumnSchema]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.columns: List[ColumnSchema] = list(columns or [])
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self.columns)

    def __iter__(self) -> Iterator[ColumnSchema]:
        return iter(self.columns)

    def __getitem__(self, idx: int) -> ColumnSchema:
        return self.columns[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.columns == other.columns

    def __repr__(self) -> str:
        return f"Schema({self.columns!r})"

    def derive(self, columns: Iterable[ColumnSchema]) -> "Schema":
        """New schema sharing this schema's logger."""
        return Schema(columns, logger=self.logger)

    def clone(self) -> "Schema":
        return self.derive(c.clone() for c in self.columns)

    def clear(self) -> "Schema":
        self.columns.clear()
        return self

    def column_names(self, wide: bool) -> List[str]:
        return [c.name for c in self.columns if wide or not c.wide]

    def index_of(self, name: str, include_wide: bool) -> Tuple[int, bool]:
        for i, col in enumerate(self.columns):
            if col.wide and not include_wide:
                continue
            if col.name == name:
                return i, True
        return NOT_FOUND, False

    def has_age(self) -> bool:
        _, ok = self.index_of(AGE_COLUMN, True)
        return ok

    def _column(self, idx: int) -> Optional[ColumnSchema]:
        if idx < 0 or idx >= len(self.columns):
            return None
        return self.columns[idx]

    def is_metrics_column(self, idx: int) -> bool:
        col = self._column(idx)
        return col is not None and col.mx

    def is_time_column(self, idx: int) -> bool:
        col = self._column(idx)
        return col is not None and col.time

    def is_capacity_column(self, idx: int) -> bool:
        col = self._column(idx)
        return col is not None and col.capacity

    def diff(self, other: "Schema") -> bool:
        """True when the header changed and needs to be redrawn."""
        if len(self) != len(other):
            return True
        return any(a.differs(b) for a, b in zip(self.columns, other.columns))

    def map_indices(
        self, specs: Sequence[str], wide: bool = False
    ) -> Tuple[List[int], ExtractionInfoBag]:
        return map_indices(self, specs, wide)

    def customize(self, specs: Sequence[str], wide: bool = False) -> "Schema":
        return customize(self, specs, wide)

    def labelize(
        self,
        column_indices: Sequence[int],
        label_column_index: int,
        row_source: "LabelSource",
    ) -> "Schema":
        return labelize(self, column_indices, label_column_index, row_source)

    def dump(self) -> None:
        self.logger.debug("HEADER")
        for i, col in enumerate(self.columns):
            self.logger.debug("%d '%s' -- %s", i, col.name, col.wide)
