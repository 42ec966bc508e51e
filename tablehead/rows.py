from __future__ import annotations

from typing import Dict, List, Protocol, Sequence

import polars as pl

from tablehead.resolver import NOT_FOUND, ExtractionInfoBag


class LabelSource(Protocol):
    def extract_header_labels(self, label_col: int) -> List[str]:
        ...


def parse_labels(text: str | None) -> Dict[str, str]:
    """
    Parse a ``k1=v1,k2=v2`` label bag.

    Items without ``=`` are ignored.
    """
    labels: Dict[str, str] = {}
    if not text or not text.strip():
        return labels
    for item in text.split(","):
        if "=" not in item:
            continue
        key, value = item.split("=", 1)
        key = key.strip()
        if key:
            labels[key] = value.strip()
    return labels


class RowTable:
    """
    Row model backed by a polars DataFrame.

    Cells are addressed by position so that frame column ``i`` lines up
    with schema column ``i``.
    """

    def __init__(self, frame: pl.DataFrame):
        self.frame = frame

    @classmethod
    def from_rows(cls, names: Sequence[str], rows: Sequence[Sequence[str]]) -> "RowTable":
        frame = pl.DataFrame(
            [list(r) for r in rows],
            schema=[(n, pl.Utf8) for n in names],
            orient="row",
        )
        return cls(frame)

    def _cells(self, col: int) -> List[str | None]:
        if col < 0 or col >= self.frame.width:
            return []
        return self.frame.to_series(col).to_list()

    def extract_header_labels(self, label_col: int) -> List[str]:
        """Sorted distinct label keys observed in a label column."""
        keys = set()
        for cell in self._cells(label_col):
            keys.update(parse_labels(cell))
        return sorted(keys)

    def project(self, indices: Sequence[int], bag: ExtractionInfoBag) -> pl.DataFrame:
        """
        Cells for a customized schema.

        ``indices`` and ``bag`` come from ``Schema.map_indices`` on the
        schema this table was built against.
        """
        height = self.frame.height
        data: Dict[str, List[str]] = {}
        for pos, idx in enumerate(indices):
            info = bag.get(pos)
            if info is not None:
                values = [
                    parse_labels(cell).get(info.key, "")
                    for cell in self._cells(info.source_column_index)
                ] or [""] * height
            elif idx != NOT_FOUND:
                values = ["" if c is None else str(c) for c in self._cells(idx)]
            else:
                values = [""] * height
            data[f"c{pos}"] = values
        return pl.DataFrame(data, schema={k: pl.Utf8 for k in data})
