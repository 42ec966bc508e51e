from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from tablehead.grammar import SPEC_GROUPS, match_column_spec, spec_from_match

if TYPE_CHECKING:
    from tablehead.schema import Schema


NOT_FOUND = -1


@dataclass(frozen=True)
class ExtractionInfo:
    """How to pull a synthesized column's value out of another column."""

    source_column_index: int
    custom_name: str
    source_header_name: str
    key: str


# Keyed by the position of the spec in the requested list.
ExtractionInfoBag = Dict[int, ExtractionInfo]


def map_indices(
    schema: "Schema",
    specs: Sequence[str],
    wide: bool = False,
    logger: logging.Logger | None = None,
) -> Tuple[List[int], ExtractionInfoBag]:
    """
    Resolve column specs against a schema.

    Returns one index per spec (``NOT_FOUND`` when the spec is not a column
    name) and the extraction entries of the LABELS[...] specs.
    """
    log = logger or schema.logger
    indices: List[int] = []
    bag: ExtractionInfoBag = {}

    for spec in specs:
        idx, ok = schema.index_of(spec, True)
        if not ok:
            log.warning("Column '%s' not found on resource", spec)
        indices.append(idx)

        match = match_column_spec(spec)
        if match is None:
            continue
        if len(match.groups()) < SPEC_GROUPS:
            log.error("Regex match failed for column: '%s'", spec)
            continue

        parsed = spec_from_match(spec, match)
        if not parsed.is_supported:
            log.warning("Custom column '%s' is not supported", spec)
            continue

        log.info(
            "Custom column '%s' will be displayed as '%s'", spec, parsed.custom_name
        )
        source_idx, _ = schema.index_of(parsed.header_name, True)
        bag[len(indices) - 1] = ExtractionInfo(
            source_column_index=source_idx,
            custom_name=parsed.custom_name,
            source_header_name=parsed.header_name,
            key=parsed.key,
        )

    return indices, bag
