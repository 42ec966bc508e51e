"""
Column spec grammar.

A column spec is either a plain column name (``NAME``) or a synthesized
column request of the form ``[custom:] HEADER[key]``, e.g.
``GROUP: LABELS[platform.io/nodegroup]``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


LABELS_HEADER = "LABELS"

# Always applied with fullmatch: a trailing newline is not accepted.
SPEC_PATTERN = re.compile(r"(?:([^:]+):\s*)?(.*)\[(.*)\]")
SPEC_GROUPS = 3


@dataclass(frozen=True)
class ColumnSpec:
    raw: str
    custom_name: str
    header_name: str
    key: str

    @property
    def is_supported(self) -> bool:
        return self.header_name == LABELS_HEADER


def match_column_spec(spec: str) -> Optional[re.Match]:
    return SPEC_PATTERN.fullmatch(spec)


def is_synthesized_spec(spec: str) -> bool:
    return match_column_spec(spec) is not None


def parse_column_spec(spec: str) -> Optional[ColumnSpec]:
    """
    Parse a synthesized column spec.

    Returns None for plain column references.
    """
    match = match_column_spec(spec)
    if match is None:
        return None
    return spec_from_match(spec, match)


def spec_from_match(spec: str, match: re.Match) -> ColumnSpec:
    custom, header, key = match.groups()[:SPEC_GROUPS]
    return ColumnSpec(
        raw=spec,
        custom_name=(custom or "").strip(),
        header_name=header,
        key=key,
    )
