from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Callable, Optional


AGE_COLUMN = "AGE"

DecoratorFunc = Callable[[str], str]


class Align(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ColumnSchema:
    """
    Display metadata for a single table column.

    ``decorator`` is an externally owned formatting handle. It is carried
    by reference and compared by identity.
    """

    name: str
    align: Align = Align.LEFT
    decorator: Optional[DecoratorFunc] = None
    wide: bool = False
    mx: bool = False
    time: bool = False
    capacity: bool = False
    vs: bool = False

    def clone(self) -> "ColumnSchema":
        return replace(self)

    def with_wide(self, wide: bool) -> "ColumnSchema":
        return replace(self, wide=wide)

    def differs(self, other: "ColumnSchema") -> bool:
        for f in fields(self):
            mine: Any = getattr(self, f.name)
            theirs: Any = getattr(other, f.name)
            if f.name == "decorator":
                if mine is not theirs:
                    return True
            elif mine != theirs:
                return True
        return False
