"""Operand tokens produced by the parser."""

from __future__ import annotations

import operator
from dataclasses import dataclass

from .config import ValueType


@dataclass(frozen=True)
class Token:
    """An operand: an 8-bit value and the kind of value it is."""

    value: int
    value_type: ValueType

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", operator.index(self.value) & 0xFF)

    def __str__(self) -> str:
        return f"Token({self.value_type} : {self.value})"