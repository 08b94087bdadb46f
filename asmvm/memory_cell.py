"""Eight-bit storage cells, including the always-zero cell."""

from __future__ import annotations

import operator
from typing import Union

_MASK = 0xFF

Operand = Union[int, "MemoryCell"]


def _byte(value: Operand) -> int:
    return operator.index(value) & _MASK


def ror(operand: Operand, shift: int) -> Operand:
    """Rotate an 8-bit value right; a cell in gives a cell out."""
    value = _byte(operand)
    shift %= 8
    result = ((value >> shift) | (value << (8 - shift))) & _MASK
    return MemoryCell(result) if isinstance(operand, MemoryCell) else result


def rol(operand: Operand, shift: int) -> Operand:
    """Rotate an 8-bit value left; a cell in gives a cell out."""
    value = _byte(operand)
    shift %= 8
    result = ((value << shift) | (value >> (8 - shift))) & _MASK
    return MemoryCell(result) if isinstance(operand, MemoryCell) else result


class MemoryCell:
    """A mutable unsigned 8-bit value with wrapping arithmetic."""

    def __init__(self, value: Operand = 0) -> None:
        self._value = _byte(value)

    @property
    def value(self) -> int:
        return self._value

    def assign(self, operand: Operand) -> MemoryCell:
        self._value = _byte(operand)
        return self

    def increment(self) -> MemoryCell:
        self._value = (self._value + 1) & _MASK
        return self

    def decrement(self) -> MemoryCell:
        self._value = (self._value - 1) & _MASK
        return self

    def __iadd__(self, operand: Operand) -> MemoryCell:
        self._value = (self._value + _byte(operand)) & _MASK
        return self

    def __isub__(self, operand: Operand) -> MemoryCell:
        self._value = (self._value - _byte(operand)) & _MASK
        return self

    def __add__(self, operand: Operand) -> MemoryCell:
        return MemoryCell(self._value + _byte(operand))

    def __sub__(self, operand: Operand) -> MemoryCell:
        return MemoryCell(self._value - _byte(operand))

    def __neg__(self) -> MemoryCell:
        return MemoryCell(-self._value)

    def logical_not(self) -> MemoryCell:
        """Return 1 if the value is zero, else 0."""
        return MemoryCell(0 if self._value else 1)

    def __and__(self, operand: Operand) -> MemoryCell:
        return MemoryCell(self._value & _byte(operand))

    def __or__(self, operand: Operand) -> MemoryCell:
        return MemoryCell(self._value | _byte(operand))

    def __xor__(self, operand: Operand) -> MemoryCell:
        return MemoryCell(self._value ^ _byte(operand))

    def __rshift__(self, shift: int) -> MemoryCell:
        return MemoryCell(self._value >> shift)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MemoryCell):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other & _MASK
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def is_null(self) -> bool:
        return False


class NullMemoryCell(MemoryCell):
    """A cell that always reads zero and ignores every write."""

    def __init__(self, cell: MemoryCell | None = None) -> None:
        super().__init__(0)

    def assign(self, operand: Operand) -> NullMemoryCell:
        return self

    def increment(self) -> NullMemoryCell:
        return self

    def decrement(self) -> NullMemoryCell:
        return self

    def __iadd__(self, operand: Operand) -> NullMemoryCell:
        return self

    def __isub__(self, operand: Operand) -> NullMemoryCell:
        return self

    def __add__(self, operand: Operand) -> MemoryCell:
        return MemoryCell(operand)

    def __sub__(self, operand: Operand) -> MemoryCell:
        if isinstance(operand, MemoryCell):
            return MemoryCell(-operand.value)
        return NullMemoryCell()

    def __repr__(self) -> str:
        return "NullMemoryCell()"

    def is_null(self) -> bool:
        return True