"""Addressable data memory."""

from __future__ import annotations

import operator

from .config import DEFAULT_SIZE_MEMORY
from .memory_cell import MemoryCell, Operand


class Memory:
    """A fixed number of 8-bit cells addressed from zero."""

    def __init__(self, size: int = DEFAULT_SIZE_MEMORY) -> None:
        if size < 0:
            raise ValueError("Memory size cannot be negative")
        self._cells = [MemoryCell() for _ in range(size)]

    def _check(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._cells):
            raise IndexError(
                f"Valid index range is : 0 <= index <= {len(self._cells) - 1}"
            )
        return index

    def __getitem__(self, index: int) -> MemoryCell:
        return self._cells[self._check(index)]

    def __setitem__(self, index: int, value: Operand) -> None:
        self._cells[self._check(index)].assign(value)

    def __len__(self) -> int:
        return len(self._cells)