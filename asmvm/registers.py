"""The register file; register 0 always reads zero."""

from __future__ import annotations

import operator

from .memory_cell import MemoryCell, NullMemoryCell, Operand

DEFAULT_SIZE_REGISTERS = 16


class Registers:
    """Sixteen 8-bit registers, the first hard-wired to zero."""

    def __init__(self) -> None:
        self._null = NullMemoryCell()
        self._cells = [MemoryCell() for _ in range(DEFAULT_SIZE_REGISTERS - 1)]

    def _cell(self, index: int) -> MemoryCell:
        index = operator.index(index)
        if not 0 <= index < DEFAULT_SIZE_REGISTERS:
            raise IndexError(
                f"Valid index range is : 0 <= index <= {DEFAULT_SIZE_REGISTERS - 1}"
            )
        return self._null if index == 0 else self._cells[index - 1]

    def __getitem__(self, index: int) -> MemoryCell:
        return self._cell(index)

    def __setitem__(self, index: int, value: Operand) -> None:
        self._cell(index).assign(value)

    def __len__(self) -> int:
        return len(self._cells) + 1