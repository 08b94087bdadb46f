"""The machine state: registers, memory, program counter, flags and call stack."""

from __future__ import annotations

from collections.abc import Iterable

from .config import DEFAULT_SIZE_MEMORY, MAX_AMOUNT_INSTRUCTIONS, MAX_STACK_MEMORY
from .memory import Memory
from .registers import Registers


class Engine:
    """Holds everything an instruction can read or change."""

    def __init__(self, memory_amount: int = DEFAULT_SIZE_MEMORY) -> None:
        self._registers = Registers()
        self._memory = Memory(memory_amount)
        self._program_counter = 0
        self._flag_states: tuple[bool, bool, bool, bool] = (False, False, False, False)
        self._stack: list[int] = []

    @property
    def registers(self) -> Registers:
        return self._registers

    @property
    def memory(self) -> Memory:
        return self._memory

    @property
    def program_counter(self) -> int:
        return self._program_counter

    @property
    def flag_states(self) -> tuple[bool, bool, bool, bool]:
        """Flags in order: equals, not equals, greater or equal, less."""
        return self._flag_states

    @flag_states.setter
    def flag_states(self, states: Iterable[bool]) -> None:
        states = tuple(bool(state) for state in states)
        if len(states) != 4:
            raise ValueError("Exactly four flag states are expected")
        self._flag_states = states  # type: ignore[assignment]

    def verify_flags(self, operand1: int, operand2: int) -> None:
        """Set the flags from comparing two values."""
        self._flag_states = (
            operand1 == operand2,
            operand1 != operand2,
            operand1 >= operand2,
            operand1 < operand2,
        )

    def increment_program_counter(self) -> None:
        self._program_counter = (self._program_counter + 1) % MAX_AMOUNT_INSTRUCTIONS

    def jump(self, address: int) -> None:
        self._program_counter = address % MAX_AMOUNT_INSTRUCTIONS

    def push_stack(self, address: int) -> None:
        if len(self._stack) > MAX_STACK_MEMORY:
            raise OverflowError("Stack overflow")
        self._stack.append(int(address) & 0xFF)

    def pop_stack(self) -> None:
        """Jump to the most recently pushed address and drop it."""
        if not self._stack:
            raise IndexError("Stack underflow")
        self.jump(self._stack.pop())