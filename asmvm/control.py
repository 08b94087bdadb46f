"""Flow-control instructions: no-op, halt, jumps, branches, calls and returns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import AVAILABLE_FLAGS, ValueType
from .instruction import Instruction, InvalidInstructionError

if TYPE_CHECKING:
    from .engine import Engine


def _starts_with_immediate(instruction: Instruction) -> bool:
    operands = instruction.operands
    return bool(operands) and operands[0].value_type is ValueType.IMMEDIATE_VALUE


class NopInstruction(Instruction):
    """NOP: do nothing."""

    name = "NOP"
    amount_operands = 0

    def execute(self, engine: Engine) -> None:
        super().execute(engine)

    def is_correct(self) -> bool:
        return not self.operands


class HltInstruction(Instruction):
    """HLT: marks the end of the program."""

    name = "HLT"
    amount_operands = 0

    def execute(self, engine: Engine) -> None:
        super().execute(engine)

    def is_correct(self) -> bool:
        return not self.operands


class JmpInstruction(Instruction):
    """JMP addr: continue execution at ``addr``."""

    name = "JMP"
    amount_operands = 1

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        # The program counter is incremented after every instruction.
        engine.jump(self.operands[0].value - 1)

    def is_correct(self) -> bool:
        return _starts_with_immediate(self)


class BrhInstruction(Instruction):
    """BRH flag addr: jump to ``addr`` when ``flag`` is set."""

    name = "BRH"
    amount_operands = 2

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        flag, target = self.operands[0], self.operands[1]
        if flag.value >= len(AVAILABLE_FLAGS):
            raise InvalidInstructionError("Invalid operand")
        if engine.flag_states[flag.value]:
            engine.jump(target.value - 1)

    def is_correct(self) -> bool:
        operands = self.operands
        return (
            len(operands) >= 2
            and operands[0].value_type is ValueType.FLAG
            and operands[1].value_type is ValueType.IMMEDIATE_VALUE
        )


class CalInstruction(Instruction):
    """CAL addr: push the current address and jump to ``addr``."""

    name = "CAL"
    amount_operands = 1

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        engine.push_stack(engine.program_counter)
        engine.jump(self.operands[0].value - 1)

    def is_correct(self) -> bool:
        return _starts_with_immediate(self)


class RetInstruction(Instruction):
    """RET: return to the address pushed by the last call."""

    name = "RET"
    amount_operands = 0

    def execute(self, engine: Engine) -> None:
        super().execute(engine)
        engine.pop_stack()

    def is_correct(self) -> bool:
        return not self.operands